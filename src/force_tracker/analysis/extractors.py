# src/force_tracker/analysis/extractors.py

"""Heuristic content extractors.

Each extractor is a pure function over plain text and knows nothing about
the others. Length bounds and caps are part of the contract.
"""

import re
from collections import Counter

from .models import (
    DEFAULT_TITLE,
    MAX_CONCEPTS,
    MAX_DEFINITIONS,
    MAX_EXAMPLES,
    MAX_FACTS,
    MAX_KEY_POINTS,
    MAX_PROCESSES,
    MAX_STATISTICS,
    MAX_VOCABULARY,
)
from .text import (
    is_heading,
    non_empty_lines,
    normalize_whitespace,
    ordered_matches,
    split_sentences,
    unique_capped,
    within,
)

# A run of capitalized words on one line: "Machine Learning", "Newton".
CAPITALIZED_PHRASE = r"[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*"

# Leading words that make a capitalized phrase a sentence opener, not a concept.
STOPWORDS = frozenset(
    {
        "A", "An", "And", "As", "At", "But", "By", "For", "From", "He", "How",
        "If", "In", "It", "Its", "On", "Or", "She", "So", "That", "The",
        "Their", "There", "These", "They", "This", "Those", "To", "We",
        "What", "When", "Where", "Which", "While", "Who", "Why", "With",
        "You",
    }
)  # fmt: skip

# ============================================================================
# Title
# ============================================================================

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 100


def extract_title(text: str, headings: list[str]) -> str:
    if headings:
        return headings[0]
    for line in non_empty_lines(text):
        if within(line, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH):
            return line
    return DEFAULT_TITLE


# ============================================================================
# Headings & sections
# ============================================================================


def extract_headings(text: str) -> list[str]:
    """Lines that pass the heading heuristic, in document order (uncapped)."""
    return [line for line in non_empty_lines(text) if is_heading(line)]


def extract_sections(text: str, headings: list[str]) -> list[str]:
    """Bodies between lines that exactly match a known heading (uncapped)."""
    heading_set = set(headings)
    sections: list[str] = []
    current: list[str] = []

    for line in non_empty_lines(text):
        if line in heading_set:
            if current:
                sections.append("\n".join(current))
                current = []
            continue
        current.append(line)

    if current:
        sections.append("\n".join(current))
    return sections


# ============================================================================
# Key points
# ============================================================================

KEY_POINT_MIN_LENGTH = 20
KEY_POINT_MAX_LENGTH = 200
KEY_POINT_TARGET = 5
PADDING_MIN_LENGTH = 40
PADDING_MAX_LENGTH = 150

_KEY_POINT_SIGNALS = re.compile(
    r"\b(?:"
    # importance
    r"important|key|main|essential|crucial|critical|significant|fundamental"
    r"|primary|central|vital"
    # definitional links
    r"|is|are|means|refers to|defined as|represents"
    # transitions
    r"|therefore|however|moreover|furthermore|consequently|thus|hence"
    # modals
    r"|must|should|can|will|may"
    r")\b",
    re.IGNORECASE,
)


def extract_key_points(text: str) -> list[str]:
    sentences = split_sentences(text)

    selected = unique_capped(
        (
            sentence
            for sentence in sentences
            if within(sentence, KEY_POINT_MIN_LENGTH, KEY_POINT_MAX_LENGTH)
            and _KEY_POINT_SIGNALS.search(sentence)
        ),
        MAX_KEY_POINTS,
    )

    if len(selected) < KEY_POINT_TARGET:
        for sentence in sentences:
            if len(selected) >= KEY_POINT_TARGET:
                break
            if (
                within(sentence, PADDING_MIN_LENGTH, PADDING_MAX_LENGTH)
                and sentence not in selected
            ):
                selected.append(sentence)

    return selected[:MAX_KEY_POINTS]


# ============================================================================
# Concepts
# ============================================================================

CONCEPT_MIN_LENGTH = 3
CONCEPT_MAX_LENGTH = 50
FREQUENT_CONCEPT_MIN_COUNT = 2
FREQUENT_CONCEPT_LIMIT = 8

_CONCEPT_PATTERNS = [
    re.compile(
        rf"\b({CAPITALIZED_PHRASE})\s+(?:is|are|refers\s+to|means|involves)\b"
    ),
    re.compile(
        r"\b(?i:concept|theory|principle|idea|notion|law|model|framework)\s+of\s+"
        rf"({CAPITALIZED_PHRASE})"
    ),
    re.compile(
        rf"\b({CAPITALIZED_PHRASE})\s+"
        r"(?:theory|principle|concept|method|approach|model|framework|technique"
        r"|law|effect)\b"
    ),
]
_CAPITALIZED_TOKEN = re.compile(rf"\b{CAPITALIZED_PHRASE}\b")


def _is_concept_candidate(candidate: str) -> bool:
    first_word = candidate.split()[0] if candidate.split() else ""
    return first_word not in STOPWORDS and within(
        candidate, CONCEPT_MIN_LENGTH, CONCEPT_MAX_LENGTH
    )


def frequent_capitalized_terms(text: str) -> list[str]:
    """Capitalized phrases seen at least twice, most frequent first."""
    counts = Counter(
        normalize_whitespace(token) for token in _CAPITALIZED_TOKEN.findall(text)
    )
    # most_common is stable, so ties keep first-seen order
    return [
        term
        for term, count in counts.most_common()
        if count >= FREQUENT_CONCEPT_MIN_COUNT and _is_concept_candidate(term)
    ][:FREQUENT_CONCEPT_LIMIT]


def extract_concepts(text: str) -> list[str]:
    matched = [
        normalize_whitespace(match.group(1))
        for match in ordered_matches(_CONCEPT_PATTERNS, text)
    ]
    candidates = [c for c in matched if _is_concept_candidate(c)]
    return unique_capped(candidates + frequent_capitalized_terms(text), MAX_CONCEPTS)


# ============================================================================
# Definitions
# ============================================================================

DEFINITION_TERM_MIN_LENGTH = 3
DEFINITION_MIN_LENGTH = 10
DEFINITION_MAX_LENGTH = 200

_TERM = CAPITALIZED_PHRASE
_BODY = r"([^.!?]+)"

_DEFINITION_PATTERNS = [
    re.compile(rf"\b({_TERM})\s+is\s+{_BODY}"),
    re.compile(rf"\b({_TERM})\s+refers\s+to\s+{_BODY}"),
    re.compile(rf"\b({_TERM})\s+means\s+{_BODY}"),
    re.compile(rf"\b({_TERM})\s+can\s+be\s+defined\s+as\s+{_BODY}"),
    re.compile(rf"\b({_TERM})\s+involves\s+{_BODY}"),
    re.compile(rf"\b({_TERM})\s+consists\s+of\s+{_BODY}"),
]


def _is_definition_term(term: str) -> bool:
    return (
        len(term) >= DEFINITION_TERM_MIN_LENGTH and term.split()[0] not in STOPWORDS
    )


def extract_definitions(text: str) -> list[str]:
    definitions = []
    for match in ordered_matches(_DEFINITION_PATTERNS, text):
        term = normalize_whitespace(match.group(1))
        body = normalize_whitespace(match.group(2))
        if _is_definition_term(term) and within(
            body, DEFINITION_MIN_LENGTH, DEFINITION_MAX_LENGTH
        ):
            definitions.append(f"{term}: {body}")
    return unique_capped(definitions, MAX_DEFINITIONS)


# ============================================================================
# Facts
# ============================================================================

FACT_MIN_LENGTH = 20
FACT_MAX_LENGTH = 200

_FACT_SIGNALS = re.compile(
    r"\d+(?:\.\d+)?\s*%"
    r"|\b(?:1[5-9]|20)\d{2}\b"
    r"|\b(?:thousands?|millions?|billions?|trillions?)\b"
    r"|\b(?:approximately|about|over|nearly|almost|around|roughly"
    r"|more than|less than|up to)\s+\d"
    r"|\b(?:percent|degrees|miles|kilometers|meters|kilograms|pounds"
    r"|tons|hours|minutes)\b"
    r"|\b(?:research|studies|study|surveys?|experts|scientists|evidence)\s+"
    r"(?:shows?|indicates?|suggests?|reveals?|found|finds|demonstrates?)\b",
    re.IGNORECASE,
)


def extract_facts(text: str) -> list[str]:
    return unique_capped(
        (
            sentence
            for sentence in split_sentences(text)
            if within(sentence, FACT_MIN_LENGTH, FACT_MAX_LENGTH)
            and _FACT_SIGNALS.search(sentence)
        ),
        MAX_FACTS,
    )


# ============================================================================
# Examples
# ============================================================================

EXAMPLE_MIN_LENGTH = 15
EXAMPLE_MAX_LENGTH = 250

_EXAMPLE_CLAUSE = re.compile(
    r"(?:\b(?:for example|for instance|such as|including|like|consider|imagine)\b"
    r"|\be\.g\.)"
    r"[^.!?]*",
    re.IGNORECASE,
)


def extract_examples(text: str) -> list[str]:
    return unique_capped(
        (
            clause
            for clause in (
                normalize_whitespace(m.group(0)) for m in _EXAMPLE_CLAUSE.finditer(text)
            )
            if within(clause, EXAMPLE_MIN_LENGTH, EXAMPLE_MAX_LENGTH)
        ),
        MAX_EXAMPLES,
    )


# ============================================================================
# Vocabulary
# ============================================================================

VOCABULARY_MIN_LENGTH = 4
VOCABULARY_MAX_LENGTH = 30  # exclusive

_VOCABULARY_PATTERNS = [
    re.compile(rf"\b({CAPITALIZED_PHRASE})\s*\([^)]+\)"),
    re.compile(r"\b([A-Za-z]+(?:tion|sion|ment|ness|ity|ism))\b"),
]


def extract_vocabulary(text: str) -> list[str]:
    terms = (
        normalize_whitespace(match.group(1))
        for match in ordered_matches(_VOCABULARY_PATTERNS, text)
    )
    return unique_capped(
        (
            term
            for term in terms
            if VOCABULARY_MIN_LENGTH <= len(term) < VOCABULARY_MAX_LENGTH
        ),
        MAX_VOCABULARY,
    )


# ============================================================================
# Processes
# ============================================================================

PROCESS_MIN_LENGTH = 20
PROCESS_MAX_LENGTH = 200

_PROCESS_STEP = re.compile(
    r"\b(?:step|stage|phase|procedure|method)\s+\d+", re.IGNORECASE
)
_PROCESS_SEQUENCE = re.compile(
    r"^\W*(?:first(?:ly)?|second(?:ly)?|third(?:ly)?|next|then|finally"
    r"|lastly|subsequently|afterwards)\b",
    re.IGNORECASE,
)


def extract_processes(text: str) -> list[str]:
    return unique_capped(
        (
            sentence
            for sentence in split_sentences(text)
            if within(sentence, PROCESS_MIN_LENGTH, PROCESS_MAX_LENGTH)
            and (_PROCESS_STEP.search(sentence) or _PROCESS_SEQUENCE.search(sentence))
        ),
        MAX_PROCESSES,
    )


# ============================================================================
# Statistics
# ============================================================================

STATISTIC_MIN_LENGTH = 15
STATISTIC_MAX_LENGTH = 150

_STATISTIC_SIGNALS = re.compile(
    r"\d+(?:\.\d+)?\s*%\s+of\b"
    r"|\b(?:average|mean|median|correlation|standard deviation)\b"
    r"|\b\d+\s+out\s+of\s+\d+\b",
    re.IGNORECASE,
)


def extract_statistics(text: str) -> list[str]:
    return unique_capped(
        (
            sentence
            for sentence in split_sentences(text)
            if within(sentence, STATISTIC_MIN_LENGTH, STATISTIC_MAX_LENGTH)
            and _STATISTIC_SIGNALS.search(sentence)
        ),
        MAX_STATISTICS,
    )
