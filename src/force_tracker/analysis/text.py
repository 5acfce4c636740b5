# src/force_tracker/analysis/text.py

"""Small text primitives shared by the heuristic extractors."""

import re
from collections.abc import Iterable, Sequence

HEADING_MIN_LENGTH = 3
HEADING_MAX_LENGTH = 100

STRUCTURAL_KEYWORDS = (
    "chapter",
    "section",
    "part",
    "unit",
    "module",
    "lesson",
    "introduction",
    "conclusion",
    "summary",
    "abstract",
    "overview",
    "background",
    "objectives",
    "references",
    "appendix",
)

_NUMBERED_PREFIX = re.compile(r"^(?:\d+(?:\.\d+)*[.)]?|[IVXLCDM]+[.)])\s+")
_KEYWORD_PREFIX = re.compile(
    r"^(?:" + "|".join(STRUCTURAL_KEYWORDS) + r")\b", re.IGNORECASE
)
# Terminators only count when followed by whitespace, so "3.5" stays whole.
_SENTENCE_BREAK = re.compile(r"[.!?]+(?=\s|$)|\n\s*\n")


def normalize_whitespace(value: str) -> str:
    return " ".join(value.split())


def is_title_case(line: str) -> bool:
    words = line.split()
    return bool(words) and all(word[:1].isupper() for word in words)


def is_heading(line: str) -> bool:
    """Standalone heading heuristic applied to a single line or fragment."""
    candidate = line.strip()
    if not HEADING_MIN_LENGTH <= len(candidate) <= HEADING_MAX_LENGTH:
        return False

    return (
        candidate[0].isupper()
        or _NUMBERED_PREFIX.match(candidate) is not None
        or ":" in candidate
        or _KEYWORD_PREFIX.match(candidate) is not None
        or candidate.isupper()
        or is_title_case(candidate)
    )


def split_sentences(text: str) -> list[str]:
    """Split on `.`, `!` and `?` (and blank lines), whitespace-normalized."""
    sentences = []
    for part in _SENTENCE_BREAK.split(text):
        sentence = normalize_whitespace(part)
        if sentence:
            sentences.append(sentence)
    return sentences


def non_empty_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def unique_capped(items: Iterable[str], limit: int) -> list[str]:
    """Drop empties and duplicates, keep first-seen order, cap at `limit`."""
    seen: dict[str, None] = {}
    for item in items:
        if item and item not in seen:
            seen[item] = None
            if len(seen) == limit:
                break
    return list(seen)


def ordered_matches(
    patterns: Sequence[re.Pattern[str]], text: str
) -> list[re.Match[str]]:
    """All matches of several patterns, ordered by position in `text`.

    Ties at the same offset keep pattern order.
    """
    found = [
        (match.start(), index, match)
        for index, pattern in enumerate(patterns)
        for match in pattern.finditer(text)
    ]
    found.sort(key=lambda item: (item[0], item[1]))
    return [match for _, _, match in found]


def within(value: str, low: int, high: int) -> bool:
    """Inclusive length check."""
    return low <= len(value) <= high
