# src/force_tracker/quiz/fallback.py

"""Deterministic quizzes used when the LLM path is unavailable or fails.

Every question here puts the correct option first (`correct_answer == 0`).
"""

import re

from force_tracker.analysis.models import ParsedContent

from .models import DEFAULT_QUESTION_COUNT, QuizQuestion

MAX_FALLBACK_QUESTIONS = 5
KEY_POINT_OPTION_LENGTH = 80


def _question(question: str, options: list[str], explanation: str) -> QuizQuestion:
    return QuizQuestion(
        question=question, options=options, correct_answer=0, explanation=explanation
    )


# ============================================================================
# Structural fallback (built from the analyzed document)
# ============================================================================


def _shorten(text: str, limit: int = KEY_POINT_OPTION_LENGTH) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def fallback_questions(content: ParsedContent) -> list[QuizQuestion]:
    """Synthesize up to five questions from the document's structure.

    Never fails: with no title, key points or headings the closing
    question alone is returned.
    """
    questions: list[QuizQuestion] = []

    title = (content.title or "").strip()
    if title:
        questions.append(
            _question(
                f'What is the main topic of "{title}"?',
                [title, "General overview", "Basic introduction", "Advanced concepts"],
                f'The main topic is "{title}" as indicated by the document title.',
            )
        )

    for point in [p for p in content.key_points if p.strip()][:3]:
        questions.append(
            _question(
                "Which of the following is a key concept covered in this material?",
                [
                    _shorten(point.strip()),
                    "Unrelated concept A",
                    "Unrelated concept B",
                    "Unrelated concept C",
                ],
                "This concept is explicitly mentioned as a key point in the course material.",
            )
        )

    headings = [h.strip() for h in content.headings if h.strip()]
    if headings:
        questions.append(
            _question(
                "Which section is covered in this course?",
                [
                    headings[0],
                    "Introduction to basics",
                    "Advanced techniques",
                    "Summary and conclusion",
                ],
                f'"{headings[0]}" is one of the main sections covered in the course material.',
            )
        )

    questions.append(
        _question(
            "What is the primary purpose of this course material?",
            [
                "To provide comprehensive understanding of the subject",
                "To give a brief overview only",
                "To test existing knowledge",
                "To provide entertainment",
            ],
            "The material is designed to provide comprehensive understanding and "
            "practical knowledge of the subject matter.",
        )
    )

    return questions[:MAX_FALLBACK_QUESTIONS]


# ============================================================================
# Study-skills fallback (returned when the LLM call fails)
# ============================================================================

_DEFINITION_SIGNAL = re.compile(r"define|definition|means|refers to|is a|are a", re.IGNORECASE)
_NUMBER_SIGNAL = re.compile(r"\d+")
_PROCESS_SIGNAL = re.compile(r"step|process|method|procedure|approach", re.IGNORECASE)
_CONCEPT_SIGNAL = re.compile(r"concept|principle|theory|framework|model", re.IGNORECASE)

# (signal the prompt text must contain, question); None means always included.
STUDY_SKILLS_POOL: list[tuple[re.Pattern[str] | None, QuizQuestion]] = [
    (
        None,
        _question(
            "Based on the uploaded content, which statement best describes the main focus?",
            [
                "The content covers fundamental concepts and their practical applications",
                "The content is primarily about historical events and timelines",
                "The content focuses exclusively on mathematical calculations",
                "The content discusses fictional narratives and stories",
            ],
            "The first option is generally applicable to most educational content, "
            "focusing on both theory and practice.",
        ),
    ),
    (
        None,
        _question(
            "What is the most effective approach to mastering the material presented?",
            [
                "Understanding core concepts and applying them in practice",
                "Memorizing all specific details without context",
                "Focusing only on the numerical data presented",
                "Reading through the material once without review",
            ],
            "Understanding concepts and their practical application leads to better "
            "retention and mastery than rote memorization.",
        ),
    ),
    (
        _DEFINITION_SIGNAL,
        _question(
            "When studying definitions and terminology in this material, what approach "
            "yields the best results?",
            [
                "Understanding the meaning and context of each term",
                "Memorizing definitions word-for-word without context",
                "Skipping definitions and focusing only on examples",
                "Learning definitions only when specifically tested",
            ],
            "Understanding definitions in context helps with better comprehension and "
            "long-term retention of the material.",
        ),
    ),
    (
        _NUMBER_SIGNAL,
        _question(
            "How should numerical information and data in this content be approached?",
            [
                "Understand what the numbers represent and their significance",
                "Ignore all numerical data as unimportant details",
                "Memorize every number without understanding context",
                "Focus only on the largest numbers mentioned",
            ],
            "Understanding the meaning and context of numerical data is crucial for "
            "comprehending the material's key points.",
        ),
    ),
    (
        _PROCESS_SIGNAL,
        _question(
            "When learning about processes or methods described in this material, what "
            "is most important?",
            [
                "Understanding the sequence and reasoning behind each step",
                "Memorizing the first and last steps only",
                "Focusing on the tools used rather than the process",
                "Learning processes in random order without sequence",
            ],
            "Understanding the logical sequence and reasoning behind processes helps in "
            "applying them effectively in different contexts.",
        ),
    ),
    (
        _CONCEPT_SIGNAL,
        _question(
            "How can the concepts presented in this material be best utilized?",
            [
                "Apply them to real-world scenarios and practical situations",
                "Keep them as abstract ideas without practical connection",
                "Use them only in academic or theoretical discussions",
                "Avoid applying them until fully memorized",
            ],
            "Applying concepts to real-world scenarios helps solidify understanding and "
            "demonstrates practical mastery.",
        ),
    ),
    (
        None,
        _question(
            "What is the most effective strategy for reviewing and retaining this material?",
            [
                "Regular review sessions connecting new information to prior knowledge",
                "Reading the material once and never reviewing it again",
                "Reviewing only the night before any assessment",
                "Focusing exclusively on memorizing the introduction",
            ],
            "Regular review and connecting new information to existing knowledge "
            "significantly improves long-term retention and understanding.",
        ),
    ),
    (
        None,
        _question(
            "When analyzing the information presented in this material, what approach "
            "demonstrates critical thinking?",
            [
                "Questioning assumptions and evaluating evidence presented",
                "Accepting all information without any analysis",
                "Focusing only on information that confirms existing beliefs",
                "Avoiding any questioning of the material's content",
            ],
            "Critical thinking involves questioning assumptions, evaluating evidence, "
            "and analyzing information objectively.",
        ),
    ),
    (
        None,
        _question(
            "How should the knowledge from this material be integrated with other learning?",
            [
                "Connect it with related concepts from other sources and experiences",
                "Keep it completely separate from all other knowledge",
                "Only use it in the exact context where it was learned",
                "Avoid making any connections to prevent confusion",
            ],
            "Integrating knowledge with related concepts and experiences creates a more "
            "comprehensive understanding and better retention.",
        ),
    ),
    (
        None,
        _question(
            "What demonstrates true mastery of the material presented?",
            [
                "Ability to explain concepts clearly and apply them in new situations",
                "Memorizing exact quotes from the material",
                "Completing assessments without understanding underlying principles",
                "Avoiding any practical application of the concepts",
            ],
            "True mastery is demonstrated by the ability to explain concepts clearly "
            "and apply them effectively in new and varied situations.",
        ),
    ),
]


def generic_fallback_questions(
    text: str, question_count: int = DEFAULT_QUESTION_COUNT
) -> list[QuizQuestion]:
    """Fixed study-skills questions, topic-gated on what `text` contains.

    Six pool entries are unconditional, so up to six questions are always
    available.
    """
    selected = [
        question
        for signal, question in STUDY_SKILLS_POOL
        if signal is None or signal.search(text)
    ]
    return selected[:question_count]


# ============================================================================
# Rank assessment fallback
# ============================================================================

RANK_ASSESSMENT_FALLBACK: list[QuizQuestion] = [
    _question(
        "How do you approach learning new skills?",
        [
            "I prefer to master one skill completely before starting another",
            "I like to explore multiple skills simultaneously",
            "I only learn skills that are immediately useful",
            "I avoid learning new skills unless required",
        ],
        "Focused mastery demonstrates discipline and patience, key Jedi traits.",
    ),
    _question(
        "When faced with a difficult challenge, what is your first response?",
        [
            "Take time to meditate and consider all options",
            "Act immediately based on instinct",
            "Seek advice from others before proceeding",
            "Avoid the challenge if possible",
        ],
        "Mindful consideration before action shows wisdom and emotional control.",
    ),
    _question(
        "How do you handle failure or setbacks?",
        [
            "View them as learning opportunities for growth",
            "Get frustrated and need time to recover",
            "Blame external circumstances",
            "Give up and try something else",
        ],
        "Seeing failure as a teacher demonstrates resilience and wisdom.",
    ),
    _question(
        "What motivates you most in your daily activities?",
        [
            "Helping others and contributing to something greater",
            "Personal achievement and recognition",
            "Financial rewards and security",
            "Avoiding conflict and maintaining comfort",
        ],
        "Service to others reflects the selfless nature of the Jedi path.",
    ),
    _question(
        "How do you maintain focus during long or tedious tasks?",
        [
            "Practice mindfulness and stay present in the moment",
            "Set frequent breaks and rewards for myself",
            "Listen to music or find other distractions",
            "Rush through to finish as quickly as possible",
        ],
        "Mindful presence demonstrates the mental discipline essential to Jedi training.",
    ),
]
