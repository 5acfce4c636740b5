# src/force_tracker/quiz/__init__.py

"""Quiz generation for force-tracker.

Builds a bounded prompt from analyzed content, asks an LLM for a
multiple-choice quiz, validates every item, and falls back to
deterministic questions whenever the LLM path fails.
"""

from .client import QuizClient, RankAssessmentClient
from .fallback import (
    RANK_ASSESSMENT_FALLBACK,
    fallback_questions,
    generic_fallback_questions,
)
from .models import (
    DEFAULT_QUESTION_COUNT,
    MAX_QUESTIONS,
    MIN_QUESTIONS,
    QuizConfig,
    QuizQuestion,
    validate_question_count,
)
from .parsing import clean_json_reply, parse_questions, validate_questions
from .prompt_builder import MAX_PROMPT_LENGTH, build_prompt

__all__ = [
    # Clients
    "QuizClient",
    "RankAssessmentClient",
    # Types & config
    "QuizQuestion",
    "QuizConfig",
    "DEFAULT_QUESTION_COUNT",
    "MIN_QUESTIONS",
    "MAX_QUESTIONS",
    "validate_question_count",
    # Prompt
    "build_prompt",
    "MAX_PROMPT_LENGTH",
    # Reply handling
    "clean_json_reply",
    "parse_questions",
    "validate_questions",
    # Fallbacks
    "fallback_questions",
    "generic_fallback_questions",
    "RANK_ASSESSMENT_FALLBACK",
]
