# src/force_tracker/quiz/parsing.py

"""Turning a model reply into validated quiz questions."""

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from force_tracker.errors import LLMParseError

from .models import QuizQuestion

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"```(?:json)?\n?", re.IGNORECASE)


def clean_json_reply(reply: str) -> str:
    """Strip markdown fences and any prose around the outermost JSON array."""
    cleaned = _FENCE.sub("", reply)

    first = cleaned.find("[")
    last = cleaned.rfind("]")
    if first != -1 and last > first:
        cleaned = cleaned[first : last + 1]
    return cleaned.strip()


def parse_questions(reply: str) -> list[Any]:
    """Decode a reply into a raw list of candidate questions.

    Raises:
        LLMParseError: If the reply is not JSON or not a JSON array.
    """
    try:
        parsed = json.loads(clean_json_reply(reply))
    except json.JSONDecodeError as exc:
        raise LLMParseError(f"Reply is not valid JSON: {exc}") from exc

    if not isinstance(parsed, list):
        raise LLMParseError(f"Expected a JSON array, got {type(parsed).__name__}")
    return parsed


def validate_questions(items: list[Any], limit: int | None = None) -> list[QuizQuestion]:
    """Keep only items that satisfy the QuizQuestion contract.

    Null entries are dropped silently; malformed ones are logged at debug.
    """
    questions: list[QuizQuestion] = []
    for index, item in enumerate(items):
        if item is None:
            continue
        if not isinstance(item, dict):
            logger.debug("Rejected question %d: not an object", index)
            continue
        try:
            questions.append(QuizQuestion.model_validate(item))
        except ValidationError as exc:
            logger.debug("Rejected question %d: %s", index, exc.errors())
            continue

    if limit is not None:
        questions = questions[:limit]
    return questions
