# src/force_tracker/progress/scoring.py

import math
from collections.abc import Sequence
from dataclasses import dataclass

from force_tracker.quiz.models import QuizQuestion

POINTS_PER_CORRECT_ANSWER = 10


@dataclass(frozen=True)
class QuizResult:
    correct: int
    total: int
    percentage: int
    points: int


def score_quiz(
    answers: Sequence[int | None], questions: Sequence[QuizQuestion]
) -> QuizResult:
    """Score one attempt. `None` marks an unanswered question.

    Raises:
        ValueError: If answers and questions differ in length.
    """
    if len(answers) != len(questions):
        raise ValueError(
            f"Got {len(answers)} answers for {len(questions)} questions"
        )

    correct = sum(
        1
        for answer, question in zip(answers, questions)
        if answer == question.correct_answer
    )
    total = len(questions)
    # Round half up, so 12.5% reads as 13%
    percentage = math.floor(correct * 100 / total + 0.5) if total else 0

    return QuizResult(
        correct=correct,
        total=total,
        percentage=percentage,
        points=correct * POINTS_PER_CORRECT_ANSWER,
    )


def updated_course_progress(current: int, percentage: int) -> int:
    """Course progress only ever moves up to the best attempt."""
    return max(current, percentage)
