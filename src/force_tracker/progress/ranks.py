# src/force_tracker/progress/ranks.py

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from force_tracker.quiz.models import QuizQuestion

POINTS_PER_RANK_STEP = 1000


class JediRank(str, Enum):
    """Ranks in progression order."""

    YOUNGLING = "Youngling"
    PADAWAN = "Padawan"
    KNIGHT = "Knight"
    MASTER = "Master"


RANK_ORDER: list[JediRank] = list(JediRank)


@dataclass(frozen=True)
class RankProgress:
    rank: JediRank
    next_rank: JediRank | None
    target_points: int
    percent: float


def rank_progress(rank: JediRank | str, total_points: int) -> RankProgress:
    """Progress toward the next rank.

    Each rank's target is 1000 points times its position (Youngling 1000,
    Padawan 2000, ...). Percent is capped at 100.
    """
    rank = JediRank(rank)
    index = RANK_ORDER.index(rank)
    next_rank = RANK_ORDER[index + 1] if index + 1 < len(RANK_ORDER) else None
    target = POINTS_PER_RANK_STEP * (index + 1)
    percent = min(max(total_points, 0) / target * 100, 100.0)
    return RankProgress(
        rank=rank, next_rank=next_rank, target_points=target, percent=percent
    )


def assess_rank(
    answers: Sequence[int | None], questions: Sequence[QuizQuestion]
) -> JediRank:
    """Starting rank from the onboarding assessment.

    Counts answers matching each question's Jedi-aligned option:
    0-1 Youngling, 2-3 Padawan, 4 Knight, 5 or more Master.
    """
    aligned = sum(
        1
        for answer, question in zip(answers, questions)
        if answer == question.correct_answer
    )
    if aligned >= 5:
        return JediRank.MASTER
    if aligned == 4:
        return JediRank.KNIGHT
    if aligned >= 2:
        return JediRank.PADAWAN
    return JediRank.YOUNGLING
