# src/force_tracker/progress/__init__.py

"""Progression rules around quizzes and daily skills.

Pure functions: callers load and persist the numbers themselves.
"""

from .ranks import RANK_ORDER, JediRank, RankProgress, assess_rank, rank_progress
from .scoring import (
    POINTS_PER_CORRECT_ANSWER,
    QuizResult,
    score_quiz,
    updated_course_progress,
)
from .skills import (
    SKILL_POINTS,
    Achievement,
    ProgressStats,
    SkillType,
    achievements,
    current_streak,
    skill_streaks,
)

__all__ = [
    # Quiz scoring
    "QuizResult",
    "score_quiz",
    "updated_course_progress",
    "POINTS_PER_CORRECT_ANSWER",
    # Ranks
    "JediRank",
    "RANK_ORDER",
    "RankProgress",
    "rank_progress",
    "assess_rank",
    # Skills
    "SkillType",
    "SKILL_POINTS",
    "current_streak",
    "skill_streaks",
    "Achievement",
    "ProgressStats",
    "achievements",
]
