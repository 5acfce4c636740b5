# src/force_tracker/progress/skills.py

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

SKILL_POINTS = 10


class SkillType(str, Enum):
    """Daily habits tracked as skill rings."""

    MEDITATION = "meditation"
    WORKOUT = "workout"
    READING = "reading"


def current_streak(completed_dates: Iterable[date], today: date) -> int:
    """Consecutive completed days ending today.

    A streak still counts while today is not yet done: it then ends
    yesterday.
    """
    days = set(completed_dates)
    cursor = today if today in days else today - timedelta(days=1)

    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def skill_streaks(
    completions: Iterable[tuple[SkillType | str, date]], today: date
) -> dict[SkillType, int]:
    """Current streak per skill from (skill, completed date) records."""
    by_skill: dict[SkillType, set[date]] = {skill: set() for skill in SkillType}
    for skill, completed_on in completions:
        by_skill[SkillType(skill)].add(completed_on)
    return {skill: current_streak(dates, today) for skill, dates in by_skill.items()}


class Achievement(str, Enum):
    WEEK_WARRIOR = "Week Warrior"
    FIRST_STEPS = "First Steps"
    MINDFUL_MASTER = "Mindful Master"
    FORCE_STRONG = "Force Strong"
    POINT_COLLECTOR = "Point Collector"


@dataclass(frozen=True)
class ProgressStats:
    current_streak: int = 0
    completed_courses: int = 0
    meditations: int = 0
    workouts: int = 0
    total_points: int = 0


def achievements(stats: ProgressStats) -> list[Achievement]:
    earned = []
    if stats.current_streak >= 7:
        earned.append(Achievement.WEEK_WARRIOR)
    if stats.completed_courses >= 1:
        earned.append(Achievement.FIRST_STEPS)
    if stats.meditations >= 5:
        earned.append(Achievement.MINDFUL_MASTER)
    if stats.workouts >= 5:
        earned.append(Achievement.FORCE_STRONG)
    if stats.total_points >= 100:
        earned.append(Achievement.POINT_COLLECTOR)
    return earned
