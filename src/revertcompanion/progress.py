"""Prayer streaks, lesson points, and achievements."""

import math
from dataclasses import replace
from datetime import date

from revertcompanion.models import Achievement, DayRecord, Progress
from revertcompanion.prayer import PRAYERS

DAY_COMPLETE_POINTS = 50
LESSON_POINTS = 25
MAX_ACHIEVEMENTS = 6


def record_prayer(
    progress: Progress,
    day: date,
    prayer: str,
    prayed: bool,
    today: date,
) -> Progress:
    """Mark one prayer as prayed (or not) on day.

    The streak grows by one, with DAY_COMPLETE_POINTS, when the record makes
    today's five prayers complete. Back-filling past days never changes the
    streak.

    Args:
        progress: Current progress.
        day: Calendar day the prayer belongs to.
        prayer: One of "fajr", "dhuhr", "asr", "maghrib", "isha".
        prayed: Whether it was prayed.
        today: The user's current calendar day.

    Returns:
        The updated Progress.

    Raises:
        ValueError: If prayer is not one of the five prayers.
    """
    if prayer not in PRAYERS:
        raise ValueError(f"Unknown prayer: {prayer!r}")
    before = progress.daily_prayers.get(day, DayRecord())
    after = replace(before, **{prayer: prayed})

    streak = progress.streak
    points = progress.total_points
    if day == today and after.complete and not before.complete:
        streak += 1
        points += DAY_COMPLETE_POINTS

    return replace(
        progress,
        daily_prayers={**progress.daily_prayers, day: after},
        streak=streak,
        total_points=points,
    )


def mark_lesson_complete(progress: Progress, lesson_id: str) -> Progress:
    """Add a finished lesson and its LESSON_POINTS. A lesson only counts once."""
    if lesson_id in progress.lessons_completed:
        return progress
    return replace(
        progress,
        lessons_completed=(*progress.lessons_completed, lesson_id),
        total_points=progress.total_points + LESSON_POINTS,
    )


def total_prayers(progress: Progress) -> int:
    return sum(record.prayed_count for record in progress.daily_prayers.values())


def completion_rate(progress: Progress) -> int:
    """Percentage of recorded days with all five prayers, rounded half up."""
    if not progress.daily_prayers:
        return 0
    complete = sum(record.complete for record in progress.daily_prayers.values())
    return math.floor(complete / len(progress.daily_prayers) * 100 + 0.5)


def achievements(progress: Progress) -> list[Achievement]:
    """Unlocked milestones first, then the streak goals still ahead."""
    earned: list[Achievement] = []
    if progress.streak >= 7:
        earned.append(Achievement("week", "Week Warrior", "7-day prayer streak", True))
    if progress.streak >= 30:
        earned.append(Achievement("month", "Monthly Master", "30-day prayer streak", True))
    if total_prayers(progress) >= 100:
        earned.append(Achievement("century", "Century Club", "100 prayers completed", True))
    if len(progress.lessons_completed) >= 10:
        earned.append(
            Achievement("learner", "Dedicated Learner", "10 lessons completed", True)
        )

    if progress.streak < 7:
        earned.append(
            Achievement("week_locked", "Week Warrior", "7-day prayer streak", False)
        )
    if progress.streak < 30:
        earned.append(
            Achievement("month_locked", "Monthly Master", "30-day prayer streak", False)
        )
    return earned[:MAX_ACHIEVEMENTS]
