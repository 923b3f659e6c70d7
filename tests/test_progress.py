from datetime import date, timedelta

import pytest

from revertcompanion.models import DayRecord, Progress
from revertcompanion.progress import (
    achievements,
    completion_rate,
    mark_lesson_complete,
    record_prayer,
    total_prayers,
)
from revertcompanion.prayer import PRAYERS

TODAY = date(2024, 6, 21)


def _pray_all(progress, day, today=TODAY):
    for name in PRAYERS:
        progress = record_prayer(progress, day, name, True, today)
    return progress


def test_record_prayer_creates_day_record():
    progress = record_prayer(Progress(), TODAY, "asr", True, TODAY)
    assert progress.daily_prayers[TODAY] == DayRecord(asr=True)
    assert progress.streak == 0
    assert progress.total_points == 0


def test_record_prayer_leaves_input_untouched():
    original = Progress()
    record_prayer(original, TODAY, "fajr", True, TODAY)
    assert original.daily_prayers == {}


def test_completing_today_grows_streak_and_points():
    progress = _pray_all(Progress(), TODAY)
    assert progress.daily_prayers[TODAY].complete
    assert progress.streak == 1
    assert progress.total_points == 50


def test_re_recording_a_complete_day_counts_once():
    progress = _pray_all(Progress(), TODAY)
    progress = record_prayer(progress, TODAY, "isha", True, TODAY)
    assert progress.streak == 1
    assert progress.total_points == 50


def test_unmarking_and_remarking_counts_again():
    progress = _pray_all(Progress(), TODAY)
    progress = record_prayer(progress, TODAY, "isha", False, TODAY)
    progress = record_prayer(progress, TODAY, "isha", True, TODAY)
    assert progress.streak == 2


def test_back_filled_day_does_not_grow_streak():
    progress = _pray_all(Progress(), TODAY - timedelta(days=1))
    assert progress.streak == 0
    assert progress.total_points == 0
    assert total_prayers(progress) == 5


def test_unknown_prayer_is_rejected():
    with pytest.raises(ValueError):
        record_prayer(Progress(), TODAY, "sunrise", True, TODAY)


def test_lesson_points_counted_once():
    progress = mark_lesson_complete(Progress(), "basics-1")
    progress = mark_lesson_complete(progress, "basics-1")
    progress = mark_lesson_complete(progress, "prayer-1")
    assert progress.lessons_completed == ("basics-1", "prayer-1")
    assert progress.total_points == 50


def test_completion_rate():
    assert completion_rate(Progress()) == 0
    progress = _pray_all(Progress(), TODAY)
    progress = record_prayer(progress, TODAY - timedelta(days=1), "fajr", True, TODAY)
    progress = record_prayer(progress, TODAY - timedelta(days=2), "fajr", True, TODAY)
    assert completion_rate(progress) == 33
    progress = _pray_all(progress, TODAY - timedelta(days=2))
    assert completion_rate(progress) == 67


def test_new_user_sees_locked_streak_goals():
    ids = [a.id for a in achievements(Progress())]
    assert ids == ["week_locked", "month_locked"]


def test_achievement_thresholds():
    full = DayRecord(True, True, True, True, True)
    progress = Progress(
        daily_prayers={TODAY - timedelta(days=n): full for n in range(20)},
        lessons_completed=tuple(f"lesson-{n}" for n in range(10)),
        streak=7,
    )
    result = {a.id: a.unlocked for a in achievements(progress)}
    assert result == {
        "week": True,
        "century": True,
        "learner": True,
        "month_locked": False,
    }


def test_thirty_day_streak_unlocks_both_streak_goals():
    ids = [a.id for a in achievements(Progress(streak=30))]
    assert ids == ["week", "month"]
