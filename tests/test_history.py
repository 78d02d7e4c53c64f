from datetime import date, timedelta

import pytest

from calorie_tracker.services.history_service import (
    best_streak,
    current_streak,
    period_bounds,
    period_stats,
    window_bounds,
)


def series_from(values, start=date(2026, 10, 1)):
    return [(start + timedelta(days=i), v) for i, v in enumerate(values)]


def test_streaks_with_gap_day():
    series = series_from([500, 600, None, 400, 300, 700, 200])
    assert current_streak(series, 600) == 1
    assert best_streak(series, 600) == 2


def test_period_stats_skip_days_without_data():
    series = series_from([500, 600, None, 400, 300, 700, 200])
    stats = period_stats(series, 600)

    assert stats["days_with_data"] == 6
    assert stats["days_on_track"] == 5
    assert stats["total_consumed"] == 2700
    assert stats["total_target"] == 3600
    assert stats["total_deficit"] == 900
    assert stats["average_calories"] == 450
    assert stats["estimated_fat_kg"] == pytest.approx(900 / 7700)
    assert stats["estimated_fat_change_kg"] == pytest.approx(-900 / 7700)
    assert stats["estimated_fat_direction"] == "lost"


def test_zero_calorie_day_counts_as_no_data():
    series = series_from([300, 0, 300])
    stats = period_stats(series, 500)
    assert stats["days_with_data"] == 2
    assert stats["best_streak"] == 1
    assert stats["current_streak"] == 1


def test_surplus_reports_gain():
    stats = period_stats(series_from([2500, 2600]), 2000)
    assert stats["total_deficit"] == -1100
    assert stats["estimated_fat_direction"] == "gained"
    assert stats["days_on_track"] == 0
    assert stats["current_streak"] == 0


def test_empty_window():
    stats = period_stats(series_from([None, None]), 2000)
    assert stats["average_calories"] == 0
    assert stats["total_deficit"] == 0
    assert stats["best_streak"] == 0


def test_period_bounds():
    # 2026-10-14 is a Wednesday; weeks start on Sunday
    assert period_bounds("week", date(2026, 10, 14), 30) == (date(2026, 10, 11), date(2026, 10, 17))
    assert period_bounds("week", date(2026, 10, 11), 30) == (date(2026, 10, 11), date(2026, 10, 17))
    assert period_bounds("month", date(2026, 2, 14), 30) == (date(2026, 2, 1), date(2026, 2, 28))
    assert period_bounds("window", date(2026, 10, 7), 7) == (date(2026, 10, 1), date(2026, 10, 7))
    assert window_bounds(1, date(2026, 10, 7)) == (date(2026, 10, 7), date(2026, 10, 7))
