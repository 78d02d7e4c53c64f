"""
History Service

Per-day consumption over a window of days and the period statistics built
on it: deficit, average intake, days on track, streaks and the estimated
fat-mass change.
"""

import calendar
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import func

from calorie_tracker.extensions import db
from calorie_tracker.models.daily_log import DailyLog
from calorie_tracker.models.food_entry import FoodEntry
from calorie_tracker.models.meal_plan import MealPlan
from calorie_tracker.models.planned_food import PlannedFood
from calorie_tracker.services.food_constants import KCAL_PER_KG_FAT
from calorie_tracker.utils.enums import StatsPeriod, TargetSource

DayTotal = Tuple[date, Optional[float]]


def window_bounds(days: int, end: date) -> Tuple[date, date]:
    """The ``days`` calendar days ending at ``end`` (inclusive)."""
    return end - timedelta(days=days - 1), end


def period_bounds(period: str, anchor: date, days: int) -> Tuple[date, date]:
    if period == StatsPeriod.WEEK.value:
        # Weeks start on Sunday
        start = anchor - timedelta(days=(anchor.weekday() + 1) % 7)
        return start, start + timedelta(days=6)
    if period == StatsPeriod.MONTH.value:
        last_day = calendar.monthrange(anchor.year, anchor.month)[1]
        return anchor.replace(day=1), anchor.replace(day=last_day)
    return window_bounds(days, anchor)


def history(user_id: int, start: date, end: date) -> List[Dict[str, Any]]:
    """
    Days with a log between ``start`` and ``end``, newest first.

    Returns:
        List of {date, total_calories, entries}
    """
    logs = (
        DailyLog.query
        .filter(DailyLog.user_id == user_id, DailyLog.log_date >= start, DailyLog.log_date <= end)
        .order_by(DailyLog.log_date.desc())
        .all()
    )
    log_ids = [log.id for log in logs]

    entries = (
        FoodEntry.query
        .filter(FoodEntry.daily_log_id.in_(log_ids or [0]))
        .order_by(FoodEntry.created_at, FoodEntry.id)
        .all()
    )
    entries_by_log: Dict[int, List[FoodEntry]] = {}
    for entry in entries:
        entries_by_log.setdefault(entry.daily_log_id, []).append(entry)

    payload = []
    for log in logs:
        day_entries = entries_by_log.get(log.id, [])
        payload.append({
            "date": log.log_date.isoformat(),
            "total_calories": sum(e.calories for e in day_entries),
            "entries": [e.to_dict() for e in day_entries],
        })
    return payload


def daily_calorie_series(user_id: int, start: date, end: date) -> List[DayTotal]:
    """Every day from ``start`` to ``end`` with its consumed calories, None when nothing was logged."""
    rows = (
        db.session.query(DailyLog.log_date, func.sum(FoodEntry.calories))
        .join(FoodEntry, FoodEntry.daily_log_id == DailyLog.id)
        .filter(DailyLog.user_id == user_id, DailyLog.log_date >= start, DailyLog.log_date <= end)
        .group_by(DailyLog.log_date)
        .all()
    )
    consumed = {log_date: float(total or 0) for log_date, total in rows}

    series = []
    current = start
    while current <= end:
        series.append((current, consumed.get(current)))
        current += timedelta(days=1)
    return series


def daily_target(user_id: int, source: str = TargetSource.MEAL_PLANS.value) -> float:
    if source == TargetSource.PLANNED_FOODS.value:
        total = db.session.query(func.sum(PlannedFood.calories)).filter(PlannedFood.user_id == user_id).scalar()
    else:
        total = db.session.query(func.sum(MealPlan.target_calories)).filter(MealPlan.user_id == user_id).scalar()
    return float(total or 0)


def _on_track(consumed: Optional[float], target: float) -> bool:
    return bool(consumed) and consumed <= target


def best_streak(series: Sequence[DayTotal], target: float) -> int:
    best = run = 0
    for _, consumed in series:
        if _on_track(consumed, target):
            run += 1
            best = max(best, run)
        else:
            run = 0
    return best


def current_streak(series: Sequence[DayTotal], target: float) -> int:
    streak = 0
    for _, consumed in reversed(series):
        if not _on_track(consumed, target):
            break
        streak += 1
    return streak


def period_stats(series: Sequence[DayTotal], target: float) -> Dict[str, Any]:
    """
    Fold a chronological day series against a fixed daily target.

    Days with no logged food (None or 0 kcal) are left out of the totals and
    of the average, and break streaks.
    """
    total_consumed = 0.0
    total_target = 0.0
    days_with_data = 0
    days_on_track = 0

    for _, consumed in series:
        if not consumed:
            continue
        total_consumed += consumed
        total_target += target
        days_with_data += 1
        if consumed <= target:
            days_on_track += 1

    total_deficit = total_target - total_consumed
    fat_kg = total_deficit / KCAL_PER_KG_FAT

    return {
        "total_consumed": total_consumed,
        "total_target": total_target,
        "total_deficit": total_deficit,
        "average_calories": total_consumed / days_with_data if days_with_data else 0,
        "days_with_data": days_with_data,
        "days_on_track": days_on_track,
        "best_streak": best_streak(series, target),
        "current_streak": current_streak(series, target),
        "estimated_fat_change_kg": -fat_kg,
        "estimated_fat_direction": "lost" if total_deficit >= 0 else "gained",
        "estimated_fat_kg": abs(fat_kg),
    }


def period_summary(
    user_id: int,
    start: date,
    end: date,
    target: Optional[float] = None,
    target_source: str = TargetSource.MEAL_PLANS.value,
) -> Dict[str, Any]:
    """Statistics plus a per-day chart series for ``start``..``end``."""
    if target is None:
        target = daily_target(user_id, target_source)

    series = daily_calorie_series(user_id, start, end)
    days = [
        {
            "date": day.isoformat(),
            "consumed": consumed or 0,
            "target": target,
            "deficit": target - (consumed or 0),
            "has_data": bool(consumed),
        }
        for day, consumed in series
    ]

    return {
        "start": start.isoformat(),
        "end": end.isoformat(),
        "daily_target": target,
        "stats": period_stats(series, target),
        "days": days,
    }
