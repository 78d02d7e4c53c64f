"""
Daily Log Service

Handles the per-day food log: lazy creation of the day's log, adding and
removing food entries, and the day's consumed totals per meal.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from calorie_tracker.extensions import db
from calorie_tracker.models.custom_food import CustomFood
from calorie_tracker.models.daily_log import DailyLog
from calorie_tracker.models.food_entry import FoodEntry
from calorie_tracker.models.meal_plan import MealPlan
from calorie_tracker.services.food_helpers import empty_totals, scale_per_100g, sum_nutrients
from calorie_tracker.services.nutrition_service import calculate_deficit, deficit_status
from calorie_tracker.utils.errors import AuthorizationError, NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def find_daily_log(user_id: int, log_date: date) -> Optional[DailyLog]:
    return DailyLog.query.filter_by(user_id=user_id, log_date=log_date).first()


def get_or_create_daily_log(user_id: int, log_date: date) -> DailyLog:
    """
    Return the user's log for ``log_date``, creating it if missing.

    The (user_id, log_date) unique constraint decides concurrent creations:
    the loser rolls back and reads the winner's row.
    """
    log = find_daily_log(user_id, log_date)
    if log:
        return log

    log = DailyLog(user_id=user_id, log_date=log_date)
    db.session.add(log)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        log = find_daily_log(user_id, log_date)
        if log is None:
            raise StoreError("Could not create daily log")
        return log

    logger.debug("Created daily log %s for user %s on %s", log.id, user_id, log_date)
    return log


def update_daily_log(user_id: int, log_date: date, fields: Dict[str, Any]) -> DailyLog:
    log = get_or_create_daily_log(user_id, log_date)
    for key in ("weight", "notes"):
        if key in fields:
            setattr(log, key, fields[key])
    db.session.commit()
    return log


def _resolve_nutrients(user_id: int, data: Dict[str, Any]) -> Dict[str, float]:
    """Explicit calories win; otherwise scale per-100g values (inline or from a custom food)."""
    quantity = data["quantity_grams"]

    if data.get("calories") is not None:
        return {
            "calories": data["calories"],
            "protein": data.get("protein") or 0,
            "carbs": data.get("carbs") or 0,
            "fat": data.get("fat") or 0,
        }

    if data.get("custom_food_id") is not None:
        food = CustomFood.query.filter_by(id=data["custom_food_id"], user_id=user_id).first()
        if not food:
            raise NotFoundError("Custom food not found")
        return scale_per_100g(food.per_100g(), quantity)

    if data.get("calories_per_100g") is not None:
        return scale_per_100g({
            "calories": data["calories_per_100g"],
            "protein": data.get("protein_per_100g"),
            "carbs": data.get("carbs_per_100g"),
            "fat": data.get("fat_per_100g"),
        }, quantity)

    raise ValidationError("calories: Missing data for required field.")


def add_food_entry(user_id: int, log_date: date, data: Dict[str, Any]) -> FoodEntry:
    """
    Log a consumed food on ``log_date``.

    Args:
        user_id: Owner
        log_date: Day to log against; its DailyLog is created if missing
        data: Validated AddFood payload

    Returns:
        The created FoodEntry

    Raises:
        NotFoundError: meal plan or custom food not owned by the user
    """
    meal_plan_id = data.get("meal_plan_id")
    if meal_plan_id is not None:
        if not MealPlan.query.filter_by(id=meal_plan_id, user_id=user_id).first():
            raise NotFoundError("Meal plan not found")

    nutrients = _resolve_nutrients(user_id, data)
    log = get_or_create_daily_log(user_id, log_date)

    entry = FoodEntry(
        user_id=user_id,
        daily_log=log,
        meal_plan_id=meal_plan_id,
        food_name=data["food_name"],
        quantity_grams=data["quantity_grams"],
        **nutrients,
    )
    db.session.add(entry)
    db.session.commit()
    return entry


def delete_food_entry(user_id: int, entry_id: int) -> None:
    entry = db.session.get(FoodEntry, entry_id)
    if not entry:
        raise NotFoundError("Food entry not found")
    if entry.user_id != user_id:
        raise AuthorizationError("You do not have permission to remove this food entry")

    db.session.delete(entry)
    db.session.commit()


def list_entries(log: Optional[DailyLog]) -> List[FoodEntry]:
    if log is None:
        return []
    return FoodEntry.query.filter_by(daily_log_id=log.id).order_by(FoodEntry.created_at, FoodEntry.id).all()


def _meal_breakdown(user_id: int, entries: List[FoodEntry]) -> List[Dict[str, Any]]:
    plans = MealPlan.query.filter_by(user_id=user_id).order_by(MealPlan.meal_order).all()

    by_plan: Dict[Optional[int], List[FoodEntry]] = {}
    for entry in entries:
        by_plan.setdefault(entry.meal_plan_id, []).append(entry)

    meals = []
    for plan in plans:
        consumed = sum_nutrients(by_plan.pop(plan.id, []))
        remaining = calculate_deficit(consumed["calories"], plan.target_calories)
        meals.append({
            "meal_plan_id": plan.id,
            "name": plan.name,
            "target_calories": plan.target_calories,
            "totals": consumed,
            "remaining": remaining,
            "status": deficit_status(remaining),
        })

    # Entries without a plan, or whose plan is gone
    leftovers = [entry for group in by_plan.values() for entry in group]
    meals.append({
        "meal_plan_id": None,
        "name": None,
        "target_calories": None,
        "totals": sum_nutrients(leftovers) if leftovers else empty_totals(),
        "remaining": None,
        "status": None,
    })
    return meals


def daily_summary(user_id: int, log_date: date) -> Dict[str, Any]:
    """
    Consumed totals for one day.

    A day without a log is not an error: log is None, entries empty, totals zero.
    """
    log = find_daily_log(user_id, log_date)
    entries = list_entries(log)
    totals = sum_nutrients(entries)

    meals = _meal_breakdown(user_id, entries)
    target = sum(m["target_calories"] for m in meals if m["meal_plan_id"] is not None)
    remaining = calculate_deficit(totals["calories"], target)

    return {
        "date": log_date.isoformat(),
        "log": log.to_dict() if log else None,
        "entries": [e.to_dict() for e in entries],
        "totals": totals,
        "target": target,
        "remaining": remaining,
        "status": deficit_status(remaining),
        "meals": meals,
    }
