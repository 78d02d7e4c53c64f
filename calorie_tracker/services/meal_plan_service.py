"""
Meal Plan Service

Handles meal-plan CRUD and keeps ``MealPlan.target_calories`` equal to the
sum of its planned foods' calories.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import func

from calorie_tracker.extensions import db
from calorie_tracker.models.food_entry import FoodEntry
from calorie_tracker.models.meal_plan import MealPlan
from calorie_tracker.models.planned_food import PlannedFood
from calorie_tracker.services.food_constants import DEFAULT_MEALS
from calorie_tracker.utils.errors import NotFoundError

logger = logging.getLogger(__name__)


def get_meal_plan(user_id: int, meal_plan_id: int, for_update: bool = False) -> MealPlan:
    query = MealPlan.query.filter_by(id=meal_plan_id, user_id=user_id)
    if for_update:
        query = query.with_for_update()
    plan = query.first()
    if not plan:
        raise NotFoundError("Meal plan not found")
    return plan


def list_meal_plans(user_id: int) -> List[MealPlan]:
    return MealPlan.query.filter_by(user_id=user_id).order_by(MealPlan.meal_order, MealPlan.id).all()


def create_meal_plan(user_id: int, name: str, target_calories: float = 0) -> MealPlan:
    max_order = db.session.query(func.max(MealPlan.meal_order)).filter(MealPlan.user_id == user_id).scalar()
    plan = MealPlan(
        user_id=user_id,
        name=name,
        target_calories=target_calories or 0,
        meal_order=(max_order or 0) + 1,
        is_default=False,
    )
    db.session.add(plan)
    db.session.commit()
    return plan


def create_default_meal_plans(user_id: int) -> List[MealPlan]:
    """Seed the four default meals. A user who already has plans gets them back unchanged."""
    existing = list_meal_plans(user_id)
    if existing:
        return existing

    plans = [
        MealPlan(user_id=user_id, name=name, target_calories=target, meal_order=order, is_default=True)
        for name, target, order in DEFAULT_MEALS
    ]
    db.session.add_all(plans)
    db.session.commit()
    return plans


def recompute_meal_plan_target(meal_plan: MealPlan) -> MealPlan:
    """
    Write the sum of the plan's planned-food calories to ``target_calories``.

    Full recompute over the plan's planned foods. With no planned foods left
    the last value is kept. The caller commits, so the planned-food write and
    this recompute land in one transaction; the plan row should have been
    loaded ``for_update`` so concurrent recomputes for one plan serialize.
    """
    db.session.flush()
    count, total = (
        db.session.query(func.count(PlannedFood.id), func.sum(PlannedFood.calories))
        .filter(PlannedFood.meal_plan_id == meal_plan.id)
        .one()
    )
    if count:
        meal_plan.target_calories = float(total or 0)
        logger.debug("Meal plan %s target recomputed to %s from %s planned foods", meal_plan.id, total, count)
    return meal_plan


def update_meal_plan(user_id: int, meal_plan_id: int, fields: Dict[str, Any]) -> MealPlan:
    plan = get_meal_plan(user_id, meal_plan_id, for_update=True)
    for key in ("name", "target_calories", "meal_order"):
        if key in fields:
            setattr(plan, key, fields[key])

    # target_calories is derived while planned foods exist
    recompute_meal_plan_target(plan)
    db.session.commit()
    return plan


def delete_meal_plan(user_id: int, meal_plan_id: int) -> None:
    """Delete a plan with its planned foods; food entries logged against it are kept, unlinked."""
    plan = get_meal_plan(user_id, meal_plan_id)
    FoodEntry.query.filter_by(meal_plan_id=plan.id).update({"meal_plan_id": None})
    db.session.delete(plan)
    db.session.commit()
