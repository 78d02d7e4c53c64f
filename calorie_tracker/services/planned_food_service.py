"""
Planned Food Service

CRUD for the foods prescribed in a meal plan. Every mutation re-derives the
owning plan's target calories before committing.
"""

from typing import Any, Dict, List, Optional

from calorie_tracker.extensions import db
from calorie_tracker.models.planned_food import PlannedFood
from calorie_tracker.services.meal_plan_service import get_meal_plan, recompute_meal_plan_target
from calorie_tracker.utils.errors import NotFoundError

EDITABLE_FIELDS = ("food_name", "quantity_grams", "calories", "protein", "carbs", "fat")


def list_planned_foods(user_id: int, meal_plan_id: Optional[int] = None) -> List[PlannedFood]:
    query = PlannedFood.query.filter_by(user_id=user_id)
    if meal_plan_id is not None:
        query = query.filter_by(meal_plan_id=meal_plan_id)
    return query.order_by(PlannedFood.created_at, PlannedFood.id).all()


def get_planned_food(user_id: int, planned_food_id: int) -> PlannedFood:
    food = PlannedFood.query.filter_by(id=planned_food_id, user_id=user_id).first()
    if not food:
        raise NotFoundError("Planned food not found")
    return food


def create_planned_food(user_id: int, data: Dict[str, Any]) -> PlannedFood:
    plan = get_meal_plan(user_id, data["meal_plan_id"], for_update=True)

    food = PlannedFood(
        user_id=user_id,
        meal_plan=plan,
        food_name=data["food_name"],
        quantity_grams=data["quantity_grams"],
        calories=data["calories"],
        protein=data.get("protein") or 0,
        carbs=data.get("carbs") or 0,
        fat=data.get("fat") or 0,
    )
    db.session.add(food)
    recompute_meal_plan_target(plan)
    db.session.commit()
    return food


def update_planned_food(user_id: int, planned_food_id: int, fields: Dict[str, Any]) -> PlannedFood:
    food = get_planned_food(user_id, planned_food_id)
    plan = get_meal_plan(user_id, food.meal_plan_id, for_update=True)

    for key in EDITABLE_FIELDS:
        if key in fields and fields[key] is not None:
            setattr(food, key, fields[key])

    recompute_meal_plan_target(plan)
    db.session.commit()
    return food


def delete_planned_food(user_id: int, planned_food_id: int) -> None:
    food = get_planned_food(user_id, planned_food_id)
    plan = get_meal_plan(user_id, food.meal_plan_id, for_update=True)

    db.session.delete(food)
    recompute_meal_plan_target(plan)
    db.session.commit()
