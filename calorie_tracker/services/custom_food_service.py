"""
Custom Food Service

User-defined reusable foods with per-100g nutrients. Names are unique per
user case-insensitively: creating an existing name updates that record.
"""

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from calorie_tracker.extensions import db
from calorie_tracker.models.custom_food import CustomFood
from calorie_tracker.services.food_constants import CUSTOM_FOOD_SEARCH_LIMIT
from calorie_tracker.utils.errors import NotFoundError, StoreError, ValidationError

NUTRIENT_FIELDS = ("calories_per_100g", "protein_per_100g", "carbs_per_100g", "fat_per_100g")


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_custom_foods(user_id: int, search: Optional[str] = None) -> List[CustomFood]:
    query = CustomFood.query.filter_by(user_id=user_id)
    if search:
        query = query.filter(CustomFood.food_name.ilike(f"%{_escape_like(search)}%", escape="\\"))
    return query.order_by(CustomFood.food_name).limit(CUSTOM_FOOD_SEARCH_LIMIT).all()


def find_by_name(user_id: int, food_name: str) -> Optional[CustomFood]:
    return CustomFood.query.filter(
        CustomFood.user_id == user_id,
        func.lower(CustomFood.food_name) == food_name.strip().lower(),
    ).first()


def _apply_nutrients(food: CustomFood, data: Dict[str, Any]) -> None:
    food.calories_per_100g = data["calories_per_100g"]
    food.protein_per_100g = data.get("protein_per_100g") or 0
    food.carbs_per_100g = data.get("carbs_per_100g") or 0
    food.fat_per_100g = data.get("fat_per_100g") or 0
    if data.get("brand"):
        food.brand = data["brand"]


def upsert_custom_food(user_id: int, data: Dict[str, Any]) -> Tuple[CustomFood, bool]:
    """
    Create a custom food or update the one with the same name.

    The unique (user_id, lower(food_name)) index decides concurrent creations:
    the loser rolls back and updates the winner's row.

    Returns:
        (food, created)
    """
    food = find_by_name(user_id, data["food_name"])
    if food:
        _apply_nutrients(food, data)
        db.session.commit()
        return food, False

    food = CustomFood(user_id=user_id, food_name=data["food_name"].strip())
    _apply_nutrients(food, data)
    db.session.add(food)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        food = find_by_name(user_id, data["food_name"])
        if food is None:
            raise StoreError("Could not save custom food")
        _apply_nutrients(food, data)
        db.session.commit()
        return food, False
    return food, True


def get_custom_food(user_id: int, custom_food_id: int) -> CustomFood:
    food = CustomFood.query.filter_by(id=custom_food_id, user_id=user_id).first()
    if not food:
        raise NotFoundError("Custom food not found")
    return food


def update_custom_food(user_id: int, custom_food_id: int, fields: Dict[str, Any]) -> CustomFood:
    food = get_custom_food(user_id, custom_food_id)
    new_name = (fields.get("food_name") or "").strip()
    if new_name:
        clash = find_by_name(user_id, new_name)
        if clash and clash.id != food.id:
            raise ValidationError("Custom food with this name already exists")
        fields = {**fields, "food_name": new_name}

    for key in ("food_name", "brand") + NUTRIENT_FIELDS:
        if key in fields and fields[key] is not None:
            setattr(food, key, fields[key])
    try:
        db.session.commit()
    except IntegrityError:
        # Another request took the name between the check and the commit
        db.session.rollback()
        raise ValidationError("Custom food with this name already exists")
    return food


def delete_custom_food(user_id: int, custom_food_id: int) -> None:
    food = get_custom_food(user_id, custom_food_id)
    db.session.delete(food)
    db.session.commit()
