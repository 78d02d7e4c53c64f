from flask import Blueprint
from calorie_tracker.utils.auth import require_auth
from calorie_tracker.controllers.custom_food_controller import (
    list_custom_foods_handler,
    upsert_custom_food_handler,
    update_custom_food_handler,
    delete_custom_food_handler,
)

custom_food_bp = Blueprint("custom_foods", __name__, url_prefix="/api/custom-foods")

@custom_food_bp.get("")
@require_auth
def list_custom_foods():
    return list_custom_foods_handler()


@custom_food_bp.post("")
@require_auth
def upsert_custom_food():
    return upsert_custom_food_handler()


@custom_food_bp.put("")
@require_auth
def update_custom_food():
    return update_custom_food_handler()


@custom_food_bp.delete("")
@require_auth
def delete_custom_food():
    return delete_custom_food_handler()
