from flask import Blueprint
from calorie_tracker.utils.auth import require_auth
from calorie_tracker.controllers.planned_food_controller import (
    list_planned_foods_handler,
    create_planned_food_handler,
    update_planned_food_handler,
    delete_planned_food_handler,
)

planned_food_bp = Blueprint("planned_foods", __name__, url_prefix="/api/planned-foods")

@planned_food_bp.get("")
@require_auth
def list_planned_foods():
    return list_planned_foods_handler()


@planned_food_bp.post("")
@require_auth
def create_planned_food():
    return create_planned_food_handler()


@planned_food_bp.put("")
@require_auth
def update_planned_food():
    return update_planned_food_handler()


@planned_food_bp.delete("")
@require_auth
def delete_planned_food():
    return delete_planned_food_handler()
