from flask import Blueprint
from calorie_tracker.utils.auth import require_auth
from calorie_tracker.controllers.meal_plan_controller import (
    list_meal_plans_handler,
    post_meal_plan_handler,
    update_meal_plan_handler,
    delete_meal_plan_handler,
)

meal_plan_bp = Blueprint("meal_plans", __name__, url_prefix="/api/meal-plans")

@meal_plan_bp.get("")
@require_auth
def list_meal_plans():
    return list_meal_plans_handler()


@meal_plan_bp.post("")
@require_auth
def create_meal_plan():
    return post_meal_plan_handler()


@meal_plan_bp.put("")
@require_auth
def update_meal_plan():
    return update_meal_plan_handler()


@meal_plan_bp.delete("")
@require_auth
def delete_meal_plan():
    return delete_meal_plan_handler()
