from flask import request
from calorie_tracker.schemas.meal_plan_schema import MEAL_PLAN_ACTIONS, UpdateMealPlanSchema
from calorie_tracker.services import meal_plan_service
from calorie_tracker.utils.http import ok, error, arg_id, id_in_range, json_body, load_action, validate_schema, validation_error


def list_meal_plans_handler():
    plans = meal_plan_service.list_meal_plans(request.user_id)
    return ok([p.to_dict() for p in plans])


def post_meal_plan_handler():
    action, data, errors = load_action(MEAL_PLAN_ACTIONS, json_body())
    if errors:
        return validation_error(errors)

    if action == "createDefaults":
        plans = meal_plan_service.create_default_meal_plans(request.user_id)
        return ok([p.to_dict() for p in plans], 201)

    plan = meal_plan_service.create_meal_plan(request.user_id, data["name"], data["target_calories"])
    return ok(plan.to_dict(), 201)


def update_meal_plan_handler():
    data, errors = validate_schema(UpdateMealPlanSchema, json_body())
    if errors:
        return validation_error(errors)

    plan_id = data.pop("id")
    plan = meal_plan_service.update_meal_plan(request.user_id, plan_id, data)
    return ok(plan.to_dict())


def delete_meal_plan_handler():
    plan_id = arg_id("id")
    if plan_id is None:
        return error("id is required", 400)
    if not id_in_range(plan_id):
        return error("Meal plan not found", 404)

    meal_plan_service.delete_meal_plan(request.user_id, plan_id)
    return ok({"success": True})
