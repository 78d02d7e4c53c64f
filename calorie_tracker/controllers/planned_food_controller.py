from flask import request
from calorie_tracker.schemas.planned_food_schema import CreatePlannedFoodSchema, UpdatePlannedFoodSchema
from calorie_tracker.services import planned_food_service
from calorie_tracker.utils.http import ok, error, arg_id, id_in_range, json_body, validate_schema, validation_error


def list_planned_foods_handler():
    meal_plan_id = arg_id("meal_plan_id")
    if meal_plan_id is not None and not id_in_range(meal_plan_id):
        return ok([])
    foods = planned_food_service.list_planned_foods(request.user_id, meal_plan_id)
    return ok([f.to_dict() for f in foods])


def create_planned_food_handler():
    data, errors = validate_schema(CreatePlannedFoodSchema, json_body())
    if errors:
        return validation_error(errors)

    food = planned_food_service.create_planned_food(request.user_id, data)
    return ok(food.to_dict(), 201)


def update_planned_food_handler():
    data, errors = validate_schema(UpdatePlannedFoodSchema, json_body())
    if errors:
        return validation_error(errors)

    food_id = data.pop("id")
    food = planned_food_service.update_planned_food(request.user_id, food_id, data)
    return ok(food.to_dict())


def delete_planned_food_handler():
    food_id = arg_id("id")
    if food_id is None:
        return error("id is required", 400)
    if not id_in_range(food_id):
        return error("Planned food not found", 404)

    planned_food_service.delete_planned_food(request.user_id, food_id)
    return ok({"success": True})
