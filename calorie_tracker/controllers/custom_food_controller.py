from flask import request
from calorie_tracker.schemas.custom_food_schema import CustomFoodSchema, UpdateCustomFoodSchema
from calorie_tracker.services import custom_food_service
from calorie_tracker.utils.http import ok, error, arg_id, id_in_range, json_body, validate_schema, validation_error


def list_custom_foods_handler():
    search = (request.args.get("search") or "").strip()
    foods = custom_food_service.search_custom_foods(request.user_id, search or None)
    return ok([f.to_dict() for f in foods])


def upsert_custom_food_handler():
    data, errors = validate_schema(CustomFoodSchema, json_body())
    if errors:
        return validation_error(errors)

    food, created = custom_food_service.upsert_custom_food(request.user_id, data)
    return ok(food.to_dict(), 201 if created else 200)


def update_custom_food_handler():
    data, errors = validate_schema(UpdateCustomFoodSchema, json_body())
    if errors:
        return validation_error(errors)

    food_id = data.pop("id")
    food = custom_food_service.update_custom_food(request.user_id, food_id, data)
    return ok(food.to_dict())


def delete_custom_food_handler():
    food_id = arg_id("id")
    if food_id is None:
        return error("id is required", 400)
    if not id_in_range(food_id):
        return error("Custom food not found", 404)

    custom_food_service.delete_custom_food(request.user_id, food_id)
    return ok({"success": True})
