from flask import Blueprint
from calorie_tracker.utils.auth import require_auth
from calorie_tracker.controllers.daily_log_controller import (
    get_daily_log_handler,
    post_daily_log_handler,
    put_daily_log_handler,
    delete_food_entry_handler,
)

daily_log_bp = Blueprint("daily_log", __name__, url_prefix="/api/daily-log")

@daily_log_bp.get("")
@require_auth
def get_daily_log():
    return get_daily_log_handler()


@daily_log_bp.post("")
@require_auth
def post_daily_log():
    return post_daily_log_handler()


@daily_log_bp.put("")
@require_auth
def put_daily_log():
    return put_daily_log_handler()


@daily_log_bp.delete("")
@require_auth
def delete_food_entry():
    return delete_food_entry_handler()


@daily_log_bp.delete("/entries/<int:entry_id>")
@require_auth
def delete_food_entry_by_id(entry_id):
    return delete_food_entry_handler(entry_id)
