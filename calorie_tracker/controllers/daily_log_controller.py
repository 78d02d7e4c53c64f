"""
Daily Log Controller

GET    /api/daily-log                  day summary (``?date=``, default today in ``?tz=``)
GET    /api/daily-log?action=history   logged days in the last ``days`` days
GET    /api/daily-log?action=stats     deficit / streak statistics for a period
POST   /api/daily-log                  ``create`` or ``addFood``
PUT    /api/daily-log                  weight / notes for a day
DELETE /api/daily-log?foodEntryId=     remove one food entry
"""

from flask import request, current_app

from calorie_tracker.schemas.daily_log_schema import DAILY_LOG_ACTIONS, StatsQuerySchema, UpdateDailyLogSchema
from calorie_tracker.services import daily_log_service, history_service
from calorie_tracker.utils.http import (
    ok,
    error,
    arg_id,
    arg_int,
    id_in_range,
    json_body,
    load_action,
    request_date,
    validate_schema,
    validation_error,
)


def _history_days(days=None) -> int:
    default = current_app.config["HISTORY_DEFAULT_DAYS"]
    max_days = current_app.config["HISTORY_MAX_DAYS"]
    if days is None:
        days = arg_int("days", default, min_value=1, max_value=max_days)
    return max(1, min(days, max_days))


def get_daily_log_handler():
    action = request.args.get("action")
    if action == "history":
        return _history()
    if action == "stats":
        return _stats()
    if action:
        return error("action: Must be one of: history, stats.", 400)

    log_date = request_date(request.args.get("date"))
    if log_date is None:
        return error("date: Not a valid date.", 400)
    return ok(daily_log_service.daily_summary(request.user_id, log_date))


def _history():
    end = request_date(request.args.get("date"))
    if end is None:
        return error("date: Not a valid date.", 400)
    start, end = history_service.window_bounds(_history_days(), end)
    return ok(history_service.history(request.user_id, start, end))


def _stats():
    query, errors = validate_schema(StatsQuerySchema, request.args.to_dict())
    if errors:
        return validation_error(errors)

    anchor = query["date"] or request_date()
    start, end = history_service.period_bounds(query["period"], anchor, _history_days(query["days"]))
    return ok(history_service.period_summary(
        request.user_id,
        start,
        end,
        target=query["target"],
        target_source=query["target_source"],
    ))


def post_daily_log_handler():
    body = json_body()
    action, data, errors = load_action(DAILY_LOG_ACTIONS, body)
    if errors:
        return validation_error(errors)

    log_date = data["date"] or request_date(request.args.get("date"))
    if log_date is None:
        return error("date: Not a valid date.", 400)

    if action == "create":
        log = daily_log_service.get_or_create_daily_log(request.user_id, log_date)
        return ok(log.to_dict())

    entry = daily_log_service.add_food_entry(request.user_id, log_date, data)
    return ok(entry.to_dict(), 201)


def put_daily_log_handler():
    data, errors = validate_schema(UpdateDailyLogSchema, json_body())
    if errors:
        return validation_error(errors)

    log_date = data.pop("date") or request_date(request.args.get("date"))
    if log_date is None:
        return error("date: Not a valid date.", 400)
    log = daily_log_service.update_daily_log(request.user_id, log_date, data)
    return ok(log.to_dict())


def delete_food_entry_handler(entry_id=None):
    if entry_id is None:
        entry_id = arg_id("foodEntryId")
    if entry_id is None:
        return error("foodEntryId is required", 400)
    if not id_in_range(entry_id):
        return error("Food entry not found", 404)

    daily_log_service.delete_food_entry(request.user_id, entry_id)
    return ok({"success": True})
