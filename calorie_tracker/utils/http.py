from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from flask import request, jsonify
from marshmallow import Schema, ValidationError, validate

# Largest value a 64-bit INTEGER primary key can hold
MAX_ID = 2**63 - 1

valid_id = validate.Range(min=1, max=MAX_ID)


def ok(payload: Any, status: int = 200):
    return jsonify({"data": payload}), status


def error(message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": message}
    if extra:
        body.update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls, data: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    schema: Schema = schema_cls()
    try:
        return schema.load(data), None
    except ValidationError as err:
        return None, err.messages


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def id_in_range(value: Optional[int]) -> bool:
    return value is not None and 1 <= value <= MAX_ID


def arg_id(name: str) -> Optional[int]:
    return request.args.get(name, type=int)


def parse_iso_date(value: Any) -> Optional[date]:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def today_for(tz_name: Optional[str] = None) -> date:
    """Current calendar date in the caller's timezone, server-local if none given."""
    if tz_name:
        try:
            return datetime.now(ZoneInfo(tz_name)).date()
        except (ZoneInfoNotFoundError, ValueError):
            pass
    return date.today()


def request_date(value: Any = None) -> Optional[date]:
    """Resolve the day a request refers to: explicit ISO date, else today in ``?tz=``.

    Returns None when an explicit value is present but malformed.
    """
    if value in (None, ""):
        return today_for(request.args.get("tz") or request.headers.get("X-Timezone"))
    return parse_iso_date(value)


def schema_error_message(messages) -> str:
    """Flatten marshmallow's error dict into ``"field: message"``."""
    if isinstance(messages, dict):
        for field, value in messages.items():
            if field == "_schema":
                return schema_error_message(value)
            inner = schema_error_message(value)
            return f"{field}: {inner}" if isinstance(value, list) else f"{field}.{inner}"
    if isinstance(messages, (list, tuple)) and messages:
        return str(messages[0])
    return str(messages)


def validation_error(messages):
    return error(schema_error_message(messages), 400, details=messages)


def load_action(actions: Dict[str, Any], data: Dict[str, Any]):
    """
    Validate a tagged request body against the schema for its ``action``.

    Returns:
        (action, data, errors)
    """
    action = data.get("action")
    if not isinstance(action, str) or action not in actions:
        allowed = ", ".join(sorted(actions))
        return action, None, {"action": [f"Must be one of: {allowed}."]}
    loaded, errors = validate_schema(actions[action], data)
    return action, loaded, errors
