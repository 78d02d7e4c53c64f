from flask import request
from calorie_tracker.schemas.auth_schema import AUTH_ACTIONS, SigninSchema, SignupSchema
from calorie_tracker.services import auth_service
from calorie_tracker.utils.http import ok, json_body, load_action, validate_schema, validation_error


def _signup(data):
    return ok(auth_service.signup(data["email"], data["password"], data.get("name")), 201)


def _signin(data):
    return ok(auth_service.signin(data["email"], data["password"]))


def auth_action_handler():
    """POST /api/auth with ``{action: signup|signin, ...}``."""
    action, data, errors = load_action(AUTH_ACTIONS, json_body())
    if errors:
        return validation_error(errors)
    if action == "signup":
        return _signup(data)
    return _signin(data)


def signup_handler():
    data, errors = validate_schema(SignupSchema, json_body())
    if errors:
        return validation_error(errors)
    return _signup(data)


def signin_handler():
    data, errors = validate_schema(SigninSchema, json_body())
    if errors:
        return validation_error(errors)
    return _signin(data)


def whoami_handler():
    user = auth_service.get_user(request.user_id)
    return ok({"user": user.to_dict()})
