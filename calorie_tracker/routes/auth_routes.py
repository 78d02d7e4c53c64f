from flask import Blueprint
from calorie_tracker.controllers.auth_controller import (
    auth_action_handler,
    signup_handler,
    signin_handler,
    whoami_handler,
)
from calorie_tracker.utils.auth import require_auth

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

@auth_bp.post("")
def auth_action():
    return auth_action_handler()


@auth_bp.post("/signup")
def signup():
    return signup_handler()


@auth_bp.post("/signin")
def signin():
    return signin_handler()


@auth_bp.get("")
@require_auth
def whoami():
    return whoami_handler()


# Alias kept for clients that prefer an explicit path
@auth_bp.get("/whoami")
@require_auth
def whoami_alias():
    return whoami_handler()
