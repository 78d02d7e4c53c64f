from flask import Blueprint
from calorie_tracker.utils.auth import require_auth
from calorie_tracker.controllers.profile_controller import get_profile_handler, upsert_profile_handler

profile_bp = Blueprint("profile", __name__, url_prefix="/api/profile")

@profile_bp.get("")
@require_auth
def get_profile():
    return get_profile_handler()


@profile_bp.put("")
@require_auth
def update_profile():
    return upsert_profile_handler()


# First-time setup; same upsert semantics
@profile_bp.post("")
@require_auth
def setup_profile():
    return upsert_profile_handler()
