from flask import request
from calorie_tracker.schemas.profile_schema import ProfileSchema
from calorie_tracker.services.profile_service import get_profile, serialize_profile, upsert_profile
from calorie_tracker.utils.http import ok, json_body, validate_schema, validation_error


def get_profile_handler():
    return ok(serialize_profile(get_profile(request.user_id)))


def upsert_profile_handler():
    data, errors = validate_schema(ProfileSchema, json_body())
    if errors:
        return validation_error(errors)

    profile = upsert_profile(request.user_id, data)
    return ok(serialize_profile(profile))
