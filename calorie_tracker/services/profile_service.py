"""
Profile Service

One profile per user, replaced field by field on every upsert.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from calorie_tracker.extensions import db
from calorie_tracker.models.profile import Profile
from calorie_tracker.services.nutrition_service import calculate_profile_targets

PROFILE_FIELDS = (
    "name", "weight", "height", "age", "sex", "activity_level",
    "calorie_goal", "protein_goal", "carbs_goal", "fat_goal",
)


def get_profile(user_id: int) -> Optional[Profile]:
    return Profile.query.filter_by(user_id=user_id).first()


def upsert_profile(user_id: int, fields: Dict[str, Any]) -> Profile:
    profile = get_profile(user_id)
    if not profile:
        profile = Profile(user_id=user_id)
        db.session.add(profile)

    for key in PROFILE_FIELDS:
        if key in fields:
            setattr(profile, key, fields[key])
    profile.updated_at = datetime.utcnow()

    db.session.commit()
    return profile


def serialize_profile(profile: Optional[Profile]) -> Optional[Dict[str, Any]]:
    if profile is None:
        return None
    return {**profile.to_dict(), "targets": calculate_profile_targets(profile)}
