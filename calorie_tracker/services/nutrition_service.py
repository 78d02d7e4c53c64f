"""
Nutrition Service

Metabolic calculations and targets derived from a user's profile. Every
function here is pure: no database access, no request state.
"""

from typing import Any, Dict, Optional

from calorie_tracker.services.food_constants import (
    ACTIVITY_MULTIPLIERS,
    BMR_FEMALE_OFFSET,
    BMR_MALE_OFFSET,
    CALORIES_PER_GRAM_CARBS,
    CALORIES_PER_GRAM_FAT,
    DEFAULT_ACTIVITY_MULTIPLIER,
    DEFAULT_CARBS_PERCENTAGE,
    DEFAULT_DAILY_DEFICIT,
    DEFAULT_FAT_PERCENTAGE,
    DEFAULT_MIN_PROTEIN_G,
    DEFAULT_PROTEIN_G_PER_KG,
    DEFICIT_WARNING_FLOOR,
)
from calorie_tracker.utils.enums import DeficitStatus


def calculate_bmr(weight: float, height: float, age: float, sex: str) -> float:
    """
    Basal metabolic rate using the Mifflin-St Jeor equation.

    Args:
        weight: Body weight in kg
        height: Height in cm
        age: Age in years
        sex: "male" or "female"

    Returns:
        BMR in kcal/day
    """
    base = (10 * weight) + (6.25 * height) - (5 * age)
    if sex == "male":
        return base + BMR_MALE_OFFSET
    return base + BMR_FEMALE_OFFSET


def calculate_tdee(bmr: float, activity_level: str) -> float:
    """Total daily energy expenditure. Unknown activity levels count as moderate."""
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)
    return bmr * multiplier


def default_calorie_goal(tdee: float) -> float:
    return tdee - DEFAULT_DAILY_DEFICIT


def calculate_deficit(consumed: float, target: float) -> float:
    """Positive when under target."""
    return target - consumed


def deficit_status(remaining: float) -> str:
    if remaining >= 0:
        return DeficitStatus.ON_TRACK.value
    if remaining >= DEFICIT_WARNING_FLOOR:
        return DeficitStatus.WARNING.value
    return DeficitStatus.DANGER.value


def default_macro_goals(calorie_goal: float, weight: float) -> Dict[str, float]:
    protein_g = max(DEFAULT_MIN_PROTEIN_G, DEFAULT_PROTEIN_G_PER_KG * weight)
    return {
        "protein_goal": round(protein_g, 1),
        "carbs_goal": round(DEFAULT_CARBS_PERCENTAGE * calorie_goal / CALORIES_PER_GRAM_CARBS, 1),
        "fat_goal": round(DEFAULT_FAT_PERCENTAGE * calorie_goal / CALORIES_PER_GRAM_FAT, 1),
    }


def calculate_profile_targets(profile) -> Dict[str, Any]:
    """
    Derive BMR, TDEE and daily goals for a profile.

    Explicit goals stored on the profile win; missing ones are filled with
    defaults (TDEE minus the standard deficit, and the default macro split).

    Args:
        profile: Profile object (or anything with the same attributes)

    Returns:
        Dictionary with bmr, tdee, calorie_goal, macro goals and which were defaulted
    """
    bmr = calculate_bmr(
        float(profile.weight),
        float(profile.height),
        float(profile.age),
        profile.sex,
    )
    tdee = calculate_tdee(bmr, profile.activity_level)

    explicit_goal: Optional[float] = profile.calorie_goal
    calorie_goal = float(explicit_goal) if explicit_goal else default_calorie_goal(tdee)

    macros = default_macro_goals(calorie_goal, float(profile.weight))
    for key in macros:
        value = getattr(profile, key, None)
        if value is not None:
            macros[key] = float(value)

    return {
        "bmr": bmr,
        "tdee": tdee,
        "calorie_goal": calorie_goal,
        "goal_is_default": not explicit_goal,
        **macros,
    }
