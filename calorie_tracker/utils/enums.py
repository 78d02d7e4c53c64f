from enum import Enum

class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"

class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

class DeficitStatus(str, Enum):
    ON_TRACK = "on track"
    WARNING = "warning"
    DANGER = "danger"

class StatsPeriod(str, Enum):
    WINDOW = "window"
    WEEK = "week"
    MONTH = "month"

class TargetSource(str, Enum):
    MEAL_PLANS = "meal_plans"
    PLANNED_FOODS = "planned_foods"
