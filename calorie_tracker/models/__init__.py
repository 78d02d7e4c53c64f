from .user import User
from .profile import Profile
from .daily_log import DailyLog
from .food_entry import FoodEntry
from .meal_plan import MealPlan
from .planned_food import PlannedFood
from .custom_food import CustomFood

__all__ = [
    "User",
    "Profile",
    "DailyLog",
    "FoodEntry",
    "MealPlan",
    "PlannedFood",
    "CustomFood",
]
