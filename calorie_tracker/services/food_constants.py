"""
Food Service Constants

Contains all constants and configuration values used in the calorie accounting services.
"""

# Mifflin-St Jeor sex offsets (kcal)
BMR_MALE_OFFSET = 5
BMR_FEMALE_OFFSET = -161

# TDEE multipliers per activity level
ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,       # little or no exercise
    "light": 1.375,         # light exercise 1-3 days/week
    "moderate": 1.55,       # moderate exercise 3-5 days/week
    "active": 1.725,        # hard exercise 6-7 days/week
    "very_active": 1.9,     # very hard exercise and physical job
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.55

# Default daily deficit applied to TDEE when no explicit goal is set
DEFAULT_DAILY_DEFICIT = 500

# Remaining calories below this are "danger", between it and 0 "warning"
DEFICIT_WARNING_FLOOR = -200

# kcal per kg of adipose tissue
KCAL_PER_KG_FAT = 7700

# Nutrition calculation constants
CALORIES_PER_GRAM_CARBS = 4.0
CALORIES_PER_GRAM_FAT = 9.0

# Default macro targets when the profile has none
DEFAULT_MIN_PROTEIN_G = 50.0
DEFAULT_PROTEIN_G_PER_KG = 0.9
DEFAULT_CARBS_PERCENTAGE = 0.5
DEFAULT_FAT_PERCENTAGE = 0.3

# Seeded meal plans: (name, target_calories, meal_order)
DEFAULT_MEALS = [
    ("Breakfast", 400, 1),
    ("Lunch", 600, 2),
    ("Snack", 200, 3),
    ("Dinner", 500, 4),
]

# Custom food search result cap
CUSTOM_FOOD_SEARCH_LIMIT = 50
