from calorie_tracker.extensions import db
from calorie_tracker.models.user import User
from calorie_tracker.models.profile import Profile
from calorie_tracker.services.meal_plan_service import create_default_meal_plans
from calorie_tracker.services.planned_food_service import create_planned_food
from calorie_tracker.utils.auth import hash_password

DEMO_EMAIL = "demo@example.com"

# (meal name, food, grams, kcal, protein, carbs, fat)
DEMO_PLANNED_FOODS = [
    ("Breakfast", "Rolled oats", 60, 233, 8.1, 39.8, 4.1),
    ("Breakfast", "Banana", 100, 89, 1.1, 22.8, 0.3),
    ("Lunch", "White rice", 200, 260, 5.4, 56.0, 0.6),
    ("Lunch", "Grilled chicken breast", 120, 198, 37.2, 0.0, 4.3),
    ("Dinner", "Salmon fillet", 150, 312, 30.0, 0.0, 20.0),
]


def seed_demo():
    """Create a demo account with a profile, the default meals and a few planned foods.

    Run after migrations: ``python -m calorie_tracker.scripts.seed_demo``.
    Existing demo data is left untouched.
    """
    user = User.query.filter_by(email=DEMO_EMAIL).first()
    if user:
        print(f"Demo user already exists (id={user.id}).")
        return

    user = User(name="Demo", email=DEMO_EMAIL, password=hash_password("secret123"))
    db.session.add(user)
    db.session.flush()
    db.session.add(Profile(user_id=user.id, name="Demo", weight=70, height=170, age=25,
                           sex="male", activity_level="moderate"))
    db.session.commit()

    plans = {plan.name: plan for plan in create_default_meal_plans(user.id)}
    for meal, food, grams, kcal, protein, carbs, fat in DEMO_PLANNED_FOODS:
        create_planned_food(user.id, {
            "meal_plan_id": plans[meal].id,
            "food_name": food,
            "quantity_grams": grams,
            "calories": kcal,
            "protein": protein,
            "carbs": carbs,
            "fat": fat,
        })
    print(f"Seeded demo user {DEMO_EMAIL} (id={user.id}).")

if __name__ == "__main__":
    from calorie_tracker import create_app
    app = create_app()
    with app.app_context():
        seed_demo()
