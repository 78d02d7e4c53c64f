from calorie_tracker.extensions import db
from datetime import datetime


class FoodEntry(db.Model):
    """A food actually consumed on a given day. Created and deleted, never edited."""

    __tablename__ = "food_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    daily_log_id = db.Column(db.Integer, db.ForeignKey("daily_logs.id", ondelete="CASCADE"), nullable=False, index=True)
    meal_plan_id = db.Column(db.Integer, db.ForeignKey("meal_plans.id", ondelete="SET NULL"), nullable=True)
    food_name = db.Column(db.String(200), nullable=False)
    quantity_grams = db.Column(db.Float, nullable=False)
    calories = db.Column(db.Float, nullable=False)
    protein = db.Column(db.Float, nullable=False, default=0)
    carbs = db.Column(db.Float, nullable=False, default=0)
    fat = db.Column(db.Float, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "daily_log_id": self.daily_log_id,
            "meal_plan_id": self.meal_plan_id,
            "food_name": self.food_name,
            "quantity_grams": self.quantity_grams,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
