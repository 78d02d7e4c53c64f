from calorie_tracker.extensions import db
from datetime import datetime


class CustomFood(db.Model):
    __tablename__ = "custom_foods"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    food_name = db.Column(db.String(200), nullable=False)
    calories_per_100g = db.Column(db.Float, nullable=False)
    protein_per_100g = db.Column(db.Float, nullable=False, default=0)
    carbs_per_100g = db.Column(db.Float, nullable=False, default=0)
    fat_per_100g = db.Column(db.Float, nullable=False, default=0)
    brand = db.Column(db.String(120), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        # One name per user, ignoring case
        db.Index("uq_custom_foods_user_lower_name", user_id, db.func.lower(food_name), unique=True),
    )

    def per_100g(self):
        return {
            "calories": self.calories_per_100g,
            "protein": self.protein_per_100g,
            "carbs": self.carbs_per_100g,
            "fat": self.fat_per_100g,
        }

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "food_name": self.food_name,
            "calories_per_100g": self.calories_per_100g,
            "protein_per_100g": self.protein_per_100g,
            "carbs_per_100g": self.carbs_per_100g,
            "fat_per_100g": self.fat_per_100g,
            "brand": self.brand,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
