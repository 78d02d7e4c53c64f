from calorie_tracker.extensions import db
from datetime import datetime


class MealPlan(db.Model):
    __tablename__ = "meal_plans"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    # Derived from planned foods once any exist
    target_calories = db.Column(db.Float, nullable=False, default=0)
    meal_order = db.Column(db.Integer, nullable=False, default=0)
    is_default = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    planned_foods = db.relationship(
        "PlannedFood",
        backref="meal_plan",
        cascade="all, delete-orphan",
        order_by="PlannedFood.id",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "target_calories": self.target_calories,
            "meal_order": self.meal_order,
            "is_default": self.is_default,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<MealPlan {self.id}: {self.name}>"
