from calorie_tracker.extensions import db
from datetime import datetime


class Profile(db.Model):
    __tablename__ = "profiles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=True)
    weight = db.Column(db.Float, nullable=False, default=70)  # kg
    height = db.Column(db.Float, nullable=False, default=170)  # cm
    age = db.Column(db.Integer, nullable=False, default=25)
    sex = db.Column(db.String(10), nullable=False, default="male")
    activity_level = db.Column(db.String(20), nullable=False, default="moderate")
    calorie_goal = db.Column(db.Float, nullable=True)
    protein_goal = db.Column(db.Float, nullable=True)
    carbs_goal = db.Column(db.Float, nullable=True)
    fat_goal = db.Column(db.Float, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", backref=db.backref("profile", uselist=False))

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "weight": self.weight,
            "height": self.height,
            "age": self.age,
            "sex": self.sex,
            "activity_level": self.activity_level,
            "calorie_goal": self.calorie_goal,
            "protein_goal": self.protein_goal,
            "carbs_goal": self.carbs_goal,
            "fat_goal": self.fat_goal,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
