# fitdiet/models/meal.py
from .. import db
from ..utils import iso, utc_today, utcnow

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


class Meal(db.Model):
    __tablename__ = "meals"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    food_name = db.Column(db.String(200), nullable=False)
    quantity = db.Column(db.Float, nullable=False, default=1)
    meal_type = db.Column(
        db.Enum(*MEAL_TYPES, name="meal_type_enum", create_constraint=True),
        nullable=False,
    )
    calories = db.Column(db.Integer, nullable=False)
    protein = db.Column(db.Float, default=0)
    carbs = db.Column(db.Float, default=0)
    fat = db.Column(db.Float, default=0)
    fiber = db.Column(db.Float, default=0)
    date = db.Column(db.Date, nullable=False, default=utc_today, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "food_name": self.food_name,
            "quantity": self.quantity,
            "meal_type": self.meal_type,
            "calories": self.calories,
            "protein": self.protein or 0,
            "carbs": self.carbs or 0,
            "fat": self.fat or 0,
            "fiber": self.fiber or 0,
            "date": iso(self.date),
            "created_at": iso(self.created_at),
        }
