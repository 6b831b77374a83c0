# fitdiet/services/meal_service.py
from typing import Any, Dict, List

from ..errors import NotFoundError, ValidationError
from ..models import MEAL_TYPES, Meal
from ..utils import is_blank, parse_date, parse_number, utc_today

RECENT_LIMIT = 5
MACROS = ("protein", "carbs", "fat", "fiber")


class MealService:
    def __init__(self, db):
        self.db = db

    def list_today(self, user_id) -> List[Dict[str, Any]]:
        """Meals logged for the server's current UTC day only."""
        rows = (
            Meal.query.filter_by(user_id=user_id, date=utc_today())
            .order_by(Meal.created_at.desc(), Meal.id.desc())
            .all()
        )
        return [m.to_dict() for m in rows]

    def list_recent(self, user_id, limit=RECENT_LIMIT) -> List[Dict[str, Any]]:
        rows = (
            Meal.query.filter_by(user_id=user_id)
            .order_by(Meal.date.desc(), Meal.created_at.desc(), Meal.id.desc())
            .limit(limit)
            .all()
        )
        return [m.to_dict() for m in rows]

    def create(self, user_id, data) -> Dict[str, Any]:
        food_name = data.get("food_name")
        food_name = food_name.strip() if isinstance(food_name, str) else ""
        meal_type = data.get("meal_type")

        if (
            not food_name
            or is_blank(data.get("quantity"))
            or is_blank(meal_type)
            or is_blank(data.get("calories"))
        ):
            raise ValidationError("Food name, quantity, meal type, and calories are required")

        if meal_type not in MEAL_TYPES:
            raise ValidationError(f"meal_type must be one of: {', '.join(MEAL_TYPES)}")

        macros = {}
        for field in MACROS:
            value = data.get(field)
            macros[field] = 0 if is_blank(value) else parse_number(value, field)
            if macros[field] < 0:
                raise ValidationError(f"{field} cannot be negative")

        meal = Meal(
            user_id=user_id,
            food_name=food_name,
            quantity=parse_number(data.get("quantity"), "quantity", positive=True),
            meal_type=meal_type,
            calories=parse_number(data.get("calories"), "calories", cast=int, positive=True),
            date=parse_date(data.get("date")),
            **macros,
        )

        session = self.db.session
        try:
            session.add(meal)
            session.commit()
        except Exception:
            session.rollback()
            raise
        return meal.to_dict()

    def delete(self, user_id, meal_id) -> None:
        meal = Meal.query.filter_by(id=meal_id, user_id=user_id).first()
        if not meal:
            raise NotFoundError("Meal not found")

        session = self.db.session
        try:
            session.delete(meal)
            session.commit()
        except Exception:
            session.rollback()
            raise
