# fitdiet/services/profile_service.py
from typing import Any, Dict

from sqlalchemy import func

from ..errors import NotFoundError, ValidationError
from ..models import Meal, User, UserProfile, Workout
from ..utils import iso, parse_optional_number, utcnow

NUMERIC_FIELDS = {
    "age": int,
    "height": float,
    "weight": float,
    "target_calories": int,
}
TEXT_FIELDS = ("fitness_goal", "activity_level")


class ProfileService:
    def __init__(self, db):
        self.db = db

    def get_profile(self, user_id) -> Dict[str, Any]:
        profile = UserProfile.query.filter_by(user_id=user_id).first()
        if profile:
            return profile.to_dict()

        # older accounts may predate auto-created profiles
        profile = UserProfile(user_id=user_id)
        session = self.db.session
        try:
            session.add(profile)
            session.commit()
        except Exception:
            session.rollback()
            raise
        return profile.to_dict()

    def update_profile(self, user_id, data) -> Dict[str, Any]:
        profile = UserProfile.query.filter_by(user_id=user_id).first()
        if not profile:
            raise NotFoundError("Profile not found")

        values = {}
        for field, cast in NUMERIC_FIELDS.items():
            value = parse_optional_number(data.get(field), field, cast=cast)
            if value is not None and value < 0:
                raise ValidationError(f"{field} cannot be negative")
            values[field] = value

        for field in TEXT_FIELDS:
            value = data.get(field)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"{field} must be a string")
            values[field] = value.strip() if value and value.strip() else None

        # full-row update: omitted fields are cleared
        for field, value in values.items():
            setattr(profile, field, value)
        profile.updated_at = utcnow()

        session = self.db.session
        try:
            session.commit()
        except Exception:
            session.rollback()
            raise
        return profile.to_dict()

    def get_stats(self, user_id) -> Dict[str, Any]:
        session = self.db.session
        workout_count, calories_burned = (
            session.query(func.count(Workout.id), func.coalesce(func.sum(Workout.calories_burned), 0))
            .filter(Workout.user_id == user_id)
            .one()
        )
        meal_count = session.query(func.count(Meal.id)).filter(Meal.user_id == user_id).scalar()
        user = session.get(User, user_id)

        return {
            "totalWorkouts": workout_count,
            "totalCaloriesBurned": int(calories_burned or 0),
            "totalMeals": meal_count or 0,
            "memberSince": iso(user.created_at) if user else None,
        }
