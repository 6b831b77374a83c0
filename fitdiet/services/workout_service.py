# fitdiet/services/workout_service.py
from typing import Any, Dict, List

from ..errors import NotFoundError, ValidationError
from ..models import Workout
from ..utils import is_blank, parse_date, parse_number

RECENT_LIMIT = 5


class WorkoutService:
    def __init__(self, db):
        self.db = db

    def _ordered(self, user_id):
        return Workout.query.filter_by(user_id=user_id).order_by(
            Workout.date.desc(), Workout.created_at.desc(), Workout.id.desc()
        )

    def list_all(self, user_id) -> List[Dict[str, Any]]:
        return [w.to_dict() for w in self._ordered(user_id).all()]

    def list_recent(self, user_id, limit=RECENT_LIMIT) -> List[Dict[str, Any]]:
        return [w.to_dict() for w in self._ordered(user_id).limit(limit).all()]

    def create(self, user_id, data) -> Dict[str, Any]:
        exercise_name = data.get("exercise_name")
        exercise_name = exercise_name.strip() if isinstance(exercise_name, str) else ""

        if not exercise_name or is_blank(data.get("duration")) or is_blank(data.get("calories_burned")):
            raise ValidationError("Exercise name, duration, and calories burned are required")

        notes = data.get("notes")
        workout = Workout(
            user_id=user_id,
            exercise_name=exercise_name,
            duration=parse_number(data.get("duration"), "duration", cast=int, positive=True),
            calories_burned=parse_number(
                data.get("calories_burned"), "calories_burned", cast=int, positive=True
            ),
            notes=notes.strip() if isinstance(notes, str) and notes.strip() else None,
            date=parse_date(data.get("date")),
        )

        session = self.db.session
        try:
            session.add(workout)
            session.commit()
        except Exception:
            session.rollback()
            raise
        return workout.to_dict()

    def delete(self, user_id, workout_id) -> None:
        workout = Workout.query.filter_by(id=workout_id, user_id=user_id).first()
        if not workout:
            raise NotFoundError("Workout not found")

        session = self.db.session
        try:
            session.delete(workout)
            session.commit()
        except Exception:
            session.rollback()
            raise
