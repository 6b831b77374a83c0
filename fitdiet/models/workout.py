# fitdiet/models/workout.py
from .. import db
from ..utils import iso, utc_today, utcnow


class Workout(db.Model):
    __tablename__ = "workouts"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_name = db.Column(db.String(100), nullable=False)
    duration = db.Column(db.Integer, nullable=False)          # minutes
    calories_burned = db.Column(db.Integer, nullable=False)
    notes = db.Column(db.Text)
    date = db.Column(db.Date, nullable=False, default=utc_today, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        db.CheckConstraint("duration > 0", name="ck_workouts_duration_positive"),
        db.CheckConstraint("calories_burned > 0", name="ck_workouts_calories_positive"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "exercise_name": self.exercise_name,
            "duration": self.duration,
            "calories_burned": self.calories_burned,
            "notes": self.notes,
            "date": iso(self.date),
            "created_at": iso(self.created_at),
        }
