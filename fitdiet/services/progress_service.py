# fitdiet/services/progress_service.py
"""
Dashboard totals and the dense progress series behind the charts.

Every day in the window gets an entry, zero-filled when nothing was logged;
the charts on the client assume a contiguous series.
"""
from collections import OrderedDict
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import func

from ..errors import ValidationError
from ..models import Meal, Workout
from ..utils import round_half_up, utc_today

TIMEFRAMES = {
    "weekly": 7,
    "monthly": 30,
}
MACRO_LABELS = (
    ("Protein", Meal.protein),
    ("Carbs", Meal.carbs),
    ("Fat", Meal.fat),
    ("Fiber", Meal.fiber),
)


def window_start(today: date, days: int) -> date:
    """First day of a trailing window of ``days`` calendar days ending on ``today``."""
    return today - timedelta(days=days - 1)


def week_start(d: date) -> date:
    # Monday on or before d
    return d - timedelta(days=d.weekday())


class ProgressService:
    def __init__(self, db):
        self.db = db

    # -------------------------
    # DASHBOARD
    # -------------------------
    def dashboard_stats(self, user_id) -> Dict[str, Any]:
        session = self.db.session
        workout_count, calories_burned = (
            session.query(func.count(Workout.id), func.coalesce(func.sum(Workout.calories_burned), 0))
            .filter(Workout.user_id == user_id)
            .one()
        )
        meal_count, avg_calories = (
            session.query(func.count(Meal.id), func.avg(Meal.calories))
            .filter(Meal.user_id == user_id)
            .one()
        )

        return {
            "totalWorkouts": workout_count,
            "totalCaloriesBurned": int(calories_burned or 0),
            "totalMeals": meal_count,
            "averageCaloriesConsumed": round_half_up(avg_calories or 0),
        }

    def weekly_progress(self, user_id, today: Optional[date] = None) -> List[Dict[str, Any]]:
        today = today or utc_today()
        return self.daily_series(user_id, window_start(today, 7), today)

    # -------------------------
    # PROGRESS
    # -------------------------
    def progress(self, user_id, timeframe: str, today: Optional[date] = None) -> Dict[str, Any]:
        if timeframe not in TIMEFRAMES:
            raise ValidationError(f"timeframe must be one of: {', '.join(TIMEFRAMES)}")

        today = today or utc_today()
        start = window_start(today, TIMEFRAMES[timeframe])

        series = self.daily_series(user_id, start, today)
        if timeframe == "monthly":
            series = self.bucket_by_week(series)

        return {
            timeframe: series,
            "workoutTypes": self.workout_types(user_id, start, today),
            "nutritionBreakdown": self.nutrition_breakdown(user_id, start, today),
        }

    def daily_series(self, user_id, start: date, end: date) -> List[Dict[str, Any]]:
        session = self.db.session

        burned_rows = (
            session.query(Workout.date, func.sum(Workout.calories_burned))
            .filter(Workout.user_id == user_id, Workout.date >= start, Workout.date <= end)
            .group_by(Workout.date)
            .all()
        )
        consumed_rows = (
            session.query(Meal.date, func.sum(Meal.calories))
            .filter(Meal.user_id == user_id, Meal.date >= start, Meal.date <= end)
            .group_by(Meal.date)
            .all()
        )

        days = OrderedDict()
        d = start
        while d <= end:
            days[d] = {"date": d.isoformat(), "caloriesBurned": 0, "caloriesConsumed": 0}
            d += timedelta(days=1)

        for day, total in burned_rows:
            if day in days:
                days[day]["caloriesBurned"] = int(total or 0)
        for day, total in consumed_rows:
            if day in days:
                days[day]["caloriesConsumed"] = int(total or 0)

        return list(days.values())

    @staticmethod
    def bucket_by_week(series: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Sum a dense daily series into Monday-labelled weekly buckets."""
        buckets = OrderedDict()
        for entry in series:
            monday = week_start(date.fromisoformat(entry["date"]))
            bucket = buckets.setdefault(
                monday,
                {"date": monday.isoformat(), "caloriesBurned": 0, "caloriesConsumed": 0},
            )
            bucket["caloriesBurned"] += entry["caloriesBurned"]
            bucket["caloriesConsumed"] += entry["caloriesConsumed"]
        return list(buckets.values())

    def workout_types(self, user_id, start: date, end: date) -> List[Dict[str, Any]]:
        count = func.count(Workout.id)
        rows = (
            self.db.session.query(Workout.exercise_name, count)
            .filter(Workout.user_id == user_id, Workout.date >= start, Workout.date <= end)
            .group_by(Workout.exercise_name)
            .order_by(count.desc(), Workout.exercise_name.asc())
            .all()
        )
        return [{"name": name, "count": n} for name, n in rows]

    def nutrition_breakdown(self, user_id, start: date, end: date) -> List[Dict[str, Any]]:
        averages = (
            self.db.session.query(*[func.avg(column) for _, column in MACRO_LABELS])
            .filter(Meal.user_id == user_id, Meal.date >= start, Meal.date <= end)
            .one()
        )
        return [
            {"name": label, "value": round_half_up(avg or 0)}
            for (label, _), avg in zip(MACRO_LABELS, averages)
        ]
