# fitdiet/services/report_service.py
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from flask import render_template
from sqlalchemy import func

from ..models import Meal, User, Workout
from ..utils import round_half_up, utc_today
from .progress_service import window_start

logger = logging.getLogger(__name__)

REPORT_WINDOW_DAYS = 7


class ReportService:
    def __init__(self, db, mailer):
        self.db = db
        self.mailer = mailer

    def weekly_stats(self, user_id, today: Optional[date] = None) -> Dict[str, Any]:
        today = today or utc_today()
        start = window_start(today, REPORT_WINDOW_DAYS)
        session = self.db.session

        workout_count, calories_burned = (
            session.query(func.count(Workout.id), func.coalesce(func.sum(Workout.calories_burned), 0))
            .filter(Workout.user_id == user_id, Workout.date >= start, Workout.date <= today)
            .one()
        )
        meal_count, avg_calories = (
            session.query(func.count(Meal.id), func.avg(Meal.calories))
            .filter(Meal.user_id == user_id, Meal.date >= start, Meal.date <= today)
            .one()
        )

        return {
            "workouts": workout_count,
            "caloriesBurned": int(calories_burned or 0),
            "meals": meal_count,
            "averageCalories": round_half_up(avg_calories or 0),
        }

    def send_weekly_reports(self, today: Optional[date] = None) -> List[str]:
        """
        Email a 7-day summary to every user with activity in the window.

        Users are processed one at a time in id order; a failure for one
        user is logged and does not stop the rest. Returns the addresses a
        send was attempted for.
        """
        today = today or utc_today()
        logger.info("Running weekly fitness report job for %s", today.isoformat())

        users = User.query.order_by(User.id.asc()).all()
        attempted = []

        for user in users:
            try:
                stats = self.weekly_stats(user.id, today)
                if stats["workouts"] == 0 and stats["meals"] == 0:
                    continue

                attempted.append(user.email)
                html = render_template(
                    "email/weekly_report.html",
                    username=user.username,
                    stats=stats,
                )
                subject = f"Your Weekly Fitness Report - {today.isoformat()}"
                self.mailer.send(user.email, subject, html)
                logger.info("Sent weekly report to: %s", user.email)
            except Exception:
                logger.exception("Failed to send weekly report to %s", user.email)

        logger.info("Weekly fitness report job completed (%d notified)", len(attempted))
        return attempted
