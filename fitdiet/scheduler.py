# fitdiet/scheduler.py
import logging

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from .services import get_services

logger = logging.getLogger(__name__)

# Sundays at 09:00 server time
WEEKLY_REPORT_TRIGGER = {"day_of_week": "sun", "hour": 9, "minute": 0}


def run_weekly_reports(app):
    with app.app_context():
        try:
            get_services().reports.send_weekly_reports()
        except Exception:
            logger.exception("Error running weekly fitness job")


def start_scheduler(app):
    scheduler = BackgroundScheduler(daemon=True)
    scheduler.add_job(
        run_weekly_reports,
        CronTrigger(**WEEKLY_REPORT_TRIGGER),
        args=[app],
        id="weekly-fitness-report",
        replace_existing=True,
        coalesce=True,
        max_instances=1,
    )
    scheduler.start()
    logger.info("Weekly report scheduler started")
    return scheduler
