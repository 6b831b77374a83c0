# fitdiet/services/__init__.py
from dataclasses import dataclass

from flask import current_app

from .auth_service import AuthService
from .community_service import CommunityService
from .meal_service import MealService
from .nutrition_service import NutritionService
from .profile_service import ProfileService
from .progress_service import ProgressService
from .report_service import ReportService
from .workout_service import WorkoutService

EXTENSION_KEY = "fitdiet"


@dataclass
class Services:
    auth: AuthService
    workouts: WorkoutService
    meals: MealService
    nutrition: NutritionService
    community: CommunityService
    profiles: ProfileService
    progress: ProgressService
    reports: ReportService


def build_services(db, config, mailer) -> Services:
    """Construct every service once, at app creation, around the shared db handle."""
    return Services(
        auth=AuthService(db),
        workouts=WorkoutService(db),
        meals=MealService(db),
        nutrition=NutritionService(
            config.get("NUTRITIONIX_APP_ID"),
            config.get("NUTRITIONIX_API_KEY"),
            timeout=config.get("NUTRITION_TIMEOUT", 10),
        ),
        community=CommunityService(db),
        profiles=ProfileService(db),
        progress=ProgressService(db),
        reports=ReportService(db, mailer),
    )


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]
