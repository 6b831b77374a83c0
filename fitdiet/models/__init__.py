from .user import RevokedToken, User, UserProfile
from .workout import Workout
from .meal import MEAL_TYPES, Meal
from .community import CommunityPost, PostLike

__all__ = [
    "User",
    "UserProfile",
    "RevokedToken",
    "Workout",
    "Meal",
    "MEAL_TYPES",
    "CommunityPost",
    "PostLike",
]
