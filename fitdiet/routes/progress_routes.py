# fitdiet/routes/progress_routes.py

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import get_services

progress_bp = Blueprint("progress", __name__)


@progress_bp.route("/<timeframe>", methods=["GET"])
@jwt_required()
def progress(timeframe: str):
    """
    GET /api/progress/weekly | /api/progress/monthly

    Returns:
    {
      "weekly": [{"date": "2025-01-25", "caloriesBurned": 0, "caloriesConsumed": 1800}, ...],
      "workoutTypes": [{"name": "Running", "count": 3}, ...],
      "nutritionBreakdown": [{"name": "Protein", "value": 24}, ...]
    }
    Monthly responses carry "monthly" instead, one entry per week (Monday).
    """
    user_id = int(get_jwt_identity())
    return jsonify(get_services().progress.progress(user_id, timeframe)), 200
