# fitdiet/routes/dashboard_routes.py

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import get_services

# Blueprint for dashboard-related endpoints
dashboard_bp = Blueprint("dashboard", __name__)


# -------------------------
# DASHBOARD TOTALS
# -------------------------
@dashboard_bp.route("/stats", methods=["GET"])
@jwt_required()
def dashboard_stats():
    """
    Returns:
    {
      "totalWorkouts": 12,
      "totalCaloriesBurned": 3400,
      "totalMeals": 40,
      "averageCaloriesConsumed": 520
    }
    """
    user_id = int(get_jwt_identity())
    return jsonify(get_services().progress.dashboard_stats(user_id)), 200


# -------------------------
# LAST 7 DAYS (dense, oldest first)
# -------------------------
@dashboard_bp.route("/weekly-progress", methods=["GET"])
@jwt_required()
def weekly_progress():
    user_id = int(get_jwt_identity())
    return jsonify(get_services().progress.weekly_progress(user_id)), 200
