# fitdiet/routes/workout_routes.py

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import get_services
from ..utils import json_body

workouts_bp = Blueprint("workouts", __name__)


# ------------------------------
# GET /api/workouts
# ------------------------------
@workouts_bp.route("", methods=["GET"])
@jwt_required()
def list_workouts():
    user_id = int(get_jwt_identity())
    return jsonify(get_services().workouts.list_all(user_id)), 200


# ------------------------------
# GET /api/workouts/recent  (dashboard, newest 5)
# ------------------------------
@workouts_bp.route("/recent", methods=["GET"])
@jwt_required()
def recent_workouts():
    user_id = int(get_jwt_identity())
    return jsonify(get_services().workouts.list_recent(user_id)), 200


# ------------------------------
# POST /api/workouts
# ------------------------------
@workouts_bp.route("", methods=["POST"])
@jwt_required()
def create_workout():
    """
    Expected body:
    {
      "exercise_name": "Running",
      "duration": 30,            # minutes
      "calories_burned": 300,
      "notes": "easy pace",      # optional
      "date": "2025-01-31"       # optional, defaults to today (UTC)
    }
    """
    user_id = int(get_jwt_identity())
    data = json_body()

    workout = get_services().workouts.create(user_id, data)
    return jsonify(workout), 201


# ------------------------------
# DELETE /api/workouts/<id>
# ------------------------------
@workouts_bp.route("/<int:workout_id>", methods=["DELETE"])
@jwt_required()
def delete_workout(workout_id: int):
    user_id = int(get_jwt_identity())
    get_services().workouts.delete(user_id, workout_id)
    return jsonify({"message": "Workout deleted successfully"}), 200
