# fitdiet/routes/meal_routes.py

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import get_services
from ..utils import json_body

meals_bp = Blueprint("meals", __name__)


@meals_bp.route("", methods=["GET"])
@jwt_required()
def todays_meals():
    """Only meals dated today (server UTC day)."""
    user_id = int(get_jwt_identity())
    return jsonify(get_services().meals.list_today(user_id)), 200


@meals_bp.route("/recent", methods=["GET"])
@jwt_required()
def recent_meals():
    user_id = int(get_jwt_identity())
    return jsonify(get_services().meals.list_recent(user_id)), 200


@meals_bp.route("", methods=["POST"])
@jwt_required()
def create_meal():
    user_id = int(get_jwt_identity())
    data = json_body()

    meal = get_services().meals.create(user_id, data)
    return jsonify(meal), 201


@meals_bp.route("/<int:meal_id>", methods=["DELETE"])
@jwt_required()
def delete_meal(meal_id: int):
    user_id = int(get_jwt_identity())
    get_services().meals.delete(user_id, meal_id)
    return jsonify({"message": "Meal deleted successfully"}), 200
