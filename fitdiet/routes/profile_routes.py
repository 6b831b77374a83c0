# fitdiet/routes/profile_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import get_services
from ..utils import json_body

profile_bp = Blueprint("profile", __name__)


@profile_bp.route("", methods=["GET"])
@jwt_required()
def get_profile():
    user_id = int(get_jwt_identity())
    return jsonify(get_services().profiles.get_profile(user_id)), 200


@profile_bp.route("", methods=["PUT"])
@jwt_required()
def update_profile():
    user_id = int(get_jwt_identity())
    data = json_body()

    # age / height / weight / fitness_goal / activity_level / target_calories;
    # the whole row is replaced, missing keys become null
    profile = get_services().profiles.update_profile(user_id, data)

    return jsonify({"message": "Profile updated successfully", "profile": profile}), 200


@profile_bp.route("/stats", methods=["GET"])
@jwt_required()
def profile_stats():
    user_id = int(get_jwt_identity())
    return jsonify(get_services().profiles.get_stats(user_id)), 200
