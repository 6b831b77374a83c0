# fitdiet/routes/community_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import get_services
from ..utils import json_body

community_bp = Blueprint("community", __name__)


# ---------------------------------------------------------------------------
# Feed
# ---------------------------------------------------------------------------

@community_bp.route("/posts", methods=["GET"])
@jwt_required()
def list_posts():
    """
    Returns the 50 newest posts:
    [
      {
        "id": 7,
        "user_id": 2,
        "username": "alice",
        "content": "New 5k PR!",
        "workout_type": "Running",
        "calories_burned": 350,
        "achievement": null,
        "likes": 3,
        "user_liked": true,
        "created_at": "2025-01-31T08:12:44"
      },
      ...
    ]
    """
    viewer_id = int(get_jwt_identity())
    return jsonify(get_services().community.list_posts(viewer_id)), 200


@community_bp.route("/posts", methods=["POST"])
@jwt_required()
def create_post():
    """
    Body:
    {
      "content": "...",           # required
      "workout_type": "Running",  # optional
      "calories_burned": 350,     # optional
      "achievement": "First 5k"   # optional
    }
    """
    user_id = int(get_jwt_identity())
    data = json_body()

    post = get_services().community.create_post(user_id, data)
    return jsonify(post), 201


@community_bp.route("/posts/<int:post_id>", methods=["DELETE"])
@jwt_required()
def delete_post(post_id: int):
    user_id = int(get_jwt_identity())
    get_services().community.delete_post(user_id, post_id)
    return jsonify({"message": "Post deleted successfully"}), 200


# ---------------------------------------------------------------------------
# Likes
# ---------------------------------------------------------------------------

@community_bp.route("/posts/<int:post_id>/like", methods=["POST"])
@jwt_required()
def toggle_like(post_id: int):
    """
    Likes the post, or removes the like if the caller already liked it.
    Returns: { "likes": 4, "user_liked": true }
    """
    user_id = int(get_jwt_identity())
    return jsonify(get_services().community.toggle_like(user_id, post_id)), 200
