# fitdiet/routes/nutrition_routes.py

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from ..services import get_services

nutrition_bp = Blueprint("nutrition", __name__)


@nutrition_bp.route("/search", methods=["GET"])
@jwt_required()
def search_foods():
    """
    GET /api/nutrition/search?query=banana

    Returns:
    {
      "foods": [
        {
          "food_name": "banana",
          "nf_calories": 105,
          "nf_protein": 1,
          "nf_total_carbohydrate": 27,
          "nf_total_fat": 0,
          "nf_dietary_fiber": 3
        }
      ]
    }
    """
    foods = get_services().nutrition.search(request.args.get("query"))
    return jsonify({"foods": foods}), 200
