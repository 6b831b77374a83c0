# fitdiet/routes/auth_routes.py

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import (
    create_access_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
    set_access_cookies,
    unset_jwt_cookies,
    verify_jwt_in_request,
)
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt import PyJWTError

from ..services import get_services
from ..utils import json_body

auth_bp = Blueprint("auth", __name__)


def _session_response(result, message, status):
    resp = jsonify({"message": message, **result})
    set_access_cookies(resp, create_access_token(identity=str(result["userId"])))
    return resp, status


# -----------------------------
# Routes
# -----------------------------
@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body()

    result = get_services().auth.register(
        data.get("username"),
        data.get("email"),
        data.get("password"),
    )
    current_app.logger.info(f"[auth/register] created user_id={result['userId']}")
    return _session_response(result, "User registered successfully", 201)


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()

    result = get_services().auth.login(data.get("email"), data.get("password"))
    return _session_response(result, "Login successful", 200)


@auth_bp.route("/user", methods=["GET"])
@jwt_required()
def current_user():
    user_id = int(get_jwt_identity())
    return jsonify(get_services().auth.current_user(user_id)), 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    # idempotent: a missing, expired or already revoked session still logs out
    try:
        verify_jwt_in_request(optional=True)
        claims = get_jwt() or {}
    except (JWTExtendedException, PyJWTError):
        claims = {}

    jti = claims.get("jti")
    if jti:
        exp = claims.get("exp")
        expires_at = (
            datetime.fromtimestamp(exp, tz=timezone.utc).replace(tzinfo=None) if exp else None
        )
        get_services().auth.revoke_token(jti, expires_at)

    resp = jsonify({"message": "Logout successful"})
    unset_jwt_cookies(resp)
    return resp, 200
