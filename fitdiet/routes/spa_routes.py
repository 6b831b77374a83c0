# fitdiet/routes/spa_routes.py
import os

from flask import Blueprint, abort, current_app, send_from_directory

spa_bp = Blueprint("spa", __name__)


def _client_dir():
    return current_app.config.get("CLIENT_DIR") or current_app.static_folder


@spa_bp.route("/", defaults={"path": ""})
@spa_bp.route("/<path:path>")
def serve_client(path):
    """Serve built client assets; every other non-API path gets index.html."""
    if path == "api" or path.startswith("api/"):
        abort(404, description="Not found")

    client_dir = _client_dir()
    if path and os.path.isfile(os.path.join(client_dir, path)):
        return send_from_directory(client_dir, path)
    return send_from_directory(client_dir, "index.html")
