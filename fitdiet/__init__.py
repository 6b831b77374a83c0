# fitdiet/__init__.py

import os
import sqlite3
from datetime import datetime, timezone

import click
from flask import Flask, current_app, jsonify, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from config import Config

db = SQLAlchemy()
jwt = JWTManager()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless asked per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_app(config_object=Config, mailer=None):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)

    origins = app.config.get("CORS_ORIGINS", "*")
    if origins != "*":
        origins = [o.strip() for o in origins.split(",") if o.strip()]
    CORS(app, resources={r"/api/*": {"origins": origins}}, supports_credentials=True)

    # -----------------------------
    # SERVICES (built once, shared by every request)
    # -----------------------------
    from .mailer import SmtpMailer
    from .services import EXTENSION_KEY, build_services, get_services

    if mailer is None:
        mailer = SmtpMailer.from_config(app.config)
    app.extensions[EXTENSION_KEY] = build_services(db, app.config, mailer)

    # -----------------------------
    # Session (JWT cookie) handlers
    # -----------------------------
    @jwt.token_in_blocklist_loader
    def token_revoked(jwt_header, jwt_payload):
        return get_services().auth.is_token_revoked(jwt_payload.get("jti"))

    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return jsonify({"error": "Authentication required"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        return jsonify({"error": "Invalid session"}), 401

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"error": "Session has expired"}), 401

    @jwt.revoked_token_loader
    def revoked_token_callback(jwt_header, jwt_payload):
        return jsonify({"error": "Session has ended"}), 401

    # -----------------------------
    # Error handlers
    # -----------------------------
    from .errors import ApiError

    @app.errorhandler(ApiError)
    def handle_api_error(e):
        if e.status_code >= 500:
            current_app.logger.error(f"[{request.path}] {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_db_error(e):
        db.session.rollback()
        current_app.logger.exception(f"[{request.path}] database error: {e}")
        return jsonify({"error": "Internal server error"}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if request.path.startswith("/api"):
            return jsonify({"error": e.description}), e.code
        return e

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        current_app.logger.exception(f"[{request.path}] unhandled error: {e}")
        return jsonify({"error": "Internal server error"}), 500

    # -----------------------------
    # IMPORT BLUEPRINTS (all routes)
    # -----------------------------
    from .routes.auth_routes import auth_bp
    from .routes.workout_routes import workouts_bp
    from .routes.meal_routes import meals_bp
    from .routes.nutrition_routes import nutrition_bp
    from .routes.dashboard_routes import dashboard_bp
    from .routes.progress_routes import progress_bp
    from .routes.community_routes import community_bp
    from .routes.profile_routes import profile_bp
    from .routes.spa_routes import spa_bp

    # -----------------------------
    # REGISTER BLUEPRINTS
    # -----------------------------
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(workouts_bp, url_prefix="/api/workouts")
    app.register_blueprint(meals_bp, url_prefix="/api/meals")
    app.register_blueprint(nutrition_bp, url_prefix="/api/nutrition")
    app.register_blueprint(dashboard_bp, url_prefix="/api/dashboard")
    app.register_blueprint(progress_bp, url_prefix="/api/progress")
    app.register_blueprint(community_bp, url_prefix="/api/community")
    app.register_blueprint(profile_bp, url_prefix="/api/profile")

    @app.route("/api/health")
    def health():
        return {
            "message": "Server is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    # catch-all last so /api routes win
    app.register_blueprint(spa_bp)

    # -----------------------------
    # CLI
    # -----------------------------
    @app.cli.command("send-weekly-reports")
    def send_weekly_reports_command():
        """Send the weekly fitness report emails now."""
        notified = get_services().reports.send_weekly_reports()
        click.echo(f"Weekly reports attempted for {len(notified)} user(s)")

    # -----------------------------
    # DB init
    # -----------------------------
    with app.app_context():
        from . import models  # noqa: F401  (register tables)
        db.create_all()

    # -----------------------------
    # Weekly report scheduler
    # -----------------------------
    if app.config.get("SCHEDULER_ENABLED") and not _is_reloader_watcher(app):
        from .scheduler import start_scheduler

        app.extensions["fitdiet_scheduler"] = start_scheduler(app)

    return app


def _is_reloader_watcher(app):
    # with the debug reloader only the child process (WERKZEUG_RUN_MAIN) serves requests
    return app.debug and os.environ.get("WERKZEUG_RUN_MAIN") != "true"
