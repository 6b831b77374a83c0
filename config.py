# config.py
import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    PORT = int(os.environ.get("PORT", 3001))

    SECRET_KEY = os.environ.get("SESSION_SECRET", "fitness-diet-secret-key-change-me-in-production")
    JWT_SECRET_KEY = SECRET_KEY

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///fitness_diet.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 🔐 session cookie (JWT carried in an HttpOnly cookie)
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_ACCESS_COOKIE_NAME = "fitdiet_session"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)   # fixed TTL from issuance
    JWT_SESSION_COOKIE = False                       # cookie max-age follows the token
    JWT_COOKIE_SECURE = _env_flag("SESSION_COOKIE_SECURE")
    JWT_COOKIE_SAMESITE = "Lax"
    JWT_COOKIE_CSRF_PROTECT = False

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # weekly report email
    MAIL_SERVER = os.environ.get("EMAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(os.environ.get("EMAIL_PORT", 587))
    MAIL_USERNAME = os.environ.get("EMAIL_USER")
    MAIL_PASSWORD = os.environ.get("EMAIL_PASS")

    # optional third-party nutrition provider
    NUTRITIONIX_APP_ID = os.environ.get("NUTRITIONIX_APP_ID")
    NUTRITIONIX_API_KEY = os.environ.get("NUTRITIONIX_API_KEY")
    NUTRITION_TIMEOUT = float(os.environ.get("NUTRITION_TIMEOUT", 10))

    SCHEDULER_ENABLED = _env_flag("SCHEDULER_ENABLED", True)

    # built client (index.html + assets); falls back to fitdiet/static
    CLIENT_DIR = os.environ.get("CLIENT_DIR")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SECRET_KEY = "test-secret-key-for-pytest-0123456789abcdef"
    JWT_SECRET_KEY = SECRET_KEY
    JWT_COOKIE_SECURE = False
    MAIL_USERNAME = None
    MAIL_PASSWORD = None
    NUTRITIONIX_APP_ID = None
    NUTRITIONIX_API_KEY = None
    SCHEDULER_ENABLED = False
    CLIENT_DIR = None
