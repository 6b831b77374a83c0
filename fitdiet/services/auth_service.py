# fitdiet/services/auth_service.py
from flask import current_app
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from ..errors import AuthError, ConflictError, ValidationError
from ..models import RevokedToken, User, UserProfile

MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS = "Invalid credentials"
DUPLICATE_ACCOUNT = "Username or email already exists"


class AuthService:
    def __init__(self, db):
        self.db = db

    def register(self, username, email, password):
        username = (username or "").strip()
        email = (email or "").strip().lower()
        password = password or ""  # do NOT strip passwords

        if not username or not email or not password:
            raise ValidationError("All fields are required")

        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        taken = User.query.filter(
            or_(User.username == username, User.email == email)
        ).first()
        if taken:
            raise ConflictError(DUPLICATE_ACCOUNT)

        user = User(username=username, email=email)
        user.set_password(password)
        # user + default profile in one transaction
        user.profile = UserProfile()

        session = self.db.session
        try:
            session.add(user)
            session.commit()
        except IntegrityError:
            session.rollback()
            current_app.logger.info(f"[auth/register] duplicate username/email '{username}'")
            raise ConflictError(DUPLICATE_ACCOUNT)
        except Exception:
            session.rollback()
            raise

        return {"userId": user.id, "username": user.username}

    def login(self, email, password):
        email = (email or "").strip().lower()
        password = password or ""

        if not email or not password:
            raise ValidationError("Email and password are required")

        user = User.query.filter_by(email=email).first()
        if not user:
            current_app.logger.info(f"[auth/login] user NOT found for '{email}'")
            raise AuthError(INVALID_CREDENTIALS)

        if not user.check_password(password):
            current_app.logger.info(f"[auth/login] bad password for user_id={user.id}")
            raise AuthError(INVALID_CREDENTIALS)

        return {"userId": user.id, "username": user.username}

    def current_user(self, user_id):
        if user_id is None:
            raise AuthError()
        user = self.db.session.get(User, user_id)
        if not user:
            raise AuthError()
        return user.to_dict()

    # -----------------------------
    # Session revocation
    # -----------------------------
    def revoke_token(self, jti, expires_at=None):
        if not jti or self.is_token_revoked(jti):
            return
        session = self.db.session
        try:
            session.add(RevokedToken(jti=jti, expires_at=expires_at))
            session.commit()
        except IntegrityError:
            # concurrent logout with the same cookie already recorded it
            session.rollback()

    def is_token_revoked(self, jti):
        return RevokedToken.query.filter_by(jti=jti).first() is not None
