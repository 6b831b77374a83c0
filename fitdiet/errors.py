# fitdiet/errors.py
"""
Error taxonomy shared by services and routes.

Services raise these; the app-level handlers in ``fitdiet.__init__`` turn
them into ``{"error": message}`` JSON responses with ``status_code``.
"""


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(ApiError):
    status_code = 401
    default_message = "Authentication required"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class ConflictError(ApiError):
    # unique-constraint violations surface as a plain 400
    status_code = 400
    default_message = "Resource already exists"


class InternalError(ApiError):
    status_code = 500
