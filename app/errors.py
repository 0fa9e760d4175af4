"""
Domain error taxonomy. Each error carries the HTTP status it maps to.
"""


class LeagueError(Exception):
    status_code = 500
    default_message = "Something went wrong!"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(LeagueError):
    """Missing/malformed input or a broken business rule"""
    status_code = 400
    default_message = "Invalid request"


class ConflictError(ValidationError):
    """Duplicate record or duplicate relationship entry"""
    default_message = "Already exists"


class InvalidCredentialsError(ValidationError):
    # One message for unknown email and wrong password alike
    default_message = "Invalid credentials"

    def __init__(self):
        super().__init__(self.default_message)


class AuthenticationError(LeagueError):
    status_code = 401
    default_message = "Could not validate credentials"


class AuthorizationError(LeagueError):
    status_code = 403
    default_message = "Access denied. Insufficient permissions."


class NotFoundError(LeagueError):
    status_code = 404
    default_message = "Not found"


class InternalError(LeagueError):
    status_code = 500
