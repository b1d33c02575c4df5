# error types raised by the auth and collection layers.
# Every error carries the HTTP status and the {"error": ...} message the
# server sends back, so route handlers never build error responses by hand.
from typing import Optional


class CardServerError(Exception):
    status_code = 500
    code = "ServerError"
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)

    def to_content(self) -> dict:
        return {"error": self.message, "code": self.code}


# categories

class ValidationError(CardServerError):
    status_code = 400
    code = "ValidationError"
    message = "Invalid request"


class AuthenticationError(CardServerError):
    status_code = 401
    code = "AuthenticationError"
    message = "Authentication failed"


class ConflictError(CardServerError):
    status_code = 409
    code = "ConflictError"
    message = "Conflict"


class NotFoundError(CardServerError):
    status_code = 404
    code = "NotFoundError"
    message = "Not found"


# concrete failures

class MissingFields(ValidationError):
    code = "MissingFields"
    message = "Missing required fields"


class NotASequence(ValidationError):
    code = "NotASequence"
    message = "Cards must be an array"


class InvalidCard(ValidationError):
    code = "InvalidCard"
    message = "Each card must be an object with a name"


class Unauthenticated(AuthenticationError):
    code = "Unauthenticated"
    message = "No token provided"


class InvalidToken(AuthenticationError):
    code = "InvalidToken"
    message = "Invalid token"


class InvalidCredentials(AuthenticationError):
    code = "InvalidCredentials"
    message = "Invalid credentials"


class DuplicateUser(ConflictError):
    code = "DuplicateUser"
    message = "User already exists"


class NotFound(NotFoundError):
    code = "NotFound"
    message = "Card not found"
