"""
Errors the controllers return as ``(status, ErrorSchema)`` pairs.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from ninja import Schema


class ErrorSchema(Schema):
    """Standard error response schema."""

    code: str
    message: str
    details: dict | None = None


class APIException(Exception):
    """Base exception for API errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred."

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict | None = None,
    ):
        self.message = message or self.__class__.message
        self.code = code or self.__class__.code
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> tuple[int, ErrorSchema]:
        """Convert exception to API response tuple."""
        return self.status_code, ErrorSchema(
            code=self.code,
            message=self.message,
            details=self.details,
        )


class InvalidCredentialsError(APIException):
    """Unknown account email or wrong password on a student, organization or employer login."""

    status_code = 401
    code = "INVALID_CREDENTIALS"
    message = "Invalid email or password."


# Record lookups
class NotFoundError(APIException):
    """No record matches the path or payload."""

    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found."


class AlreadyExistsError(APIException):
    """A record with the same unique key is already stored."""

    status_code = 409
    code = "ALREADY_EXISTS"
    message = "This resource already exists."


# Request payloads
class ValidationError(APIException):
    """A model-level check rejected the payload."""

    status_code = 400
    code = "VALIDATION_ERROR"
    message = "Invalid data."

    @classmethod
    def from_django(cls, exc: DjangoValidationError) -> "ValidationError":
        """Wrap a Django model ValidationError, keeping per-field messages."""
        if hasattr(exc, "error_dict"):
            return cls(details={field: [str(m) for m in msgs] for field, msgs in exc.message_dict.items()})
        return cls(message=" ".join(exc.messages))


class BadRequestError(APIException):
    """The payload names unknown records or asks for a disallowed state change."""

    status_code = 400
    code = "BAD_REQUEST"
    message = "Bad request."
