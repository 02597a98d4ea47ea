"""
Typed failures raised by the service layer.

Each error carries the HTTP status it maps to and a human readable
message.  Services raise these instead of ``HTTPException`` so that
business rules stay independent of the web framework; ``main.py``
installs a single handler which renders any ``ServiceError`` as
``{"message": ...}`` with the matching status code.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for all failures surfaced to API callers."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ServiceError):
    """A required field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input."


class InvalidState(ServiceError):
    """The entity is not in a state that allows the requested transition."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid state transition."


class Unauthenticated(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized."


class Forbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden."


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class Conflict(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict."
