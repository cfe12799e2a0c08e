"""
Application error types

Each error carries the HTTP status and the public message it is rendered
with by the handler registered in `hanuram.main`.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class InvalidOrExpiredError(AppError):
    """Unknown, used or expired PIN"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid or expired PIN."


class UnauthorizedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized: Please go through the PIN verification process first."


class FieldRequiredError(AppError):
    """A required request field is missing or unusable"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required field."


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists."


class TransientError(AppError):
    """Mailer or network failure; retrying the whole request is safe"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to send verification email. Please try again later."


class FatalError(AppError):
    """Persistence layer failure"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"
