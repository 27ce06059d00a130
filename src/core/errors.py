"""
Custom exceptions and error handling for the booking admin API.

Defines application-specific exceptions with error codes. The admin UI shows
``message`` verbatim, so messages name the missing setting or the failed step.

Usage:
    from core.errors import UpstreamError, ErrorCode

    raise UpstreamError("Failed to record status", code=ErrorCode.STATUS_RECORD_FAILED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Configuration errors
    MISSING_CONFIG = "MISSING_CONFIG"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Store errors
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    STATUS_RECORD_FAILED = "STATUS_RECORD_FAILED"
    DELETE_FAILED = "DELETE_FAILED"

    # Notification errors
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MISSING_CONFIG: "The server is missing required configuration.",
    ErrorCode.VALIDATION_ERROR: "The request contains invalid information.",
    ErrorCode.INVALID_REQUEST: "Invalid request format.",
    ErrorCode.STORE_UNAVAILABLE: "The booking store could not be reached. Please try again.",
    ErrorCode.STATUS_RECORD_FAILED: "The booking status could not be saved. Please try again.",
    ErrorCode.DELETE_FAILED: "The booking could not be removed. Please try again.",
    ErrorCode.NOTIFICATION_FAILED: "The customer email could not be sent. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class BookingAdminError(Exception):
    """Base exception for all booking admin errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ConfigurationError(BookingAdminError):
    """A required secret or setting is not configured."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.MISSING_CONFIG):
        super().__init__(message, code)


class ValidationError(BookingAdminError):
    """Request body or payload failed validation."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code)


class UpstreamError(BookingAdminError):
    """The submissions store returned a non-success response."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORE_UNAVAILABLE):
        super().__init__(message, code)


class NotificationError(BookingAdminError):
    """The mail relay rejected or failed to deliver a notification."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NOTIFICATION_FAILED):
        super().__init__(message, code)
