"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Not found errors (404)
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    POST_VALIDATION_ERROR = "POST_VALIDATION_ERROR"
    SIGNUP_VALIDATION_ERROR = "SIGNUP_VALIDATION_ERROR"

    # Conflict errors (409)
    EMAIL_ALREADY_IN_USE = "EMAIL_ALREADY_IN_USE"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Store unavailable (503)
    DIRECTORY_UNAVAILABLE = "DIRECTORY_UNAVAILABLE"
    FEED_UNAVAILABLE = "FEED_UNAVAILABLE"
    PROFILE_UNAVAILABLE = "PROFILE_UNAVAILABLE"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class InvalidCredentialsError(AppException):
    """Email/password pair did not match an account."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_CREDENTIALS,
            message="Please check the credentials",
            status_code=401,
        )


class EmailAlreadyInUseError(AppException):
    """Sign-up attempted with an email that already has an account."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_ALREADY_IN_USE,
            message="Email already in use.",
            status_code=409,
            details={"email": email},
        )


class SignUpValidationError(AppException):
    """Sign-up form is incomplete or the passwords differ."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.SIGNUP_VALIDATION_ERROR,
            message="Please provide all required details for SignUp",
            status_code=400,
        )


class PostValidationError(AppException):
    """Post is missing its title or has neither text nor image."""

    def __init__(self, message: str = "Please fill all required fields") -> None:
        super().__init__(
            error_code=ErrorCode.POST_VALIDATION_ERROR,
            message=message,
            status_code=400,
        )


class DocumentNotFoundError(AppException):
    """A document reference points at nothing."""

    def __init__(self, collection: str, document_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.DOCUMENT_NOT_FOUND,
            message=f"Document not found: {collection}/{document_id}",
            status_code=404,
            details={"collection": collection, "document_id": document_id},
        )


class ScreenLoadError(AppException):
    """A screen could not load its data from the document store."""

    def __init__(self, error_code: ErrorCode, message: str) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=503,
        )


class DirectoryUnavailableError(ScreenLoadError):
    """The profile directory failed to load."""

    def __init__(self, message: str = "Unable to fetch users") -> None:
        super().__init__(ErrorCode.DIRECTORY_UNAVAILABLE, message)


class FeedUnavailableError(ScreenLoadError):
    """The post feed failed to load."""

    def __init__(self, message: str = "Unable to fetch posts") -> None:
        super().__init__(ErrorCode.FEED_UNAVAILABLE, message)


class ProfileUnavailableError(ScreenLoadError):
    """The profile editor failed to load the caller's profile."""

    def __init__(self, message: str = "Unable to fetch profile") -> None:
        super().__init__(ErrorCode.PROFILE_UNAVAILABLE, message)
