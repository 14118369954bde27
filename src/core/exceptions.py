"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not found errors (404)
    ENTRY_NOT_FOUND = "ENTRY_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    REPORT_NOT_FOUND = "REPORT_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DATE_OUT_OF_RANGE = "DATE_OUT_OF_RANGE"
    CATEGORIES_ALREADY_EXIST = "CATEGORIES_ALREADY_EXIST"

    # AI relay errors
    AI_NOT_CONFIGURED = "AI_NOT_CONFIGURED"
    AI_SERVICE_ERROR = "AI_SERVICE_ERROR"
    AI_EMPTY_RESPONSE = "AI_EMPTY_RESPONSE"
    AI_QUOTA_EXCEEDED = "AI_QUOTA_EXCEEDED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


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


class EntryNotFoundError(AppException):
    """Journal entry not found."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ENTRY_NOT_FOUND,
            message=f"Entry not found: {entry_id}",
            status_code=404,
            details={"entry_id": entry_id},
        )


class CategoryNotFoundError(AppException):
    """Category not found."""

    def __init__(self, category_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.CATEGORY_NOT_FOUND,
            message=f"Category not found: {category_id}",
            status_code=404,
            details={"category_id": category_id},
        )


class ReportNotFoundError(AppException):
    """Report not found."""

    def __init__(self, report_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.REPORT_NOT_FOUND,
            message=f"Report not found: {report_id}",
            status_code=404,
            details={"report_id": report_id},
        )


class DateOutOfRangeError(AppException):
    """A requested day lies too close to the ends of the representable calendar."""

    def __init__(self, day: str) -> None:
        super().__init__(
            error_code=ErrorCode.DATE_OUT_OF_RANGE,
            message=f"Date is outside the supported calendar range: {day}",
            status_code=422,
            details={"date": day},
        )


class CategoriesAlreadyExistError(AppException):
    """Default categories can only be seeded into an empty account."""

    def __init__(self, count: int) -> None:
        super().__init__(
            error_code=ErrorCode.CATEGORIES_ALREADY_EXIST,
            message="Categories already exist for this user",
            status_code=409,
            details={"existing_count": count},
        )


class AINotConfiguredError(AppException):
    """The AI relay has no API key."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.AI_NOT_CONFIGURED,
            message="GEMINI_API_KEY is not configured",
            status_code=503,
        )


class AIServiceError(AppException):
    """The upstream generative model failed or was unreachable."""

    def __init__(self, message: str, upstream_status: int | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.AI_SERVICE_ERROR,
            message=message,
            status_code=502,
            details={"upstream_status": upstream_status} if upstream_status else None,
        )


class AIEmptyResponseError(AppException):
    """The upstream model answered with no text."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.AI_EMPTY_RESPONSE,
            message="AI returned an empty response",
            status_code=502,
        )


class AIQuotaExceededError(AppException):
    """The upstream model rejected the call because of quota limits."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.AI_QUOTA_EXCEEDED,
            message="Gemini API request limit exceeded. Try again later.",
            status_code=429,
        )
