"""Domain exceptions for the form-handler application.

Defines domain-level exceptions that represent pipeline rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class FormHandlerException(Exception):
    """Base exception for all form-handler errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. app_key, template_name).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class RejectedRequestException(FormHandlerException):
    """Raised when a request must be dropped without a response body.

    Covers bad content type, malformed body, unknown app key and CORS
    origin mismatch. Callers are not told why, so valid app keys do not leak.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason, "REQUEST_REJECTED", {"reason": reason})


class AppNotFoundException(FormHandlerException):
    """Raised when an app (tenant) document does not exist."""

    def __init__(self, app_key: str) -> None:
        super().__init__(
            f"App not found: {app_key}",
            "APP_NOT_FOUND",
            {"app_key": app_key},
        )


class SubmissionDisabledException(FormHandlerException):
    """Raised when form submission is disabled for the app.

    The message is the resolved error text shown to the submitting user.
    """

    def __init__(self, message: str, app_name: str | None = None) -> None:
        details = {"app_name": app_name} if app_name else {}
        super().__init__(message, "SUBMISSION_DISABLED", details)


class TemplateNotFoundException(FormHandlerException):
    """Raised when a submission references a form template that does not exist."""

    def __init__(self, template_name: str | None) -> None:
        super().__init__(
            f"Form template not found: {template_name}",
            "TEMPLATE_NOT_FOUND",
            {"template_name": template_name},
        )


class SpamCheckException(FormHandlerException):
    """Raised by the spam classifier client when a check cannot be completed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        details = {"status_code": status_code} if status_code is not None else {}
        super().__init__(message, "SPAM_CHECK_FAILED", details)


class SheetSyncException(FormHandlerException):
    """Raised when a submission cannot be mirrored into the app spreadsheet."""

    def __init__(self, message: str, submission_id: str | None = None) -> None:
        details = {"submission_id": submission_id} if submission_id else {}
        super().__init__(message, "SHEET_SYNC_FAILED", details)


class UnknownSchemaCollectionException(FormHandlerException):
    """Raised when a collection has no default schema mapped to it."""

    def __init__(self, collection: str) -> None:
        super().__init__(
            f"No default schema for collection {collection!r}",
            "SCHEMA_COLLECTION_NOT_FOUND",
            {"collection": collection},
        )
