"""Custom exception classes for the directory API.

Each exception maps to an error code defined in errors.py and carries the
HTTP status the API layer should answer with.
"""

from typing import Any


class DirectoryError(Exception):
    """Base exception for all directory errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "SUB_001")
        details: Additional context about the error
        http_status: HTTP status code to return (default: 500)
        message: Optional message overriding the catalog's technical message
    """

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int = 500,
        message: str | None = None,
    ):
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status
        self.message = message
        super().__init__(message or error_code)


class SubmissionValidationError(DirectoryError):
    """Raised when a submission is missing required fields.

    The message names every missing field, in form order.
    """

    def __init__(self, missing_fields: list[str]):
        super().__init__(
            "SUB_001",
            details={"missing_fields": missing_fields},
            http_status=400,
            message=f"Missing required fields: {', '.join(missing_fields)}",
        )
        self.missing_fields = missing_fields


class BacklinkRequiredError(DirectoryError):
    """Raised when a free-plan submission has no verified backlink."""

    def __init__(self):
        super().__init__("SUB_002", http_status=400)


class PaymentRequiredError(DirectoryError):
    """Raised when a sponsor-plan submission has no payment confirmation."""

    def __init__(self):
        super().__init__("SUB_003", http_status=402)


class DuplicateSubmissionError(DirectoryError):
    """Raised when a submission collides with an existing alternative.

    `details` carries the duplicate-check result so the caller can offer
    the claim path.
    """

    def __init__(self, reasons: list[str], details: dict[str, Any] | None = None):
        super().__init__(
            "SUB_004",
            details=details,
            http_status=409,
            message="; ".join(reasons),
        )
        self.reasons = reasons


class ClaimError(DirectoryError):
    """Raised when a claim cannot be initiated or verified."""

    pass


class InvalidGitHubURLError(DirectoryError):
    """Raised when a URL does not point at a GitHub repository."""

    def __init__(self, url: str):
        super().__init__("GH_001", details={"url": url}, http_status=400)


class NotFoundError(DirectoryError):
    """Raised when a requested record does not exist."""

    def __init__(self, resource: str):
        super().__init__(
            "API_001",
            details={"resource": resource},
            http_status=404,
            message=f"{resource} not found",
        )
