"""Errors raised by the directory client and surfaced by the submission workflow."""

from typing import Any


class WorkflowError(Exception):
    """Base class for client-side submission errors.

    Attributes:
        message: Human-readable description, shown to the user as-is
        status_code: HTTP status when the error came from the API
        error_code: API error code when present (e.g. "SUB_004")
        details: Extra payload from the API response
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(WorkflowError):
    """Input rejected: missing fields, unverified backlink, bad request."""


class DuplicateError(WorkflowError):
    """The project is already listed. `details` carries reasons/existing/claimable."""

    @property
    def claimable(self) -> bool:
        return bool(self.details.get("claimable"))


class PaymentRequiredError(WorkflowError):
    """Sponsor plan selected but no payment confirmation available."""


class AuthenticationRequiredError(WorkflowError):
    """The operation needs a signed-in user."""


class NetworkError(WorkflowError):
    """Transport failure or server-side (5xx) error."""
