"""Python client for the directory API."""

from .directory import DirectoryClient, error_from_response
from .errors import (
    AuthenticationRequiredError,
    DuplicateError,
    NetworkError,
    PaymentRequiredError,
    ValidationError,
    WorkflowError,
)

__all__ = [
    "AuthenticationRequiredError",
    "DirectoryClient",
    "DuplicateError",
    "NetworkError",
    "PaymentRequiredError",
    "ValidationError",
    "WorkflowError",
    "error_from_response",
]
