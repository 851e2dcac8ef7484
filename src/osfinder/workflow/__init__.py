"""Client-side submission workflow."""

from .state import (
    AuthMeta,
    DraftMeta,
    DuplicateMeta,
    FormFields,
    PaymentMeta,
    SubmissionState,
)
from .submission import SubmissionWorkflow

__all__ = [
    "AuthMeta",
    "DraftMeta",
    "DuplicateMeta",
    "FormFields",
    "PaymentMeta",
    "SubmissionState",
    "SubmissionWorkflow",
]
