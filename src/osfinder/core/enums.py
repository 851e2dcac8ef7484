"""Listing enums shared by the API, the models and the client workflow."""

from enum import StrEnum


class SubmissionPlan(StrEnum):
    FREE = "free"
    SPONSOR = "sponsor"


class AlternativeStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
