"""Schemas for duplicate checks and submissions.

Form fields default to empty values so incomplete payloads reach the
submission service, which reports every missing field in one error.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from osfinder.core.enums import SubmissionPlan


class SubmissionForm(BaseModel):
    """Editable fields of a proposed alternative, shared by drafts and submissions."""

    name: str = ""
    short_description: str = ""
    description: str = ""
    long_description: str | None = None
    icon_url: str | None = None
    website: str = ""
    github: str = ""
    license: str = ""
    is_self_hosted: bool = False
    screenshots: list[str] = Field(default_factory=list)

    category_ids: list[str] = Field(default_factory=list)
    tag_ids: list[str] = Field(default_factory=list)
    tech_stack_ids: list[str] = Field(default_factory=list)
    alternative_to_ids: list[str] = Field(default_factory=list)

    submitter_name: str | None = None
    submitter_email: str | None = None


class SubmissionRequest(SubmissionForm):
    submission_plan: SubmissionPlan = SubmissionPlan.FREE
    backlink_verified: bool = False
    backlink_url: str | None = None
    sponsor_payment_id: str | None = None


class SubmissionResult(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    slug: str
    status: str
    featured: bool
    submission_plan: str
    sponsor_featured_until: datetime | None = None
    message: str


class DuplicateCheckRequest(BaseModel):
    name: str = ""
    github: str = ""


class ExistingAlternative(BaseModel):
    id: UUID
    name: str
    slug: str
    github: str
    has_owner: bool


class DuplicateCheckResult(BaseModel):
    """Outcome of a duplicate check.

    `claimable` is only ever true for an authenticated caller looking at an
    ownerless match.
    """

    duplicate: bool
    reasons: list[str] = Field(default_factory=list)
    existing: ExistingAlternative | None = None
    claimable: bool = False
