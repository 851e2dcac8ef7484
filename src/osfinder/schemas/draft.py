"""Draft schemas: the saved-for-later form state."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from osfinder.core.enums import SubmissionPlan
from osfinder.schemas.submission import SubmissionForm


class DraftPayload(SubmissionForm):
    """Partial form state; nothing is required at save time."""

    submission_plan: SubmissionPlan = SubmissionPlan.FREE
    sponsor_payment_id: str | None = None
    sponsor_paid: bool = False


class DraftResponse(DraftPayload):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    updated_at: datetime


class DraftSaved(BaseModel):
    id: UUID
    updated_at: datetime
