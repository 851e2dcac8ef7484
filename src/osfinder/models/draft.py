"""Submission drafts: one in-progress proposal per user."""
from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from osfinder.core.enums import SubmissionPlan
from osfinder.models.base import BaseModel


class SubmissionDraft(BaseModel):
    """A user's unsubmitted alternative proposal.

    `user_id` is unique: saving overwrites the existing draft. Relations are
    kept as plain id strings because drafts may reference records that were
    deleted since.
    """

    __tablename__ = "submission_drafts"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )

    name: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    short_description: Mapped[str] = mapped_column(String(500), default="", nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    long_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    website: Mapped[str] = mapped_column(String(500), default="", nullable=False)
    github: Mapped[str] = mapped_column(String(500), default="", nullable=False)
    license: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    is_self_hosted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    screenshots: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    category_ids: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    tag_ids: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    tech_stack_ids: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    alternative_to_ids: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    submitter_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    submitter_email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    submission_plan: Mapped[str] = mapped_column(
        String(20), default=SubmissionPlan.FREE.value, nullable=False
    )
    sponsor_payment_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sponsor_paid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<SubmissionDraft(user_id={self.user_id}, name={self.name!r})>"
