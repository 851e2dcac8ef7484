"""Alternative model: an open-source project listed in the directory."""
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Table, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from osfinder.core.enums import AlternativeStatus, SubmissionPlan
from osfinder.models.base import Base, BaseModel

_LIVE_ROW = (
    f"deleted_at IS NULL AND status IN "
    f"('{AlternativeStatus.PENDING.value}', '{AlternativeStatus.APPROVED.value}')"
)

alternative_categories = Table(
    "alternative_categories",
    Base.metadata,
    Column("alternative_id", ForeignKey("alternatives.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)

alternative_tech_stacks = Table(
    "alternative_tech_stacks",
    Base.metadata,
    Column("alternative_id", ForeignKey("alternatives.id", ondelete="CASCADE"), primary_key=True),
    Column("tech_stack_id", ForeignKey("tech_stacks.id", ondelete="CASCADE"), primary_key=True),
)

alternative_proprietary = Table(
    "alternative_proprietary",
    Base.metadata,
    Column("alternative_id", ForeignKey("alternatives.id", ondelete="CASCADE"), primary_key=True),
    Column("proprietary_id", ForeignKey("proprietary_software.id", ondelete="CASCADE"), primary_key=True),
)


class Alternative(BaseModel):
    """An open-source project positioned as a substitute for proprietary products."""

    __tablename__ = "alternatives"

    # Slugs are unique among live listings only; rejected and deleted rows keep theirs.
    __table_args__ = (
        Index(
            "uq_alternatives_live_slug",
            "slug",
            unique=True,
            postgresql_where=text(_LIVE_ROW),
            sqlite_where=text(_LIVE_ROW),
        ),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    short_description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    long_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    website: Mapped[str] = mapped_column(String(500), nullable=False)
    # Stored lower-cased so duplicate checks can compare exactly.
    github: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    license: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_self_hosted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    screenshots: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    tag_ids: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    status: Mapped[str] = mapped_column(
        String(20), default=AlternativeStatus.PENDING.value, nullable=False, index=True
    )
    approved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    health_score: Mapped[int] = mapped_column(Integer, default=50, nullable=False)
    vote_score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    submitter_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    submitter_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Plan
    submission_plan: Mapped[str] = mapped_column(
        String(20), default=SubmissionPlan.FREE.value, nullable=False
    )
    backlink_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    backlink_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    sponsor_payment_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sponsor_paid_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    sponsor_featured_until: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    sponsor_priority_until: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    newsletter_included: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    owner: Mapped["User"] = relationship("User", back_populates="alternatives")
    categories: Mapped[list["Category"]] = relationship(
        "Category", secondary=alternative_categories, lazy="selectin"
    )
    tech_stacks: Mapped[list["TechStack"]] = relationship(
        "TechStack", secondary=alternative_tech_stacks, lazy="selectin"
    )
    alternative_to: Mapped[list["ProprietarySoftware"]] = relationship(
        "ProprietarySoftware", secondary=alternative_proprietary, lazy="selectin"
    )

    def reference(self) -> dict[str, Any]:
        """Minimal public pointer to this record (id, name, slug, owner flag)."""
        return {
            "id": str(self.id),
            "name": self.name,
            "slug": self.slug,
            "github": self.github,
            "has_owner": self.user_id is not None,
        }

    def __repr__(self) -> str:
        return f"<Alternative(id={self.id}, slug={self.slug}, status={self.status})>"
