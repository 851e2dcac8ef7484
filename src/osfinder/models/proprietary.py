"""Proprietary software: the products alternatives are positioned against."""
from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from osfinder.models.base import Base, BaseModel

proprietary_categories = Table(
    "proprietary_categories",
    Base.metadata,
    Column("proprietary_id", ForeignKey("proprietary_software.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)


class ProprietarySoftware(BaseModel):
    """A commercial product that alternatives claim to replace."""

    __tablename__ = "proprietary_software"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    icon_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    categories: Mapped[list["Category"]] = relationship(
        "Category", secondary=proprietary_categories, lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<ProprietarySoftware(slug={self.slug})>"
