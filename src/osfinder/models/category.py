"""Taxonomy models: categories and tech stacks."""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from osfinder.models.base import BaseModel


class Category(BaseModel):
    """A browsing/filtering label assigned to alternatives."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<Category(slug={self.slug})>"


class TechStack(BaseModel):
    """A language, framework or service an alternative is built with."""

    __tablename__ = "tech_stacks"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<TechStack(slug={self.slug})>"
