"""Repositories for the label tables: categories, tech stacks, proprietary software."""
from typing import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.models.category import Category, TechStack
from osfinder.models.proprietary import ProprietarySoftware
from osfinder.repositories.base import BaseRepository, T


class _SlugRepository(BaseRepository[T]):
    """Shared queries for tables keyed by a unique slug."""

    async def get_by_slug(self, slug: str) -> T | None:
        result = await self.db.execute(select(self.model).where(self.model.slug == slug))
        return result.scalar_one_or_none()

    async def list_ordered(self) -> list[T]:
        """All rows ordered by name (used by the submission form pickers)."""
        result = await self.db.execute(select(self.model).order_by(self.model.name))
        return list(result.scalars().all())

    async def slug_map(self) -> dict[str, T]:
        result = await self.db.execute(select(self.model))
        return {row.slug: row for row in result.scalars().all()}

    async def get_many(self, ids: Iterable[UUID]) -> list[T]:
        """Rows for the given ids; unknown ids are silently skipped."""
        ids = list(ids)
        if not ids:
            return []
        result = await self.db.execute(select(self.model).where(self.model.id.in_(ids)))
        return list(result.scalars().all())


class CategoryRepository(_SlugRepository[Category]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Category)


class TechStackRepository(_SlugRepository[TechStack]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, TechStack)


class ProprietaryRepository(_SlugRepository[ProprietarySoftware]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, ProprietarySoftware)
