"""Alternative repository with duplicate-detection queries."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.core.enums import AlternativeStatus
from osfinder.models.alternative import Alternative
from osfinder.repositories.base import BaseRepository

# Rejected submissions do not block a resubmission.
_LIVE_STATUSES = (AlternativeStatus.PENDING.value, AlternativeStatus.APPROVED.value)


class AlternativeRepository(BaseRepository[Alternative]):
    """Repository for Alternative model."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Alternative)

    async def get_by_slug(self, slug: str) -> Alternative | None:
        """Newest row with this slug, whatever its status."""
        result = await self.db.execute(
            select(Alternative)
            .where(Alternative.slug == slug)
            .order_by(Alternative.created_at.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def find_live_by_slug(self, slug: str) -> Alternative | None:
        result = await self.db.execute(
            select(Alternative).where(
                Alternative.slug == slug,
                Alternative.status.in_(_LIVE_STATUSES),
                Alternative.deleted_at.is_(None),
            )
        )
        return result.scalar_one_or_none()

    async def find_live_by_github(self, github: str) -> Alternative | None:
        result = await self.db.execute(
            select(Alternative)
            .where(
                Alternative.github == github,
                Alternative.status.in_(_LIVE_STATUSES),
                Alternative.deleted_at.is_(None),
            )
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def slug_exists(self, slug: str) -> bool:
        result = await self.db.execute(select(Alternative.id).where(Alternative.slug == slug))
        return result.scalar_one_or_none() is not None
