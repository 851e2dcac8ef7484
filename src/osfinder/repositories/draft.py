"""Submission draft repository (single-slot per user)."""
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.models.base import utcnow
from osfinder.models.draft import SubmissionDraft
from osfinder.repositories.base import BaseRepository


class DraftRepository(BaseRepository[SubmissionDraft]):
    """Repository for SubmissionDraft keyed by user."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, SubmissionDraft)

    async def get_by_user(self, user_id: UUID) -> SubmissionDraft | None:
        result = await self.db.execute(
            select(SubmissionDraft).where(SubmissionDraft.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def upsert(self, user_id: UUID, data: dict) -> SubmissionDraft:
        """Create the user's draft or overwrite every field of the existing one."""
        draft = await self.get_by_user(user_id)
        if draft is None:
            draft = SubmissionDraft(user_id=user_id, **data)
            self.db.add(draft)
        else:
            for key, value in data.items():
                setattr(draft, key, value)
            # Saving counts as a modification even when no field changed.
            draft.updated_at = utcnow()

        await self.db.commit()
        await self.db.refresh(draft)
        return draft

    async def delete_for_user(self, user_id: UUID, commit: bool = True) -> bool:
        """Delete the user's draft. Returns True if one existed."""
        result = await self.db.execute(
            delete(SubmissionDraft).where(SubmissionDraft.user_id == user_id)
        )
        if commit:
            await self.db.commit()
        return (result.rowcount or 0) > 0
