"""Single-slot submission drafts."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.models.draft import SubmissionDraft
from osfinder.models.user import User
from osfinder.repositories.draft import DraftRepository
from osfinder.schemas.draft import DraftPayload


logger = logging.getLogger(__name__)


class DraftService:
    """Save, load and discard a user's in-progress submission.

    Saving never validates plan requirements; partial forms are the point.
    """

    def __init__(self, db: AsyncSession):
        self.draft_repo = DraftRepository(db)

    async def load(self, user: User) -> SubmissionDraft | None:
        return await self.draft_repo.get_by_user(user.id)

    async def save(self, user: User, payload: DraftPayload) -> SubmissionDraft:
        draft = await self.draft_repo.upsert(user.id, payload.model_dump(mode="json"))
        logger.debug(f"Draft saved for user {user.id}")
        return draft

    async def delete(self, user: User) -> bool:
        deleted = await self.draft_repo.delete_for_user(user.id)
        if deleted:
            logger.debug(f"Draft deleted for user {user.id}")
        return deleted
