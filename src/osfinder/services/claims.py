"""Ownership claims for listed projects.

A maintainer proves control of a repository by committing a verification
file whose content binds their user id to the listing id.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.core.exceptions import ClaimError, InvalidGitHubURLError, NotFoundError
from osfinder.core.text import normalize_github_url, parse_github_url
from osfinder.models.alternative import Alternative
from osfinder.models.user import User
from osfinder.repositories.alternative import AlternativeRepository
from osfinder.schemas.claim import ClaimInstructions, ClaimResult
from osfinder.schemas.submission import ExistingAlternative
from osfinder.services.github import GitHubContent


logger = logging.getLogger(__name__)

VERIFICATION_FILENAME = ".opensourcefinder-verify"
VERIFICATION_BRANCHES = ("main", "master")


def verification_code(user_id: UUID, alternative_id: UUID) -> str:
    return f"opensourcefinder-claim-{user_id}-{alternative_id}"


class ClaimService:
    def __init__(self, db: AsyncSession, github: GitHubContent):
        self.db = db
        self.github = github
        self.alternative_repo = AlternativeRepository(db)

    async def initiate(self, github_url: str, user: User) -> ClaimInstructions:
        """Return the verification file the caller must commit to the repository."""
        alternative = await self.alternative_repo.find_live_by_github(normalize_github_url(github_url))
        if alternative is None:
            raise ClaimError("CLAIM_001", details={"github": github_url}, http_status=404)
        self._ensure_unowned(alternative, user)

        code = verification_code(user.id, alternative.id)
        return ClaimInstructions(
            alternative=ExistingAlternative(**alternative.reference()),
            file_name=VERIFICATION_FILENAME,
            file_content=code,
            instructions=[
                f'Create a file named "{VERIFICATION_FILENAME}" in the root of your repository',
                f"Add this exact content to the file: {code}",
                "Commit and push the file to your main/master branch",
                'Click "Verify Ownership" to complete the claim',
            ],
        )

    async def verify(self, alternative_id: UUID, user: User) -> ClaimResult:
        """Check the committed verification file and assign ownership on a match.

        Raises:
            NotFoundError: Unknown alternative id
            ClaimError: Already owned, file missing, or content mismatch
        """
        alternative = await self.alternative_repo.get_by_id(alternative_id)
        if alternative is None:
            raise NotFoundError("Alternative")
        self._ensure_unowned(alternative, user)

        parsed = parse_github_url(alternative.github)
        if parsed is None:
            raise InvalidGitHubURLError(alternative.github)
        owner, repo = parsed

        content = None
        for branch in VERIFICATION_BRANCHES:
            content = await self.github.fetch_raw(owner, repo, branch, VERIFICATION_FILENAME)
            if content is not None:
                break

        if content is None:
            raise ClaimError(
                "CLAIM_004",
                http_status=400,
                message=(
                    f'Verification file "{VERIFICATION_FILENAME}" not found in your repository. '
                    "Make sure you've committed and pushed the file to the main or master branch."
                ),
            )

        expected = verification_code(user.id, alternative.id)
        if content.strip() != expected:
            raise ClaimError(
                "CLAIM_004",
                details={"found": content.strip()[:100]},
                http_status=400,
                message="Verification code does not match. Make sure you copied the exact code provided.",
            )

        alternative.user_id = user.id
        await self.db.commit()
        await self.db.refresh(alternative)
        logger.info(f"User {user.id} claimed alternative {alternative.slug}")

        return ClaimResult(
            success=True,
            message=f"You are now the owner of {alternative.name}.",
            alternative=ExistingAlternative(**alternative.reference()),
        )

    @staticmethod
    def _ensure_unowned(alternative: Alternative, user: User) -> None:
        if alternative.user_id is None:
            return
        if alternative.user_id == user.id:
            raise ClaimError("CLAIM_002", http_status=400)
        raise ClaimError("CLAIM_003", http_status=400)
