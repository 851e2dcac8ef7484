"""Submission service.

Turns a submitted form into a directory listing:
1. Check required fields
2. Check plan requirements (backlink for free, payment for sponsor)
3. Reject duplicates by slug or GitHub URL
4. Persist the alternative and drop the submitter's draft

Every check runs before anything is written.
"""

import logging
from datetime import timedelta
from typing import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.config import settings
from osfinder.core.enums import AlternativeStatus, SubmissionPlan
from osfinder.core.exceptions import (
    BacklinkRequiredError,
    DuplicateSubmissionError,
    PaymentRequiredError,
    SubmissionValidationError,
)
from osfinder.core.text import normalize_github_url, slugify
from osfinder.models.alternative import Alternative
from osfinder.models.base import utcnow
from osfinder.models.user import User
from osfinder.repositories.alternative import AlternativeRepository
from osfinder.repositories.draft import DraftRepository
from osfinder.repositories.taxonomy import (
    CategoryRepository,
    ProprietaryRepository,
    TechStackRepository,
)
from osfinder.schemas.submission import (
    DuplicateCheckResult,
    ExistingAlternative,
    SubmissionRequest,
    SubmissionResult,
)


logger = logging.getLogger(__name__)

# Checked in this order; the error message lists missing fields the same way.
REQUIRED_TEXT_FIELDS = ("name", "short_description", "description", "website", "github", "license")


def missing_fields(form: SubmissionRequest) -> list[str]:
    """Names of required fields that are empty, in form order."""
    missing = [f for f in REQUIRED_TEXT_FIELDS if not (getattr(form, f) or "").strip()]
    if not form.alternative_to_ids:
        missing.append("alternative_to")
    return missing


def _parse_ids(values: Iterable[str]) -> list[UUID]:
    ids = []
    for value in values:
        try:
            ids.append(UUID(str(value)))
        except ValueError:
            logger.debug(f"Ignoring malformed id {value!r}")
    return ids


class SubmissionService:
    """Service for duplicate checks and alternative submissions."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.alternative_repo = AlternativeRepository(db)
        self.draft_repo = DraftRepository(db)
        self.category_repo = CategoryRepository(db)
        self.tech_stack_repo = TechStackRepository(db)
        self.proprietary_repo = ProprietaryRepository(db)

    async def check_duplicate(
        self, name: str, github: str, user: User | None = None
    ) -> DuplicateCheckResult:
        """Compare a proposed name and repository against live listings.

        Pending and approved listings count; rejected ones do not. The match
        is claimable only by a signed-in caller and only while it has no owner.
        """
        reasons: list[str] = []
        match: Alternative | None = None

        slug = slugify(name)
        if slug:
            by_slug = await self.alternative_repo.find_live_by_slug(slug)
            if by_slug is not None:
                reasons.append(f'An alternative named "{by_slug.name}" already exists')
                match = by_slug

        github_key = normalize_github_url(github)
        if github_key:
            by_github = await self.alternative_repo.find_live_by_github(github_key)
            if by_github is not None:
                reasons.append("This GitHub repository is already listed")
                match = match or by_github

        if match is None:
            return DuplicateCheckResult(duplicate=False)

        return DuplicateCheckResult(
            duplicate=True,
            reasons=reasons,
            existing=ExistingAlternative(**match.reference()),
            claimable=user is not None and match.user_id is None,
        )

    async def submit(self, form: SubmissionRequest, user: User | None = None) -> SubmissionResult:
        """Validate and persist a submission.

        Raises:
            SubmissionValidationError: Required fields missing (all named at once)
            BacklinkRequiredError: Free plan without a verified backlink
            PaymentRequiredError: Sponsor plan without a payment confirmation
            DuplicateSubmissionError: Name or repository already listed
        """
        missing = missing_fields(form)
        if missing:
            raise SubmissionValidationError(missing)

        if form.submission_plan == SubmissionPlan.FREE and not form.backlink_verified:
            raise BacklinkRequiredError()

        if form.submission_plan == SubmissionPlan.SPONSOR and not (form.sponsor_payment_id or "").strip():
            raise PaymentRequiredError()

        duplicate = await self.check_duplicate(form.name, form.github, user)
        if duplicate.duplicate:
            raise DuplicateSubmissionError(duplicate.reasons, details=duplicate.model_dump(mode="json"))

        alternative = await self._build(form, user)
        self.db.add(alternative)
        if user is not None:
            await self.draft_repo.delete_for_user(user.id, commit=False)

        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(alternative)

        logger.info(
            f"Submission {alternative.slug} created "
            f"(plan={alternative.submission_plan}, status={alternative.status})"
        )

        if alternative.submission_plan == SubmissionPlan.SPONSOR:
            message = "Your alternative is live and featured. Thank you for sponsoring!"
        else:
            message = "Your alternative has been submitted for review."

        return SubmissionResult(
            id=alternative.id,
            slug=alternative.slug,
            status=alternative.status,
            featured=alternative.featured,
            submission_plan=alternative.submission_plan,
            sponsor_featured_until=alternative.sponsor_featured_until,
            message=message,
        )

    async def _build(self, form: SubmissionRequest, user: User | None) -> Alternative:
        categories = await self.category_repo.get_many(_parse_ids(form.category_ids))
        tech_stacks = await self.tech_stack_repo.get_many(_parse_ids(form.tech_stack_ids))
        alternative_to = await self.proprietary_repo.get_many(_parse_ids(form.alternative_to_ids))

        alternative = Alternative(
            name=form.name.strip(),
            slug=slugify(form.name),
            description=form.description,
            short_description=form.short_description,
            long_description=form.long_description,
            icon_url=form.icon_url,
            website=form.website.strip(),
            github=normalize_github_url(form.github),
            license=form.license,
            is_self_hosted=form.is_self_hosted,
            screenshots=list(form.screenshots),
            tag_ids=list(form.tag_ids),
            submitter_name=form.submitter_name or (user.full_name if user else None),
            submitter_email=form.submitter_email or (user.email if user else None),
            user_id=user.id if user else None,
            submission_plan=form.submission_plan.value,
            categories=categories,
            tech_stacks=tech_stacks,
            alternative_to=alternative_to,
        )

        if form.submission_plan == SubmissionPlan.SPONSOR:
            now = utcnow()
            window = timedelta(days=settings.sponsor_duration_days)
            alternative.status = AlternativeStatus.APPROVED.value
            alternative.approved = True
            alternative.featured = True
            alternative.sponsor_payment_id = form.sponsor_payment_id.strip()
            alternative.sponsor_paid_at = now
            alternative.sponsor_featured_until = now + window
            alternative.sponsor_priority_until = now + window
            alternative.newsletter_included = True
        else:
            alternative.status = AlternativeStatus.PENDING.value
            alternative.approved = False
            alternative.backlink_verified = True
            alternative.backlink_url = form.backlink_url

        return alternative
