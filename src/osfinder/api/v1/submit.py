"""Submission endpoints: duplicate check, drafts, submit and ownership claims."""

from fastapi import APIRouter, Depends, status

from osfinder.api.deps import (
    get_claim_service,
    get_current_user,
    get_draft_service,
    get_optional_user,
    get_submission_service,
)
from osfinder.models.user import User
from osfinder.schemas.claim import (
    ClaimInitiateRequest,
    ClaimInstructions,
    ClaimResult,
    ClaimVerifyRequest,
)
from osfinder.schemas.draft import DraftPayload, DraftResponse, DraftSaved
from osfinder.schemas.submission import (
    DuplicateCheckRequest,
    DuplicateCheckResult,
    SubmissionRequest,
    SubmissionResult,
)
from osfinder.services.claims import ClaimService
from osfinder.services.drafts import DraftService
from osfinder.services.submission import SubmissionService

router = APIRouter(prefix="/submit", tags=["submission"])


@router.post("", response_model=SubmissionResult, status_code=status.HTTP_201_CREATED)
async def create_submission(
    data: SubmissionRequest,
    user: User | None = Depends(get_optional_user),
    service: SubmissionService = Depends(get_submission_service),
) -> SubmissionResult:
    """
    Submit a new alternative.

    Raises:
        400: Missing fields or unverified backlink (free plan)
        402: Missing payment confirmation (sponsor plan)
        409: Already listed; details carry the claim hint
    """
    return await service.submit(data, user)


@router.post("/check-duplicate", response_model=DuplicateCheckResult)
async def check_duplicate(
    data: DuplicateCheckRequest,
    user: User | None = Depends(get_optional_user),
    service: SubmissionService = Depends(get_submission_service),
) -> DuplicateCheckResult:
    return await service.check_duplicate(data.name, data.github, user)


@router.get("/draft", response_model=DraftResponse | None)
async def load_draft(
    user: User = Depends(get_current_user),
    service: DraftService = Depends(get_draft_service),
):
    """The caller's saved form state, or null."""
    return await service.load(user)


@router.post("/draft", response_model=DraftSaved)
async def save_draft(
    data: DraftPayload,
    user: User = Depends(get_current_user),
    service: DraftService = Depends(get_draft_service),
) -> DraftSaved:
    """Overwrite the caller's draft. Partial forms are accepted."""
    draft = await service.save(user, data)
    return DraftSaved(id=draft.id, updated_at=draft.updated_at)


@router.delete("/draft")
async def delete_draft(
    user: User = Depends(get_current_user),
    service: DraftService = Depends(get_draft_service),
):
    deleted = await service.delete(user)
    return {"success": True, "deleted": deleted}


@router.post("/claim", response_model=ClaimInstructions)
async def initiate_claim(
    data: ClaimInitiateRequest,
    user: User = Depends(get_current_user),
    service: ClaimService = Depends(get_claim_service),
) -> ClaimInstructions:
    """Verification file the caller must commit to prove ownership."""
    return await service.initiate(data.github, user)


@router.put("/claim", response_model=ClaimResult)
async def verify_claim(
    data: ClaimVerifyRequest,
    user: User = Depends(get_current_user),
    service: ClaimService = Depends(get_claim_service),
) -> ClaimResult:
    return await service.verify(data.alternative_id, user)
