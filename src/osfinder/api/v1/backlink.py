from fastapi import APIRouter, Depends

from osfinder.api.deps import get_backlink_verifier
from osfinder.schemas.backlink import BacklinkRequest, BacklinkResult
from osfinder.services.backlink import BacklinkVerifier

router = APIRouter(tags=["submission"])


@router.post("/verify-backlink", response_model=BacklinkResult)
async def verify_backlink(
    data: BacklinkRequest,
    verifier: BacklinkVerifier = Depends(get_backlink_verifier),
) -> BacklinkResult:
    """Check the repository README (then homepage) for a link to the directory.

    Raises:
        400: Not a GitHub repository URL
    """
    return await verifier.verify(data.github_url)
