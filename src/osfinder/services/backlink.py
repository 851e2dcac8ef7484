"""Backlink verification for free-plan submissions.

A free listing requires the project to link back to the directory. The
README is searched first (common file names across the usual default
branches), then the homepage configured on the GitHub repository.
"""

import logging
from urllib.parse import urlparse

from osfinder.config import settings
from osfinder.core.exceptions import InvalidGitHubURLError
from osfinder.core.text import parse_github_url
from osfinder.schemas.backlink import BacklinkResult
from osfinder.services.github import GitHubContent


logger = logging.getLogger(__name__)

README_BRANCHES = ("main", "master", "develop")
README_FILES = ("README.md", "readme.md", "Readme.md", "README")


def contains_marker(content: str, markers: list[str]) -> bool:
    """Case-insensitive search for any backlink marker."""
    lowered = content.lower()
    return any(marker.lower() in lowered for marker in markers)


class BacklinkVerifier:
    def __init__(self, github: GitHubContent, markers: list[str] | None = None):
        self.github = github
        self.markers = markers if markers is not None else settings.backlink_markers

    async def verify(self, github_url: str) -> BacklinkResult:
        """Look for a backlink in the repository README or homepage.

        Raises:
            InvalidGitHubURLError: If the URL is not a GitHub repository URL
        """
        parsed = parse_github_url(github_url)
        if parsed is None:
            raise InvalidGitHubURLError(github_url)
        owner, repo = parsed

        found_at = await self._check_readme(owner, repo)
        if found_at:
            logger.info(f"Backlink verified for {owner}/{repo} in README")
            return BacklinkResult(verified=True, message="Backlink found in README!", found_at=found_at)

        found_at = await self._check_homepage(owner, repo)
        if found_at:
            logger.info(f"Backlink verified for {owner}/{repo} on homepage")
            return BacklinkResult(
                verified=True, message="Backlink found on project website!", found_at=found_at
            )

        logger.info(f"No backlink found for {owner}/{repo}")
        return BacklinkResult(
            verified=False,
            message=(
                "Backlink not found. Please add the Open Source Finder badge "
                "to your README.md and try again."
            ),
        )

    async def _check_readme(self, owner: str, repo: str) -> str | None:
        for branch in README_BRANCHES:
            for filename in README_FILES:
                content = await self.github.fetch_raw(owner, repo, branch, filename)
                if content is not None and contains_marker(content, self.markers):
                    return self.github.raw_url(owner, repo, branch, filename)
        return None

    async def _check_homepage(self, owner: str, repo: str) -> str | None:
        metadata = await self.github.repo_metadata(owner, repo)
        homepage = (metadata or {}).get("homepage")
        if not homepage:
            return None

        content = await self.github.fetch_text(homepage)
        # Homepages must link to the site itself, a brand mention is not enough.
        site_host = urlparse(settings.site_url).hostname or settings.site_url
        if content is not None and site_host.lower() in content.lower():
            return homepage
        return None
