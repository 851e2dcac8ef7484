"""Read-only access to public GitHub repository content."""

import logging

import httpx

from osfinder.config import settings


logger = logging.getLogger(__name__)

RAW_BASE_URL = "https://raw.githubusercontent.com"
API_BASE_URL = "https://api.github.com"
USER_AGENT = "OpenSourceFinder-Verifier/1.0"


class GitHubContent:
    """Fetches raw files and repository metadata over a shared httpx client.

    Lookups answer None for anything other than a 200 response, including
    transport failures, so callers can move on to the next branch or file.
    """

    def __init__(self, http: httpx.AsyncClient, token: str | None = None):
        self.http = http
        self.token = token if token is not None else settings.github_token

    async def fetch_raw(self, owner: str, repo: str, branch: str, path: str) -> str | None:
        url = self.raw_url(owner, repo, branch, path)
        return await self.fetch_text(url, headers={"Cache-Control": "no-cache"})

    async def fetch_text(self, url: str, headers: dict[str, str] | None = None) -> str | None:
        try:
            response = await self.http.get(
                url,
                headers={"User-Agent": USER_AGENT, **(headers or {})},
                follow_redirects=True,
            )
        except httpx.HTTPError as e:
            logger.debug(f"GET {url} failed: {e}")
            return None

        if response.status_code != 200:
            return None
        return response.text

    async def repo_metadata(self, owner: str, repo: str) -> dict | None:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/vnd.github.v3+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"

        try:
            response = await self.http.get(f"{API_BASE_URL}/repos/{owner}/{repo}", headers=headers)
        except httpx.HTTPError as e:
            logger.debug(f"GitHub API lookup for {owner}/{repo} failed: {e}")
            return None

        if response.status_code != 200:
            return None
        return response.json()

    @staticmethod
    def raw_url(owner: str, repo: str, branch: str, path: str) -> str:
        return f"{RAW_BASE_URL}/{owner}/{repo}/{branch}/{path}"
