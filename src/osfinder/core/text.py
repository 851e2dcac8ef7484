"""Slug and GitHub URL helpers shared by the seeder and the submission API."""

import re
from urllib.parse import urlparse

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lower-case, collapse non-alphanumerics to '-', trim leading/trailing '-'."""
    return _NON_ALNUM.sub("-", (name or "").lower()).strip("-")


def normalize_github_url(url: str | None) -> str:
    """Key used to compare GitHub URLs: trimmed and lower-cased."""
    return (url or "").strip().lower()


def parse_github_url(url: str) -> tuple[str, str] | None:
    """Extract (owner, repo) from a GitHub repository URL.

    Returns None for anything that is not github.com/<owner>/<repo>.
    """
    try:
        parsed = urlparse((url or "").strip())
    except ValueError:
        return None
    if not parsed.hostname or "github.com" not in parsed.hostname:
        return None

    parts = [p for p in parsed.path.split("/") if p]
    if len(parts) < 2:
        return None
    repo = parts[1]
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    return parts[0], repo
