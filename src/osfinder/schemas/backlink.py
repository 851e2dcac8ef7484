"""Backlink verification schemas."""

from pydantic import BaseModel, Field


class BacklinkRequest(BaseModel):
    github_url: str = Field(..., description="Repository URL, https://github.com/<owner>/<repo>")


class BacklinkResult(BaseModel):
    verified: bool
    message: str
    found_at: str | None = None
