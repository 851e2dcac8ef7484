"""Ownership claim schemas."""

from uuid import UUID

from pydantic import BaseModel

from osfinder.schemas.submission import ExistingAlternative


class ClaimInitiateRequest(BaseModel):
    github: str


class ClaimVerifyRequest(BaseModel):
    alternative_id: UUID


class ClaimInstructions(BaseModel):
    alternative: ExistingAlternative
    file_name: str
    file_content: str
    instructions: list[str]


class ClaimResult(BaseModel):
    success: bool
    message: str
    alternative: ExistingAlternative
