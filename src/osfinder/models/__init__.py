"""Database models."""
from osfinder.models.user import User
from osfinder.models.category import Category, TechStack
from osfinder.models.proprietary import ProprietarySoftware
from osfinder.models.alternative import Alternative
from osfinder.models.draft import SubmissionDraft

__all__ = [
    "User",
    "Category",
    "TechStack",
    "ProprietarySoftware",
    "Alternative",
    "SubmissionDraft",
]
