"""Category inference for directory records.

Keyword rules map a record's descriptive text to taxonomy slugs. Matching is
local and deterministic so it can run inside batch seeding loops.
"""

from .matcher import CategoryRule, build_match_text, infer_categories, match_categories

__all__ = ["CategoryRule", "build_match_text", "infer_categories", "match_categories"]
