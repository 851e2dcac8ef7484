"""Keyword-rule category matcher.

Rules are tried in declaration order and the first rule that both matches
the text and resolves to enough known labels wins. Rule order is therefore a
priority list: declare specific keyword sets (product names) before generic
ones ("analytics", "automation").

Keywords are matched by plain substring containment, so "api" also matches
inside "rapid". Existing category assignments depend on this; do not switch
to word-boundary matching without re-seeding.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass

# A rule only wins if this many of its labels exist in the store.
MIN_RESOLVED_LABELS = 3


@dataclass(frozen=True)
class CategoryRule:
    keywords: tuple[str, ...]
    categories: tuple[str, ...]


def build_match_text(
    alternative_to: str | Iterable[str] | None,
    short_description: str | None,
    long_description: str | None,
) -> str:
    """Lower-cased match subject: alternative-to label(s), short then long description."""
    if alternative_to is None:
        target = ""
    elif isinstance(alternative_to, str):
        target = alternative_to
    else:
        target = " ".join(alternative_to)

    parts = [target, short_description or "", long_description or ""]
    return " ".join(p for p in parts if p).lower()


def _resolve(labels: Iterable[str], available: Collection[str]) -> list[str]:
    return [label for label in labels if label in available]


def match_categories(
    candidate_text: str,
    rules: Sequence[CategoryRule],
    available_labels: Collection[str],
    default_labels: Sequence[str],
) -> list[str]:
    """Select up to 3 taxonomy labels for a candidate.

    Args:
        candidate_text: Match subject (see build_match_text)
        rules: Ordered keyword rules
        available_labels: Slugs that exist in the destination store
        default_labels: Fallback slugs when no rule resolves enough labels

    Returns:
        The first 3 resolved labels of the first matching rule, else the
        resolved defaults (possibly empty). Never raises.
    """
    text = (candidate_text or "").lower()

    if text:
        for rule in rules:
            if not any(keyword.lower() in text for keyword in rule.keywords):
                continue
            resolved = _resolve(rule.categories, available_labels)
            if len(resolved) >= MIN_RESOLVED_LABELS:
                return resolved[:MIN_RESOLVED_LABELS]

    return _resolve(default_labels, available_labels)[:MIN_RESOLVED_LABELS]


def infer_categories(
    available_labels: Collection[str],
    alternative_to: str | Iterable[str] | None = None,
    short_description: str | None = None,
    long_description: str | None = None,
) -> list[str]:
    """Match a record against the shipped rule table."""
    from .rules import CATEGORY_RULES, DEFAULT_CATEGORY_SLUGS

    text = build_match_text(alternative_to, short_description, long_description)
    return match_categories(text, CATEGORY_RULES, available_labels, DEFAULT_CATEGORY_SLUGS)
