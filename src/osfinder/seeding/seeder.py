"""Seeding service.

Loads the curated tables from `osfinder.seeding.data` into the store:
1. Upsert categories and tech stacks by slug
2. Create missing proprietary products (categories inferred from their description)
3. Create missing alternatives (categories inferred from what they replace
   and how they describe themselves)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.categorization import infer_categories
from osfinder.core.enums import AlternativeStatus, SubmissionPlan
from osfinder.core.text import normalize_github_url, slugify
from osfinder.models.alternative import Alternative
from osfinder.models.category import Category, TechStack
from osfinder.models.proprietary import ProprietarySoftware
from osfinder.repositories.alternative import AlternativeRepository
from osfinder.repositories.taxonomy import (
    CategoryRepository,
    ProprietaryRepository,
    TechStackRepository,
)
from osfinder.seeding import data


logger = logging.getLogger(__name__)

STAGES = ("categories", "tech_stacks", "proprietary", "alternatives")


@dataclass
class SeedCounts:
    created: int = 0
    updated: int = 0
    skipped: int = 0


@dataclass
class SeedReport:
    """Per-stage counters returned by Seeder.run()."""

    stages: dict[str, SeedCounts] = field(default_factory=dict)

    def counts(self, stage: str) -> SeedCounts:
        return self.stages.setdefault(stage, SeedCounts())

    def summary(self) -> str:
        return ", ".join(
            f"{stage}: {c.created} created, {c.updated} updated, {c.skipped} skipped"
            for stage, c in self.stages.items()
        )


class Seeder:
    """Writes reference data and curated alternatives.

    Every stage is safe to re-run: existing slugs are updated (taxonomy) or
    skipped (proprietary, alternatives), never duplicated.
    """

    def __init__(
        self,
        db: AsyncSession,
        categories: list[dict] | None = None,
        tech_stacks: list[dict] | None = None,
        proprietary: list[dict] | None = None,
        alternatives: list[dict] | None = None,
    ):
        self.db = db
        self.categories = data.CATEGORIES if categories is None else categories
        self.tech_stacks = data.TECH_STACKS if tech_stacks is None else tech_stacks
        self.proprietary = data.PROPRIETARY_SOFTWARE if proprietary is None else proprietary
        self.alternatives = data.ALTERNATIVES if alternatives is None else alternatives

        self.category_repo = CategoryRepository(db)
        self.tech_stack_repo = TechStackRepository(db)
        self.proprietary_repo = ProprietaryRepository(db)
        self.alternative_repo = AlternativeRepository(db)

    async def run(self, only: str | None = None) -> SeedReport:
        """Run all stages in order, or a single stage when `only` is given."""
        if only is not None and only not in STAGES:
            raise ValueError(f"Unknown seed stage: {only}")

        report = SeedReport()
        stages = {
            "categories": self.seed_categories,
            "tech_stacks": self.seed_tech_stacks,
            "proprietary": self.seed_proprietary,
            "alternatives": self.seed_alternatives,
        }
        for stage in STAGES:
            if only and stage != only:
                continue
            report.stages[stage] = await stages[stage]()

        logger.info(f"Seeding complete: {report.summary()}")
        return report

    async def seed_categories(self) -> SeedCounts:
        return await self._upsert_by_slug(self.category_repo, Category, self.categories, "category")

    async def seed_tech_stacks(self) -> SeedCounts:
        return await self._upsert_by_slug(self.tech_stack_repo, TechStack, self.tech_stacks, "tech stack")

    async def seed_proprietary(self) -> SeedCounts:
        counts = SeedCounts()
        existing = await self.proprietary_repo.slug_map()
        category_map = await self.category_repo.slug_map()

        for entry in self.proprietary:
            if entry["slug"] in existing:
                counts.skipped += 1
                logger.debug(f"Proprietary {entry['slug']} exists, skipping")
                continue

            slugs = infer_categories(
                category_map.keys(),
                alternative_to=entry["name"],
                short_description=entry.get("description"),
            )
            product = ProprietarySoftware(
                name=entry["name"],
                slug=entry["slug"],
                description=entry.get("description", ""),
                website=entry.get("website"),
                icon_url=entry.get("icon_url"),
                categories=[category_map[s] for s in slugs],
            )
            self.db.add(product)
            existing[product.slug] = product
            counts.created += 1
            logger.info(f"Added proprietary {product.slug} -> {', '.join(slugs) or 'no categories'}")

        await self.db.commit()
        return counts

    async def seed_alternatives(self) -> SeedCounts:
        counts = SeedCounts()
        category_map = await self.category_repo.slug_map()
        proprietary_map = await self.proprietary_repo.slug_map()

        for entry in self.alternatives:
            slug = entry.get("slug") or slugify(entry["name"])
            if await self.alternative_repo.slug_exists(slug):
                counts.skipped += 1
                logger.debug(f"Alternative {slug} exists, skipping")
                continue

            targets = self._resolve_targets(slug, entry.get("alternative_to", []), proprietary_map)
            slugs = infer_categories(
                category_map.keys(),
                alternative_to=[p.name for p in targets],
                short_description=entry.get("short_description"),
                long_description=entry.get("description"),
            )

            alternative = Alternative(
                name=entry["name"],
                slug=slug,
                description=entry["description"],
                short_description=entry.get("short_description"),
                website=entry["website"],
                github=normalize_github_url(entry["github"]),
                license=entry.get("license"),
                is_self_hosted=entry.get("is_self_hosted", False),
                screenshots=[],
                tag_ids=[],
                status=AlternativeStatus.APPROVED.value,
                approved=True,
                submission_plan=SubmissionPlan.FREE.value,
                categories=[category_map[s] for s in slugs],
                alternative_to=targets,
            )
            self.db.add(alternative)
            # Flush so later entries in this batch see the slug.
            await self.db.flush()
            counts.created += 1
            logger.info(f"Added alternative {slug} -> {', '.join(slugs) or 'no categories'}")

        await self.db.commit()
        return counts

    def _resolve_targets(
        self, slug: str, target_slugs: Iterable[str], proprietary_map: dict[str, ProprietarySoftware]
    ) -> list[ProprietarySoftware]:
        targets = []
        for target in target_slugs:
            product = proprietary_map.get(target)
            if product is None:
                logger.warning(f"Alternative {slug}: unknown proprietary slug {target!r}, dropped")
                continue
            targets.append(product)
        return targets

    async def _upsert_by_slug(self, repo, model, rows: list[dict], label: str) -> SeedCounts:
        counts = SeedCounts()
        existing = await repo.slug_map()

        for row in rows:
            current = existing.get(row["slug"])
            if current is None:
                obj = model(**row)
                self.db.add(obj)
                existing[row["slug"]] = obj
                counts.created += 1
            else:
                for key, value in row.items():
                    setattr(current, key, value)
                counts.updated += 1

        await self.db.commit()
        logger.info(f"Seeded {len(rows)} {label} rows ({counts.created} new)")
        return counts
