"""Batch loading of reference data and curated alternatives."""

from .seeder import STAGES, SeedCounts, SeedReport, Seeder

__all__ = ["STAGES", "SeedCounts", "SeedReport", "Seeder"]
