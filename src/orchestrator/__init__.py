"""Orchestrator Package - Drives an enrichment run end to end."""

from .pipeline import EnrichmentPipeline

__all__ = ["EnrichmentPipeline"]
