"""Models Package - Value types for the warranty enricher."""

from .records import LookupOutcome, RunSummary, WarrantyInfo, format_date

__all__ = ["LookupOutcome", "RunSummary", "WarrantyInfo", "format_date"]
