"""
Record Models

Value types passed between the lookups, the record merger and the pipeline.
"""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Generic, Optional, Tuple, TypeVar
from pydantic import BaseModel


OUTPUT_DATE_FORMAT = "%m/%d/%Y"

T = TypeVar("T")


def format_date(value: Optional[date]) -> str:
    """Render a date as MM/dd/yyyy, or an empty string when missing."""
    if value is None:
        return ""
    return value.strftime(OUTPUT_DATE_FORMAT)


class WarrantyInfo(BaseModel):
    """Warranty fields derived from an entitlement response."""
    ship_date: Optional[date] = None
    warranty_expiration: Optional[date] = None

    def is_empty(self) -> bool:
        return self.ship_date is None and self.warranty_expiration is None

    def formatted(self) -> Tuple[str, str]:
        """Return (ship date, warranty expiration) as output strings."""
        return format_date(self.ship_date), format_date(self.warranty_expiration)


@dataclass
class LookupOutcome(Generic[T]):
    """
    Result of a single per-record lookup.

    A failed lookup still carries a usable sentinel value so the record can
    be written; `error` holds the underlying cause for the caller to log.
    """
    service_tag: str
    value: T
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunSummary:
    """Counters collected over one enrichment run."""
    output_path: Optional[Path] = None
    rows_read: int = 0
    rows_written: int = 0
    rows_skipped: int = 0
    warranty_failures: int = 0
    warranty_missing: int = 0
    storage_failures: int = 0
    skipped_rows: list = field(default_factory=list)

    @property
    def lookup_failures(self) -> int:
        return self.warranty_failures + self.storage_failures
