"""
Column Handling and Record Merging

Column identity is case-insensitive and whitespace-insensitive everywhere:
both when deduplicating input columns and when deciding which enrichment
columns to append.
"""

import re
from typing import Dict, Iterable, List, Mapping, Optional

from src.models import WarrantyInfo


SHIP_DATE_COLUMN = "Ship Date"
WARRANTY_EXPIRATION_COLUMN = "Warranty Expiration"
STORAGE_COLUMN = "Storage"

ENRICHMENT_COLUMNS = [SHIP_DATE_COLUMN, WARRANTY_EXPIRATION_COLUMN, STORAGE_COLUMN]

_WHITESPACE = re.compile(r"\s+")


def normalize_column(name: str) -> str:
    """Lowercase a column name and remove all whitespace."""
    return _WHITESPACE.sub("", str(name)).lower()


def canonical_columns(columns: Iterable[str]) -> List[str]:
    """Deduplicate columns by normalized name; the first occurrence wins."""
    seen = set()
    result = []
    for column in columns:
        key = normalize_column(column)
        if key in seen:
            continue
        seen.add(key)
        result.append(column)
    return result


def appended_columns(original_columns: Iterable[str]) -> List[str]:
    """Enrichment columns not already present among the original columns."""
    present = {normalize_column(c) for c in original_columns}
    return [c for c in ENRICHMENT_COLUMNS if normalize_column(c) not in present]


def find_column(columns: Iterable[str], name: str) -> Optional[str]:
    """Return the first column matching `name` after normalization."""
    key = normalize_column(name)
    for column in columns:
        if normalize_column(column) == key:
            return column
    return None


def merge_record(
    record: Mapping[str, str],
    original_columns: List[str],
    warranty: WarrantyInfo,
    storage: str
) -> Dict[str, str]:
    """
    Build an output record.

    Args:
        record: Input row
        original_columns: Canonical input columns, in order
        warranty: Derived warranty fields
        storage: Storage summary string

    Returns:
        New dict with the original columns in order followed by whichever
        enrichment columns are not already present
    """
    merged = {column: record.get(column, "") for column in original_columns}

    ship_date, expiration = warranty.formatted()
    values = {
        SHIP_DATE_COLUMN: ship_date,
        WARRANTY_EXPIRATION_COLUMN: expiration,
        STORAGE_COLUMN: storage,
    }
    for column in appended_columns(original_columns):
        merged[column] = values[column]

    return merged
