"""Compute Package - Deterministic derivations over vendor API responses."""

from .columns import appended_columns, canonical_columns, find_column, merge_record, normalize_column
from .storage import summarize_component_response, summarize_storage
from .warranty import derive_warranty

__all__ = [
    "appended_columns",
    "canonical_columns",
    "derive_warranty",
    "find_column",
    "merge_record",
    "normalize_column",
    "summarize_component_response",
    "summarize_storage",
]
