"""
Storage Summary Extraction

Heuristic text mining over component descriptions. Capacity and drive type
are extracted by two independent passes over the same text, so they may come
from different parts of it. Pattern order matters: the first capacity pattern
that matches wins.
"""

import re
from typing import Any, Iterable, List, Optional, Tuple


STORAGE_KEYWORDS = re.compile(r"SSD|HDD|Solid State Drive|SSDR", re.IGNORECASE)

# (pattern, unit) in priority order
CAPACITY_PATTERNS = [
    (re.compile(r"(\d+)\s*GB", re.IGNORECASE), "GB"),
    (re.compile(r"(\d+)\s*TB", re.IGNORECASE), "TB"),
    (re.compile(r"(\d+)\s*G\b", re.IGNORECASE), "GB"),
    (re.compile(r"(\d+)\s*T\b", re.IGNORECASE), "TB"),
]

# (pattern, drive type) in priority order
DRIVE_TYPE_PATTERNS = [
    (re.compile(r"SSD|Solid State Drive|SSDR", re.IGNORECASE), "SSD"),
    (re.compile(r"HDD|Hard Drive|HD", re.IGNORECASE), "HDD"),
]


def _field(component: Any, name: str) -> str:
    if not isinstance(component, dict):
        return ""
    value = component.get(name)
    return value if isinstance(value, str) else ""


def component_text(component: Any) -> str:
    """Concatenate itemDescription and partDescription, trimmed."""
    return f"{_field(component, 'itemDescription')} {_field(component, 'partDescription')}".strip()


def is_storage_component(component: Any) -> bool:
    """Check whether either description field mentions a drive."""
    return any(
        STORAGE_KEYWORDS.search(_field(component, name))
        for name in ("itemDescription", "partDescription")
    )


def extract_capacity(text: str) -> Optional[Tuple[str, str]]:
    """Return (number, unit) from the first capacity pattern that matches."""
    for pattern, unit in CAPACITY_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1), unit
    return None


def classify_drive_type(text: str) -> Optional[str]:
    """Return "SSD", "HDD" or None."""
    for pattern, drive_type in DRIVE_TYPE_PATTERNS:
        if pattern.search(text):
            return drive_type
    return None


def storage_components(components: Iterable[Any]) -> List[Any]:
    """Filter a component list down to storage-like entries, keeping order."""
    return [c for c in components if is_storage_component(c)]


def summarize_storage(components: Any) -> str:
    """
    Summarize the storage of a device from its component list.

    Returns:
        "<number> <unit> <type>" for the first storage component where both
        capacity and type are found; otherwise the raw descriptions of the
        first storage component; otherwise "".
    """
    if not isinstance(components, list):
        return ""

    candidates = storage_components(components)
    if not candidates:
        return ""

    for component in candidates:
        text = component_text(component)
        capacity = extract_capacity(text)
        drive_type = classify_drive_type(text)
        if capacity and drive_type:
            number, unit = capacity
            return f"{number} {unit} {drive_type}"

    # No full match: raw descriptions of the first storage component
    return component_text(candidates[0])


def summarize_component_response(payload: Any) -> str:
    """Summarize storage from a component endpoint response body."""
    if not isinstance(payload, dict):
        return ""
    return summarize_storage(payload.get("components") or [])
