"""
Warranty Derivation

Turns an entitlement response into ship date and warranty expiration.
Pure and deterministic: same payload -> same WarrantyInfo.
"""

from datetime import date
from dateutil.parser import isoparse
from typing import Any, List, Optional

from src.models import WarrantyInfo


def parse_api_date(value: Any) -> Optional[date]:
    """
    Parse an API timestamp such as "2020-01-15T06:00:00Z" to a calendar date.

    Blank or missing values give None; anything else unparsable raises
    ValueError (or OverflowError for out-of-range years).
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Unexpected date value: {value!r}")
    value = value.strip()
    if not value:
        return None
    return isoparse(value).date()


def entitlement_end_dates(asset: dict) -> List[date]:
    """Collect every parsable entitlement endDate under an asset, in ascending order."""
    entitlements = asset.get("entitlements") or []
    if not isinstance(entitlements, list):
        return []

    end_dates = []
    for entitlement in entitlements:
        if not isinstance(entitlement, dict):
            continue
        end_date = parse_api_date(entitlement.get("endDate"))
        if end_date is not None:
            end_dates.append(end_date)
    return sorted(end_dates)


def derive_warranty(payload: Any) -> WarrantyInfo:
    """
    Derive warranty fields from an entitlement response.

    Args:
        payload: Decoded entitlement response (a list of asset records)

    Returns:
        WarrantyInfo with the first asset's ship date and the latest
        entitlement end date. Empty or malformed payloads give an empty
        WarrantyInfo.
    """
    if not isinstance(payload, list) or not payload:
        return WarrantyInfo()

    asset = payload[0]
    if not isinstance(asset, dict):
        return WarrantyInfo()

    end_dates = entitlement_end_dates(asset)

    return WarrantyInfo(
        ship_date=parse_api_date(asset.get("shipDate")),
        warranty_expiration=end_dates[-1] if end_dates else None,
    )
