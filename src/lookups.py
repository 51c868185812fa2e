"""
Per-Record Lookups

getWarranty / getStorage for one service tag. Failures never raise: they come
back as a LookupOutcome carrying an empty sentinel value and the cause, and
the caller decides how to report them.
"""

from src.api.client import VendorAPIClient
from src.compute.storage import summarize_component_response
from src.compute.warranty import derive_warranty
from src.errors import VendorLookupError
from src.models import LookupOutcome, WarrantyInfo


# Errors that degrade a record instead of aborting the run. ValueError and
# OverflowError come from date parsing of malformed payloads.
RECOVERABLE_ERRORS = (VendorLookupError, ValueError, OverflowError)


def get_warranty(service_tag: str, token: str, client: VendorAPIClient) -> LookupOutcome[WarrantyInfo]:
    """Fetch entitlements for a service tag and derive ship date / expiration."""
    try:
        payload = client.get_entitlements(service_tag, token)
        return LookupOutcome(service_tag=service_tag, value=derive_warranty(payload))
    except RECOVERABLE_ERRORS as e:
        return LookupOutcome(service_tag=service_tag, value=WarrantyInfo(), error=e)


def get_storage(service_tag: str, token: str, client: VendorAPIClient) -> LookupOutcome[str]:
    """Fetch components for a service tag and summarize its storage."""
    try:
        payload = client.get_components(service_tag, token)
        return LookupOutcome(service_tag=service_tag, value=summarize_component_response(payload))
    except RECOVERABLE_ERRORS as e:
        return LookupOutcome(service_tag=service_tag, value="", error=e)
