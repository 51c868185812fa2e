"""
Vendor API Client
==================
Thin wrapper over the entitlement and component endpoints.

Every call takes the bearer token as an argument. Transport failures, non-2xx
responses and non-JSON bodies are raised as VendorLookupError so the caller
can degrade the affected record instead of aborting the run.
"""

import logging
import requests
from typing import Any, Dict, Optional

from src.config import VendorAPIConfig
from src.errors import VendorLookupError


logger = logging.getLogger(__name__)


class VendorAPIClient:
    """HTTP client for warranty entitlement and component lookups."""

    def __init__(self, api_config: VendorAPIConfig, session: Optional[requests.Session] = None):
        """
        Initialize API client.

        Args:
            api_config: Endpoint URLs and request timeout
            session: Optional HTTP session; the client closes only sessions it created
        """
        self.api_config = api_config
        self._owns_session = session is None
        self.session = session or requests.Session()

    def __enter__(self) -> "VendorAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, url: str, params: Dict[str, str], token: str, service_tag: str) -> Any:
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        logger.debug(f"GET {url} params={params}")

        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.api_config.request_timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise VendorLookupError(f"Request to {url} for {service_tag} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise VendorLookupError(f"Response from {url} for {service_tag} is not valid JSON: {e}") from e

    def get_entitlements(self, service_tag: str, token: str) -> Any:
        """
        Fetch warranty entitlements for a service tag.

        Example:
            GET /asset-entitlements?servicetags={service_tag}
            Headers: Authorization: Bearer {token}

        Returns:
            The decoded JSON body, normally a list of asset records
        """
        return self._get(self.api_config.entitlement_url, {"servicetags": service_tag}, token, service_tag)

    def get_components(self, service_tag: str, token: str) -> Any:
        """
        Fetch the hardware component list for a service tag.

        Example:
            GET /asset-components?servicetag={service_tag}
            Headers: Authorization: Bearer {token}

        Returns:
            The decoded JSON body, normally an object with a "components" list
        """
        return self._get(self.api_config.component_url, {"servicetag": service_tag}, token, service_tag)

    def close(self) -> None:
        """Close HTTP session."""
        if self._owns_session:
            self.session.close()
