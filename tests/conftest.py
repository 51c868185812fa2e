"""
Shared test doubles.

FakeSession stands in for requests.Session: it serves canned responses per
URL and records every call so tests can assert on parameters and headers.
"""

import json
import pytest
import requests

from src.config import EnricherConfig, VendorAPIConfig
from pydantic import SecretStr


AUTH_URL = "https://vendor.test/oauth/token"
ENTITLEMENT_URL = "https://vendor.test/asset-entitlements"
COMPONENT_URL = "https://vendor.test/asset-components"


class FakeResponse:
    """Minimal requests.Response replacement."""

    def __init__(self, status_code=200, json_data=None, text=None):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text if text is not None else json.dumps(json_data)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._json_data is None:
            raise ValueError("No JSON object could be decoded")
        return self._json_data


class FakeSession:
    """
    Routes requests to handlers keyed by URL.

    A handler is either a FakeResponse, an exception instance (raised), or a
    callable taking the request kwargs and returning one of those.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def _dispatch(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        handler = self.routes.get(url)
        if handler is None:
            raise requests.ConnectionError(f"No route for {url}")
        if callable(handler) and not isinstance(handler, FakeResponse):
            handler = handler(**kwargs)
        if isinstance(handler, Exception):
            raise handler
        return handler

    def post(self, url, **kwargs):
        return self._dispatch("POST", url, **kwargs)

    def get(self, url, **kwargs):
        return self._dispatch("GET", url, **kwargs)

    def close(self):
        self.closed = True

    def calls_to(self, url):
        return [c for c in self.calls if c["url"] == url]


def token_response(token="test-token"):
    return FakeResponse(200, {"access_token": token, "token_type": "Bearer", "expires_in": 3600})


def by_service_tag(responses, param):
    """Build a handler that picks a response by the service tag query parameter."""
    def handler(**kwargs):
        tag = kwargs["params"][param]
        return responses.get(tag, FakeResponse(404, {"error": "not found"}))
    return handler


@pytest.fixture
def api_config():
    return VendorAPIConfig(
        auth_url=AUTH_URL,
        entitlement_url=ENTITLEMENT_URL,
        component_url=COMPONENT_URL,
        client_id="client-id",
        client_secret=SecretStr("client-secret"),
        request_timeout=5,
    )


@pytest.fixture
def make_config(tmp_path, api_config):
    def factory(**overrides):
        values = {
            "input_path": tmp_path / "devices.csv",
            "output_path": tmp_path / "out" / "devices_enriched.csv",
            "api": api_config,
        }
        values.update(overrides)
        return EnricherConfig(**values)
    return factory
