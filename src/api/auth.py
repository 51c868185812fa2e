"""
Client Credentials Authentication
==================================
Exchanges the vendor client id/secret for a bearer token (OAuth 2.0 client
credentials grant). The token is returned to the caller and passed explicitly
to every lookup; nothing is cached at module level.
"""

import logging
import requests
from typing import Optional

from src.config import VendorAPIConfig
from src.errors import AuthError


logger = logging.getLogger(__name__)


def authenticate(api_config: VendorAPIConfig, session: Optional[requests.Session] = None) -> str:
    """
    Request a bearer token from the identity endpoint.

    Args:
        api_config: Vendor API settings holding the token URL and credentials
        session: Optional HTTP session (a fresh one is used if omitted)

    Returns:
        str: The access token

    Raises:
        AuthError: Credentials missing, endpoint unreachable, non-2xx response,
            unparsable body or no access_token in the response
    """
    if not api_config.has_credentials():
        raise AuthError("Vendor client credentials are not configured (VENDOR_CLIENT_ID / VENDOR_CLIENT_SECRET)")

    form = {
        "client_id": api_config.client_id,
        "client_secret": api_config.client_secret.get_secret_value(),
        "grant_type": api_config.grant_type,
    }

    http = session or requests.Session()
    logger.info(f"Requesting bearer token from {api_config.auth_url}")

    try:
        response = http.post(api_config.auth_url, data=form, timeout=api_config.request_timeout)
        response.raise_for_status()
        body = response.json()
    except requests.RequestException as e:
        raise AuthError(f"Token request failed: {e}") from e
    except ValueError as e:
        raise AuthError(f"Token response is not valid JSON: {e}") from e
    finally:
        if session is None:
            http.close()

    token = body.get("access_token") if isinstance(body, dict) else None
    if not token or not isinstance(token, str):
        raise AuthError("Token response did not contain an access_token")

    logger.info("Bearer token obtained")
    return token
