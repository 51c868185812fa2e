"""
Vendor API Module
==================
Authentication and lookup calls against the vendor warranty API.
"""

from .auth import authenticate
from .client import VendorAPIClient

__all__ = ["authenticate", "VendorAPIClient"]
