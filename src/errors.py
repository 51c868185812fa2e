"""
Error Taxonomy

Exceptions raised across the enrichment run. Only AuthError, ConfigError and
InputTableError stop a run; VendorLookupError is recovered per record.
"""


class EnricherError(Exception):
    """Base class for all enricher errors."""
    pass


class ConfigError(EnricherError):
    """Raised when the configuration file or values are invalid."""
    pass


class AuthError(EnricherError):
    """Raised when a bearer token cannot be obtained from the identity endpoint."""
    pass


class InputTableError(EnricherError):
    """Raised when the input table cannot be read."""
    pass


class VendorLookupError(EnricherError):
    """Raised when an entitlement or component request fails for a service tag."""
    pass
