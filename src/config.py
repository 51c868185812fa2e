"""
Configuration Management for the Warranty Enricher
===================================================
Centralized configuration for file paths, table layout and the vendor API.

Values are layered: explicit overrides (CLI) > environment variables >
TOML file (config/enricher.toml) > defaults.
"""

import os
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from src.errors import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/enricher.toml")

# Environment variable -> (section, key)
ENV_MAPPING = {
    "ENRICH_INPUT_PATH": (None, "input_path"),
    "ENRICH_OUTPUT_PATH": (None, "output_path"),
    "ENRICH_IDENTIFIER_COLUMN": (None, "identifier_column"),
    "ENRICH_DELIMITER": (None, "delimiter"),
    "LOG_LEVEL": (None, "log_level"),
    "VENDOR_CLIENT_ID": ("api", "client_id"),
    "VENDOR_CLIENT_SECRET": ("api", "client_secret"),
    "VENDOR_AUTH_URL": ("api", "auth_url"),
    "VENDOR_ENTITLEMENT_URL": ("api", "entitlement_url"),
    "VENDOR_COMPONENT_URL": ("api", "component_url"),
    "VENDOR_REQUEST_TIMEOUT": ("api", "request_timeout"),
}


class VendorAPIConfig(BaseModel):
    """Vendor (Dell TechDirect) API endpoints and client credentials."""

    auth_url: str = Field(
        default="https://apigtwb2c.us.dell.com/auth/oauth/v2/token",
        description="OAuth2 token endpoint (client credentials grant)"
    )
    entitlement_url: str = Field(
        default="https://apigtwb2c.us.dell.com/PROD/sbil/eapi/v5/asset-entitlements",
        description="Warranty entitlement endpoint, queried with ?servicetags="
    )
    component_url: str = Field(
        default="https://apigtwb2c.us.dell.com/PROD/sbil/eapi/v5/asset-components",
        description="Component inventory endpoint, queried with ?servicetag="
    )

    client_id: Optional[str] = Field(default=None, description="API client identifier")
    client_secret: Optional[SecretStr] = Field(default=None, description="API client secret")
    grant_type: str = "client_credentials"

    request_timeout: Optional[float] = Field(
        default=60.0,
        description="Per-request timeout in seconds; None or 0 uses the transport default"
    )

    @field_validator("request_timeout")
    @classmethod
    def _zero_means_default(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            return None
        return value

    def has_credentials(self) -> bool:
        """Check that both halves of the client credentials are present."""
        secret = self.client_secret.get_secret_value() if self.client_secret else ""
        return bool(self.client_id) and bool(secret)


class EnricherConfig(BaseModel):
    """Main configuration for the warranty enricher."""

    input_path: Path = Field(default=Path("devices.csv"), description="Input table path")
    output_path: Path = Field(default=Path("devices_enriched.csv"), description="Output table path")
    identifier_column: str = Field(
        default="Serial Number",
        description="Column holding the service tag used as lookup key"
    )
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    log_level: str = "INFO"

    api: VendorAPIConfig = Field(default_factory=VendorAPIConfig)

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_toml(config_path: Path) -> Dict[str, Any]:
    """Load the TOML config file, returning an empty dict if it does not exist."""
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        logger.warning(f"Config file not found at {config_path}, using defaults")
        return {}
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e


def _env_values() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for env_name, (section, key) in ENV_MAPPING.items():
        raw = os.environ.get(env_name)
        if raw is None or raw == "":
            continue
        target = values.setdefault(section, {}) if section else values
        target[key] = raw
    return values


def _merge(base: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in extra.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Path] = None, **overrides: Any) -> EnricherConfig:
    """
    Build the run configuration.

    Args:
        config_path: TOML file; defaults to $ENRICH_CONFIG or config/enricher.toml
        **overrides: Top-level values that win over every other source
            (None values are ignored)

    Returns:
        EnricherConfig

    Raises:
        ConfigError: If the file or the merged values are invalid
    """
    load_dotenv(find_dotenv(usecwd=True))

    if config_path is None:
        config_path = Path(os.environ.get("ENRICH_CONFIG") or DEFAULT_CONFIG_PATH)

    file_values = load_toml(Path(config_path))
    # [enricher] holds the top-level keys, [api] the vendor settings
    values = dict(file_values.get("enricher", {}))
    if "api" in file_values:
        values["api"] = dict(file_values["api"])

    values = _merge(values, _env_values())
    values = _merge(values, {k: v for k, v in overrides.items() if v is not None})

    try:
        return EnricherConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
