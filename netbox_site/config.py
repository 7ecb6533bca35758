# SPDX-License-Identifier: Apache-2.0

"""Configuration management for NetBox site reconciliation."""

from dataclasses import dataclass, field
from pathlib import Path

from dynaconf import Dynaconf

# Default configuration values
DEFAULT_SITES_FILE = "/netbox/sites.yml"
DEFAULT_STATE_FILE = "/netbox/sites.state.json"

# Initialize settings once at module level
SETTINGS = Dynaconf(
    envvar_prefix=False,  # No prefix, use exact environment variable names
    environments=False,  # Disable environments feature
    load_dotenv=False,  # Don't load .env files
)


@dataclass
class Config:
    """Configuration settings for NetBox site reconciliation.

    Attributes:
        netbox_url: NetBox API URL
        netbox_token: Authentication token for NetBox API
        ignore_ssl_errors: Whether to ignore SSL certificate errors
        sites_file: Path to the YAML file declaring the desired sites
        state_file: Path to the JSON file holding stored site identifiers
        dry_run: Only log the planned changes without applying them
    """

    netbox_url: str
    netbox_token: str
    ignore_ssl_errors: bool = True
    sites_file: Path = field(default_factory=lambda: Path(DEFAULT_SITES_FILE))
    state_file: Path = field(default_factory=lambda: Path(DEFAULT_STATE_FILE))
    dry_run: bool = False

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables using dynaconf.

        Returns:
            Config: Configuration instance populated from environment variables

        Raises:
            ValueError: If required environment variables are missing
        """
        netbox_url = SETTINGS.get("NETBOX_API")
        if not netbox_url:
            raise ValueError("NETBOX_API environment variable is required")

        netbox_token = SETTINGS.get("NETBOX_TOKEN", cls._read_secret("NETBOX_TOKEN"))
        if not netbox_token:
            raise ValueError("NETBOX_TOKEN not found in environment or secrets")

        return cls(
            netbox_url=netbox_url,
            netbox_token=netbox_token,
            ignore_ssl_errors=SETTINGS.get("IGNORE_SSL_ERRORS", True),
            sites_file=Path(SETTINGS.get("SITES_FILE", DEFAULT_SITES_FILE)),
            state_file=Path(SETTINGS.get("STATE_FILE", DEFAULT_STATE_FILE)),
            dry_run=SETTINGS.get("DRY_RUN", False),
        )

    @staticmethod
    def _read_secret(secret_name: str) -> str:
        """Read secret from file system.

        Args:
            secret_name: Name of the secret to read

        Returns:
            str: Secret value or empty string if not found
        """
        secret_path = Path(f"/run/secrets/{secret_name}")
        try:
            return secret_path.read_text(encoding="utf-8").strip()
        except (EnvironmentError, FileNotFoundError):
            return ""
