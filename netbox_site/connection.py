# SPDX-License-Identifier: Apache-2.0

"""NetBox API connection management."""

from typing import Optional

from loguru import logger
import pynetbox
import requests

from .config import Config
from .exceptions import NetBoxConnectionError


class ConnectionManager:
    """Manages the NetBox API connection and its HTTP session."""

    def __init__(self, config: Config):
        self.config = config
        self.api: Optional[pynetbox.api] = None
        self._session: Optional[requests.Session] = None

    def _configure_session(self) -> requests.Session:
        """Configure the requests session used by pynetbox.

        Returns:
            requests.Session: Session honouring the SSL settings
        """
        session = requests.Session()

        if self.config.ignore_ssl_errors:
            requests.packages.urllib3.disable_warnings()
            session.verify = False
            logger.debug("SSL certificate verification disabled")

        return session

    def connect(self) -> pynetbox.api:
        """Establish connection to NetBox.

        Returns:
            pynetbox.api: Connected NetBox API instance

        Raises:
            NetBoxConnectionError: If NetBox cannot be reached
        """
        logger.info(f"Connecting to NetBox {self.config.netbox_url}")

        try:
            self._session = self._configure_session()

            self.api = pynetbox.api(self.config.netbox_url, self.config.netbox_token)
            self.api.http_session = self._session

            # Test connection
            self.api.dcim.sites.count()
        except Exception as e:
            self.disconnect()
            raise NetBoxConnectionError(
                f"Failed to connect to NetBox {self.config.netbox_url}: {e}"
            ) from e

        logger.debug("Successfully connected to NetBox")
        return self.api

    def disconnect(self) -> None:
        """Close connection and cleanup resources."""
        if self._session:
            self._session.close()
            self._session = None
        self.api = None
