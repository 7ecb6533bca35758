# SPDX-License-Identifier: Apache-2.0

"""NetBox client for dcim site operations."""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from loguru import logger

from .config import Config
from .connection import ConnectionManager
from .exceptions import NetBoxAPIError
from .identifiers import format_identifier


@dataclass(frozen=True)
class RemoteSite:
    """Site as stored in NetBox."""

    id: int
    name: Optional[str]
    slug: Optional[str]
    description: str = ""

    @classmethod
    def from_record(cls, record: Any) -> "RemoteSite":
        """Build a RemoteSite from a pynetbox record.

        Args:
            record: pynetbox Record of a dcim site

        Returns:
            RemoteSite carrying the record's ID and attributes
        """
        return cls(
            id=int(record.id),
            name=getattr(record, "name", None),
            slug=getattr(record, "slug", None),
            description=getattr(record, "description", None) or "",
        )


@dataclass(frozen=True)
class Found:
    """Lookup result for a site present in NetBox."""

    site: RemoteSite


@dataclass(frozen=True)
class NotFound:
    """Lookup result for a site absent from NetBox."""


LookupResult = Union[Found, NotFound]


class SiteClient:
    """Client for NetBox dcim site operations."""

    def __init__(self, api: Any, connection_manager: Optional[ConnectionManager] = None):
        self.api = api
        self._connection_manager = connection_manager

    @classmethod
    def connect(cls, config: Config) -> "SiteClient":
        """Connect to NetBox and return a client bound to the connection.

        Args:
            config: Configuration with NetBox URL and token

        Returns:
            SiteClient using the established connection

        Raises:
            NetBoxConnectionError: If NetBox cannot be reached
        """
        connection_manager = ConnectionManager(config)
        api = connection_manager.connect()
        return cls(api, connection_manager=connection_manager)

    def close(self) -> None:
        """Close the underlying connection if this client owns one."""
        if self._connection_manager:
            self._connection_manager.disconnect()
        self.api = None

    def __enter__(self) -> "SiteClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @contextmanager
    def api_operation(self, operation_name: str):
        """Context manager for API operations with error handling.

        Args:
            operation_name: Name of the operation for logging

        Yields:
            None

        Raises:
            NetBoxAPIError: If API operation fails
        """
        if self.api is None:
            raise NetBoxAPIError("Not connected to NetBox")

        try:
            logger.debug(f"Starting {operation_name}")
            yield
            logger.debug(f"Completed {operation_name}")
        except NetBoxAPIError:
            raise
        except Exception as e:
            logger.error(f"Failed {operation_name}: {e}")
            raise NetBoxAPIError(f"Failed {operation_name}: {e}") from e

    def list_sites(self, site_id: str) -> List[RemoteSite]:
        """List sites filtered by ID.

        Args:
            site_id: Stored identifier used as the ``id`` filter

        Returns:
            Sites returned by NetBox for the filter
        """
        with self.api_operation(f"list_sites id={site_id}"):
            records = self.api.dcim.sites.filter(id=site_id)
            return [RemoteSite.from_record(record) for record in records]

    def lookup_site(self, site_id: str) -> LookupResult:
        """Look up a single site by its stored identifier.

        NetBox is queried with a list filter and the response is scanned for
        an entry whose ID matches ``site_id`` exactly.

        Args:
            site_id: Stored identifier, empty when no site is known

        Returns:
            Found with the matching site, or NotFound
        """
        if not site_id:
            return NotFound()

        for site in self.list_sites(site_id):
            if format_identifier(site.id) == site_id:
                return Found(site)

        return NotFound()

    def create_site(self, name: str, slug: str, description: str) -> RemoteSite:
        """Create a site.

        Returns:
            The created site including its assigned ID
        """
        with self.api_operation(f"create_site {slug}"):
            record = self.api.dcim.sites.create(
                name=name, slug=slug, description=description
            )
            return RemoteSite.from_record(record)

    def partial_update_site(
        self, site_id: int, name: str, slug: str, description: str
    ) -> RemoteSite:
        """Overwrite name, slug and description of a site with a PATCH.

        Args:
            site_id: NetBox ID of the site
            name: New site name
            slug: New site slug
            description: New site description

        Returns:
            The updated site
        """
        with self.api_operation(f"partial_update_site {site_id}"):
            records = self.api.dcim.sites.update(
                [
                    {
                        "id": site_id,
                        "name": name,
                        "slug": slug,
                        "description": description,
                    }
                ]
            )
            return RemoteSite.from_record(records[0])

    def delete_site(self, site_id: int) -> None:
        """Delete a site by NetBox ID."""
        with self.api_operation(f"delete_site {site_id}"):
            if not self.api.dcim.sites.delete([site_id]):
                raise NetBoxAPIError(f"NetBox refused to delete site {site_id}")
