# SPDX-License-Identifier: Apache-2.0

"""Lifecycle operations for the NetBox site resource.

Every operation takes the declared ``SiteRecord`` and the ``SiteClient`` it
should talk to. The record's ``id`` is the only state carried between calls.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from loguru import logger

from .exceptions import InvalidIdentifierError
from .identifiers import format_identifier, parse_identifier
from .netbox_client import Found, SiteClient
from .schema import SITE_SCHEMA, Field, SiteRecord


def create(record: SiteRecord, client: SiteClient) -> None:
    """Create the site in NetBox and store its identifier on the record."""
    site = client.create_site(
        name=record.name, slug=record.slug, description=record.description
    )
    record.id = format_identifier(site.id)
    logger.info(f"Created site {record.slug} with ID {record.id}")

    read(record, client)


def read(record: SiteRecord, client: SiteClient) -> None:
    """Refresh the record from NetBox.

    Clears ``record.id`` when NetBox has no matching site.
    """
    result = client.lookup_site(record.id)

    if isinstance(result, Found):
        record.description = result.site.description
        record.name = result.site.name or ""
        record.slug = result.site.slug or ""
        logger.debug(f"Read site {record.slug} (ID {record.id})")
        return

    if record.id:
        logger.warning(f"Site with ID {record.id} no longer exists in NetBox")
    record.id = ""


def update(record: SiteRecord, client: SiteClient) -> None:
    """Overwrite name, slug and description of the site in NetBox."""
    site_id = parse_identifier(record.id)

    client.partial_update_site(
        site_id,
        name=record.name,
        slug=record.slug,
        description=record.description,
    )
    logger.info(f"Updated site {record.slug} (ID {record.id})")

    read(record, client)


def delete(record: SiteRecord, client: SiteClient) -> None:
    """Delete the site from NetBox, doing nothing if it is already gone."""
    if not exists(record, client):
        logger.debug(f"Site with ID {record.id!r} already absent, nothing to delete")
        return

    try:
        site_id = parse_identifier(record.id)
    except InvalidIdentifierError as e:
        raise InvalidIdentifierError("Unable to convert ID into int64") from e

    client.delete_site(site_id)
    logger.info(f"Deleted site {record.slug} (ID {record.id})")


def exists(record: SiteRecord, client: SiteClient) -> bool:
    """Return whether NetBox has a site matching the record's identifier."""
    return isinstance(client.lookup_site(record.id), Found)


@dataclass(frozen=True)
class Resource:
    """Schema and lifecycle hooks of a resource type."""

    schema: Dict[str, Field]
    create: Callable[[SiteRecord, SiteClient], None]
    read: Callable[[SiteRecord, SiteClient], None]
    update: Callable[[SiteRecord, SiteClient], None]
    delete: Callable[[SiteRecord, SiteClient], None]
    exists: Callable[[SiteRecord, SiteClient], bool]


SITE_RESOURCE = Resource(
    schema=SITE_SCHEMA,
    create=create,
    read=read,
    update=update,
    delete=delete,
    exists=exists,
)
