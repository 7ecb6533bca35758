# SPDX-License-Identifier: Apache-2.0

"""Plan and apply declared sites against NetBox."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger
import yaml

from .exceptions import SchemaValidationError
from .netbox_client import SiteClient
from .schema import SiteRecord, validate_site
from .site_resource import SITE_RESOURCE
from .state import StateFile

CREATE = "create"
UPDATE = "update"
DELETE = "delete"
NOOP = "noop"


@dataclass
class Change:
    """Planned action for a single site.

    Attributes:
        action: One of create, update, delete or noop
        key: Site key in the state file (the declared slug)
        record: Record the action is applied with
        observed: Site as read from NetBox, if it exists
    """

    action: str
    key: str
    record: SiteRecord
    observed: Optional[SiteRecord] = None

    def __str__(self) -> str:
        if self.action == UPDATE and self.observed is not None:
            changed = [
                name
                for name, value in self.record.fields().items()
                if self.observed.fields()[name] != value
            ]
            return f"{self.action} {self.key} ({', '.join(changed)})"
        return f"{self.action} {self.key}"


def load_declarations(path: Path) -> Dict[str, SiteRecord]:
    """Load and validate declared sites from a YAML file.

    The file contains a top-level ``sites`` list, each item declaring
    ``name``, ``slug`` and optionally ``description``.

    Args:
        path: Path to the YAML file

    Returns:
        Declared sites keyed by slug

    Raises:
        SchemaValidationError: If a site is invalid or a slug is declared twice
    """
    with open(path, "rb") as fp:
        document = yaml.safe_load(fp) or {}

    if not isinstance(document, dict) or not isinstance(
        document.get("sites", []), list
    ):
        raise SchemaValidationError([f"{path}: expected a 'sites' list"])

    declared: Dict[str, SiteRecord] = {}
    for item in document.get("sites") or []:
        record = validate_site(item)
        if record.slug in declared:
            raise SchemaValidationError(
                [f"slug: '{record.slug}' is declared more than once"],
                name=record.name,
            )
        declared[record.slug] = record

    logger.info(f"Loaded {len(declared)} declared sites from {path}")
    return declared


class Reconciler:
    """Drives the site resource from declared sites and stored identifiers."""

    def __init__(self, client: SiteClient, state: StateFile):
        self.client = client
        self.state = state

    def plan(self, declared: Dict[str, SiteRecord]) -> List[Change]:
        """Compare declared sites with NetBox.

        Deletes are planned first, so a site whose slug was renamed frees its
        name before the replacement is created.

        Args:
            declared: Declared sites keyed by slug

        Returns:
            Changes needed to make NetBox match the declaration
        """
        changes = []

        for key in self.state.keys():
            if key not in declared:
                record = SiteRecord(name="", slug=key, id=self.state.get(key))
                changes.append(Change(DELETE, key, record))

        for key, desired in declared.items():
            observed = SiteRecord(name="", slug="", id=self.state.get(key))
            if observed.id:
                SITE_RESOURCE.read(observed, self.client)

            if not observed.id:
                changes.append(Change(CREATE, key, replace(desired, id="")))
            elif observed.fields() != desired.fields():
                changes.append(
                    Change(UPDATE, key, replace(desired, id=observed.id), observed)
                )
            else:
                changes.append(Change(NOOP, key, observed, observed))

        return changes

    def apply(self, changes: List[Change]) -> None:
        """Apply planned changes, persisting identifiers after each one.

        The identifier of a change is persisted even when the change fails
        after NetBox assigned it, e.g. when reading back a created site fails.

        Args:
            changes: Changes returned by ``plan``
        """
        operations = {
            CREATE: SITE_RESOURCE.create,
            UPDATE: SITE_RESOURCE.update,
            DELETE: SITE_RESOURCE.delete,
        }

        for change in changes:
            if change.action == NOOP:
                continue
            if change.action not in operations:
                raise ValueError(f"Unknown action '{change.action}'")

            logger.info(f"Applying {change}")
            try:
                operations[change.action](change.record, self.client)
                if change.action == DELETE:
                    change.record.id = ""
            finally:
                self._persist(change)

    def _persist(self, change: Change) -> None:
        # An empty identifier only removes the key once a delete went through
        if change.record.id or change.action == DELETE:
            self.state.set(change.key, change.record.id)
        self.state.save()
