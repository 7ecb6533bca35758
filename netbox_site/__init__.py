# SPDX-License-Identifier: Apache-2.0

"""Reconcile NetBox sites against a declared desired state."""

from .netbox_client import Found, NotFound, RemoteSite, SiteClient
from .schema import SiteRecord, validate_site
from .site_resource import SITE_RESOURCE, create, delete, exists, read, update

__all__ = [
    "Found",
    "NotFound",
    "RemoteSite",
    "SiteClient",
    "SiteRecord",
    "validate_site",
    "SITE_RESOURCE",
    "create",
    "read",
    "update",
    "delete",
    "exists",
]
