# SPDX-License-Identifier: Apache-2.0

"""Site schema declaration and validation."""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import SchemaValidationError

SLUG_PATTERN = "^[-a-zA-Z0-9_]{1,50}$"


@dataclass(frozen=True)
class Field:
    """Declaration of a single site attribute.

    Attributes:
        name: Attribute name
        required: Whether the attribute must be declared
        default: Value used when an optional attribute is absent
        pattern: Regular expression the value must match
        message: Error message used when the pattern does not match
    """

    name: str
    required: bool = False
    default: Optional[str] = None
    pattern: Optional[re.Pattern] = None
    message: str = ""

    def validate(self, value: Any) -> List[str]:
        """Check a declared value against this field.

        The pattern has to match the whole value, a trailing newline included.

        Args:
            value: Declared value of the attribute

        Returns:
            Error messages, empty if the value is valid
        """
        if not isinstance(value, str):
            return [f"{self.name}: expected a string, got {type(value).__name__}"]
        if self.pattern is not None and not self.pattern.fullmatch(value):
            return [f"{self.name}: {self.message}"]
        return []


SITE_SCHEMA: Dict[str, Field] = {
    "description": Field(name="description", default=""),
    "name": Field(name="name", required=True),
    "slug": Field(
        name="slug",
        required=True,
        pattern=re.compile(SLUG_PATTERN),
        message=f"Must be like {SLUG_PATTERN}",
    ),
}


@dataclass
class SiteRecord:
    """Declared site together with its stored identifier.

    ``id`` holds the decimal string form of the NetBox ID. An empty string
    means no remote site is known for this record.
    """

    name: str
    slug: str
    description: str = ""
    id: str = ""

    def fields(self) -> Dict[str, str]:
        """Return the declared attributes without the identifier."""
        return {
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
        }


def validate_site(data: Mapping[str, Any]) -> SiteRecord:
    """Validate declared site data against the site schema.

    Args:
        data: Mapping of attribute names to declared values

    Returns:
        SiteRecord populated from data, with defaults applied

    Raises:
        SchemaValidationError: If any attribute is missing, unknown or invalid
    """
    if not isinstance(data, Mapping):
        raise SchemaValidationError(
            [f"expected a mapping, got {type(data).__name__}"]
        )

    errors = []
    values = {}

    for key in sorted(set(data) - set(SITE_SCHEMA)):
        errors.append(f"{key}: unknown attribute")

    for name, schema_field in SITE_SCHEMA.items():
        if name not in data or data[name] is None:
            if schema_field.required:
                errors.append(f"{name}: required attribute is missing")
            else:
                values[name] = schema_field.default
            continue

        field_errors = schema_field.validate(data[name])
        if field_errors:
            errors.extend(field_errors)
        else:
            values[name] = data[name]

    if errors:
        declared_name = data.get("name")
        raise SchemaValidationError(
            errors, name=declared_name if isinstance(declared_name, str) else None
        )

    return SiteRecord(**values)
