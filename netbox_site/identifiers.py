# SPDX-License-Identifier: Apache-2.0

"""Conversions between stored site identifiers and NetBox IDs.

The state layer stores identifiers as strings while NetBox addresses sites
by a 64-bit integer. Every crossing between the two goes through
``format_identifier`` or ``parse_identifier``.
"""

import re

from .exceptions import InvalidIdentifierError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def format_identifier(value: int) -> str:
    """Format a NetBox ID as a stored identifier.

    Args:
        value: NetBox object ID

    Returns:
        Decimal string form of the ID
    """
    return str(int(value))


def parse_identifier(value: str) -> int:
    """Parse a stored identifier into a NetBox ID.

    Args:
        value: Stored identifier

    Returns:
        The identifier as an integer

    Raises:
        InvalidIdentifierError: If value is not a decimal int64
    """
    if not isinstance(value, str) or not _DECIMAL_RE.fullmatch(value):
        raise InvalidIdentifierError(f"invalid site identifier {value!r}")

    parsed = int(value)
    if not INT64_MIN <= parsed <= INT64_MAX:
        raise InvalidIdentifierError(f"site identifier {value!r} is out of range")
    return parsed
