# SPDX-License-Identifier: Apache-2.0

"""Custom exceptions for NetBox site operations."""

from typing import List, Optional


class NetBoxException(Exception):
    """Base exception for NetBox site errors."""

    pass


class NetBoxConnectionError(NetBoxException):
    """Raised when connection to NetBox fails."""

    pass


class NetBoxAPIError(NetBoxException):
    """Raised when NetBox API returns an error."""

    pass


class InvalidIdentifierError(NetBoxException, ValueError):
    """Raised when a stored site identifier is not a valid int64."""

    pass


class SchemaValidationError(NetBoxException, ValueError):
    """Raised when a declared site does not match the site schema."""

    def __init__(self, errors: List[str], name: Optional[str] = None):
        self.errors = list(errors)
        self.name = name
        prefix = f"Invalid site '{name}'" if name else "Invalid site"
        super().__init__(f"{prefix}: {'; '.join(self.errors)}")
