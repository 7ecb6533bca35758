# SPDX-License-Identifier: Apache-2.0

"""File-based persistence for stored site identifiers."""

import json
from pathlib import Path
from typing import Dict, List

from loguru import logger


class StateFile:
    """Maps declared site keys to the identifiers of their NetBox sites."""

    def __init__(self, state_file: Path):
        """Initialize the state file.

        Args:
            state_file: Path to the JSON state file
        """
        self.state_file = Path(state_file)
        self._state: Dict[str, str] = {}

    def load(self) -> Dict[str, str]:
        """Load identifiers from the state file.

        Returns:
            Loaded identifiers, empty if the file doesn't exist

        Raises:
            ValueError: If the state file is not a JSON object of strings
        """
        if not self.state_file.exists():
            logger.debug(f"State file {self.state_file} does not exist")
            self._state = {}
            return self._state

        with open(self.state_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict) or not all(
            isinstance(key, str) and isinstance(value, str)
            for key, value in data.items()
        ):
            raise ValueError(
                f"State file {self.state_file} must map site keys to identifiers"
            )

        self._state = data
        logger.info(
            f"Loaded state from {self.state_file} with {len(self._state)} sites"
        )
        return self._state

    def save(self) -> None:
        """Write identifiers to the state file."""
        self.state_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.state_file, "w", encoding="utf-8") as f:
            json.dump(self._state, f, indent=2, sort_keys=True)
        logger.debug(f"Saved state to {self.state_file} with {len(self._state)} sites")

    def get(self, key: str) -> str:
        """Get the stored identifier for a site key, empty if unknown."""
        return self._state.get(key, "")

    def set(self, key: str, identifier: str) -> None:
        """Store an identifier for a site key.

        An empty identifier removes the key.
        """
        if identifier:
            self._state[key] = identifier
        else:
            self._state.pop(key, None)

    def keys(self) -> List[str]:
        return sorted(self._state)
