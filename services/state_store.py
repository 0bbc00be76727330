"""
JSON persistence for printer configuration.

Stores the administrator-editable state of the printer (identity, driver
defaults and ready media) in a single JSON file so changes survive a
restart. Job history is not persisted.
"""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from core.exceptions import StateStoreError
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)


class StateStore:
    """
    Read/write the printer state file.

    Writes go to a temporary file that is then renamed over the target, so
    a crash mid-write never leaves a truncated state file behind.
    """

    def __init__(self, path: str):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[Dict[str, Any]]:
        """
        Load the saved state.

        Returns:
            Saved state dictionary, or None if no state file exists yet

        Raises:
            StateStoreError: If the file exists but cannot be read or parsed
        """
        with self._lock:
            if not self._path.exists():
                return None
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise StateStoreError(str(self._path), str(e)) from e

        logger.info(f"Loaded printer state from {self._path}")
        return data

    def save(self, data: Dict[str, Any]) -> None:
        """
        Save state atomically.

        Raises:
            StateStoreError: If the file cannot be written
        """
        with self._lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                temp_path = self._path.with_suffix(self._path.suffix + ".tmp")
                with open(temp_path, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                os.replace(temp_path, self._path)
            except OSError as e:
                raise StateStoreError(str(self._path), str(e)) from e

        logger.debug(f"Saved printer state to {self._path}")
