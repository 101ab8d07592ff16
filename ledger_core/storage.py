"""Key-value persistence for the ledger core services."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from .exceptions import PersistenceError

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "MEOW_LEDGER_DATA_DIR"


def default_data_dir() -> Path:
    """Data directory from the environment, or ./data."""
    return Path(os.getenv(DATA_DIR_ENV) or "data")


class JSONStorage:
    """File-based key-value storage: one JSON document per key, crash-safe writes."""

    def __init__(self, base_path: Path) -> None:
        self._base_path = Path(base_path)
        self._base_path.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        return self._base_path / f"{key}.json"

    def exists(self, key: str) -> bool:
        return self._path_for(key).exists()

    def load(self, key: str) -> Optional[Any]:
        """Return the stored document for ``key`` or ``None`` when the key is absent."""
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"Corrupted JSON data in {path}") from exc
        except OSError as exc:
            raise PersistenceError(f"Unable to read from {path}") from exc

    def save(self, key: str, value: Any) -> None:
        path = self._path_for(key)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as handle:
                json.dump(value, handle, indent=2, ensure_ascii=False)
                handle.flush()
            # Use replace for atomic move on POSIX; ensures crash-safe persistence.
            temp_path.replace(path)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Unable to write to {path}") from exc
        logger.debug("Saved %s", path)

    def quarantine(self, key: str) -> Optional[Path]:
        """Move the document for ``key`` to ``<key>.json.corrupt`` and return the new path."""
        path = self._path_for(key)
        if not path.exists():
            return None
        target = path.with_suffix(path.suffix + ".corrupt")
        try:
            path.replace(target)
        except OSError as exc:
            raise PersistenceError(f"Unable to move {path} aside") from exc
        return target

    @property
    def base_path(self) -> Path:
        return self._base_path
