"""Repository for the app's team store (JSON file)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import threading

from team_chemistry.roster import ME_ID, TeamStore


logger = logging.getLogger(__name__)

_DEFAULT_PATH = "team_store.json"


class TeamStoreRepository:
    """Thread-safe persistence layer for TeamStore."""

    def __init__(self, store_path: str = _DEFAULT_PATH) -> None:
        self._path = Path(store_path)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def save_store(self, store: TeamStore) -> None:
        """Persist *store* to JSON file (atomic write).

        The synthesized viewer entry is never written.
        """
        if any(m.id == ME_ID for m in store.members):
            store = store.model_copy(
                update={"members": [m for m in store.members if m.id != ME_ID]}
            )
        with self._lock:
            self._atomic_write(store)

    def load_store(self) -> TeamStore | None:
        """Load from JSON. Returns ``None`` when no file exists."""
        with self._lock:
            if not self._path.exists():
                return None
            try:
                with open(self._path, encoding="utf-8") as fh:
                    data = json.load(fh)
                store = TeamStore(**data)
            except Exception as exc:
                raise ValueError(f"Failed to load team store: {exc}") from exc
        logger.debug("Loaded team store with %d members from %s", len(store.members), self._path)
        return store

    def delete_store(self) -> None:
        """Remove the store file if it exists."""
        with self._lock:
            if self._path.exists():
                self._path.unlink()
                logger.info("Deleted team store %s", self._path)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _atomic_write(self, store: TeamStore) -> None:
        tmp = self._path.with_suffix(".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump(store.model_dump(), fh, indent=2, ensure_ascii=False)
            tmp.replace(self._path)
        except Exception as exc:
            if tmp.exists():
                tmp.unlink()
            raise ValueError(f"Failed to save team store: {exc}") from exc
