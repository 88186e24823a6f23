"""Single-file JSON snapshot of the last successful directory fetch.

The file is never locked.  Two concurrent misses both write and the last
write wins.  Each write goes to a temporary file beside the cache and is then
renamed over it, so readers see either the old or the new snapshot whole.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from instance_finder.domain.entities import CacheSnapshot
from instance_finder.domain.exceptions import InstanceFinderError, StorageError

logger = logging.getLogger(__name__)


class JsonCacheStore:
    """Concrete ``SnapshotStore`` reading and overwriting the file at *path*."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> CacheSnapshot | None:
        """Return the stored snapshot, or ``None`` for a missing/corrupt file."""
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.debug("Cache unreadable at %s: %s", self._path, exc)
            return None

        try:
            return CacheSnapshot.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError, AttributeError, InstanceFinderError) as exc:
            logger.debug("Ignoring malformed cache at %s: %s", self._path, exc)
            return None

    def write(self, snapshot: CacheSnapshot) -> None:
        """Persist *snapshot*; failures are logged and otherwise ignored."""
        try:
            payload = json.dumps(snapshot.to_dict()).encode("utf-8")
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._replace_with(payload)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not write cache to %s: %s", self._path, exc)

    def _replace_with(self, payload: bytes) -> None:
        with tempfile.NamedTemporaryFile(
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp.write(payload)
        try:
            os.replace(tmp.name, self._path)
        except OSError:
            Path(tmp.name).unlink(missing_ok=True)
            raise

    def clear(self) -> None:
        """Delete the snapshot file if present."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not remove cache file {self._path}: {exc}") from exc
