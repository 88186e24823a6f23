"""Port: snapshot store — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from instance_finder.domain.entities import CacheSnapshot


class SnapshotStore(Protocol):
    """Holds at most one :class:`CacheSnapshot`."""

    def read(self) -> CacheSnapshot | None:
        """Return the stored snapshot; missing or corrupt data yields ``None``."""
        ...

    def write(self, snapshot: CacheSnapshot) -> None:
        """Replace the stored snapshot.  Must not raise."""
        ...

    def clear(self) -> None:
        """Delete the stored snapshot if any."""
        ...
