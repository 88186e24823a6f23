"""Snapshot reuse rule."""

from __future__ import annotations

from instance_finder.domain.entities import CacheSnapshot
from instance_finder.domain.value_objects import FetchParams

DEFAULT_TTL_SECONDS = 24 * 3600


def is_fresh(
    snapshot: CacheSnapshot,
    params: FetchParams,
    now: float,
    ttl_seconds: int = DEFAULT_TTL_SECONDS,
) -> bool:
    """Return *True* if *snapshot* was taken for *params* less than *ttl_seconds* ago."""
    return snapshot.params == params and now - snapshot.saved_at < ttl_seconds
