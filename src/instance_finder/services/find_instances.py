"""Instance-finder use case — the fetch → cache → filter pipeline.

This is the single entry point for the business logic.  It depends only on
the ports (:class:`CredentialVault` through :class:`TokenStore`,
:class:`DirectoryTransport`, :class:`SnapshotStore`) and the pure service
modules.  The interface layer injects concrete adapters at runtime.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Sequence

from instance_finder.domain.entities import CacheSnapshot, DerivedInstance
from instance_finder.domain.exceptions import NoTokenError
from instance_finder.domain.ports.directory_transport import DirectoryTransport
from instance_finder.domain.ports.snapshot_store import SnapshotStore
from instance_finder.domain.value_objects import FetchParams, Preferences
from instance_finder.services.cache_policy import DEFAULT_TTL_SECONDS, is_fresh
from instance_finder.services.directory_client import DirectoryClient
from instance_finder.services.languages import collect_languages
from instance_finder.services.ranking import rank_instances
from instance_finder.services.token_store import TokenStore
from instance_finder.services.transformer import transform_all

logger = logging.getLogger(__name__)


class InstanceFinder:
    """Orchestrates token handling, directory queries and the result cache.

    Parameters
    ----------
    token_store:
        Two-tier token resolution (session, then vault).
    transport:
        Adapter performing authenticated GETs against the directory.
    cache_store:
        Single-file snapshot of the last fetch.
    caching_enabled:
        ``False`` in debug mode: the snapshot is neither read nor written.
    default_max_results:
        ``count`` sent upstream when the request leaves ``max`` unset.
    language_sample_size:
        ``count`` used when sampling the directory for languages.
    cache_ttl_seconds:
        Maximum snapshot age for reuse.
    clock:
        Returns the current epoch time in seconds.
    """

    def __init__(
        self,
        token_store: TokenStore,
        transport: DirectoryTransport,
        cache_store: SnapshotStore,
        *,
        caching_enabled: bool = True,
        default_max_results: int = 200,
        language_sample_size: int = 500,
        cache_ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._tokens = token_store
        self._transport = transport
        self._cache = cache_store
        self._caching_enabled = caching_enabled
        self._default_max = default_max_results
        self._language_sample = language_sample_size
        self._ttl = cache_ttl_seconds
        self._clock = clock

    # ── Token management ────────────────────────────────────────────────

    def token_status(self) -> bool:
        return self._tokens.status()

    def save_token(self, token: str, persist: bool) -> None:
        self._tokens.save(token, persist)

    def clear_token(self) -> None:
        self._tokens.clear()

    def test_token(self, token: str | None = None) -> None:
        """Validate *token* (or the stored one) with a one-entry sample query."""
        candidate = token if token is not None else self._tokens.resolve()
        if candidate is None:
            raise NoTokenError()
        DirectoryClient(self._transport, candidate).sample(count=1)
        logger.info("Token accepted by the directory")

    # ── Instances ───────────────────────────────────────────────────────

    def fetch_instances(
        self, params: FetchParams, bypass_cache: bool = False
    ) -> list[DerivedInstance]:
        """Return filtered instances, from a fresh snapshot when possible."""
        if self._caching_enabled and not bypass_cache:
            cached = self._cache.read()
            if cached is not None and is_fresh(cached, params, self._clock(), self._ttl):
                logger.info("Cache hit: %d instance(s)", len(cached.items))
                return list(cached.items)
            logger.debug("Cache miss for %s", params)

        client = DirectoryClient(self._transport, self._require_token())
        response = client.list(params, params.max or self._default_max)
        items = transform_all(response, params)
        logger.info(
            "Kept %d of %d instance(s) after filtering",
            len(items),
            len(response.instances),
        )

        if self._caching_enabled:
            self._cache.write(
                CacheSnapshot(saved_at=int(self._clock()), params=params, items=items)
            )
        return items

    def fetch_languages(self) -> list[str]:
        """Sample the directory and return every language seen, sorted."""
        client = DirectoryClient(self._transport, self._require_token())
        response = client.list(FetchParams(), self._language_sample)
        return collect_languages(response)

    def clear_instances_cache(self) -> None:
        self._cache.clear()
        logger.info("Instance cache cleared")

    def rank_instances(
        self, items: Sequence[DerivedInstance], preferences: Preferences
    ) -> list[DerivedInstance]:
        return rank_instances(items, preferences)

    # ── Helpers ─────────────────────────────────────────────────────────

    def _require_token(self) -> str:
        token = self._tokens.resolve()
        if token is None:
            raise NoTokenError()
        return token
