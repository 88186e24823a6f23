"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache

import httpx

from instance_finder.infrastructure.config import Settings, get_settings
from instance_finder.infrastructure.directory_rest_adapter import (
    DirectoryRestAdapter,
    build_http_client,
)
from instance_finder.infrastructure.json_cache_store import JsonCacheStore
from instance_finder.infrastructure.keyring_vault import KeyringVault
from instance_finder.services.find_instances import InstanceFinder
from instance_finder.services.token_store import SessionContext, TokenStore

_http_client: httpx.Client | None = None
_session: SessionContext | None = None


def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _session  # noqa: PLW0603

    settings = get_settings()
    _http_client = build_http_client(settings.http_timeout_seconds, settings.user_agent)
    _session = SessionContext()


def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _session  # noqa: PLW0603

    if _http_client:
        _http_client.close()
        _http_client = None
    _session = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_finder() -> InstanceFinder:
    """Build the use case around the process-wide session and HTTP client."""
    settings = _settings()

    assert _http_client is not None, "startup() was not called"
    assert _session is not None, "startup() was not called"

    vault = KeyringVault(settings.keyring_service, settings.keyring_username)
    return InstanceFinder(
        token_store=TokenStore(_session, vault),
        transport=DirectoryRestAdapter(_http_client, settings.api_base_url),
        cache_store=JsonCacheStore(settings.cache_path),
        caching_enabled=not settings.debug,
        default_max_results=settings.default_max_results,
        language_sample_size=settings.language_sample_size,
        cache_ttl_seconds=settings.cache_ttl_hours * 3600,
    )
