"""Shared pytest fixtures for instance_finder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from fakes import FakeClock, FakeTransport, FakeVault

from instance_finder.infrastructure.json_cache_store import JsonCacheStore
from instance_finder.services.find_instances import InstanceFinder
from instance_finder.services.token_store import SessionContext, TokenStore


@pytest.fixture
def vault() -> FakeVault:
    return FakeVault()


@pytest.fixture
def session() -> SessionContext:
    return SessionContext()


@pytest.fixture
def token_store(session: SessionContext, vault: FakeVault) -> TokenStore:
    return TokenStore(session, vault)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "instances_cache.json"


@pytest.fixture
def cache_store(cache_path: Path) -> JsonCacheStore:
    return JsonCacheStore(cache_path)


@pytest.fixture
def finder(
    token_store: TokenStore,
    transport: FakeTransport,
    cache_store: JsonCacheStore,
    clock: FakeClock,
) -> InstanceFinder:
    """Use case wired to fakes, with caching enabled and a token in session."""
    token_store.save("session-token", persist=False)
    return InstanceFinder(
        token_store=token_store,
        transport=transport,
        cache_store=cache_store,
        caching_enabled=True,
        clock=clock,
    )
