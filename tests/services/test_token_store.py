"""Tests for SessionContext and TokenStore."""

from __future__ import annotations

import threading

import pytest
from fakes import FakeVault

from instance_finder.domain.exceptions import StorageError
from instance_finder.services.token_store import SessionContext, TokenStore


class TestStatus:
    def test_false_when_both_tiers_empty(self, token_store: TokenStore) -> None:
        assert token_store.status() is False

    def test_true_after_session_only_save(
        self, token_store: TokenStore, vault: FakeVault
    ) -> None:
        token_store.save("abc", persist=False)
        assert token_store.status() is True
        assert vault.token is None

    def test_true_when_only_vault_holds_token(self, session: SessionContext) -> None:
        store = TokenStore(session, FakeVault(token="stored"))
        assert store.status() is True

    def test_vault_failure_reads_as_absent(
        self, token_store: TokenStore, vault: FakeVault
    ) -> None:
        vault.fail_on.add("get")
        assert token_store.status() is False

    def test_false_after_clear(self, token_store: TokenStore) -> None:
        token_store.save("abc", persist=True)
        token_store.clear()
        assert token_store.status() is False


class TestSave:
    def test_persist_writes_vault(self, token_store: TokenStore, vault: FakeVault) -> None:
        token_store.save("abc", persist=True)
        assert vault.token == "abc"

    def test_vault_failure_surfaces_but_session_is_set(
        self, token_store: TokenStore, vault: FakeVault
    ) -> None:
        vault.fail_on.add("set")
        with pytest.raises(StorageError):
            token_store.save("abc", persist=True)
        assert token_store.resolve() == "abc"


class TestClear:
    def test_swallows_vault_errors(self, token_store: TokenStore, vault: FakeVault) -> None:
        token_store.save("abc", persist=False)
        vault.fail_on.add("delete")
        token_store.clear()
        assert token_store.resolve() is None

    def test_is_idempotent(self, token_store: TokenStore) -> None:
        token_store.clear()
        token_store.clear()
        assert token_store.status() is False


class TestResolve:
    def test_session_takes_precedence(self, session: SessionContext) -> None:
        store = TokenStore(session, FakeVault(token="durable"))
        store.save("override", persist=False)
        assert store.resolve() == "override"

    def test_falls_back_to_vault(self, session: SessionContext) -> None:
        store = TokenStore(session, FakeVault(token="durable"))
        assert store.resolve() == "durable"

    def test_absent_is_none(self, token_store: TokenStore) -> None:
        assert token_store.resolve() is None

    def test_vault_failure_is_none(self, token_store: TokenStore, vault: FakeVault) -> None:
        vault.fail_on.add("get")
        assert token_store.resolve() is None


class TestSessionContextConcurrency:
    def test_concurrent_readers_and_writers(self) -> None:
        session = SessionContext()
        seen: list[str | None] = []
        errors: list[BaseException] = []

        def writer(value: str) -> None:
            for _ in range(200):
                session.set_token(value)

        def reader() -> None:
            try:
                for _ in range(200):
                    seen.append(session.get_token())
            except BaseException as exc:  # pragma: no cover - surfaced below
                errors.append(exc)

        threads = [threading.Thread(target=writer, args=(v,)) for v in ("a", "b")]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert not errors
        assert all(not t.is_alive() for t in threads)
        assert set(seen) <= {None, "a", "b"}
        assert session.get_token() in {"a", "b"}
