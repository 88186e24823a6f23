"""Two-tier bearer token resolution: session override, then credential vault."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from instance_finder.domain.exceptions import StorageError
from instance_finder.domain.ports.credential_vault import CredentialVault

logger = logging.getLogger(__name__)


class _ReadWriteLock:
    """Many concurrent readers, one exclusive writer.

    Waiting writers block new readers so a steady stream of reads cannot
    starve a write.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class SessionContext:
    """Process-lifetime session state shared by every operation.

    Holds the in-memory token override.  One instance is created by the
    sidecar wiring and passed explicitly to whoever needs it.
    """

    def __init__(self) -> None:
        self._lock = _ReadWriteLock()
        self._token: str | None = None

    def get_token(self) -> str | None:
        with self._lock.read():
            return self._token

    def set_token(self, token: str | None) -> None:
        with self._lock.write():
            self._token = token


class TokenStore:
    """Resolve, save and clear the bearer token across both tiers."""

    def __init__(self, session: SessionContext, vault: CredentialVault) -> None:
        self._session = session
        self._vault = vault

    def status(self) -> bool:
        """Return *True* if a token is available in either tier."""
        if self._session.get_token() is not None:
            return True
        try:
            return self._vault.get() is not None
        except StorageError as exc:
            logger.debug("Vault lookup failed during status check: %s", exc)
            return False

    def save(self, token: str, persist: bool) -> None:
        """Keep *token* for this session and, if *persist*, in the vault.

        The session value is set even when the vault write fails.
        """
        self._session.set_token(token)
        if persist:
            self._vault.set(token)
            logger.info("Token persisted to the credential vault")

    def clear(self) -> None:
        """Forget the token everywhere.  Vault errors are ignored."""
        try:
            self._vault.delete()
        except StorageError as exc:
            logger.debug("Ignoring vault delete failure: %s", exc)
        self._session.set_token(None)

    def resolve(self) -> str | None:
        """Return the session token, else the vault token, else ``None``."""
        token = self._session.get_token()
        if token is not None:
            return token
        try:
            return self._vault.get()
        except StorageError as exc:
            logger.warning("Vault lookup failed, treating token as absent: %s", exc)
            return None
