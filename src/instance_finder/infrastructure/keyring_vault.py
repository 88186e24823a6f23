"""OS keyring adapter — implements the CredentialVault port."""

from __future__ import annotations

import logging

import keyring
from keyring.backend import KeyringBackend
from keyring.errors import KeyringError, PasswordDeleteError

from instance_finder.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyringVault:
    """Concrete ``CredentialVault`` storing one token in the system keyring.

    *backend* defaults to whatever backend ``keyring`` selects for the
    platform (Keychain, Secret Service, Windows Credential Locker, ...).
    """

    def __init__(
        self,
        service: str,
        username: str,
        backend: KeyringBackend | None = None,
    ) -> None:
        self._service = service
        self._username = username
        self._backend = backend

    def get(self) -> str | None:
        try:
            if self._backend is not None:
                return self._backend.get_password(self._service, self._username)
            return keyring.get_password(self._service, self._username)
        except KeyringError as exc:
            raise StorageError(f"Keyring lookup failed: {exc}") from exc

    def set(self, token: str) -> None:
        try:
            if self._backend is not None:
                self._backend.set_password(self._service, self._username, token)
            else:
                keyring.set_password(self._service, self._username, token)
        except KeyringError as exc:
            raise StorageError(f"Keyring write failed: {exc}") from exc

    def delete(self) -> None:
        try:
            if self._backend is not None:
                self._backend.delete_password(self._service, self._username)
            else:
                keyring.delete_password(self._service, self._username)
        except PasswordDeleteError:
            logger.debug("No keyring entry to delete for %s", self._service)
        except KeyringError as exc:
            raise StorageError(f"Keyring delete failed: {exc}") from exc
