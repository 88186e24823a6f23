"""Port: credential vault — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol


class CredentialVault(Protocol):
    """Durable secure storage holding at most one bearer token."""

    def get(self) -> str | None:
        """Return the stored token, or ``None`` when nothing is stored."""
        ...

    def set(self, token: str) -> None:
        """Store *token*, replacing any previous value.

        Raises :class:`~instance_finder.domain.exceptions.StorageError`.
        """
        ...

    def delete(self) -> None:
        """Remove the stored token.

        Raises :class:`~instance_finder.domain.exceptions.StorageError`.
        """
        ...
