"""Port: directory transport — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Mapping, Protocol


class DirectoryTransport(Protocol):
    """Authenticated, read-only GET access to the instance directory API."""

    def get(self, path: str, query: Mapping[str, str], token: str) -> bytes:
        """GET *path* with *query* and return the raw response body.

        Raises :class:`~instance_finder.domain.exceptions.NetworkError` when
        the remote is unreachable and
        :class:`~instance_finder.domain.exceptions.RemoteError` on a
        non-success status.
        """
        ...
