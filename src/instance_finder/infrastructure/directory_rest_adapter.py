"""instances.social REST adapter — implements the DirectoryTransport port."""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from instance_finder.domain.exceptions import NetworkError, RemoteError

logger = logging.getLogger(__name__)


def build_http_client(timeout_seconds: float, user_agent: str) -> httpx.Client:
    """Create the shared ``httpx.Client`` used for every directory call."""
    return httpx.Client(
        timeout=httpx.Timeout(timeout_seconds),
        headers={"User-Agent": user_agent, "Accept": "application/json"},
    )


class DirectoryRestAdapter:
    """Concrete DirectoryTransport backed by the instances.social v1 API."""

    def __init__(self, client: httpx.Client, base_url: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")

    def get(self, path: str, query: Mapping[str, str], token: str) -> bytes:
        """Perform an authenticated GET with error translation."""
        url = f"{self._base_url}{path}"
        try:
            resp = self._client.get(
                url,
                params=dict(query),
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as exc:
            raise NetworkError(f"Network error fetching {url}: {exc}") from exc

        if resp.is_success:
            return resp.content

        logger.warning("Directory returned HTTP %d for %s", resp.status_code, path)
        raise RemoteError(resp.status_code, resp.text)
