"""Tests for the httpx-backed directory transport."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from instance_finder.domain.exceptions import NetworkError, RemoteError
from instance_finder.infrastructure.directory_rest_adapter import (
    DirectoryRestAdapter,
    build_http_client,
)

BASE = "https://instances.example/api/1.0"


def _adapter(handler: Callable[[httpx.Request], httpx.Response]) -> DirectoryRestAdapter:
    client = httpx.Client(
        transport=httpx.MockTransport(handler),
        headers={"User-Agent": "instance-finder/test"},
    )
    return DirectoryRestAdapter(client, BASE + "/")


class TestGet:
    def test_sends_bearer_query_and_user_agent(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b'{"instances": []}')

        body = _adapter(handler).get("/instances/list", {"count": "5", "language": "fr"}, "tok")

        assert body == b'{"instances": []}'
        request = seen[0]
        assert request.url.path == "/api/1.0/instances/list"
        assert request.url.params["count"] == "5"
        assert request.url.params["language"] == "fr"
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.headers["User-Agent"] == "instance-finder/test"

    @pytest.mark.parametrize("status", [400, 401, 403, 404, 500, 503])
    def test_non_success_raises_remote_error(self, status: int) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, text="nope")

        with pytest.raises(RemoteError) as excinfo:
            _adapter(handler).get("/instances/sample", {"count": "1"}, "tok")
        assert excinfo.value.status == status
        assert excinfo.value.body == "nope"

    def test_transport_failure_raises_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(NetworkError):
            _adapter(handler).get("/instances/sample", {"count": "1"}, "tok")

    def test_timeout_raises_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(NetworkError):
            _adapter(handler).get("/instances/sample", {"count": "1"}, "tok")


class TestBuildHttpClient:
    def test_fixed_timeout_and_headers(self) -> None:
        client = build_http_client(20.0, "instance-finder/0.1.0")
        try:
            assert client.timeout.read == 20.0
            assert client.timeout.connect == 20.0
            assert client.headers["User-Agent"] == "instance-finder/0.1.0"
        finally:
            client.close()
