"""Tests for DirectoryClient — query building and response decoding."""

from __future__ import annotations

import pytest
from fakes import FakeTransport, directory_body, entry

from instance_finder.domain.exceptions import RemoteError, SerializationError
from instance_finder.domain.value_objects import FetchParams
from instance_finder.services.directory_client import (
    DirectoryClient,
    build_list_query,
    parse_list_response,
)


class TestBuildListQuery:
    def test_count_only_by_default(self) -> None:
        assert build_list_query(FetchParams(), 200) == {"count": "200"}

    def test_native_params_are_forwarded(self) -> None:
        params = FetchParams(language="fr", include_down=False, include_closed=True)
        assert build_list_query(params, 50) == {
            "count": "50",
            "language": "fr",
            "include_down": "false",
            "include_closed": "true",
        }

    def test_client_side_filters_never_sent(self) -> None:
        params = FetchParams(signups="open", region="eu", size="medium")
        assert build_list_query(params, 10) == {"count": "10"}

    def test_empty_language_not_sent(self) -> None:
        assert "language" not in build_list_query(FetchParams(language=""), 10)


class TestParseListResponse:
    def test_decodes_entries(self) -> None:
        body = directory_body([entry("piaille.fr", users="2500", languages=["fr"])])
        response = parse_list_response(body)
        raw = response.instances[0]
        assert raw.name == "piaille.fr"
        assert raw.users == "2500"
        assert raw.info is not None
        assert raw.info.languages == ["fr"]

    def test_null_info_and_numeric_users(self) -> None:
        body = b'{"instances": [{"name": "x.org", "up": false, "users": 12, "info": null}]}'
        raw = parse_list_response(body).instances[0]
        assert raw.info is None
        assert raw.users == "12"
        assert raw.open_registrations is False

    @pytest.mark.parametrize(
        "body",
        [
            b"not json",
            b"[]",
            b'{"instances": {}}',
            b'{"instances": [{"up": true}]}',
            b'{"instances": ["x"]}',
        ],
    )
    def test_malformed_bodies_raise(self, body: bytes) -> None:
        with pytest.raises(SerializationError):
            parse_list_response(body)


class TestDirectoryClient:
    def test_list_sends_token_and_query(self, transport: FakeTransport) -> None:
        transport.body = directory_body([entry("a.de")])
        client = DirectoryClient(transport, "tok")
        response = client.list(FetchParams(language="de"), 25)

        assert len(response.instances) == 1
        assert transport.calls == [
            ("/instances/list", {"count": "25", "language": "de"}, "tok")
        ]

    def test_sample_probes_with_count(self, transport: FakeTransport) -> None:
        DirectoryClient(transport, "tok").sample(1)
        assert transport.calls == [("/instances/sample", {"count": "1"}, "tok")]

    def test_remote_errors_propagate(self, transport: FakeTransport) -> None:
        transport.error = RemoteError(401, "bad token")
        with pytest.raises(RemoteError) as excinfo:
            DirectoryClient(transport, "tok").sample()
        assert excinfo.value.status == 401
        assert excinfo.value.body == "bad token"
