"""Authenticated read-only queries against the instance directory."""

from __future__ import annotations

import json
import logging
from typing import Any

from instance_finder.domain.entities import InstanceInfo, ListResponse, RawEntry
from instance_finder.domain.exceptions import SerializationError
from instance_finder.domain.ports.directory_transport import DirectoryTransport
from instance_finder.domain.value_objects import FetchParams

logger = logging.getLogger(__name__)

LIST_PATH = "/instances/list"
SAMPLE_PATH = "/instances/sample"


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def build_list_query(params: FetchParams, count: int) -> dict[str, str]:
    """Translate *params* into the query the remote API understands.

    Only ``include_down``, ``include_closed`` and a non-empty ``language``
    are sent; size, region and signup filtering happen client-side.
    """
    query = {"count": str(count)}
    if params.include_down is not None:
        query["include_down"] = _bool_param(params.include_down)
    if params.include_closed is not None:
        query["include_closed"] = _bool_param(params.include_closed)
    if params.language:
        query["language"] = params.language
    return query


def _parse_info(data: Any) -> InstanceInfo | None:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise SerializationError(f"Expected an object for 'info', got {type(data).__name__}")
    languages = data.get("languages")
    return InstanceInfo(
        short_description=data.get("short_description"),
        languages=[str(lang) for lang in languages] if languages is not None else None,
    )


def _parse_entry(data: Any) -> RawEntry:
    if not isinstance(data, dict):
        raise SerializationError(f"Expected an instance object, got {type(data).__name__}")
    try:
        return RawEntry(
            name=str(data["name"]),
            up=bool(data.get("up", False)),
            users=str(data.get("users") or ""),
            open_registrations=bool(data.get("open_registrations", False)),
            info=_parse_info(data.get("info")),
        )
    except KeyError as exc:
        raise SerializationError(f"Instance entry is missing field {exc}") from exc


def parse_list_response(body: bytes) -> ListResponse:
    """Decode a ``/instances/list`` body into a :class:`ListResponse`."""
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise SerializationError(f"Directory response is not valid JSON: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("instances", []), list):
        raise SerializationError("Directory response has no 'instances' list.")

    return ListResponse(instances=[_parse_entry(item) for item in data.get("instances", [])])


class DirectoryClient:
    """Directory queries bound to one resolved bearer token."""

    def __init__(self, transport: DirectoryTransport, token: str) -> None:
        self._transport = transport
        self._token = token

    def sample(self, count: int = 1) -> None:
        """Probe ``/instances/sample``; returns only if the remote accepted the token."""
        self._transport.get(SAMPLE_PATH, {"count": str(count)}, self._token)

    def list(self, params: FetchParams, count: int) -> ListResponse:
        """GET /instances/list → ListResponse."""
        query = build_list_query(params, count)
        logger.debug("Listing instances with %s", query)
        body = self._transport.get(LIST_PATH, query, self._token)
        response = parse_list_response(body)
        logger.info("Directory returned %d instance(s)", len(response.instances))
        return response
