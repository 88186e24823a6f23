"""Domain exception hierarchy.

Every exception carries an :class:`ErrorKind` so callers can branch on the
kind instead of parsing messages.  Inner layers raise these; the sidecar's
error handlers translate them to HTTP responses.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories surfaced to callers."""

    NO_TOKEN = "no_token"
    NETWORK = "network"
    REMOTE = "remote"
    SERIALIZATION = "serialization"
    STORAGE = "storage"
    INVALID_PARAMS = "invalid_params"


class InstanceFinderError(Exception):
    """Base exception for the entire application."""

    kind: ErrorKind


# ── Credentials ─────────────────────────────────────────────────────────────


class NoTokenError(InstanceFinderError):
    """No bearer token could be resolved from the session or the vault."""

    kind = ErrorKind.NO_TOKEN

    def __init__(self, message: str = "no token available") -> None:
        super().__init__(message)


class StorageError(InstanceFinderError):
    """A durable store (credential vault or cache file) rejected a write/delete."""

    kind = ErrorKind.STORAGE


# ── Directory API ───────────────────────────────────────────────────────────


class NetworkError(InstanceFinderError):
    """The directory could not be reached (DNS, connect, timeout, ...)."""

    kind = ErrorKind.NETWORK


class RemoteError(InstanceFinderError):
    """The directory answered with a non-success HTTP status."""

    kind = ErrorKind.REMOTE

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"directory returned HTTP {status}: {body[:200]}")
        self.status = status
        self.body = body


class SerializationError(InstanceFinderError):
    """A response body could not be decoded."""

    kind = ErrorKind.SERIALIZATION


# ── Input validation ────────────────────────────────────────────────────────


class InvalidParamsError(InstanceFinderError):
    """A fetch parameter holds a value outside its enumerated set."""

    kind = ErrorKind.INVALID_PARAMS
