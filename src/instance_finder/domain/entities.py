"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from instance_finder.domain.value_objects import FetchParams


@dataclass(frozen=True, slots=True)
class InstanceInfo:
    """Optional descriptive block attached to a directory entry."""

    short_description: str | None = None
    languages: list[str] | None = None


@dataclass(frozen=True, slots=True)
class RawEntry:
    """A directory entry exactly as the remote service reports it."""

    name: str
    up: bool
    users: str
    open_registrations: bool
    info: InstanceInfo | None = None


@dataclass(frozen=True, slots=True)
class ListResponse:
    """Body of ``GET /instances/list``."""

    instances: list[RawEntry] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class DerivedInstance:
    """Client-facing entry derived from a :class:`RawEntry`."""

    domain: str
    description: str
    languages: list[str]
    signups: str  # "open" | "approval"
    size: int  # 1 small, 2 medium, 3 large
    size_label: str
    region: str  # "eu" | "na" | "other"
    availability: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "description": self.description,
            "languages": list(self.languages),
            "signups": self.signups,
            "size": self.size,
            "sizeLabel": self.size_label,
            "region": self.region,
            "availability": self.availability,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DerivedInstance:
        return cls(
            domain=str(data["domain"]),
            description=str(data["description"]),
            languages=[str(lang) for lang in data["languages"]],
            signups=str(data["signups"]),
            size=int(data["size"]),
            size_label=str(data["sizeLabel"]),
            region=str(data["region"]),
            availability=float(data["availability"]),
        )


@dataclass(frozen=True, slots=True)
class CacheSnapshot:
    """The single persisted result of the last successful fetch."""

    saved_at: int  # epoch seconds
    params: FetchParams
    items: list[DerivedInstance]

    def to_dict(self) -> dict[str, Any]:
        return {
            "saved_at": self.saved_at,
            "params": self.params.to_dict(),
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CacheSnapshot:
        return cls(
            saved_at=int(data["saved_at"]),
            params=FetchParams.from_dict(data["params"]),
            items=[DerivedInstance.from_dict(item) for item in data["items"]],
        )
