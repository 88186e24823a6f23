"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from instance_finder.domain.exceptions import InvalidParamsError

SIGNUP_POLICIES: frozenset[str] = frozenset({"open", "approval"})
REGION_CLASSES: frozenset[str] = frozenset({"eu", "na", "other"})
SIZE_CLASSES: frozenset[str] = frozenset({"small", "medium", "large"})
MODERATION_STYLES: frozenset[str] = frozenset({"open", "balanced", "strict"})


@dataclass(frozen=True, slots=True)
class FetchParams:
    """Request descriptor for a directory fetch.

    Equality is structural over every field, which makes an instance usable
    as the cache key: a snapshot is only reused for an identical request.
    Unset fields (``None``) mean "no constraint".
    """

    language: str | None = None
    include_closed: bool | None = None
    include_down: bool | None = None
    max: int | None = None
    signups: str | None = None
    region: str | None = None
    size: str | None = None

    def __post_init__(self) -> None:
        _check_choice("signups", self.signups, SIGNUP_POLICIES)
        _check_choice("region", self.region, REGION_CLASSES)
        _check_choice("size", self.size, SIZE_CLASSES)
        if self.max is not None and self.max <= 0:
            raise InvalidParamsError(f"max must be positive, got {self.max}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FetchParams:
        """Build from a mapping, ignoring unknown keys."""
        return cls(
            language=data.get("language"),
            include_closed=data.get("include_closed"),
            include_down=data.get("include_down"),
            max=data.get("max"),
            signups=data.get("signups"),
            region=data.get("region"),
            size=data.get("size"),
        )


@dataclass(frozen=True, slots=True)
class Preferences:
    """User preferences used to rank already-fetched instances.

    ``"any"`` disables the corresponding criterion.
    """

    languages: tuple[str, ...] = ()
    size: str = "any"
    moderation: str = "any"
    region: str = "any"

    def __post_init__(self) -> None:
        _check_choice("size", self.size, SIZE_CLASSES | {"any"})
        _check_choice("moderation", self.moderation, MODERATION_STYLES | {"any"})
        _check_choice("region", self.region, REGION_CLASSES | {"any"})


def _check_choice(name: str, value: str | None, allowed: frozenset[str]) -> None:
    if value is not None and value not in allowed:
        raise InvalidParamsError(
            f"Invalid {name} '{value}'. Expected one of: {', '.join(sorted(allowed))}"
        )
