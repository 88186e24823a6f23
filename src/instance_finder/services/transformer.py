"""Result transformation — derive presentation attributes and filter client-side."""

from __future__ import annotations

import re

from instance_finder.domain.entities import DerivedInstance, ListResponse, RawEntry
from instance_finder.domain.value_objects import FetchParams

SMALL_MAX_USERS = 2000
MEDIUM_MAX_USERS = 10000

SIZE_LABELS: dict[int, str] = {1: "Small", 2: "Medium", 3: "Large"}

SIZE_CLASS_BUCKETS: dict[str, int] = {"small": 1, "medium": 2, "large": 3}

NA_TLDS: tuple[str, ...] = (".us", ".ca")

EU_TLDS: tuple[str, ...] = (
    ".eu", ".fr", ".de", ".it", ".es", ".pt", ".pl", ".nl", ".be", ".lu",
    ".ie", ".se", ".fi", ".dk", ".cz", ".sk", ".si", ".hr", ".gr", ".bg",
    ".ro", ".hu", ".lt", ".lv", ".ee", ".cy", ".mt", ".is", ".no",
)

AVAILABILITY_UP = 0.999
AVAILABILITY_DOWN = 0.4

_USER_COUNT_RE = re.compile(r"[+-]?[0-9]+")


def parse_users(users: str) -> int:
    """Parse the directory's user-count string; anything unparsable counts as 0."""
    if _USER_COUNT_RE.fullmatch(users) is None:
        return 0
    return int(users)


def size_bucket(users: int) -> int:
    """Return 1 (small), 2 (medium) or 3 (large) for a user count."""
    if users <= SMALL_MAX_USERS:
        return 1
    if users <= MEDIUM_MAX_USERS:
        return 2
    return 3


def region_for_domain(domain: str) -> str:
    """Classify *domain* as ``"na"``, ``"eu"`` or ``"other"`` from its suffix."""
    lowered = domain.lower()
    if lowered.endswith(NA_TLDS):
        return "na"
    if lowered.endswith(EU_TLDS):
        return "eu"
    return "other"


def availability(up: bool) -> float:
    """Coarse static uptime estimate, not a measured figure."""
    return AVAILABILITY_UP if up else AVAILABILITY_DOWN


def signup_label(open_registrations: bool) -> str:
    return "open" if open_registrations else "approval"


def size_matches(requested: str, bucket: int) -> bool:
    """Exact bucket match, except ``"medium"`` which also admits small instances."""
    if requested == "medium":
        return bucket in (1, 2)
    return bucket == SIZE_CLASS_BUCKETS[requested]


def transform(raw: RawEntry, params: FetchParams) -> DerivedInstance | None:
    """Derive a :class:`DerivedInstance`, or ``None`` if any filter rejects it."""
    bucket = size_bucket(parse_users(raw.users))
    region = region_for_domain(raw.name)
    signups = signup_label(raw.open_registrations)
    info = raw.info
    languages = list(info.languages or []) if info else []

    if params.signups is not None and signups != params.signups:
        return None
    if params.region is not None and region != params.region:
        return None
    if params.size is not None and not size_matches(params.size, bucket):
        return None
    if params.language and params.language not in languages:
        return None

    return DerivedInstance(
        domain=raw.name,
        description=(info.short_description or "") if info else "",
        languages=languages,
        signups=signups,
        size=bucket,
        size_label=SIZE_LABELS[bucket],
        region=region,
        availability=availability(raw.up),
    )


def transform_all(response: ListResponse, params: FetchParams) -> list[DerivedInstance]:
    """Transform every entry of *response*, keeping remote order and dropping rejects."""
    results: list[DerivedInstance] = []
    for raw in response.instances:
        derived = transform(raw, params)
        if derived is not None:
            results.append(derived)
    return results
