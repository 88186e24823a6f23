"""Preference scoring — order derived instances by how well they fit a user.

Score components:

- **language**: +2 if the instance speaks any preferred language
- **size**: ``2 - |preferred bucket - bucket|`` (so -0 .. +2)
- **moderation**: +0.5 when signup policy agrees with the moderation style
- **region**: +1 on an exact region match
- **availability**: ``1.5 * availability``
"""

from __future__ import annotations

from typing import Sequence

from instance_finder.domain.entities import DerivedInstance
from instance_finder.domain.value_objects import Preferences

_SIZE_PREFERENCE = {"small": 1, "medium": 2, "large": 3}

# moderation style → signup policy that earns the bonus
_MODERATION_SIGNUPS = {"open": "open", "balanced": "approval", "strict": "approval"}

LANGUAGE_WEIGHT = 2.0
MODERATION_WEIGHT = 0.5
REGION_WEIGHT = 1.0
AVAILABILITY_WEIGHT = 1.5


def score_instance(instance: DerivedInstance, prefs: Preferences) -> float:
    """Return the composite preference score of *instance*."""
    score = 0.0

    if prefs.languages and any(lang in prefs.languages for lang in instance.languages):
        score += LANGUAGE_WEIGHT

    if prefs.size != "any":
        score += 2 - abs(_SIZE_PREFERENCE[prefs.size] - instance.size)

    if prefs.moderation != "any" and instance.signups == _MODERATION_SIGNUPS[prefs.moderation]:
        score += MODERATION_WEIGHT

    if prefs.region != "any" and instance.region == prefs.region:
        score += REGION_WEIGHT

    score += instance.availability * AVAILABILITY_WEIGHT
    return score


def rank_instances(
    instances: Sequence[DerivedInstance], prefs: Preferences
) -> list[DerivedInstance]:
    """Sort by descending score; ties keep their input order."""
    return sorted(instances, key=lambda inst: score_instance(inst, prefs), reverse=True)
