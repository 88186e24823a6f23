"""Tests for FetchParams and Preferences."""

from __future__ import annotations

import pytest

from instance_finder.domain.exceptions import ErrorKind, InvalidParamsError
from instance_finder.domain.value_objects import FetchParams, Preferences


class TestFetchParamsEquality:
    def test_identical_fields_are_equal(self) -> None:
        a = FetchParams(language="fr", size="medium", max=50)
        b = FetchParams(language="fr", size="medium", max=50)
        assert a == b
        assert hash(a) == hash(b)

    def test_any_field_difference_breaks_equality(self) -> None:
        base = FetchParams(language="fr", region="eu")
        assert base != FetchParams(language="en", region="eu")
        assert base != FetchParams(language="fr", region="eu", include_down=False)

    def test_unset_differs_from_false(self) -> None:
        assert FetchParams() != FetchParams(include_closed=False)


class TestFetchParamsValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"signups": "invite"},
            {"region": "asia"},
            {"size": "huge"},
            {"max": 0},
        ],
    )
    def test_rejects_values_outside_enumeration(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(InvalidParamsError) as excinfo:
            FetchParams(**kwargs)  # type: ignore[arg-type]
        assert excinfo.value.kind is ErrorKind.INVALID_PARAMS

    def test_accepts_all_known_values(self) -> None:
        params = FetchParams(signups="approval", region="na", size="large", max=10)
        assert params.size == "large"


class TestFetchParamsDict:
    def test_to_dict_includes_unset_fields(self) -> None:
        data = FetchParams(language="de").to_dict()
        assert data == {
            "language": "de",
            "include_closed": None,
            "include_down": None,
            "max": None,
            "signups": None,
            "region": None,
            "size": None,
        }

    def test_from_dict_ignores_unknown_keys(self) -> None:
        params = FetchParams.from_dict({"region": "eu", "colour": "blue"})
        assert params == FetchParams(region="eu")


class TestPreferences:
    def test_defaults_to_any(self) -> None:
        prefs = Preferences()
        assert (prefs.size, prefs.moderation, prefs.region) == ("any", "any", "any")

    def test_rejects_unknown_moderation(self) -> None:
        with pytest.raises(InvalidParamsError):
            Preferences(moderation="lenient")
