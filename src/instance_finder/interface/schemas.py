"""Pydantic request / response DTOs for the sidecar boundary."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from instance_finder.domain.entities import DerivedInstance
from instance_finder.domain.value_objects import FetchParams, Preferences


class FetchParamsSchema(BaseModel):
    """Fetch parameters as sent by the presentation layer."""

    language: str | None = None
    include_closed: bool | None = None
    include_down: bool | None = None
    max: int | None = Field(default=None, gt=0)
    signups: Literal["open", "approval"] | None = None
    region: Literal["eu", "na", "other"] | None = None
    size: Literal["small", "medium", "large"] | None = None

    def to_domain(self) -> FetchParams:
        return FetchParams(**self.model_dump())


class PreferencesSchema(BaseModel):
    languages: list[str] = Field(default_factory=list)
    size: Literal["small", "medium", "large", "any"] = "any"
    moderation: Literal["open", "balanced", "strict", "any"] = "any"
    region: Literal["eu", "na", "other", "any"] = "any"

    def to_domain(self) -> Preferences:
        return Preferences(
            languages=tuple(self.languages),
            size=self.size,
            moderation=self.moderation,
            region=self.region,
        )


class SaveTokenRequest(BaseModel):
    """Request body for ``PUT /token``."""

    token: str
    persist: bool = False

    @field_validator("token")
    @classmethod
    def _must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "token must not be empty."
            raise ValueError(msg)
        return v


class TokenTestRequest(BaseModel):
    """Request body for ``POST /token/test``; omit *token* to test the stored one."""

    token: str | None = None


class FetchInstancesRequest(BaseModel):
    """Request body for ``POST /instances``."""

    params: FetchParamsSchema = Field(default_factory=FetchParamsSchema)
    bypass_cache: bool = False


class RankInstancesRequest(FetchInstancesRequest):
    """Request body for ``POST /instances/ranked``."""

    preferences: PreferencesSchema = Field(default_factory=PreferencesSchema)


class InstanceSchema(BaseModel):
    """One derived instance, keyed exactly like the cache file."""

    model_config = ConfigDict(populate_by_name=True)

    domain: str
    description: str
    languages: list[str]
    signups: str
    size: int
    size_label: str = Field(alias="sizeLabel")
    region: str
    availability: float

    @classmethod
    def from_domain(cls, instance: DerivedInstance) -> InstanceSchema:
        return cls.model_validate(instance.to_dict())


class TokenStatusResponse(BaseModel):
    has_token: bool


class LanguagesResponse(BaseModel):
    """Successful response from ``GET /languages``."""

    languages: list[str]
    display_names: dict[str, str] | None = None


class OkResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    kind: str
    message: str
    remote_status: int | None = None
