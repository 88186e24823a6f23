"""API routes — thin controllers that delegate to the use case.

Routes are plain ``def`` functions: FastAPI runs them on its worker thread
pool, so operations may execute concurrently against the shared session.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends

from instance_finder.interface.dependencies import get_finder
from instance_finder.interface.schemas import (
    ErrorResponse,
    FetchInstancesRequest,
    InstanceSchema,
    LanguagesResponse,
    OkResponse,
    RankInstancesRequest,
    SaveTokenRequest,
    TokenStatusResponse,
    TokenTestRequest,
)
from instance_finder.services.find_instances import InstanceFinder
from instance_finder.services.languages import language_display_name

router = APIRouter()

_DIRECTORY_ERRORS = {
    401: {"model": ErrorResponse, "description": "No token available"},
    502: {
        "model": ErrorResponse,
        "description": "Directory unreachable, rejected the call, or sent garbage",
    },
}


# ── Token ───────────────────────────────────────────────────────────────────


@router.get("/token/status", response_model=TokenStatusResponse)
def token_status(finder: InstanceFinder = Depends(get_finder)) -> TokenStatusResponse:
    """Report whether a token is available in the session or the vault."""
    return TokenStatusResponse(has_token=finder.token_status())


@router.put(
    "/token",
    response_model=OkResponse,
    responses={500: {"model": ErrorResponse, "description": "Credential vault write failed"}},
)
def save_token(
    body: SaveTokenRequest,
    finder: InstanceFinder = Depends(get_finder),
) -> OkResponse:
    finder.save_token(body.token, body.persist)
    return OkResponse()


@router.delete("/token", response_model=OkResponse)
def clear_token(finder: InstanceFinder = Depends(get_finder)) -> OkResponse:
    finder.clear_token()
    return OkResponse()


@router.post("/token/test", response_model=OkResponse, responses=_DIRECTORY_ERRORS)
def test_token(
    body: TokenTestRequest | None = None,
    finder: InstanceFinder = Depends(get_finder),
) -> OkResponse:
    """Validate a token against the directory without touching the cache."""
    finder.test_token(body.token if body else None)
    return OkResponse()


# ── Instances ───────────────────────────────────────────────────────────────


@router.post("/instances", response_model=list[InstanceSchema], responses=_DIRECTORY_ERRORS)
def fetch_instances(
    body: FetchInstancesRequest,
    finder: InstanceFinder = Depends(get_finder),
) -> list[InstanceSchema]:
    """Fetch instances matching *params*, reusing a fresh snapshot when allowed."""
    items = finder.fetch_instances(body.params.to_domain(), body.bypass_cache)
    return [InstanceSchema.from_domain(item) for item in items]


@router.post(
    "/instances/ranked",
    response_model=list[InstanceSchema],
    responses=_DIRECTORY_ERRORS,
)
def fetch_ranked_instances(
    body: RankInstancesRequest,
    finder: InstanceFinder = Depends(get_finder),
) -> list[InstanceSchema]:
    """Fetch like ``POST /instances``, then order by preference score."""
    items = finder.fetch_instances(body.params.to_domain(), body.bypass_cache)
    ranked = finder.rank_instances(items, body.preferences.to_domain())
    return [InstanceSchema.from_domain(item) for item in ranked]


@router.delete(
    "/instances/cache",
    response_model=OkResponse,
    responses={500: {"model": ErrorResponse, "description": "Cache file could not be removed"}},
)
def clear_instances_cache(finder: InstanceFinder = Depends(get_finder)) -> OkResponse:
    finder.clear_instances_cache()
    return OkResponse()


# ── Languages ───────────────────────────────────────────────────────────────


@router.get("/languages", response_model=LanguagesResponse, responses=_DIRECTORY_ERRORS)
def fetch_languages(
    display: Literal["en", "fr"] | None = None,
    finder: InstanceFinder = Depends(get_finder),
) -> LanguagesResponse:
    """List languages observed in a large directory sample (never cached)."""
    languages = finder.fetch_languages()
    names = None
    if display is not None:
        names = {code: language_display_name(code, display) for code in languages}
    return LanguagesResponse(languages=languages, display_names=names)
