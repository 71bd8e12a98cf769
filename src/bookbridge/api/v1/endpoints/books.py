"""Book search endpoints — One route per provider plus fan-out search.

Successful calls return the provider's native JSON. Failed calls are mapped
to HTTP errors here, and only here:

| Failure kind | HTTP status |
|--------------|-------------|
| transport    | 504         |
| upstream     | 502         |
| decode       | 502         |
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from bookbridge.api.deps import get_facade
from bookbridge.core.facade import BookSearchFacade
from bookbridge.models.outcome import CallOutcome, ErrorKind, SearchStatistics, Success, UnifiedSearchResult
from bookbridge.models.request import (
    AladinSearchRequest,
    KakaoSearchRequest,
    NaverSearchRequest,
    Provider,
    SearchRequestBody,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books")

_FAILURE_STATUS: dict[ErrorKind, int] = {
    ErrorKind.TRANSPORT: 504,
    ErrorKind.UPSTREAM: 502,
    ErrorKind.DECODE: 502,
}

_ERROR_RESPONSES: dict[int | str, dict] = {
    422: {"description": "Validation error — missing or blank query, out-of-range paging, unknown enum value"},
    502: {"description": "Provider returned an error status or an undecodable body"},
    504: {"description": "Provider timed out or could not be reached"},
}


def _to_response(outcome: CallOutcome) -> JSONResponse:
    """Render a call outcome as the provider's JSON or raise the mapped HTTP error."""
    if isinstance(outcome, Success):
        return JSONResponse(content=outcome.result.model_dump(mode="json", by_alias=True, exclude_unset=True))

    logger.warning(
        "Provider call failed: provider=%s, kind=%s, upstream_status=%s",
        outcome.provider.value,
        outcome.kind.value,
        outcome.status_code,
    )
    raise HTTPException(
        status_code=_FAILURE_STATUS[outcome.kind],
        detail={
            "provider": outcome.provider.value,
            "kind": outcome.kind.value,
            "upstream_status": outcome.status_code,
            "message": outcome.message,
        },
    )


def _require_keyword(keyword: str) -> str:
    if not keyword.strip():
        raise HTTPException(status_code=422, detail="keyword must not be blank")
    return keyword


@router.post(
    "/aladin",
    summary="Aladin Book Search",
    description="Search Aladin's ItemSearch API. Returns Aladin's native JSON response.",
    responses=_ERROR_RESPONSES,
)
async def search_aladin(
    request: AladinSearchRequest,
    facade: BookSearchFacade = Depends(get_facade),
) -> JSONResponse:
    return _to_response(await facade.search(request))


@router.post(
    "/kakao",
    summary="Kakao Book Search",
    description="Search Kakao's book API. Returns Kakao's native JSON response.",
    responses=_ERROR_RESPONSES,
)
async def search_kakao(
    request: KakaoSearchRequest,
    facade: BookSearchFacade = Depends(get_facade),
) -> JSONResponse:
    return _to_response(await facade.search(request))


@router.post(
    "/naver",
    summary="Naver Book Search",
    description="Search Naver's book API. Returns Naver's native JSON response.",
    responses=_ERROR_RESPONSES,
)
async def search_naver(
    request: NaverSearchRequest,
    facade: BookSearchFacade = Depends(get_facade),
) -> JSONResponse:
    return _to_response(await facade.search(request))


@router.post(
    "/search",
    summary="Book Search (any provider)",
    description=(
        "Search one provider chosen by the body's `provider` field "
        "(`aladin`, `kakao` or `naver`). The remaining fields are those of "
        "the provider-specific endpoint."
    ),
    responses=_ERROR_RESPONSES,
)
async def search(
    body: SearchRequestBody,
    facade: BookSearchFacade = Depends(get_facade),
) -> JSONResponse:
    return _to_response(await facade.search(body.root))


@router.get(
    "/unified",
    response_model=UnifiedSearchResult,
    summary="Unified Search",
    description=(
        "Search a keyword on the selected providers concurrently. Each provider's "
        "outcome is returned side by side; results are not merged."
    ),
)
async def unified_search(
    keyword: str = Query(min_length=1, max_length=500, description="Search keyword"),
    include_aladin: bool = Query(default=True),
    include_kakao: bool = Query(default=True),
    include_naver: bool = Query(default=True),
    facade: BookSearchFacade = Depends(get_facade),
) -> JSONResponse:
    _require_keyword(keyword)
    flags = {
        Provider.ALADIN: include_aladin,
        Provider.KAKAO: include_kakao,
        Provider.NAVER: include_naver,
    }
    result = await facade.search_all(keyword, providers=[p for p, on in flags.items() if on])
    # Serialized here: re-validating would turn provider results into plain dicts.
    return JSONResponse(content=result.model_dump(mode="json"))


@router.get(
    "/statistics",
    response_model=SearchStatistics,
    summary="Search Statistics",
    description="Total hit counts and provider success rate for a keyword across all providers.",
)
async def search_statistics(
    keyword: str = Query(min_length=1, max_length=500, description="Search keyword"),
    facade: BookSearchFacade = Depends(get_facade),
) -> SearchStatistics:
    _require_keyword(keyword)
    return await facade.statistics(keyword)
