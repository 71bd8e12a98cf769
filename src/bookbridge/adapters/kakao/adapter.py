"""Kakao adapter — Book search via the Kakao (Daum) search API.

Authenticates with a single ``Authorization: KakaoAK <REST API key>`` header.

API reference:
  GET /v3/search/book?query=<query>&target=<field>&sort=<order>&page=<n>&size=<n>
"""

from __future__ import annotations

from typing import Any

from bookbridge.adapters.base.adapter import HEALTH_CHECK_QUERY, BookSearchAdapter
from bookbridge.config.settings import KakaoConfig
from bookbridge.models.request import KakaoSearchRequest, Provider
from bookbridge.models.response import KakaoSearchResponse


class KakaoAdapter(BookSearchAdapter[KakaoConfig, KakaoSearchRequest, KakaoSearchResponse]):
    """Header-authenticated adapter for Kakao."""

    provider = Provider.KAKAO
    method = "GET"
    path = "/v3/search/book"
    request_type = KakaoSearchRequest
    response_type = KakaoSearchResponse

    def build_params(self, request: KakaoSearchRequest) -> dict[str, Any]:
        params: dict[str, Any] = {
            "query": request.query,
            "sort": request.sort,
            "page": request.page,
            "size": request.size,
        }
        if request.target:
            params["target"] = request.target
        return params

    def build_headers(self) -> dict[str, str]:
        return {"Authorization": f"KakaoAK {self._config.rest_api_key}"}

    def health_check_request(self) -> KakaoSearchRequest:
        return KakaoSearchRequest(query=HEALTH_CHECK_QUERY, target="title", size=1)
