"""Naver adapter — Book search via the Naver Open API.

Authenticates with two headers, ``X-Naver-Client-Id`` and
``X-Naver-Client-Secret``.

API reference:
  GET /v1/search/book.json?query=<query>&display=<page size>&start=<first index>&sort=<sim|date>
"""

from __future__ import annotations

from typing import Any

from bookbridge.adapters.base.adapter import HEALTH_CHECK_QUERY, BookSearchAdapter
from bookbridge.config.settings import NaverConfig
from bookbridge.models.request import NaverSearchRequest, Provider
from bookbridge.models.response import NaverSearchResponse


class NaverAdapter(BookSearchAdapter[NaverConfig, NaverSearchRequest, NaverSearchResponse]):
    """Dual-header-authenticated adapter for Naver."""

    provider = Provider.NAVER
    method = "GET"
    path = "/v1/search/book.json"
    request_type = NaverSearchRequest
    response_type = NaverSearchResponse

    def build_params(self, request: NaverSearchRequest) -> dict[str, Any]:
        return {
            "query": request.query,
            "display": request.display,
            "start": request.start,
            "sort": request.sort,
        }

    def build_headers(self) -> dict[str, str]:
        return {
            "X-Naver-Client-Id": self._config.client_id,
            "X-Naver-Client-Secret": self._config.client_secret,
        }

    def health_check_request(self) -> NaverSearchRequest:
        return NaverSearchRequest(query=HEALTH_CHECK_QUERY, display=1)
