"""Aladin adapter — Book search via the Aladin TTB ItemSearch API.

The TTB key travels as a query parameter and the call is a ``POST`` with an
empty body; every filter is a query parameter as well.

API reference:
  POST /ttb/api/ItemSearch.aspx
    ?ttbkey=<key>&Query=<query>&QueryType=<type>&MaxResults=<n>&start=<page>
    &SearchTarget=<mall>&Sort=<order>&output=JS&Version=20131101

Usage::

    adapter = AladinAdapter(AladinConfig(ttb_key="ttb..."))
    await adapter.initialize()
    outcome = await adapter.call(AladinSearchRequest(query="clean code"))
"""

from __future__ import annotations

from typing import Any

from bookbridge.adapters.base.adapter import HEALTH_CHECK_QUERY, BookSearchAdapter
from bookbridge.config.settings import AladinConfig
from bookbridge.models.request import AladinSearchRequest, Provider
from bookbridge.models.response import AladinSearchResponse


class AladinAdapter(BookSearchAdapter[AladinConfig, AladinSearchRequest, AladinSearchResponse]):
    """Query-authenticated adapter for Aladin."""

    provider = Provider.ALADIN
    method = "POST"
    path = "/ttb/api/ItemSearch.aspx"
    request_type = AladinSearchRequest
    response_type = AladinSearchResponse

    def build_params(self, request: AladinSearchRequest) -> dict[str, Any]:
        return {
            "ttbkey": self._config.ttb_key,
            "Query": request.query,
            "QueryType": request.query_type,
            "MaxResults": request.max_results,
            "start": request.start,
            "SearchTarget": request.search_target,
            "Sort": request.sort,
            "output": request.output,
            "Version": request.version,
        }

    def health_check_request(self) -> AladinSearchRequest:
        return AladinSearchRequest(query=HEALTH_CHECK_QUERY, max_results=1)
