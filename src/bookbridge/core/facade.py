"""Book search facade — Routes each request to exactly one provider adapter.

The facade is the single entry into the provider layer:
  - ``search`` dispatches on the request's ``provider`` tag and returns the
    adapter's ``CallOutcome`` untouched (no fallback, no auto-selection)
  - ``search_all`` fans one keyword out to several providers concurrently
    and returns their outcomes side by side (no merging or ranking)
  - ``statistics`` summarizes a fan-out search
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, overload

from bookbridge.adapters.aladin.adapter import AladinAdapter
from bookbridge.adapters.base.adapter import AdapterHealth, BookSearchAdapter
from bookbridge.adapters.kakao.adapter import KakaoAdapter
from bookbridge.adapters.naver.adapter import NaverAdapter
from bookbridge.models.outcome import CallOutcome, Failure, SearchStatistics, Success, UnifiedSearchResult
from bookbridge.models.request import (
    AladinSearchRequest,
    KakaoSearchRequest,
    NaverSearchRequest,
    Provider,
)

if TYPE_CHECKING:
    import httpx

    from bookbridge.config.settings import Settings
    from bookbridge.models.response import AladinSearchResponse, KakaoSearchResponse, NaverSearchResponse

logger = logging.getLogger(__name__)


class BookSearchFacade:
    """Aggregation facade over the Aladin, Kakao, and Naver adapters.

    Holds one adapter per provider, wired once at construction. It keeps no
    other state, so a single instance may serve unbounded concurrent callers.

    Args:
        aladin: Query-authenticated Aladin adapter.
        kakao: Header-authenticated Kakao adapter.
        naver: Dual-header-authenticated Naver adapter.
    """

    def __init__(self, aladin: AladinAdapter, kakao: KakaoAdapter, naver: NaverAdapter) -> None:
        self.aladin = aladin
        self.kakao = kakao
        self.naver = naver
        self._adapters: dict[Provider, BookSearchAdapter] = {
            Provider.ALADIN: aladin,
            Provider.KAKAO: kakao,
            Provider.NAVER: naver,
        }

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> BookSearchFacade:
        """Build the facade from application settings.

        Args:
            settings: Application settings holding the three provider configs.
            transport: Optional httpx transport shared by all adapters.
        """
        return cls(
            aladin=AladinAdapter(settings.aladin, transport=transport),
            kakao=KakaoAdapter(settings.kakao, transport=transport),
            naver=NaverAdapter(settings.naver, transport=transport),
        )

    @property
    def adapters(self) -> dict[Provider, BookSearchAdapter]:
        return dict(self._adapters)

    async def initialize(self) -> None:
        """Initialize every adapter.

        Raises:
            ConfigurationError: If any provider is missing credentials.
        """
        for adapter in self._adapters.values():
            await adapter.initialize()
        logger.info("Book search facade initialized (%s)", ", ".join(p.value for p in self._adapters))

    async def shutdown(self) -> None:
        """Close every adapter's HTTP client."""
        for provider, adapter in self._adapters.items():
            try:
                await adapter.shutdown()
            except Exception:
                logger.warning("Error shutting down adapter: %s", provider.value, exc_info=True)
        logger.info("Book search facade shut down")

    # ── Single-provider search ───────────────────────────────────────────

    @overload
    async def search(self, request: AladinSearchRequest) -> Success[AladinSearchResponse] | Failure: ...
    @overload
    async def search(self, request: KakaoSearchRequest) -> Success[KakaoSearchResponse] | Failure: ...
    @overload
    async def search(self, request: NaverSearchRequest) -> Success[NaverSearchResponse] | Failure: ...

    async def search(
        self, request: AladinSearchRequest | KakaoSearchRequest | NaverSearchRequest
    ) -> CallOutcome:
        """Route *request* to the adapter matching its ``provider`` tag.

        The adapter's outcome is returned verbatim; failures are not caught
        or rewritten here.
        """
        adapter = self._adapters[Provider(request.provider)]
        return await adapter.call(request)

    # ── Fan-out search ───────────────────────────────────────────────────

    async def search_all(
        self,
        keyword: str,
        providers: Iterable[Provider] | None = None,
    ) -> UnifiedSearchResult:
        """Search *keyword* on several providers concurrently.

        Each provider gets its default request (Aladin keyword search, Kakao
        title search, Naver defaults). Outcomes are independent: one
        provider failing does not affect the others.

        Args:
            keyword: Search keyword (must be non-blank).
            providers: Providers to query. ``None`` means all three.

        Returns:
            A ``UnifiedSearchResult`` with one outcome per selected provider.
        """
        selected = list(dict.fromkeys(providers)) if providers is not None else list(self._adapters)

        requests = {
            Provider.ALADIN: lambda: AladinSearchRequest(query=keyword),
            Provider.KAKAO: lambda: KakaoSearchRequest(query=keyword, target="title"),
            Provider.NAVER: lambda: NaverSearchRequest(query=keyword),
        }
        outcomes = await asyncio.gather(*(self.search(requests[p]()) for p in selected))

        result = UnifiedSearchResult(
            keyword=keyword,
            **{p.value: outcome for p, outcome in zip(selected, outcomes, strict=True)},
        )
        logger.info(
            "Unified search: keyword=%s, providers=%d, succeeded=%d",
            keyword,
            len(selected),
            result.successful_count,
        )
        return result

    async def statistics(self, keyword: str) -> SearchStatistics:
        """Fan *keyword* out to every provider and summarize the outcomes."""
        result = await self.search_all(keyword)
        return SearchStatistics(
            keyword=keyword,
            total_results=result.total_book_count,
            successful_providers=result.successful_count,
            failed_providers=result.failed_count,
        )

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check_all(self) -> dict[str, AdapterHealth]:
        """Probe every provider concurrently."""
        providers = list(self._adapters)
        checks = await asyncio.gather(
            *(self._adapters[p].health_check() for p in providers),
            return_exceptions=True,
        )
        results: dict[str, AdapterHealth] = {}
        for provider, check in zip(providers, checks, strict=True):
            if isinstance(check, BaseException):
                results[provider.value] = AdapterHealth(status="unhealthy", message=str(check))
            else:
                results[provider.value] = check
        return results
