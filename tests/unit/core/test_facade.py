"""Tests for the book search facade."""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator, Callable
from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pydantic
import pytest

from bookbridge.adapters.base.adapter import AdapterHealth
from bookbridge.config.settings import Settings
from bookbridge.core.facade import BookSearchFacade
from bookbridge.models.outcome import ErrorKind, Failure, Success
from bookbridge.models.request import (
    AladinSearchRequest,
    KakaoSearchRequest,
    NaverSearchRequest,
    Provider,
)

# ── Fixtures ──────────────────────────────────────────────────────────────────


@pytest.fixture
def routed_handler(
    aladin_payload: dict, kakao_payload: dict, naver_payload: dict
) -> Callable[[httpx.Request], httpx.Response]:
    """Answer each provider by host with its canned payload."""
    payloads = {"aladin.test": aladin_payload, "kakao.test": kakao_payload, "naver.test": naver_payload}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payloads[request.url.host])

    return handler


@pytest.fixture
async def facade(
    settings: Settings, recording_transport: type, routed_handler: Callable
) -> AsyncIterator[BookSearchFacade]:
    facade = BookSearchFacade.from_settings(settings, transport=recording_transport(routed_handler))
    await facade.initialize()
    yield facade
    await facade.shutdown()


# ── Construction ─────────────────────────────────────────────────────────────


class TestFacadeConstruction:
    def test_from_settings_wires_three_adapters(self, settings: Settings) -> None:
        facade = BookSearchFacade.from_settings(settings)
        assert list(facade.adapters) == [Provider.ALADIN, Provider.KAKAO, Provider.NAVER]
        assert facade.aladin.config is settings.aladin
        assert facade.naver.config.client_id == "naver-client-id"

    def test_adapters_is_a_copy(self, settings: Settings) -> None:
        facade = BookSearchFacade.from_settings(settings)
        facade.adapters.clear()
        assert len(facade.adapters) == 3


# ── Dispatch ─────────────────────────────────────────────────────────────────


class TestFacadeSearch:
    @pytest.mark.parametrize(
        "request_, host",
        [
            (AladinSearchRequest(query="clean code"), "aladin.test"),
            (KakaoSearchRequest(query="코틀린", target="title"), "kakao.test"),
            (NaverSearchRequest(query="스프링 부트"), "naver.test"),
        ],
    )
    async def test_routes_to_exactly_one_adapter(
        self, settings: Settings, recording_transport: type, routed_handler: Callable, request_: Any, host: str
    ) -> None:
        transport = recording_transport(routed_handler)
        facade = BookSearchFacade.from_settings(settings, transport=transport)
        await facade.initialize()

        outcome = await facade.search(request_)

        assert isinstance(outcome, Success)
        assert outcome.provider.value == request_.provider
        assert [r.url.host for r in transport.requests] == [host]
        await facade.shutdown()

    async def test_failure_returned_verbatim(self, facade: BookSearchFacade) -> None:
        failure = Failure(provider=Provider.KAKAO, kind=ErrorKind.UPSTREAM, status_code=401, body_snippet="denied")

        with patch.object(facade.kakao, "call", AsyncMock(return_value=failure)) as call:
            outcome = await facade.search(KakaoSearchRequest(query="코틀린"))

        assert outcome is failure
        call.assert_awaited_once()

    async def test_no_fallback_to_other_provider(self, facade: BookSearchFacade) -> None:
        failure = Failure(provider=Provider.ALADIN, kind=ErrorKind.TRANSPORT)
        naver_call = AsyncMock()

        with (
            patch.object(facade.aladin, "call", AsyncMock(return_value=failure)),
            patch.object(facade.naver, "call", naver_call),
        ):
            await facade.search(AladinSearchRequest(query="python"))

        naver_call.assert_not_awaited()

    async def test_concurrent_calls_do_not_serialize(self, facade: BookSearchFacade) -> None:
        async def slow_call(request: Any) -> Failure:
            await asyncio.sleep(0.1)
            return Failure(provider=Provider(request.provider), kind=ErrorKind.TRANSPORT)

        with patch.object(facade.naver, "call", side_effect=slow_call):
            start = time.monotonic()
            outcomes = await asyncio.gather(*(facade.search(NaverSearchRequest(query=f"q{i}")) for i in range(5)))
            elapsed = time.monotonic() - start

        assert len(outcomes) == 5
        assert elapsed < 0.4


# ── Fan-out ──────────────────────────────────────────────────────────────────


class TestFacadeSearchAll:
    async def test_all_providers(self, facade: BookSearchFacade) -> None:
        result = await facade.search_all("python")

        assert result.keyword == "python"
        assert result.successful_count == 3
        assert result.failed_count == 0
        assert result.has_any_results is True
        assert result.total_book_count == 145 + 100 + 87

    async def test_default_requests(
        self, settings: Settings, recording_transport: type, routed_handler: Callable
    ) -> None:
        transport = recording_transport(routed_handler)
        facade = BookSearchFacade.from_settings(settings, transport=transport)
        await facade.initialize()

        await facade.search_all("python")

        by_host = {r.url.host: r for r in transport.requests}
        assert by_host["aladin.test"].url.params["QueryType"] == "Keyword"
        assert by_host["kakao.test"].url.params["target"] == "title"
        assert by_host["naver.test"].url.params["display"] == "10"
        await facade.shutdown()

    async def test_subset(self, facade: BookSearchFacade) -> None:
        result = await facade.search_all("python", providers=[Provider.KAKAO])

        assert result.aladin is None
        assert result.naver is None
        assert isinstance(result.kakao, Success)
        assert result.successful_count == 1

    async def test_partial_failure(self, facade: BookSearchFacade) -> None:
        failure = Failure(provider=Provider.NAVER, kind=ErrorKind.DECODE, status_code=200)

        with patch.object(facade.naver, "call", AsyncMock(return_value=failure)):
            result = await facade.search_all("python")

        assert isinstance(result.aladin, Success)
        assert isinstance(result.kakao, Success)
        assert result.naver == failure
        assert result.successful_count == 2
        assert result.failed_count == 1
        assert result.total_book_count == 145 + 100

    async def test_blank_keyword(self, facade: BookSearchFacade) -> None:
        with pytest.raises(pydantic.ValidationError):
            await facade.search_all("   ")

    async def test_statistics(self, facade: BookSearchFacade) -> None:
        failure = Failure(provider=Provider.ALADIN, kind=ErrorKind.UPSTREAM, status_code=500)

        with patch.object(facade.aladin, "call", AsyncMock(return_value=failure)):
            stats = await facade.statistics("python")

        assert stats.keyword == "python"
        assert stats.total_results == 100 + 87
        assert stats.successful_providers == 2
        assert stats.failed_providers == 1
        assert stats.success_rate == pytest.approx(66.666, rel=1e-3)


# ── Health ───────────────────────────────────────────────────────────────────


class TestFacadeHealth:
    async def test_all_healthy(self, facade: BookSearchFacade) -> None:
        health = await facade.health_check_all()
        assert set(health) == {"aladin", "kakao", "naver"}
        assert all(h.status == "healthy" for h in health.values())

    async def test_exception_becomes_unhealthy(self, facade: BookSearchFacade) -> None:
        with patch.object(facade.kakao, "health_check", AsyncMock(side_effect=RuntimeError("boom"))):
            health = await facade.health_check_all()

        assert health["kakao"] == AdapterHealth(status="unhealthy", message="boom")
        assert health["aladin"].status == "healthy"
