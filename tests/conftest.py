"""Shared test fixtures and configuration."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from bookbridge.config.settings import AladinConfig, KakaoConfig, NaverConfig, Settings


class RecordingTransport(httpx.MockTransport):
    """``httpx.MockTransport`` that keeps every outbound request it sees."""

    def __init__(self, handler: Callable[[httpx.Request], Any]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> Any:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def aladin_config() -> AladinConfig:
    return AladinConfig(base_url="http://aladin.test", ttb_key="ttb-test-key", timeout=1.0)


@pytest.fixture
def kakao_config() -> KakaoConfig:
    return KakaoConfig(base_url="https://kakao.test", rest_api_key="kakao-test-key", timeout=1.0)


@pytest.fixture
def naver_config() -> NaverConfig:
    return NaverConfig(
        base_url="https://naver.test",
        client_id="naver-client-id",
        client_secret="naver-client-secret",
        timeout=1.0,
    )


@pytest.fixture
def settings(aladin_config: AladinConfig, kakao_config: KakaoConfig, naver_config: NaverConfig) -> Settings:
    """Create a test Settings instance with fake credentials."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        aladin=aladin_config,
        kakao=kakao_config,
        naver=naver_config,
    )


@pytest.fixture
def recording_transport() -> type[RecordingTransport]:
    """The recording transport class, for tests that need a custom handler."""
    return RecordingTransport


@pytest.fixture
def json_transport() -> Callable[..., RecordingTransport]:
    """Factory for a transport answering every request with one canned response."""

    def _make(payload: Any = None, status_code: int = 200, text: str | None = None) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))

        return RecordingTransport(handler)

    return _make


# ── Provider payloads (native JSON as sent by each provider) ──


@pytest.fixture
def aladin_payload() -> dict[str, Any]:
    """Aladin ItemSearch response for 'clean code'."""
    return {
        "version": "20131101",
        "logo": "http://image.aladin.co.kr/img/header/2011/aladin_logo_new.gif",
        "title": "알라딘 검색결과 - clean code",
        "link": "http://www.aladin.co.kr/search/wsearchresult.aspx?KeyWord=clean+code",
        "pubDate": "Mon, 14 Oct 2024 10:12:45 GMT",
        "totalResults": 145,
        "startIndex": 1,
        "itemsPerPage": 10,
        "query": "clean code",
        "searchCategoryId": 0,
        "searchCategoryName": "",
        "item": [
            {
                "title": "Clean Code 클린 코드 - 애자일 소프트웨어 장인 정신",
                "link": "http://www.aladin.co.kr/shop/wproduct.aspx?ItemId=34083680",
                "author": "로버트 C. 마틴 (지은이), 박재호 (옮긴이)",
                "pubDate": "2013-12-24",
                "description": "소프트웨어 장인 정신의 정수를 담은 책.",
                "isbn": "8966260950",
                "isbn13": "9788966260959",
                "itemId": 34083680,
                "priceSales": 29700,
                "priceStandard": 33000,
                "mallType": "BOOK",
                "stockStatus": "",
                "mileage": 1650,
                "cover": "https://image.aladin.co.kr/product/3408/36/coversum/8966260950_2.jpg",
                "categoryId": 6734,
                "categoryName": "국내도서>컴퓨터/모바일>컴퓨터 공학>소프트웨어 공학",
                "publisher": "인사이트",
                "salesPoint": 12450,
                "adult": False,
                "fixedPrice": True,
                "customerReviewRank": 9,
                "bestRank": 12,
                "seriesInfo": {"seriesId": 36467, "seriesName": "프로그래밍 인사이트"},
                "subInfo": {},
            }
        ],
    }


@pytest.fixture
def kakao_payload() -> dict[str, Any]:
    """Kakao book search response for '코틀린'."""
    return {
        "documents": [
            {
                "title": "코틀린 인 액션",
                "contents": "코틀린에 대한 상세한 설명",
                "url": "https://search.daum.net/search?w=bookpage&bookId=4305011",
                "isbn": "8960777722 9788960777729",
                "datetime": "2017-10-31T00:00:00.000+09:00",
                "authors": ["드미트리 제메로프", "스베트라나 이사코바"],
                "publisher": "에이콘출판",
                "translators": ["오현석"],
                "price": 36000,
                "sale_price": 32400,
                "thumbnail": "https://search1.kakaocdn.net/thumb/R120x174.q85/?fname=cover.jpg",
                "status": "정상판매",
            }
        ],
        "meta": {"is_end": False, "pageable_count": 50, "total_count": 100},
    }


@pytest.fixture
def naver_payload() -> dict[str, Any]:
    """Naver book search response for '스프링 부트'."""
    return {
        "lastBuildDate": "Mon, 14 Oct 2024 19:25:33 +0900",
        "total": 87,
        "start": 1,
        "display": 10,
        "items": [
            {
                "title": "스프링 부트 실전 활용 마스터",
                "link": "https://search.shopping.naver.com/book/catalog/32466732305",
                "image": "https://shopping-phinf.pstatic.net/main_3246673/32466732305.20221019.jpg",
                "author": "그렉 턴키스트^오명운",
                "discount": "27000",
                "publisher": "책만",
                "pubdate": "20220325",
                "isbn": "9791189909345",
                "description": "스프링 부트에 대한 실전 가이드",
            }
        ],
    }
