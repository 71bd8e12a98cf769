"""Provider response models — Native search payloads, one schema per provider.

Field names are Pythonic; aliases keep the provider's wire names so that
``model_dump(by_alias=True, exclude_unset=True)`` reproduces the provider
JSON; defaults fill in only for attribute access. Unknown fields
are retained (``extra="allow"``) so nothing the provider sends is lost.
No normalization across providers happens here.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ═══════════════════════════════════════════════════════════════════════════════
# Aladin
# ═══════════════════════════════════════════════════════════════════════════════


class _AladinModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", alias_generator=to_camel, populate_by_name=True)


class AladinItem(_AladinModel):
    """A single Aladin catalogue item."""

    title: str
    link: str = ""
    author: str = ""
    pub_date: str = ""
    description: str = ""
    isbn: str = ""
    isbn13: str = ""
    item_id: int | None = None
    price_sales: int | None = None
    price_standard: int | None = None
    mall_type: str = ""
    stock_status: str = ""
    mileage: int | None = None
    cover: str = ""
    category_id: int | None = None
    category_name: str = ""
    publisher: str = ""
    sales_point: int | None = None
    adult: bool | None = None
    fixed_price: bool | None = None
    customer_review_rank: float | None = None
    best_rank: int | None = None
    series_info: dict[str, Any] | None = None
    sub_info: dict[str, Any] | None = None


class AladinSearchResponse(_AladinModel):
    """Aladin ItemSearch response (``output=JS``)."""

    version: str = ""
    logo: str = ""
    title: str = ""
    link: str = ""
    pub_date: str = ""
    total_results: int
    start_index: int
    items_per_page: int | None = None
    query: str = ""
    search_category_id: int | None = None
    search_category_name: str = ""
    item: list[AladinItem]

    @property
    def total_count(self) -> int:
        return self.total_results


# ═══════════════════════════════════════════════════════════════════════════════
# Kakao
# ═══════════════════════════════════════════════════════════════════════════════


class KakaoDocument(BaseModel):
    """A single Kakao book document."""

    model_config = ConfigDict(frozen=True, extra="allow")

    title: str
    contents: str = ""
    url: str = ""
    isbn: str = Field(default="", description="Space-separated ISBN10 and ISBN13")
    datetime: str = Field(default="", description="Publication timestamp (ISO 8601)")
    authors: list[str] = Field(default_factory=list)
    publisher: str = ""
    translators: list[str] = Field(default_factory=list)
    price: int | None = None
    sale_price: int | None = None
    thumbnail: str = ""
    status: str = ""


class KakaoMeta(BaseModel):
    """Kakao pagination metadata."""

    model_config = ConfigDict(frozen=True, extra="allow")

    total_count: int
    pageable_count: int
    is_end: bool


class KakaoSearchResponse(BaseModel):
    """Kakao book search response."""

    model_config = ConfigDict(frozen=True, extra="allow")

    documents: list[KakaoDocument]
    meta: KakaoMeta

    @property
    def total_count(self) -> int:
        return self.meta.total_count


# ═══════════════════════════════════════════════════════════════════════════════
# Naver
# ═══════════════════════════════════════════════════════════════════════════════


class NaverItem(BaseModel):
    """A single Naver book item."""

    model_config = ConfigDict(frozen=True, extra="allow")

    title: str
    link: str = ""
    image: str = ""
    author: str = Field(default="", description="Authors joined with '^'")
    price: str | None = None
    discount: str = ""
    publisher: str = ""
    pubdate: str = Field(default="", description="Publication date (YYYYMMDD)")
    isbn: str = ""
    description: str = ""


class NaverSearchResponse(BaseModel):
    """Naver book search response."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    last_build_date: str = Field(default="", alias="lastBuildDate")
    total: int
    start: int
    display: int
    items: list[NaverItem]

    @property
    def total_count(self) -> int:
        return self.total

