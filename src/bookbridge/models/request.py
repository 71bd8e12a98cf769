"""Search request models — One validated variant per book provider.

The ``provider`` field is the variant tag. The union ``SearchRequest`` is
discriminated on it, so an incoming JSON body is routed to exactly one
model (and later to exactly one adapter).
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel


class Provider(str, Enum):
    """Supported book-search providers."""

    ALADIN = "aladin"
    KAKAO = "kakao"
    NAVER = "naver"


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("query must not be blank")
    return value


QueryText = Annotated[str, Field(min_length=1, max_length=500), AfterValidator(_require_text)]


class AladinSearchRequest(BaseModel):
    """Aladin ItemSearch request.

    JSON field names follow Aladin's camelCase convention
    (``queryType``, ``maxResults``, ``searchTarget``).
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    provider: Literal["aladin"] = Field(default="aladin", description="Variant tag")
    query: QueryText = Field(description="Search keyword")
    query_type: Literal["Keyword", "Title", "Author", "Publisher"] = Field(
        default="Keyword",
        description="Keyword (title+author), Title, Author or Publisher search",
    )
    max_results: int = Field(default=10, ge=1, le=100, description="Results per page")
    start: int = Field(default=1, ge=1, description="Result page to start from")
    search_target: Literal["Book", "Foreign", "Music", "DVD", "Used", "eBook", "All"] = Field(
        default="Book",
        description="Mall to search",
    )
    sort: Literal["Accuracy", "PublishTime", "Title", "SalesPoint", "CustomerRating", "MyReviewCount"] = Field(
        default="PublishTime",
        description="Sort order",
    )
    output: Literal["JS"] = Field(default="JS", description="Response format (JSON)")
    version: str = Field(default="20131101", description="ItemSearch API version")


class KakaoSearchRequest(BaseModel):
    """Kakao (Daum) book search request."""

    model_config = ConfigDict(frozen=True)

    provider: Literal["kakao"] = Field(default="kakao", description="Variant tag")
    query: QueryText = Field(description="Search keyword")
    target: Literal["title", "isbn", "publisher", "person"] | None = Field(
        default=None,
        description="Restrict the search to one field",
    )
    sort: Literal["accuracy", "latest"] = Field(default="accuracy", description="Sort order")
    page: int = Field(default=1, ge=1, le=50, description="Result page")
    size: int = Field(default=10, ge=1, le=50, description="Documents per page")


class NaverSearchRequest(BaseModel):
    """Naver book search request.

    ``start`` is the 1-based index of the first result and ``display`` is the
    page size. They are independent parameters on the wire.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    provider: Literal["naver"] = Field(default="naver", description="Variant tag")
    query: QueryText = Field(
        description="Search keyword (title, ISBN, author)",
        validation_alias=AliasChoices("query", "keyword"),
    )
    display: int = Field(default=10, ge=1, le=100, description="Results per page")
    start: int = Field(default=1, ge=1, le=1000, description="Index of the first result")
    sort: Literal["sim", "date"] = Field(default="sim", description="Similarity or publication date")


SearchRequest = Annotated[
    AladinSearchRequest | KakaoSearchRequest | NaverSearchRequest,
    Field(discriminator="provider"),
]
"""Tagged union over the three provider request variants."""


class SearchRequestBody(RootModel[SearchRequest]):
    """Request body accepting any provider variant, selected by ``provider``."""
