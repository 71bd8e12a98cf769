"""Call outcome models — Success-or-classified-failure result of one provider call.

Provider failures are data, not exceptions: a timeout, an HTTP error status,
or an undecodable body all produce a ``Failure`` carrying an ``ErrorKind``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, SerializationInfo, computed_field, field_serializer

from bookbridge.models.request import Provider

ResultT = TypeVar("ResultT")

BODY_SNIPPET_LIMIT = 200


class ErrorKind(str, Enum):
    """Classification of a failed provider call."""

    TRANSPORT = "transport"
    UPSTREAM = "upstream"
    DECODE = "decode"


class Success(BaseModel, Generic[ResultT]):
    """A provider call that returned a decoded response."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    provider: Provider = Field(description="Provider that answered")
    result: ResultT = Field(description="Decoded provider response")

    @field_serializer("result")
    def serialize_result(self, result: Any, info: SerializationInfo) -> Any:
        # Only what the provider sent, under its own field names.
        if isinstance(result, BaseModel):
            return result.model_dump(mode=info.mode, by_alias=True, exclude_unset=True)
        return result


class Failure(BaseModel):
    """A provider call that failed.

    ``status_code`` and ``body_snippet`` are set for ``upstream`` and
    ``decode`` failures only; a ``transport`` failure has no upstream data.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    provider: Provider = Field(description="Provider that was called")
    kind: ErrorKind = Field(description="Failure classification")
    status_code: int | None = Field(default=None, description="Upstream HTTP status")
    body_snippet: str | None = Field(default=None, description="Truncated upstream body")
    message: str = Field(default="", description="Human-readable diagnostic")


CallOutcome = Success | Failure
"""Either ``Success`` or ``Failure``."""


def snippet(text: str, limit: int = BODY_SNIPPET_LIMIT) -> str:
    """Truncate an upstream body for diagnostics."""
    return text if len(text) <= limit else text[:limit] + "…"


class UnifiedSearchResult(BaseModel):
    """Per-provider outcomes of one keyword fanned out to several providers.

    Outcomes are kept side by side; nothing is merged or ranked.
    """

    keyword: str
    aladin: CallOutcome | None = None
    kakao: CallOutcome | None = None
    naver: CallOutcome | None = None
    searched_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def outcomes(self) -> list[CallOutcome]:
        return [o for o in (self.aladin, self.kakao, self.naver) if o is not None]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def successful_count(self) -> int:
        return sum(1 for o in self.outcomes() if isinstance(o, Success))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes() if isinstance(o, Failure))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_any_results(self) -> bool:
        return self.successful_count > 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_book_count(self) -> int:
        """Sum of each successful provider's reported total hit count."""
        return sum(o.result.total_count for o in self.outcomes() if isinstance(o, Success))


class SearchStatistics(BaseModel):
    """Summary counts for a fanned-out keyword search."""

    keyword: str
    total_results: int = 0
    successful_providers: int = 0
    failed_providers: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success_rate(self) -> float:
        attempted = self.successful_providers + self.failed_providers
        return self.successful_providers / attempted * 100 if attempted else 0.0
