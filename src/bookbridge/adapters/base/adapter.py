"""Base book-search adapter — Shared contract for all provider connectors.

Every provider adapter declares *what* goes on the wire (HTTP method, path,
query parameters, auth headers, response schema). This base class owns *how*
a call is made and classified:
  1. Reject a request meant for another provider (programming error)
  2. Issue exactly one HTTP exchange, bounded by the configured timeout
  3. Decode a 2xx body into the provider's response model
  4. Turn every provider-side failure into a ``Failure`` outcome

Adapters hold no mutable state besides their HTTP client, so one instance
can serve any number of concurrent calls.
"""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

import httpx
import pydantic
from pydantic import BaseModel, Field

from bookbridge.adapters.base.exceptions import ConfigurationError, ConnectionError, ValidationError
from bookbridge.config.settings import ProviderConfig
from bookbridge.models.outcome import ErrorKind, Failure, Success, snippet
from bookbridge.models.request import Provider

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)
ConfigT = TypeVar("ConfigT", bound=ProviderConfig)

HEALTH_CHECK_QUERY = "health-check"


class AdapterHealth(BaseModel):
    """Health status of a provider adapter."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class BookSearchAdapter(ABC, Generic[ConfigT, RequestT, ResponseT]):
    """Abstract base class for book provider adapters.

    Subclasses set the class attributes below and implement:
      - build_params(): map a request to the provider's query parameters
      - build_headers(): provider auth headers (may be empty)
      - health_check_request(): a minimal request used by ``health_check``

    Args:
        config: Provider configuration (base URL, credentials, timeout).
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    provider: ClassVar[Provider]
    method: ClassVar[str]
    path: ClassVar[str]
    request_type: ClassVar[type[BaseModel]]
    response_type: ClassVar[type[BaseModel]]

    def __init__(self, config: ConfigT, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return self.provider.value

    @property
    def config(self) -> ConfigT:
        return self._config

    # ── Wire format (per provider) ───────────────────────────────────────

    @abstractmethod
    def build_params(self, request: RequestT) -> dict[str, Any]:
        """Map a validated request to the provider's query parameters."""

    def build_headers(self) -> dict[str, str]:
        """Authentication headers sent with every call."""
        return {}

    @abstractmethod
    def health_check_request(self) -> RequestT:
        """Smallest valid request used to probe the provider."""

    # ── Lifecycle ────────────────────────────────────────────────────────

    async def initialize(self) -> None:
        """Create the pooled HTTP client.

        Raises:
            ConfigurationError: If a credential is missing.
        """
        missing = [key for key, value in self._config.credentials().items() if not value]
        if missing:
            raise ConfigurationError(
                f"{self.name} adapter is missing credentials: {', '.join(missing)}. "
                f"Set them via BOOKBRIDGE_{self.name.upper()}__<FIELD>."
            )

        self._client = httpx.AsyncClient(
            base_url=self._config.base_url.rstrip("/"),
            headers={"Accept": "application/json", **self.build_headers()},
            timeout=httpx.Timeout(self._config.timeout),
            transport=self._transport,
        )
        logger.info("%s adapter initialized (base_url: %s)", self.name, self._config.base_url)

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Call ─────────────────────────────────────────────────────────────

    async def call(self, request: RequestT) -> Success[ResponseT] | Failure:
        """Execute one search against the provider.

        Args:
            request: A request of this adapter's variant.

        Returns:
            ``Success`` with the decoded response, or a classified ``Failure``.

        Raises:
            ValidationError: If *request* belongs to another provider.
            ConnectionError: If the adapter was not initialized.
        """
        if not isinstance(request, self.request_type):
            raise ValidationError(
                f"{self.name} adapter cannot handle {type(request).__name__}; "
                f"expected {self.request_type.__name__}"
            )
        if not self._client:
            raise ConnectionError(f"{self.name} client not initialized.")

        params = self.build_params(request)
        start = time.monotonic()
        try:
            async with asyncio.timeout(self._config.timeout):
                response = await self._client.request(self.method, self.path, params=params)
        except (TimeoutError, httpx.RequestError) as e:
            logger.warning(
                "%s transport failure after %dms: %s",
                self.name,
                int((time.monotonic() - start) * 1000),
                type(e).__name__,
            )
            return Failure(
                provider=self.provider,
                kind=ErrorKind.TRANSPORT,
                message=f"{self.name} request failed: {type(e).__name__}",
            )

        took_ms = int((time.monotonic() - start) * 1000)

        if not response.is_success:
            logger.warning("%s upstream error: status=%d, took=%dms", self.name, response.status_code, took_ms)
            return Failure(
                provider=self.provider,
                kind=ErrorKind.UPSTREAM,
                status_code=response.status_code,
                body_snippet=snippet(response.text),
                message=f"{self.name} API error ({response.status_code})",
            )

        try:
            result = self.response_type.model_validate_json(response.content)
        except pydantic.ValidationError as e:
            logger.warning(
                "%s decode error: status=%d, errors=%d",
                self.name,
                response.status_code,
                e.error_count(),
            )
            return Failure(
                provider=self.provider,
                kind=ErrorKind.DECODE,
                status_code=response.status_code,
                body_snippet=snippet(response.text),
                message=f"{self.name} response did not match the expected schema",
            )

        logger.debug(
            "%s search: query=%s, status=%d, took=%dms",
            self.name,
            getattr(request, "query", ""),
            response.status_code,
            took_ms,
        )
        return Success(provider=self.provider, result=result)

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check(self) -> AdapterHealth:
        """Probe the provider with a minimal search."""
        if not self._client:
            return AdapterHealth(status="unhealthy", message="Client not initialized")

        start = time.monotonic()
        outcome = await self.call(self.health_check_request())
        latency_ms = int((time.monotonic() - start) * 1000)
        now = datetime.now(UTC).isoformat()

        if isinstance(outcome, Success):
            return AdapterHealth(status="healthy", latency_ms=latency_ms, last_check=now, message=f"{self.name} OK")
        if outcome.kind is ErrorKind.TRANSPORT:
            return AdapterHealth(status="unhealthy", latency_ms=latency_ms, last_check=now, message=outcome.message)
        return AdapterHealth(status="degraded", latency_ms=latency_ms, last_check=now, message=outcome.message)
