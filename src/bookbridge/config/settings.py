"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables and .env (BOOKBRIDGE_ prefix)
  2. YAML config file (if specified, or named by BOOKBRIDGE_CONFIG_FILE)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, DotEnvSettingsSource, EnvSettingsSource

CONFIG_FILE_ENV = "BOOKBRIDGE_CONFIG_FILE"
"""Environment variable naming the YAML file for processes started by uvicorn."""


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=1, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class ProviderConfig(BaseModel):
    """Static configuration shared by every provider adapter.

    Read-only once loaded. Credential fields on subclasses are kept out of
    ``repr`` so that settings can be logged safely.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(description="Provider base URL")
    timeout: float = Field(default=5.0, gt=0, description="Per-call timeout in seconds")

    def credentials(self) -> dict[str, str]:
        """Return credential values keyed by field name."""
        return {}


class AladinConfig(ProviderConfig):
    """Aladin TTB API configuration."""

    base_url: str = Field(default="http://www.aladin.co.kr", description="Aladin API base URL")
    ttb_key: str = Field(default="", repr=False, description="TTB key (sent as the 'ttbkey' query parameter)")

    def credentials(self) -> dict[str, str]:
        return {"ttb_key": self.ttb_key}


class KakaoConfig(ProviderConfig):
    """Kakao Daum search API configuration."""

    base_url: str = Field(default="https://dapi.kakao.com", description="Kakao API base URL")
    rest_api_key: str = Field(default="", repr=False, description="REST API key (KakaoAK header)")

    def credentials(self) -> dict[str, str]:
        return {"rest_api_key": self.rest_api_key}


class NaverConfig(ProviderConfig):
    """Naver Open API configuration."""

    base_url: str = Field(default="https://openapi.naver.com", description="Naver API base URL")
    client_id: str = Field(default="", repr=False, description="X-Naver-Client-Id header value")
    client_secret: str = Field(default="", repr=False, description="X-Naver-Client-Secret header value")

    def credentials(self) -> dict[str, str]:
        return {"client_id": self.client_id, "client_secret": self.client_secret}


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the BOOKBRIDGE_ prefix.
    Nested settings use double underscores: BOOKBRIDGE_SERVER__PORT=9090

    Example:
        BOOKBRIDGE_ALADIN__TTB_KEY=ttb...
        BOOKBRIDGE_KAKAO__REST_API_KEY=...
        BOOKBRIDGE_NAVER__CLIENT_ID=...
        BOOKBRIDGE_NAVER__CLIENT_SECRET=...
    """

    model_config = {
        "env_prefix": "BOOKBRIDGE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    app_name: str = Field(default="BookBridge", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    server: ServerSettings = Field(default_factory=ServerSettings)
    aladin: AladinConfig = Field(default_factory=AladinConfig)
    kakao: KakaoConfig = Field(default_factory=KakaoConfig)
    naver: NaverConfig = Field(default_factory=NaverConfig)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Environment variables (and .env) win over keys in the YAML file, so a
        single ``BOOKBRIDGE_*`` variable can override one YAML value.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        for source in (DotEnvSettingsSource(cls), EnvSettingsSource(cls)):
            data = _deep_merge(data, source())
        return cls(**data)
