# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Every section reads only <SECTION>__<KEY> variables, e.g. LOGGING__LEVEL,
STORE__URL. The CI workflow secret names (YOUR_EMAIL, RESEND_API_KEY,
SUPABASE_URL, SUPABASE_KEY) are read at the root and folded into their
section when the nested form is unset.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HOUSE_WATCHER_URL = "https://house-stock-watcher-data.s3-us-west-2.amazonaws.com/data/all_transactions.json"
SENATE_WATCHER_URL = "https://senate-stock-watcher-data.s3-us-west-2.amazonaws.com/aggregate/all_transactions.json"

# (section, key, root field read from the CI workflow secret of the same name)
_LEGACY_ENV_NAMES: tuple[tuple[str, str, str], ...] = (
    ("store", "url", "supabase_url"),
    ("store", "api_key", "supabase_key"),
    ("email", "api_key", "resend_api_key"),
    ("email", "recipient", "your_email"),
)


def _split_csv(raw: str) -> list[str]:
    if not raw or not raw.strip():
        return []
    return [s.strip() for s in raw.split(",") if s.strip()]


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(env_prefix="APP__", extra="ignore")

    app_name: str = "congress-trade-alerts"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(env_prefix="LOGGING__", extra="ignore")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    # Console (stderr) renderer: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False
    # When set, events are also appended here as JSON lines
    file_path: Optional[str] = None

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ApiSettings(BaseSettings):
    """Outbound HTTP configuration shared by every client."""

    model_config = SettingsConfigDict(env_prefix="API__", extra="ignore")

    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="Total timeout for every outbound HTTP request, in seconds.",
    )
    user_agent: str = Field(
        default="Mozilla/5.0",
        description="User-Agent header sent to trade sources.",
    )


class SourceSettings(BaseSettings):
    """Trade sources, tried in order until one yields an eligible trade."""

    model_config = SettingsConfigDict(env_prefix="SOURCE__", extra="ignore")

    # Raw strings so pydantic-settings does not try to JSON-decode list values.
    json_urls_raw: str = Field(
        default=f"{HOUSE_WATCHER_URL},{SENATE_WATCHER_URL}",
        description="JSON feed URLs, comma-separated. Env: SOURCE__JSON_URLS.",
    )
    html_urls_raw: str = Field(
        default="",
        description="HTML pages with a trade table, comma-separated. Env: SOURCE__HTML_URLS.",
    )
    trades_limit: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Maximum number of most recent trades taken from a source per run.",
    )

    @model_validator(mode="before")
    @classmethod
    def _accept_list_names(cls, data: Any) -> Any:
        """Accept json_urls/html_urls (the SOURCE__ env names) for the raw fields."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name in ("json_urls", "html_urls"):
            if name in data:
                data.setdefault(f"{name}_raw", data.pop(name))
        return data

    @computed_field
    @property
    def json_urls(self) -> list[str]:
        """Parse comma-separated json_urls_raw into a list of stripped strings."""
        return _split_csv(self.json_urls_raw)

    @computed_field
    @property
    def html_urls(self) -> list[str]:
        """Parse comma-separated html_urls_raw into a list of stripped strings."""
        return _split_csv(self.html_urls_raw)


class StoreSettings(BaseSettings):
    """Seen-trade store (Supabase / PostgREST)."""

    model_config = SettingsConfigDict(env_prefix="STORE__", extra="ignore")

    url: Optional[str] = Field(
        default=None,
        description="Store base URL. Env: STORE__URL or SUPABASE_URL.",
    )
    api_key: Optional[str] = Field(
        default=None,
        description="Store API key. Env: STORE__API_KEY or SUPABASE_KEY.",
    )
    rest_path: str = Field(default="/rest/v1", description="REST prefix appended to url.")
    table: str = Field(default="seen_trades", description="Table holding seen trade ids.")

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.url.strip() and self.api_key and self.api_key.strip())


class EmailNotificationSettings(BaseSettings):
    """Email digest delivery (Resend API)."""

    model_config = SettingsConfigDict(env_prefix="EMAIL__", extra="ignore")

    api_key: Optional[str] = Field(
        default=None,
        description="Email API key. Env: EMAIL__API_KEY or RESEND_API_KEY.",
    )
    recipient: Optional[str] = Field(
        default=None,
        description="Digest recipient. Env: EMAIL__RECIPIENT or YOUR_EMAIL.",
    )
    sender: str = Field(default="alerts@resend.dev", description="From address.")
    api_base: str = Field(default="https://api.resend.com", description="Email API base URL.")

    @property
    def is_configured(self) -> bool:
        return bool(
            self.api_key and self.api_key.strip() and self.recipient and self.recipient.strip()
        )


class NotificationSettings(BaseSettings):
    """Digest formatting."""

    model_config = SettingsConfigDict(env_prefix="NOTIFICATIONS__", extra="ignore")

    max_items: int = Field(
        default=10,
        ge=1,
        le=200,
        description="Maximum trades listed in a digest before the '... and N more' line.",
    )
    site_url: str = Field(
        default="https://housestockwatcher.com/",
        description="Link appended to the digest footer.",
    )


class ConsoleNotificationSettings(BaseSettings):
    """Console notification settings."""

    model_config = SettingsConfigDict(env_prefix="CONSOLE__", extra="ignore")

    # Forced on by the container when email is not configured.
    enabled: bool = False


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__LEVEL, SOURCE__TRADES_LIMIT.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    source: SourceSettings = Field(default_factory=SourceSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)
    email: EmailNotificationSettings = Field(default_factory=EmailNotificationSettings)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    console: ConsoleNotificationSettings = Field(default_factory=ConsoleNotificationSettings)

    supabase_url: Optional[str] = Field(default=None, exclude=True)
    supabase_key: Optional[str] = Field(default=None, exclude=True)
    resend_api_key: Optional[str] = Field(default=None, exclude=True)
    your_email: Optional[str] = Field(default=None, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_names(cls, data: Any) -> Any:
        """Copy CI secret names into store/email where the nested key is unset."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for section, key, legacy in _LEGACY_ENV_NAMES:
            value = data.get(legacy)
            current = data.get(section)
            if value is None or not (current is None or isinstance(current, dict)):
                continue
            data[section] = {key: value, **(current or {})}
        return data

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(store={"url": "https://x.supabase.co", "api_key": "k"})
        - from_env(source={"trades_limit": 5})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from congress_trade_alerts.config import get_settings

        settings = get_settings()
        timeout = settings.api.timeout_seconds
        store_configured = settings.store.is_configured
    """
    return Settings()
