"""
API configuration and settings management.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from listing_scraper.core import DEFAULT_USER_AGENT, BrowserSettings


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    return int(value) if value else default


@dataclass
class Config:
    """Application configuration. Defaults are read from the environment."""

    # Upstream LLM
    OPENROUTER_API_KEY: Optional[str] = field(default_factory=lambda: os.getenv("OPENROUTER_API_KEY"))
    OPENROUTER_URL: str = field(default_factory=lambda: os.getenv(
        "OPENROUTER_URL", "https://openrouter.ai/api/v1/chat/completions"))
    OPENROUTER_MODEL: str = field(default_factory=lambda: os.getenv(
        "OPENROUTER_MODEL", "nvidia/nemotron-nano-12b-v2-vl:free"))
    LLM_TIMEOUT_S: float = field(default_factory=lambda: float(os.getenv("LLM_TIMEOUT_S", "120")))

    # Listing extraction
    HEADLESS: bool = field(default_factory=lambda: _env_flag("HEADLESS", "true"))
    BROWSER_SANDBOX: bool = field(default_factory=lambda: _env_flag("BROWSER_SANDBOX", "false"))
    BROWSER_USER_AGENT: str = field(default_factory=lambda: os.getenv("BROWSER_USER_AGENT", DEFAULT_USER_AGENT))
    NAVIGATION_TIMEOUT_MS: int = field(default_factory=lambda: _env_int("NAVIGATION_TIMEOUT_MS", 60_000))
    SETTLE_TIMEOUT_MS: int = field(default_factory=lambda: _env_int("SETTLE_TIMEOUT_MS", 3_500))

    # API settings
    API_TITLE: str = "Fahrzeug-Check API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "LLM-based vehicle assessment from descriptions or mobile.de links"
    HOST: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    PORT: int = field(default_factory=lambda: _env_int("PORT", 3000))

    # CORS settings
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])
    CORS_ALLOW_CREDENTIALS: bool = False
    CORS_ALLOW_METHODS: List[str] = field(default_factory=lambda: ["*"])
    CORS_ALLOW_HEADERS: List[str] = field(default_factory=lambda: ["*"])

    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    LOG_FILE: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    def browser_settings(self) -> BrowserSettings:
        return BrowserSettings(
            headless=self.HEADLESS,
            sandbox=self.BROWSER_SANDBOX,
            user_agent=self.BROWSER_USER_AGENT,
            navigation_timeout_ms=self.NAVIGATION_TIMEOUT_MS,
            settle_timeout_ms=self.SETTLE_TIMEOUT_MS,
        )

    def has_credentials(self) -> bool:
        return bool(self.OPENROUTER_API_KEY)


# Global config instance
config = Config()


def get_config() -> Config:
    """Dependency returning the process configuration."""
    return config
