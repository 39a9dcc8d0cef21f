# =============================================================================
# core/settings.py  —  Runtime configuration
# =============================================================================
#
# Settings come from environment variables, optionally loaded from a .env
# file first.  Every value has a default, so a bare `inventory-mcp-server`
# starts an in-memory inventory seeded with sample data.
#
#   INVENTORY_DB_PATH            SQLite path              (":memory:")
#   INVENTORY_SEED_SAMPLE_DATA   Seed sample products     ("true")
#   INVENTORY_LOG_LEVEL          Logging level name       ("INFO")
#   INVENTORY_SERVER_NAME        MCP server identity      ("product-inventory")
#   INVENTORY_AGENT_MODEL        LiteLlm model string     ("openrouter/openai/gpt-4o")
#
# Unparseable values fail fast with ConfigurationError at startup.
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigurationError(Exception):
    """Raised when a configuration value is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration for the server and the demo agent."""

    db_path: str = ":memory:"
    seed_sample_data: bool = True
    log_level: str = "INFO"
    server_name: str = "product-inventory"
    agent_model: str = "openrouter/openai/gpt-4o"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _get_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _parse_bool(key: str, raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Environment variable '{key}' must be a boolean (true/false), got {raw!r}."
    )


def _parse_log_level(key: str, raw: str) -> str:
    level = raw.upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"Environment variable '{key}' must be one of {sorted(_LOG_LEVELS)}, got {raw!r}."
        )
    return level


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from the environment.

    Args:
        dotenv: Load a .env file (if present) before reading the environment.
            Values already set in the environment take precedence.

    Raises:
        ConfigurationError: If a value cannot be parsed.
    """
    if dotenv:
        load_dotenv()

    defaults = Settings()
    return Settings(
        db_path=_get_env("INVENTORY_DB_PATH", defaults.db_path),
        seed_sample_data=_parse_bool(
            "INVENTORY_SEED_SAMPLE_DATA",
            _get_env("INVENTORY_SEED_SAMPLE_DATA", "true"),
        ),
        log_level=_parse_log_level(
            "INVENTORY_LOG_LEVEL",
            _get_env("INVENTORY_LOG_LEVEL", defaults.log_level),
        ),
        server_name=_get_env("INVENTORY_SERVER_NAME", defaults.server_name),
        agent_model=_get_env("INVENTORY_AGENT_MODEL", defaults.agent_model),
    )


# Module-level singleton for convenience
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the cached Settings, loading them on first access."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() reloads."""
    global _settings
    _settings = None
