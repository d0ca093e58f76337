"""
Client configuration management.

This module loads the client configuration from multiple sources with a
clear priority order:

    1. Environment variables (highest priority) - for keys and deployments
    2. Config file (config/client.ini, or an explicit path) - for static setups
    3. Built-in defaults (lowest priority) - sensible fallbacks

The ClientConfig dataclass provides typed access to all settings.

Usage:
    from linguistic.config import load_config
    from linguistic.services import Translator

    cfg = load_config()
    translator = Translator.from_config(cfg)

Environment Variable Mapping:
    LINGUISTIC_DICTIONARY_KEY  -> dictionary.key
    LINGUISTIC_PREDICTOR_KEY   -> predictor.key
    LINGUISTIC_TRANSLATOR_KEY  -> translator.key
    LINGUISTIC_HTTP_BACKEND    -> http.backend
    LINGUISTIC_TIMEOUT         -> http.timeout
    LINGUISTIC_LOG_LEVEL       -> logging.level
"""

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from linguistic.http.transport import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_TIMEOUT,
    HttpxTransport,
    RequestsTransport,
    create_transport,
)

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Config file paths
CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "client.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "client.example.ini"

SERVICES = ("dictionary", "predictor", "speller", "translator")


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class HttpSettings:
    """Transport configuration shared by all services."""

    backend: Literal["requests", "httpx"] = "requests"
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS


@dataclass
class ServiceSettings:
    """Per-service configuration."""

    key: str | None = None
    base_url: str | None = None  # None = the service's public endpoint


@dataclass
class LoggingSettings:
    """Logging configuration (applied by the CLI only)."""

    level: str = "WARNING"
    format: Literal["simple", "detailed"] = "simple"


@dataclass
class ClientConfig:
    """
    Complete client configuration.

    Aggregates the transport, per-service and logging sections.
    """

    http: HttpSettings = field(default_factory=HttpSettings)
    dictionary: ServiceSettings = field(default_factory=ServiceSettings)
    predictor: ServiceSettings = field(default_factory=ServiceSettings)
    speller: ServiceSettings = field(default_factory=ServiceSettings)
    translator: ServiceSettings = field(default_factory=ServiceSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def service_settings(self, service: str) -> ServiceSettings:
        """Settings section for a service by name."""
        if service not in SERVICES:
            raise ValueError(f"Unknown service: {service!r}")
        return getattr(self, service)

    def create_transport(self, base_url: str) -> RequestsTransport | HttpxTransport:
        """Build a transport for ``base_url`` from the ``[http]`` settings."""
        return create_transport(
            self.http.backend,
            base_url,
            timeout=self.http.timeout,
            max_workers=self.http.max_workers,
        )


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _load_from_ini(parser: configparser.ConfigParser, cfg: ClientConfig) -> None:
    """Load configuration from parsed INI file into ClientConfig."""
    # HTTP section
    if parser.has_section("http"):
        if parser.has_option("http", "backend"):
            val = parser.get("http", "backend").lower()
            if val in ("requests", "httpx"):
                cfg.http.backend = val  # type: ignore[assignment]
        if parser.has_option("http", "timeout"):
            cfg.http.timeout = parser.getfloat("http", "timeout")
        if parser.has_option("http", "max_workers"):
            cfg.http.max_workers = parser.getint("http", "max_workers")

    # Service sections
    for service in SERVICES:
        if not parser.has_section(service):
            continue
        settings = cfg.service_settings(service)
        if parser.has_option(service, "key"):
            settings.key = parser.get(service, "key").strip() or None
        if parser.has_option(service, "base_url"):
            settings.base_url = parser.get(service, "base_url").strip() or None

    # Logging section
    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in ("simple", "detailed"):
                cfg.logging.format = val  # type: ignore[assignment]


def _apply_env_overrides(cfg: ClientConfig) -> None:
    """Apply environment variable overrides to configuration."""
    # Service keys
    if env_key := os.getenv("LINGUISTIC_DICTIONARY_KEY"):
        cfg.dictionary.key = env_key
    if env_key := os.getenv("LINGUISTIC_PREDICTOR_KEY"):
        cfg.predictor.key = env_key
    if env_key := os.getenv("LINGUISTIC_TRANSLATOR_KEY"):
        cfg.translator.key = env_key

    # HTTP settings
    if env_backend := os.getenv("LINGUISTIC_HTTP_BACKEND"):
        if env_backend.lower() in ("requests", "httpx"):
            cfg.http.backend = env_backend.lower()  # type: ignore[assignment]
    if env_timeout := os.getenv("LINGUISTIC_TIMEOUT"):
        cfg.http.timeout = float(env_timeout)

    # Logging settings
    if env_log := os.getenv("LINGUISTIC_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()


def load_config(config_file: Path | str | None = None) -> ClientConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. ``config_file`` if given, else config/client.ini
        3. config/client.example.ini (fallback for development)
        4. Built-in defaults

    Args:
        config_file: Explicit INI file to read instead of the project ones.

    Returns:
        ClientConfig: Fully populated configuration object.
    """
    cfg = ClientConfig()

    # Determine which config file to use
    path: Path | None = None
    if config_file is not None:
        path = Path(config_file)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
    elif CONFIG_FILE.exists():
        path = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        # Use example as fallback for development
        path = CONFIG_EXAMPLE

    # Load from INI file if available
    if path is not None:
        parser = configparser.ConfigParser()
        parser.read(path)
        _load_from_ini(parser, cfg)

    # Apply environment variable overrides (highest priority)
    _apply_env_overrides(cfg)

    return cfg
