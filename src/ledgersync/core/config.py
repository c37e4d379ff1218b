#!/usr/bin/env python3
"""
Configuration Management for ledgersync

Settings come from environment variables (a local .env file is honoured) and
are grouped per concern: YNAB access, sync behaviour and the on-disk layout.
Each environment (development, test, production) gets its own defaults.
"""

import logging
import os
import tempfile
from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

REDACTED = "***REDACTED***"
SENSITIVE_FIELDS = ("ynab.api_token",)

LOG_FORMATS = {
    "development": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "test": "%(levelname)s %(name)s: %(message)s",
    "production": "%(asctime)s - %(levelname)s - %(message)s",
}


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class Backend(Enum):
    """Replay backends that can apply a sync plan."""

    API = "api"
    FILE = "file"


def _env_flag(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes")


def _env_list(name: str) -> list[str]:
    raw = os.getenv(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def _default_year_prefixes() -> list[str]:
    """Current and previous calendar year, newest first."""
    this_year = date.today().year
    return [str(this_year), str(this_year - 1)]


@dataclass
class YNABConfig:
    """YNAB API access."""

    api_token: str | None = None
    budget_id: str | None = None  # first budget returned by the API when unset
    base_url: str = "https://api.ynab.com/v1"
    timeout: int = 30
    rate_limit_delay: float = 0.5  # seconds between update calls

    @classmethod
    def from_environment(cls) -> "YNABConfig":
        return cls(
            api_token=os.getenv("YNAB_API_TOKEN") or None,
            budget_id=os.getenv("YNAB_BUDGET_ID") or None,
            base_url=os.getenv("YNAB_BASE_URL", cls.base_url),
            timeout=int(os.getenv("YNAB_TIMEOUT", str(cls.timeout))),
            rate_limit_delay=float(os.getenv("YNAB_RATE_LIMIT_DELAY", str(cls.rate_limit_delay))),
        )

    def validate(self, environment: Environment) -> list[str]:
        errors = []
        if environment == Environment.PRODUCTION and not self.api_token:
            errors.append("YNAB_API_TOKEN is required in production")
        if self.timeout <= 0:
            errors.append("YNAB timeout must be positive")
        if self.rate_limit_delay < 0:
            errors.append("YNAB rate limit delay must be non-negative")
        return errors


@dataclass
class SyncConfig:
    """Reconciliation settings."""

    output_dir: Path
    year_prefixes: list[str] = field(default_factory=_default_year_prefixes)
    backend: Backend = Backend.API
    strict_fingerprints: bool = False

    @classmethod
    def from_environment(cls, output_dir: Path) -> "SyncConfig":
        return cls(
            output_dir=output_dir,
            year_prefixes=_env_list("LEDGERSYNC_YEARS") or _default_year_prefixes(),
            backend=Backend(os.getenv("LEDGERSYNC_BACKEND", Backend.API.value)),
            strict_fingerprints=_env_flag("LEDGERSYNC_STRICT"),
        )

    def validate(self) -> list[str]:
        return [f"Year prefix must be numeric: {p!r}" for p in self.year_prefixes if not p.isdigit()]


@dataclass
class Config:
    """
    Top-level ledgersync configuration.

    Directory layout under ``data_dir``:
        ynab/cache/   cached accounts.json and transactions.json
        sync/         import files and diagnostics from sync runs
    """

    environment: Environment

    data_dir: Path
    cache_dir: Path
    output_dir: Path

    ynab: YNABConfig
    sync: SyncConfig

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("LEDGERSYNC_ENV", Environment.DEVELOPMENT.value))

        if env == Environment.TEST:
            fallback = Path(tempfile.gettempdir()) / "test_ledgersync"
            data_dir = Path(os.getenv("LEDGERSYNC_DATA_DIR", str(fallback)))
        else:
            data_dir = Path(os.getenv("LEDGERSYNC_DATA_DIR", "./data")).expanduser().resolve()

        cache_dir = data_dir / "ynab" / "cache"
        output_dir = data_dir / "sync"
        for directory in (data_dir, cache_dir, output_dir):
            directory.mkdir(parents=True, exist_ok=True)

        return cls(
            environment=env,
            data_dir=data_dir,
            cache_dir=cache_dir,
            output_dir=output_dir,
            ynab=YNABConfig.from_environment(),
            sync=SyncConfig.from_environment(output_dir),
            debug=_env_flag("DEBUG"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = [
            f"{name} does not exist: {path}"
            for name, path in (("data_dir", self.data_dir), ("cache_dir", self.cache_dir), ("output_dir", self.output_dir))
            if not path.exists()
        ]
        errors.extend(self.ynab.validate(self.environment))
        errors.extend(self.sync.validate())
        return errors

    def setup_logging(self) -> None:
        """Configure root logging for the current environment."""
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.INFO),
            format=LOG_FORMATS[self.environment.value],
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # HTTP libraries log every request at INFO/DEBUG
        if self.environment == Environment.PRODUCTION:
            for name in ("urllib3", "requests"):
                logging.getLogger(name).setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list[str]:
        return list(SENSITIVE_FIELDS)

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Plain-JSON view of the configuration; secrets are redacted unless requested."""
        result = {name: _jsonable(value) for name, value in asdict(self).items()}

        if not include_sensitive:
            for dotted in self.get_sensitive_fields():
                section, key = dotted.split(".")
                if result[section].get(key):
                    result[section][key] = REDACTED

        return result


def _jsonable(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


_config: Config | None = None


def get_config() -> Config:
    """Return the process-wide configuration, loading and validating it on first use."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Drop the cached configuration and load it again from the environment."""
    global _config
    _config = None
    return get_config()


def get_data_dir() -> Path:
    return get_config().data_dir
