"""petcli configuration: Pydantic model, load, and save."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from petcli.core.constants import (
    CONFIG_FILENAME,
    DB_FILENAME,
    DEFAULT_TICK_RATE_MS,
    LOG_FILENAME,
    MAX_TICK_RATE_MS,
    MIN_TICK_RATE_MS,
    PETCLI_DIR_NAME,
)
from petcli.core.exceptions import ConfigError, ConfigNotFoundError


def petcli_dir() -> Path:
    """Return the petcli home directory (~/.petcli), creating it if needed."""
    d = Path.home() / PETCLI_DIR_NAME
    d.mkdir(mode=0o700, parents=True, exist_ok=True)
    return d


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class StoreConfig(BaseModel):
    path: str = ""  # empty → use default


class UIConfig(BaseModel):
    tick_rate_ms: int = DEFAULT_TICK_RATE_MS

    @field_validator("tick_rate_ms")
    @classmethod
    def validate_tick_rate(cls, v: int) -> int:
        if not (MIN_TICK_RATE_MS <= v <= MAX_TICK_RATE_MS):
            raise ValueError(
                f"tick_rate_ms must be between {MIN_TICK_RATE_MS} and {MAX_TICK_RATE_MS}"
            )
        return v


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "text"  # "text" | "json"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v.lower()


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class PetCLIConfig(BaseModel):
    """Root petcli configuration model."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def db_path(self) -> Path:
        if self.store.path:
            return Path(self.store.path).expanduser()
        return petcli_dir() / DB_FILENAME

    @property
    def log_path(self) -> Path:
        return petcli_dir() / LOG_FILENAME

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.ui.tick_rate_ms / 1000.0


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------


def _config_file_path() -> Path:
    if env_path := os.environ.get("PETCLI_CONFIG"):
        return Path(env_path)
    return Path.home() / PETCLI_DIR_NAME / CONFIG_FILENAME


def load_config(path: Path | None = None) -> PetCLIConfig:
    """
    Load PetCLIConfig from TOML file, overlaid with environment variables.

    Priority (highest to lowest):
      1. Environment variables (PETCLI_*)
      2. Config file (~/.petcli/config.toml)
      3. Built-in defaults

    A missing default config file is not an error; a missing file that was
    asked for explicitly raises ConfigNotFoundError.
    """
    import tomllib

    cfg_path = path or _config_file_path()
    data: dict[str, Any] = {}

    if cfg_path.exists():
        try:
            with open(cfg_path, "rb") as f:
                data = tomllib.load(f)
        except Exception as exc:
            raise ConfigError(f"Cannot read config file {cfg_path}: {exc}") from exc
    elif path is not None:
        raise ConfigNotFoundError(f"Config file not found: {cfg_path}")

    try:
        _apply_env_overrides(data)
        return PetCLIConfig.model_validate(data)
    except Exception as exc:
        raise ConfigError(f"Invalid config at {cfg_path}: {exc}") from exc


def _apply_env_overrides(data: dict[str, Any]) -> None:
    """Overlay PETCLI_* environment variables onto the parsed TOML data."""
    if db := os.environ.get("PETCLI_DB_PATH"):
        data.setdefault("store", {})["path"] = db
    if tick := os.environ.get("PETCLI_TICK_MS"):
        data.setdefault("ui", {})["tick_rate_ms"] = int(tick)
    if level := os.environ.get("PETCLI_LOG_LEVEL"):
        data.setdefault("logging", {})["level"] = level


def default_config_data() -> dict[str, Any]:
    """Return the default configuration as a TOML-ready dict."""
    return PetCLIConfig().model_dump()


def save_config(config_data: dict[str, Any], path: Path | None = None) -> Path:
    """Write config dict to TOML file with secure permissions (0600)."""
    import tomli_w

    cfg_path = path or _config_file_path()
    cfg_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)

    # Write atomically
    tmp_path = cfg_path.with_suffix(".tmp")
    try:
        with open(tmp_path, "wb") as f:
            tomli_w.dump(config_data, f)
        tmp_path.rename(cfg_path)
    except Exception as exc:
        tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Cannot write config to {cfg_path}: {exc}") from exc

    cfg_path.chmod(0o600)
    return cfg_path
