"""Generator settings: reads settings.toml + .env to produce GeneratorSettings.

Lookup order for every value: environment variable > settings.toml > default.
The settings file is optional; without one the built-in defaults apply.

Key entities:
  - GeneratorSettings: frozen dataclass with the resolved defaults.
  - xgen_dir(): base config directory ($XGEN_DIR or ~/.xgen).
  - load_settings(): parse .env + settings.toml into GeneratorSettings.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .playground import Platform

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def xgen_dir() -> Path:
    """Return the base config directory."""
    raw = os.getenv("XGEN_DIR", "")
    if raw:
        return Path(raw).expanduser()
    return Path.home() / ".xgen"


@dataclass(frozen=True)
class GeneratorSettings:
    """Defaults applied by the command line when options are omitted."""

    default_platform: Platform = Platform.IOS
    default_playground_name: str = "Playground"
    log_level: str = "INFO"


def load_settings(config_dir: Path | None = None) -> GeneratorSettings:
    """Read .env + settings.toml and return the resolved GeneratorSettings.

    Args:
        config_dir: Override for the base config directory.
                    Defaults to ``xgen_dir()``.

    Raises:
        ValueError: If a value is malformed (unknown platform, bad log level,
            unparsable TOML).
    """
    if config_dir is None:
        config_dir = xgen_dir()

    # Load .env files (local cwd first, then config_dir)
    local_env = Path(".env")
    global_env = config_dir / ".env"
    if local_env.is_file():
        load_dotenv(local_env)
    if global_env.is_file():
        load_dotenv(global_env)

    defaults: dict = {}
    toml_path = config_dir / "settings.toml"
    if toml_path.is_file():
        try:
            with open(toml_path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid settings file {toml_path}: {exc}") from exc
        defaults = raw.get("defaults", {})
        if not isinstance(defaults, dict):
            raise ValueError(f"[defaults] in {toml_path} must be a table")
        logger.debug("Loaded settings from %s", toml_path)

    def _get(key: str, env_name: str, default: str) -> str:
        """Environment > settings.toml > default."""
        value = os.getenv(env_name, "")
        if value:
            return value
        return str(defaults.get(key, default))

    platform = Platform.parse(_get("platform", "XGEN_DEFAULT_PLATFORM", "ios"))

    playground_name = _get("playground_name", "XGEN_PLAYGROUND_NAME", "Playground").strip()
    if not playground_name:
        raise ValueError("playground_name must not be empty.")

    log_level = _get("log_level", "XGEN_LOG_LEVEL", "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"Unknown log_level: {log_level!r}")

    return GeneratorSettings(
        default_platform=platform,
        default_playground_name=playground_name,
        log_level=log_level,
    )
