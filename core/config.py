# core/config.py

import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv
from rich.logging import RichHandler

from core.errors import ConfigError


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    unsplash_api_key: str
    gemini_model: str = "gemini-2.5-flash"
    models_timeout: float = 15.0
    generate_timeout: float = 30.0
    unsplash_timeout: float = 15.0
    max_days: int = 30
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    def services(self) -> Dict[str, bool]:
        return {
            "gemini": bool(self.gemini_api_key),
            "unsplash": bool(self.unsplash_api_key),
        }


def _required(env: Mapping[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigError(f"Missing {name} environment variable")
    return value


def _number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


def _log_level(env: Mapping[str, str]) -> str:
    level = (env.get("LOG_LEVEL") or Settings.log_level).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"LOG_LEVEL must be a logging level name, got {level!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build the Settings once at start-up.
    Reads .env into the process environment unless an explicit mapping is given.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        gemini_api_key=_required(environ, "GEMINI_API_KEY"),
        unsplash_api_key=_required(environ, "UNSPLASH_API_KEY"),
        gemini_model=environ.get("GEMINI_MODEL") or Settings.gemini_model,
        models_timeout=_number(environ, "GEMINI_MODELS_TIMEOUT", Settings.models_timeout, float),
        generate_timeout=_number(environ, "GEMINI_TIMEOUT", Settings.generate_timeout, float),
        unsplash_timeout=_number(environ, "UNSPLASH_TIMEOUT", Settings.unsplash_timeout, float),
        max_days=_number(environ, "MAX_TRIP_DAYS", Settings.max_days, int),
        host=environ.get("HOST") or Settings.host,
        port=_number(environ, "PORT", Settings.port, int),
        log_level=_log_level(environ),
    )


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if any(isinstance(h, RichHandler) for h in root.handlers):
        root.setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
