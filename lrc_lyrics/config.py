from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from lrc_lyrics.errors import ConfigError

DEFAULT_BASE_PATH = "./assets/lyrics/"


@dataclass(frozen=True)
class AppConfig:
    # Sources
    base_path: str  # URL or directory prefix, key and ".lrc" are appended as-is
    fallback_path: Path | None
    http_timeout_s: float


def _float_env(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def load_config() -> AppConfig:
    fallback = os.getenv("LRC_LYRICS_FALLBACK")
    timeout_s = _float_env("LRC_LYRICS_HTTP_TIMEOUT", "10.0")
    if timeout_s <= 0:
        raise ConfigError("LRC_LYRICS_HTTP_TIMEOUT must be positive")

    return AppConfig(
        base_path=os.getenv("LRC_LYRICS_BASE_PATH") or DEFAULT_BASE_PATH,
        fallback_path=Path(fallback) if fallback else None,
        http_timeout_s=timeout_s,
    )
