from __future__ import annotations

import logging
from typing import Callable, Sequence

from lrc_lyrics.config import AppConfig
from lrc_lyrics.lrc.model import LyricLine, LyricSequence
from lrc_lyrics.lrc.parse import parse_lrc

from .base import LyricsFetcher
from .fallback import FallbackTable
from .file import FileFetcher
from .http import HttpFetcher

logger = logging.getLogger(__name__)

LRC_SUFFIX = ".lrc"

FallbackLookup = Callable[[str], Sequence[LyricLine] | None]


class LyricsLoader:
    """
    LRC first, static fallback second.

    Parsed LRC results are cached for the lifetime of the instance; fallback
    lines are returned as-is and never cached. Concurrent calls for the same
    uncached key may fetch twice.
    """

    def __init__(
        self,
        fetcher: LyricsFetcher,
        *,
        base_path: str = "./assets/lyrics/",
        fallback: FallbackLookup | None = None,
    ):
        self.fetcher = fetcher
        self.base_path = base_path
        self.fallback = fallback
        self._cache: dict[str, LyricSequence] = {}

    def resource_path(self, key: str) -> str:
        return f"{self.base_path}{key}{LRC_SUFFIX}"

    async def load_lrc(self, key: str) -> LyricSequence | None:
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        try:
            res = await self.fetcher.fetch(self.resource_path(key))
        except Exception as e:
            logger.warning("Error loading LRC for %s: %s", key, e)
            return None

        if not res.ok or res.text is None:
            logger.info("No LRC file found for: %s", key)
            return None

        lines = parse_lrc(res.text)
        if not lines:
            logger.info("LRC for %s has no timed lines", key)
            return None

        self._cache[key] = lines
        logger.info("Loaded LRC for: %s (%s lines, %s)", key, len(lines), res.source)
        return lines

    async def get_lyrics(self, key: str | None) -> Sequence[LyricLine] | None:
        if not key:
            return None

        lines = await self.load_lrc(key)
        if lines:
            return lines

        if self.fallback is not None:
            fb = self.fallback(key)
            if fb is not None:
                logger.debug("Using fallback lyrics for %s", key)
                return fb

        return None


def build_fetcher(cfg: AppConfig) -> LyricsFetcher:
    if cfg.base_path.startswith(("http://", "https://")):
        return HttpFetcher(timeout_s=cfg.http_timeout_s)
    return FileFetcher()


def build_loader(cfg: AppConfig) -> LyricsLoader:
    fallback = FallbackTable.from_json(cfg.fallback_path).lookup if cfg.fallback_path else None
    return LyricsLoader(build_fetcher(cfg), base_path=cfg.base_path, fallback=fallback)
