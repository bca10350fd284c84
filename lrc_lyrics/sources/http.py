from __future__ import annotations

import asyncio
import logging

import requests

from .base import FetchResult, LyricsFetcher

logger = logging.getLogger(__name__)


class HttpFetcher(LyricsFetcher):
    name = "http"

    def __init__(self, *, timeout_s: float = 10.0):
        self.timeout_s = timeout_s

    def _get(self, url: str) -> FetchResult:
        # no Session: executor threads must not share one
        r = requests.get(url, timeout=self.timeout_s)
        if not 200 <= r.status_code < 300:
            logger.debug("GET %s -> %s", url, r.status_code)
            return FetchResult(False, None, self.name)
        if "charset" not in r.headers.get("Content-Type", "").lower():
            r.encoding = "utf-8"
        return FetchResult(True, r.text, self.name)

    async def fetch(self, path: str) -> FetchResult:
        # requests is blocking; keep the event loop free while it runs.
        # RequestException propagates to the caller.
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._get, path)
