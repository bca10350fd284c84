from __future__ import annotations

import asyncio
from pathlib import Path

from .base import FetchResult, LyricsFetcher


class FileFetcher(LyricsFetcher):
    name = "file"

    def _read(self, path: str) -> FetchResult:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return FetchResult(False, None, self.name)
        return FetchResult(True, text, self.name)

    async def fetch(self, path: str) -> FetchResult:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._read, path)
