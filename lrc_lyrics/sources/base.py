from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FetchResult:
    ok: bool
    text: str | None
    source: str


class LyricsFetcher:
    """
    Retrieves raw LRC text for a resource path.

    Ordinary "not found" is reported as ok=False; transport faults may raise.
    """

    name: str

    async def fetch(self, path: str) -> FetchResult:
        raise NotImplementedError
