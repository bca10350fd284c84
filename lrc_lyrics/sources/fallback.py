from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Sequence

from lrc_lyrics.errors import ConfigError
from lrc_lyrics.lrc.model import LyricLine


def _to_line(raw: Mapping[str, Any]) -> LyricLine:
    t = raw["time"]
    if isinstance(t, bool) or not isinstance(t, (int, float)):
        raise TypeError(f"time must be a number, got {t!r}")
    if t < 0 or t != int(t):
        raise ValueError(f"time must be a whole number of seconds >= 0, got {t!r}")
    return LyricLine(time=int(t), text=str(raw["text"]))


class FallbackTable:
    """
    Static lyrics keyed like the LRC files. Each entry exposes `lines`, either as
    an attribute or as a mapping key, already shaped as a lyric sequence.
    """

    def __init__(self, entries: Mapping[str, Any]):
        self._entries = entries

    def lookup(self, key: str) -> Sequence[LyricLine] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if isinstance(entry, Mapping):
            lines = entry.get("lines")
        else:
            lines = getattr(entry, "lines", None)
        return lines

    @classmethod
    def from_json(cls, path: Path) -> "FallbackTable":
        """
        {"key": {"lines": [{"time": 0, "text": "..."}, ...]}, ...}
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read fallback table {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Fallback table {path} must be a JSON object")

        entries: dict[str, dict[str, tuple[LyricLine, ...]]] = {}
        for key, entry in data.items():
            raw_lines = entry.get("lines") if isinstance(entry, dict) else None
            if raw_lines is None:
                continue
            try:
                lines = tuple(_to_line(x) for x in raw_lines)
            except (KeyError, TypeError, ValueError, OverflowError) as e:
                raise ConfigError(f"Bad lines for '{key}' in {path}: {e}") from e
            entries[str(key)] = {"lines": lines}
        return cls(entries)
