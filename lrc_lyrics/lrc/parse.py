from __future__ import annotations

from dataclasses import dataclass
import re

from .model import INSTRUMENTAL_TEXT, INTRO_TEXT, LyricLine, LyricSequence

_TS_RE = re.compile(r"\[(\d{2}):(\d{2})(?:[.:](\d{2,3}))?\]", re.ASCII)  # [mm:ss] / [mm:ss.xx] / [mm:ss:xxx]
_META_RE = re.compile(r"^\[(?:ar|ti|al|au|length|by|offset|re|ve|id|la):", re.IGNORECASE)

# first line later than this gets a leading intro marker at 0
_INTRO_THRESHOLD_S = 2


@dataclass(frozen=True, slots=True)
class LrcParseStats:
    lines_total: int
    lines_with_timestamps: int
    lines_skipped: int
    entries_total: int


def _ts_to_seconds(m: str, s: str, frac: str | None) -> int:
    # "50" -> 500ms, "05" -> 50ms, "500" -> 500ms
    ms = int(frac.ljust(3, "0")[:3]) if frac else 0
    total_ms = (int(m) * 60 + int(s)) * 1000 + ms
    # half up
    return (total_ms + 500) // 1000


def parse_lrc(text: str) -> LyricSequence:
    """
    Parse LRC text into lyric lines sorted by time.

    - [mm:ss], [mm:ss.xx], [mm:ss.xxx] and ':' as fraction separator
    - multiple timestamps per line share the line's text
    - metadata tags ([ar:], [ti:], [offset:], ...) are skipped
    - times are rounded to whole seconds
    """
    lines, _stats = parse_lrc_with_stats(text)
    return lines


def parse_lrc_with_stats(text: str) -> tuple[LyricSequence, LrcParseStats]:
    entries: list[LyricLine] = []

    total = 0
    lines_with_ts = 0
    skipped = 0

    for line in text.lstrip("\ufeff").split("\n"):
        total += 1
        if _META_RE.match(line) or not line.strip():
            skipped += 1
            continue

        ts = list(_TS_RE.finditer(line))
        if not ts:
            skipped += 1
            continue

        lines_with_ts += 1
        payload = _TS_RE.sub("", line).strip() or INSTRUMENTAL_TEXT
        for m in ts:
            entries.append(LyricLine(time=_ts_to_seconds(m.group(1), m.group(2), m.group(3)), text=payload))

    # list.sort is stable: equal times keep file order
    entries.sort(key=lambda e: e.time)
    if entries and entries[0].time > _INTRO_THRESHOLD_S:
        entries.insert(0, LyricLine(time=0, text=INTRO_TEXT))

    stats = LrcParseStats(
        lines_total=total,
        lines_with_timestamps=lines_with_ts,
        lines_skipped=skipped,
        entries_total=len(entries),
    )
    return tuple(entries), stats
