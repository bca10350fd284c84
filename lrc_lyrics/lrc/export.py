from __future__ import annotations

import json
from typing import Iterable

from .model import LyricLine


def export_json(lines: Iterable[LyricLine]) -> str:
    return json.dumps(
        [{"time": e.time, "text": e.text} for e in lines],
        ensure_ascii=False,
        indent=2,
    )


# two-digit minutes: 99:59.999 is the latest readable stamp, which rounds to 6000s
_MAX_SECONDS = 100 * 60


def _fmt_lrc_time(seconds: int) -> str:
    if seconds == _MAX_SECONDS:
        return "99:59.50"
    if not 0 <= seconds < _MAX_SECONDS:
        raise ValueError(f"time {seconds}s cannot be written as a 2-digit-minute LRC timestamp")
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


def export_lrc(lines: Iterable[LyricLine]) -> str:
    """
    One [mm:ss]text line per entry. Parsing the output again gives the same lines.
    Times past 6000s have no 2-digit-minute form and raise ValueError.
    """
    out = [f"[{_fmt_lrc_time(e.time)}]{e.text}" for e in lines]
    return "\n".join(out) + ("\n" if out else "")
