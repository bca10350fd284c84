from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LyricLine:
    time: int  # whole seconds
    text: str


LyricSequence = tuple[LyricLine, ...]

# shown by players for timestamps with no text / before the first line
INSTRUMENTAL_TEXT = "•••"
INTRO_TEXT = "♪"
