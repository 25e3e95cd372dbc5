from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True, slots=True)
class LyricLine:
    time: timedelta
    text: str

    @property
    def t_ms(self) -> int:
        return self.time // timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True)
class Lyrics:
    """
    Parsed LRC document.

    `lines` keeps source order: lines sharing a timestamp group stay adjacent,
    groups follow the order of their source lines (not sorted by time).
    """

    lines: tuple[LyricLine, ...]
    title: str | None = None
    artist: str | None = None
    album: str | None = None
