from __future__ import annotations

from datetime import timedelta
import json
from typing import Iterator

from .model import Lyrics, LyricLine

_CENTISECOND = timedelta(milliseconds=10)
_MIN_CUE = timedelta(milliseconds=1)


def export_json(lyrics: Lyrics) -> str:
    return json.dumps(
        {
            "title": lyrics.title,
            "artist": lyrics.artist,
            "album": lyrics.album,
            "lines": [{"t_ms": line.t_ms, "text": line.text} for line in lyrics.lines],
        },
        ensure_ascii=False,
        indent=2,
    )


def format_lrc_time(time: timedelta) -> str:
    """mm:ss.xx, truncated to hundredths. Minutes grow past two digits."""
    minutes, rest = divmod(time, timedelta(minutes=1))
    seconds, rest = divmod(rest, timedelta(seconds=1))
    return f"{minutes:02d}:{seconds:02d}.{rest // _CENTISECOND:02d}"


def _lrc_line(line: LyricLine) -> str:
    text = line.text
    # keep a leading bracket out of the timestamp run when re-parsed
    if text.startswith("["):
        text = " " + text
    return f"[{format_lrc_time(line.time)}]{text}"


def export_lrc(lyrics: Lyrics, include_tags: bool = True) -> str:
    out: list[str] = []
    if include_tags:
        for tag, value in (("ti", lyrics.title), ("ar", lyrics.artist), ("al", lyrics.album)):
            if value is not None:
                # [ti:] does not parse, [ti: ] reads back as ""
                out.append(f"[{tag}:{value or ' '}]")

    out.extend(_lrc_line(line) for line in lyrics.lines)
    return "\n".join(out) + ("\n" if out else "")


def _fmt_srt_time(time: timedelta) -> str:
    # HH:MM:SS,mmm
    hours, rest = divmod(time, timedelta(hours=1))
    minutes, rest = divmod(rest, timedelta(minutes=1))
    seconds, rest = divmod(rest, timedelta(seconds=1))
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{rest // _MIN_CUE:03d}"


def _srt_cues(lines: tuple[LyricLine, ...], last_line: timedelta) -> Iterator[tuple[timedelta, timedelta, str]]:
    following: list[LyricLine | None] = [*lines[1:], None]
    for line, nxt in zip(lines, following):
        if nxt is None:
            end = line.time + last_line
        else:
            # file order is kept, so the next line may start earlier
            end = max(nxt.time, line.time + _MIN_CUE)
        yield line.time, end, line.text


def export_srt(lyrics: Lyrics, last_line: timedelta = timedelta(seconds=2)) -> str:
    """
    One cue per lyric line, in file order. A cue lasts until the next line starts;
    the last one lasts `last_line`.
    """
    blocks = [
        f"{n}\n{_fmt_srt_time(start)} --> {_fmt_srt_time(end)}\n{text}\n"
        for n, (start, end, text) in enumerate(_srt_cues(lyrics.lines, last_line), start=1)
    ]
    return "\n".join(blocks)
