from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
import logging
import os
from pathlib import Path
import re

from .model import Lyrics, LyricLine

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")
_META_RE = re.compile(r"^\[(ti|ar|al|au|length|by|offset):(.+)\]", re.IGNORECASE)
_TS_RE = re.compile(r"\[(\d{2,}):(\d{2})\.(\d{2,3})\]")  # [mm:ss.xx] / [mm:ss.xxx]

# au/length/by/offset are recognized but not kept
_KEPT_TAGS = {"ti": "title", "ar": "artist", "al": "album"}


@dataclass(frozen=True, slots=True)
class LrcParseStats:
    lines_total: int
    lines_blank: int
    lines_metadata: int
    lines_with_timestamps: int
    lines_ignored: int
    events_total: int


def _parse_ts_to_ms(m: int, s: int, frac: str) -> int:
    # "50" -> 500ms (hundredths), "500" -> 500ms
    ms = int(frac) * 10 if len(frac) == 2 else int(frac)
    return (m * 60 + s) * 1000 + ms


def _timestamp_run(line: str) -> tuple[list[re.Match[str]], int]:
    """Leading run of concatenated timestamp tags and the offset where text begins."""
    stamps: list[re.Match[str]] = []
    pos = 0
    while True:
        m = _TS_RE.match(line, pos)
        if m is None:
            break
        stamps.append(m)
        pos = m.end()
    return stamps, pos


def parse_lrc_with_stats(content: str | None) -> tuple[Lyrics | None, LrcParseStats]:
    """
    Supported:
    - [mm:ss.xx], [mm:ss.xxx]
    - multiple timestamps per line: [00:01.00][00:05.00]text
    - tags [ti:], [ar:], [al:] (kept); [au:], [length:], [by:], [offset:] (skipped)

    Lines are kept in source order, never sorted or de-duplicated.
    Unrecognized lines are dropped silently. Returns None if no timed line was found.
    """
    if not content or not content.strip():
        return None, LrcParseStats(0, 0, 0, 0, 0, 0)

    tags: dict[str, str] = {}
    lines: list[LyricLine] = []

    total = 0
    blank = 0
    metadata = 0
    lines_with_ts = 0
    ignored = 0

    for raw in _NEWLINE_RE.split(content):
        total += 1
        line = raw.strip()
        if not line:
            blank += 1
            continue

        meta = _META_RE.match(line)
        if meta:
            metadata += 1
            field = _KEPT_TAGS.get(meta.group(1).lower())
            if field:
                tags[field] = meta.group(2).strip()
            continue

        stamps, text_start = _timestamp_run(line)
        if not stamps:
            ignored += 1
            logger.debug("Ignoring LRC line %d: %r", total, line)
            continue

        text = line[text_start:].strip()
        decoded = 0
        for m in stamps:
            try:
                t_ms = _parse_ts_to_ms(int(m.group(1)), int(m.group(2)), m.group(3))
                time = timedelta(milliseconds=t_ms)
            except (OverflowError, ValueError):
                logger.debug("Timestamp out of range on line %d: %s", total, m.group(0))
                continue
            lines.append(LyricLine(time=time, text=text))
            decoded += 1

        if decoded:
            lines_with_ts += 1
        else:
            ignored += 1

    stats = LrcParseStats(
        lines_total=total,
        lines_blank=blank,
        lines_metadata=metadata,
        lines_with_timestamps=lines_with_ts,
        lines_ignored=ignored,
        events_total=len(lines),
    )
    if not lines:
        return None, stats
    return Lyrics(lines=tuple(lines), **tags), stats


def parse_lrc(content: str | None) -> Lyrics | None:
    doc, _stats = parse_lrc_with_stats(content)
    return doc


def load_lrc_file(path: str | os.PathLike[str], encoding: str | None = None) -> Lyrics | None:
    """
    Read an LRC file and parse it. Never raises on I/O or decoding errors:
    missing, unreadable or undecodable files yield None.

    encoding=None uses the platform default text encoding.
    """
    try:
        text = Path(path).read_text(encoding=encoding)
    except (OSError, ValueError, LookupError) as e:
        logger.debug("Cannot read LRC file %s: %s", path, e)
        return None
    return parse_lrc(text)
