from .model import Lyrics, LyricLine
from .parse import LrcParseStats, load_lrc_file, parse_lrc, parse_lrc_with_stats

__all__ = [
    "Lyrics",
    "LyricLine",
    "LrcParseStats",
    "load_lrc_file",
    "parse_lrc",
    "parse_lrc_with_stats",
]
