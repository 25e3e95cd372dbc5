from lrc_lyrics.lrc import Lyrics, LyricLine, load_lrc_file, parse_lrc

__all__ = ["Lyrics", "LyricLine", "load_lrc_file", "parse_lrc"]
__version__ = "0.1.0"
