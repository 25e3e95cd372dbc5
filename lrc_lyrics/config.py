from __future__ import annotations

import json
from dataclasses import dataclass
import os
from pathlib import Path

EXPORT_FORMATS = ("json", "lrc", "srt")


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lrc-lyrics"
    return Path.home() / ".config" / "lrc-lyrics"


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # Reading
    encoding: str | None  # None = platform default

    # Export
    export_format: str
    srt_last_line_ms: int


def load_config() -> AppConfig:
    config_dir = _config_dir()

    export_format = os.getenv("LRC_LYRICS_EXPORT_FORMAT", "json").strip().lower()
    if export_format not in EXPORT_FORMATS:
        export_format = "json"

    return AppConfig(
        config_dir=config_dir,
        encoding=_load_encoding(config_dir),
        export_format=export_format,
        srt_last_line_ms=int(os.getenv("LRC_LYRICS_SRT_LAST_LINE_MS", "2000")),
    )


def _load_encoding(config_dir: Path) -> str | None:
    # Priority: config.json → LRC_LYRICS_ENCODING → platform default
    cfg_path = config_dir / "config.json"
    if cfg_path.exists():
        try:
            data = json.loads(cfg_path.read_text(encoding="utf-8"))
            raw = data.get("encoding")
            if isinstance(raw, str) and raw.strip():
                return raw.strip()
        except (OSError, ValueError, AttributeError):
            pass
    env_enc = os.getenv("LRC_LYRICS_ENCODING")
    if env_enc and env_enc.strip():
        return env_enc.strip()
    return None
