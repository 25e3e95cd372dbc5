from __future__ import annotations

import logging
import os


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    # Allow env override, e.g. LRC_LYRICS_LOG_LEVEL=warning
    level_name = os.getenv("LRC_LYRICS_LOG_LEVEL")
    if level_name:
        candidate = getattr(logging, level_name.upper(), None)
        if isinstance(candidate, int):
            level = candidate

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
