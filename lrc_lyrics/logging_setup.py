from __future__ import annotations

import logging
import os


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    # LRC_LYRICS_LOG_LEVEL wins over --debug
    level_name = os.getenv("LRC_LYRICS_LOG_LEVEL")
    if level_name:
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if not debug:
        # requests' connection pool chatter
        logging.getLogger("urllib3").setLevel(logging.WARNING)
