#===============================================================================
#  TaskLauncher | logging_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Root logging: stderr plus a rotating file under ./.tasklauncher/logs.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from .constants import LOG_DIR_NAME, LOG_FILE_NAME

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(base_dir: Path, level: Union[str, int] = "INFO") -> Optional[Path]:
    """Configure the root logger. Returns the log file path (None if not writable)."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(stream_handler)
    root.setLevel(level)

    log_path = Path(base_dir) / LOG_DIR_NAME / "logs" / LOG_FILE_NAME
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError as e:
        # Read-only install folder: keep stderr logging only.
        root.warning("File logging disabled (%s)", e)
        return None

    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(file_handler)
    return log_path
