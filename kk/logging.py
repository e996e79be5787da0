from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from .settings import Settings, default_data_dir


def setup_logging(settings: Settings) -> Path:
    """Configure Python logging to write to a rotating diagnostic log file.

    Returns the resolved log file path.

    Rotation:
      - Daily rotation at midnight.
      - Keep the last `KK_LOG_BACKUP_COUNT` rotated files.

    Notes:
      - No console handler: the board draws over the whole terminal.
      - This function is safe to call multiple times (it resets handlers).
    """

    log_dir = settings.KK_LOG_DIR or default_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "kk.log"

    level_name = str(settings.KK_LOG_LEVEL or "INFO").upper().strip()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    file_handler = TimedRotatingFileHandler(
        filename=str(log_file),
        when="midnight",
        interval=1,
        backupCount=max(0, int(settings.KK_LOG_BACKUP_COUNT or 0)),
        encoding="utf-8",
        utc=False,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(fmt))

    # Reset root handlers so we don't duplicate logs on repeated starts.
    root = logging.getLogger()
    for h in root.handlers:
        h.close()
    root.handlers = []
    root.setLevel(level)
    root.addHandler(file_handler)

    logging.getLogger("kk").info(
        "kk logging enabled (file=%s, level=%s, db=%s)",
        os.fspath(log_file),
        level_name,
        settings.KK_DB_PATH,
    )

    return log_file
