"""Utility helpers for feature-flagged debug logging."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import config

LOG_FILE_PATH = Path(config.LOG_FILE_PATH)


def log_debug(message: Any) -> None:
    """Append a timestamped debug entry when logging is enabled."""
    if not config.LOG_ENABLED:
        return
    LOG_FILE_PATH.parent.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    with LOG_FILE_PATH.open("a", encoding="utf-8") as log_file:
        log_file.write(f"{timestamp} {message}\n")
