from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

LOG_DIR = "/tmp"

# Banner lines between phases; sits between INFO and WARNING so it shows at the default level.
SECTION = 25
logging.addLevelName(SECTION, "SECTION")

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def default_log_path(now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
    return os.path.join(LOG_DIR, f"docker_install_{stamp}.log")


def _open_run_log(log_path: str) -> tuple[logging.Handler, str]:
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, mode="a"), log_path
    except OSError:
        fallback = str(Path.cwd() / "docker-installer.log")
        return logging.FileHandler(fallback, mode="a"), fallback


def configure_logging(log_path: str, level: int = logging.INFO) -> str:
    """Send INFO/SECTION/WARNING/ERROR lines to the console and the run log.

    The console gets a bare `[LEVEL] message` line; the log file adds a
    timestamp and the emitting module. When log_path is not writable the run
    log falls back to ./docker-installer.log.

    Returns the actual file path being used.
    """

    file_handler, chosen_path = _open_run_log(log_path)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    handlers: List[logging.Handler] = [file_handler, console]

    root = logging.getLogger()
    root.setLevel(level)
    for h in handlers:
        root.addHandler(h)

    if chosen_path != log_path:
        logging.getLogger(__name__).warning("Cannot write %s; logging to %s instead", log_path, chosen_path)
    return chosen_path
