from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigFile:
    path: str
    content: str
    only_if_absent: bool = False


def host_path(root: str, path: str) -> Path:
    """Map an absolute host path under root (tests use a temp dir as root)."""

    return Path(root) / path.lstrip("/")


def write_config_file(root: str, cfg: ConfigFile, *, dry_run: bool = False) -> bool:
    """Write cfg under root. Returns False when an existing file was kept."""

    p = host_path(root, cfg.path)
    if cfg.only_if_absent and p.exists():
        logger.info("Keeping existing %s", cfg.path)
        return False
    if dry_run:
        logger.info("Would write %s", str(p))
        return True
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(cfg.content, encoding="utf-8")
    logger.info("Wrote %s", str(p))
    return True
