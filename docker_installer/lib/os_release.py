from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = "/etc/os-release"


@dataclass(frozen=True)
class DistroInfo:
    id: str
    codename: str
    pretty_name: str
    version_id: str = ""


def parse_os_release(text: str) -> Dict[str, str]:
    """Parse os-release KEY=value lines into a dict (quotes stripped)."""

    data: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip().strip('"').strip("'")
    return data


def derive_codename(fields: Dict[str, str]) -> str:
    """Return VERSION_CODENAME, else the major part of VERSION_ID.

    The numeric fallback rarely names a real repository suite.
    """

    codename = fields.get("VERSION_CODENAME", "").strip()
    if codename:
        return codename
    return fields.get("VERSION_ID", "").split(".")[0]


def read_os_release(path: str = OS_RELEASE_PATH) -> DistroInfo:
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(path)

    fields = parse_os_release(p.read_text(encoding="utf-8", errors="ignore"))
    distro_id = fields.get("ID", "").lower()
    info = DistroInfo(
        id=distro_id,
        codename=derive_codename(fields),
        pretty_name=fields.get("PRETTY_NAME") or fields.get("NAME") or distro_id,
        version_id=fields.get("VERSION_ID", ""),
    )
    logger.debug("os-release %s -> %s", path, info)
    return info
