from __future__ import annotations

import logging
from typing import Mapping, Optional

from .command import Runner

logger = logging.getLogger(__name__)

ROOT_ACCOUNT = "root"


def _usable(name: Optional[str]) -> bool:
    return bool(name) and name != ROOT_ACCOUNT


def terminal_user(runner: Runner) -> Optional[str]:
    """First field of `who am i` (the login owning the controlling tty)."""

    r = runner.run(["who", "am", "i"], check=False, read_only=True)
    if r.returncode != 0:
        return None
    fields = (r.stdout or "").split()
    return fields[0] if fields else None


def resolve_invoking_user(environ: Mapping[str, str], runner: Runner) -> Optional[str]:
    """Resolve the non-root account that should get docker access.

    Returns None when only root could be found.
    """

    user = environ.get("SUDO_USER")
    if _usable(user):
        return user

    logger.warning("Running as root. Consider using a regular user with sudo privileges instead.")
    user = terminal_user(runner)
    if _usable(user):
        return user

    logger.warning("Could not determine non-root user. Docker will only be usable by root.")
    return None
