from __future__ import annotations

import logging
import os
from typing import Callable, Mapping, Optional

from .context import InstallContext
from .lib.command import Runner
from .lib.os_release import OS_RELEASE_PATH, read_os_release
from .lib.users import resolve_invoking_user
from .settings import Settings

logger = logging.getLogger(__name__)


class PreflightError(RuntimeError):
    """The host is not fit to run the installer at all."""


def require_root(geteuid: Optional[Callable[[], int]] = None) -> None:
    if (geteuid or os.geteuid)() != 0:
        raise PreflightError("Please run as root or with sudo privileges.")


def run_preflight(
    *,
    runner: Runner,
    settings: Settings,
    os_release_path: str = OS_RELEASE_PATH,
    environ: Optional[Mapping[str, str]] = None,
    root_dir: str = "/",
    dry_run: bool = False,
    log_path: str = "",
    geteuid: Optional[Callable[[], int]] = None,
) -> InstallContext:
    """Check privileges, resolve the invoking user and detect the distribution."""

    require_root(geteuid)

    user = resolve_invoking_user(os.environ if environ is None else environ, runner)

    try:
        distro = read_os_release(os_release_path)
    except FileNotFoundError as e:
        raise PreflightError(
            "Unable to detect OS distribution. This installer requires a Debian-based system."
        ) from e

    logger.info("Detected distribution: %s", distro.pretty_name)

    ctx = InstallContext(
        distro=distro,
        user=user,
        runner=runner,
        settings=settings,
        root_dir=root_dir,
        dry_run=dry_run,
        log_path=log_path,
    )

    if ctx.distro_supported:
        logger.info("Distribution %s is supported.", distro.id)
    else:
        logger.warning("Distribution %s has not been tested with this installer. Proceeding anyway...", distro.id)

    return ctx
