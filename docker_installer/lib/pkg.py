from __future__ import annotations

import logging
from typing import Sequence

from .command import CmdResult, Runner

logger = logging.getLogger(__name__)


def apt_update(runner: Runner, *, quiet: bool = False) -> CmdResult:
    argv = ["apt", "update"]
    argv.append("-qq" if quiet else "-y")
    return runner.run(argv)


def apt_upgrade(runner: Runner) -> CmdResult:
    return runner.run(["apt", "upgrade", "-y"])


def apt_install(runner: Runner, packages: Sequence[str], *, frontend: str = "apt-get") -> CmdResult | None:
    if not packages:
        return None
    return runner.run([frontend, "install", "-y", *packages])


def apt_remove(runner: Runner, packages: Sequence[str]) -> CmdResult | None:
    if not packages:
        return None
    return runner.run(["apt-get", "remove", "-y", *packages])


def apt_fix_broken(runner: Runner) -> CmdResult:
    return runner.run(["apt", "--fix-broken", "install", "-y"])


def apt_search_names(runner: Runner, pattern: str) -> bool:
    """Return True if apt-cache knows a package whose name matches pattern."""

    r = runner.run(["apt-cache", "search", "--names-only", pattern], check=False, read_only=True)
    return r.returncode == 0 and bool((r.stdout or "").strip())


def dpkg_architecture(runner: Runner) -> str:
    r = runner.run(["dpkg", "--print-architecture"], read_only=True)
    arch = (r.stdout or "").strip()
    if not arch:
        raise RuntimeError("dpkg --print-architecture printed nothing")
    return arch
