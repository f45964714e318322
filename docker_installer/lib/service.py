from __future__ import annotations

import logging

from .command import CmdResult, Runner

logger = logging.getLogger(__name__)


def systemctl(runner: Runner, action: str, unit: str) -> CmdResult:
    return runner.run(["systemctl", action, unit])


def add_user_to_group(runner: Runner, user: str, group: str) -> CmdResult:
    return runner.run(["usermod", "-aG", group, user])


def apply_sysctl_file(runner: Runner, path: str) -> CmdResult:
    return runner.run(["sysctl", "-p", path])
