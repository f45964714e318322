from __future__ import annotations

import logging

from ..context import InstallContext
from ..lib.pkg import apt_update, apt_upgrade
from ..pipeline import FailurePolicy

logger = logging.getLogger(__name__)


class UpdateIndexStep:
    step_id = "10_update_index"
    title = "SYSTEM UPDATE"
    policy = FailurePolicy.WARN
    failure_message = "Package index update encountered issues."

    def run(self, ctx: InstallContext) -> None:
        logger.info("Updating package index...")
        apt_update(ctx.runner, quiet=True)


class UpgradeSystemStep:
    step_id = "15_upgrade_system"
    title = "SYSTEM UPDATE"
    policy = FailurePolicy.WARN
    failure_message = "System upgrade encountered issues, continuing anyway."

    def run(self, ctx: InstallContext) -> None:
        logger.info("Upgrading system packages...")
        apt_upgrade(ctx.runner)
