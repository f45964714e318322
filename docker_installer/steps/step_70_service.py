from __future__ import annotations

import logging

from ..context import InstallContext
from ..lib.service import add_user_to_group, systemctl
from ..pipeline import FailurePolicy

logger = logging.getLogger(__name__)


class EnableServiceStep:
    step_id = "70_enable_service"
    title = "ENABLING AND STARTING DOCKER SERVICE"
    policy = FailurePolicy.FATAL

    def run(self, ctx: InstallContext) -> None:
        systemctl(ctx.runner, "enable", ctx.settings.service_name)


class StartServiceStep:
    step_id = "71_start_service"
    title = "ENABLING AND STARTING DOCKER SERVICE"
    policy = FailurePolicy.WARN
    failure_level = logging.ERROR
    failure_message = "Failed to start Docker service."

    def run(self, ctx: InstallContext) -> None:
        systemctl(ctx.runner, "start", ctx.settings.service_name)


class GrantGroupAccessStep:
    step_id = "75_grant_group_access"
    title = "CONFIGURING USER PERMISSIONS"
    policy = FailurePolicy.FATAL

    def run(self, ctx: InstallContext) -> None:
        if not ctx.user:
            logger.info("No non-root user resolved; skipping group membership.")
            return

        group = ctx.settings.service_group
        logger.info("Adding user %s to the %s group...", ctx.user, group)
        add_user_to_group(ctx.runner, ctx.user, group)
        logger.info("IMPORTANT: %s must log out and back in for group changes to apply.", ctx.user)
