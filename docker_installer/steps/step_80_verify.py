from __future__ import annotations

import logging

from ..context import InstallContext
from ..lib.command import CommandError
from ..lib.pkg import apt_install, apt_search_names
from ..pipeline import FailurePolicy

logger = logging.getLogger(__name__)


class VerifyEngineStep:
    step_id = "80_verify_engine"
    title = "VERIFYING DOCKER INSTALLATION"
    policy = FailurePolicy.WARN
    failure_level = logging.ERROR
    failure_message = "Docker Engine installation verification failed."

    def run(self, ctx: InstallContext) -> None:
        r = ctx.runner.run(["docker", "--version"])
        if r.stdout:
            logger.info("%s", r.stdout.strip())
        logger.info("Docker Engine successfully installed.")


class VerifyComposeStep:
    step_id = "81_verify_compose"
    title = "VERIFYING DOCKER INSTALLATION"
    policy = FailurePolicy.WARN
    failure_level = logging.ERROR
    failure_message = "Docker Compose installation verification failed."

    def run(self, ctx: InstallContext) -> None:
        r = ctx.runner.run(["docker", "compose", "version"])
        if r.stdout:
            logger.info("%s", r.stdout.strip())
        logger.info("Docker Compose successfully installed.")


class InstallCredentialHelperStep:
    """Optional: the first installable credential-helper package name wins."""

    step_id = "85_install_credential_helper"
    title = "INSTALLING ADDITIONAL UTILITIES"
    policy = FailurePolicy.WARN
    failure_message = "Docker credential helpers could not be installed. Skipping this step."

    def run(self, ctx: InstallContext) -> None:
        if not apt_search_names(ctx.runner, "docker-credential-helper"):
            logger.warning("Docker credential helpers package not found in repositories. Skipping this step.")
            return

        for package in ctx.settings.credential_helper_packages:
            try:
                apt_install(ctx.runner, [package])
            except CommandError as e:
                logger.debug("Could not install %s: %s", package, e)
                continue
            logger.info("Installed %s for secure credential storage.", package)
            return

        logger.warning("Docker credential helpers package could not be installed. Skipping this step.")
