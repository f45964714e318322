from __future__ import annotations

import logging

from ..context import InstallContext
from ..lib.apt_repo import register_vendor_repo
from ..lib.pkg import apt_update
from ..pipeline import FailurePolicy

logger = logging.getLogger(__name__)


class RegisterRepositoryStep:
    step_id = "40_register_repository"
    title = "SETTING UP DOCKER REPOSITORY"
    policy = FailurePolicy.FATAL

    def run(self, ctx: InstallContext) -> None:
        s = ctx.settings
        logger.info("Downloading Docker's GPG key and adding repository...")
        register_vendor_repo(
            ctx.runner,
            base_url=s.repo_base_url,
            distro_id=ctx.distro.id,
            codename=ctx.distro.codename,
            keyring=s.keyring_path,
            sources_list=s.sources_list_path,
            channel=s.repo_channel,
            root=ctx.root_dir,
            dry_run=ctx.dry_run,
        )


class RefreshIndexStep:
    step_id = "45_refresh_index"
    title = "UPDATING PACKAGE INDEX WITH DOCKER REPOSITORY"
    policy = FailurePolicy.WARN
    failure_level = logging.ERROR
    failure_message = "Failed to update package index with Docker repository."

    def run(self, ctx: InstallContext) -> None:
        apt_update(ctx.runner)
