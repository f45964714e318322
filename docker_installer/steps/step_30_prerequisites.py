from __future__ import annotations

from ..context import InstallContext
from ..lib.pkg import apt_install
from ..pipeline import FailurePolicy


class InstallPrerequisitesStep:
    step_id = "30_install_prerequisites"
    title = "INSTALLING PREREQUISITES"
    policy = FailurePolicy.FATAL

    def run(self, ctx: InstallContext) -> None:
        apt_install(ctx.runner, ctx.settings.prerequisite_packages)
