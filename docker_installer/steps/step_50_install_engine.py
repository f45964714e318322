from __future__ import annotations

from ..context import InstallContext
from ..lib.pkg import apt_fix_broken, apt_install
from ..pipeline import FailurePolicy


class InstallEngineStep:
    step_id = "50_install_engine"
    title = "INSTALLING DOCKER ENGINE"
    policy = FailurePolicy.FATAL

    def run(self, ctx: InstallContext) -> None:
        apt_install(ctx.runner, ctx.settings.engine_packages, frontend="apt")


class FixBrokenStep:
    step_id = "55_fix_broken"
    title = "INSTALLING DOCKER ENGINE"
    policy = FailurePolicy.WARN
    failure_message = "Fix broken installation attempted, check for errors."

    def run(self, ctx: InstallContext) -> None:
        apt_fix_broken(ctx.runner)
