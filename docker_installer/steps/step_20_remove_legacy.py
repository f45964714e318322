from __future__ import annotations

from ..context import InstallContext
from ..lib.pkg import apt_remove
from ..pipeline import FailurePolicy


class RemoveLegacyStep:
    """Remove distro-packaged docker builds; most hosts have none installed."""

    step_id = "20_remove_legacy"
    title = "REMOVING OLD DOCKER VERSIONS"
    policy = FailurePolicy.IGNORE

    def run(self, ctx: InstallContext) -> None:
        apt_remove(ctx.runner, ctx.settings.legacy_packages)
