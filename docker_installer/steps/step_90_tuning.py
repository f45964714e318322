from __future__ import annotations

import logging

from ..context import InstallContext
from ..lib.files import ConfigFile, host_path, write_config_file
from ..lib.service import apply_sysctl_file
from ..pipeline import FailurePolicy

logger = logging.getLogger(__name__)

SYSCTL_PATH = "/etc/sysctl.d/99-docker-performance.conf"
LOGROTATE_DIR = "/etc/logrotate.d"
LOGROTATE_PATH = f"{LOGROTATE_DIR}/docker"

SYSCTL_GROUPS = [
    ("Increase max map count for Elasticsearch containers", {"vm.max_map_count": 262144}),
    ("Increase the maximum number of open files", {"fs.file-max": 1000000}),
    ("Optimize network settings", {"net.core.somaxconn": 4096, "net.ipv4.tcp_max_syn_backlog": 4096}),
]

LOGROTATE_CONF = """\
/var/lib/docker/containers/*/*.log {
    rotate 7
    daily
    compress
    missingok
    delaycompress
    copytruncate
}
"""


def render_sysctl() -> str:
    blocks = []
    for comment, values in SYSCTL_GROUPS:
        lines = [f"# {comment}"] + [f"{key} = {value}" for key, value in values.items()]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def sysctl_config() -> ConfigFile:
    return ConfigFile(path=SYSCTL_PATH, content=render_sysctl())


def logrotate_config() -> ConfigFile:
    return ConfigFile(path=LOGROTATE_PATH, content=LOGROTATE_CONF)


class WriteSysctlStep:
    step_id = "90_write_sysctl"
    title = "PERFORMING POST-INSTALLATION TASKS"
    policy = FailurePolicy.FATAL

    def run(self, ctx: InstallContext) -> None:
        write_config_file(ctx.root_dir, sysctl_config(), dry_run=ctx.dry_run)


class ApplySysctlStep:
    step_id = "91_apply_sysctl"
    title = "PERFORMING POST-INSTALLATION TASKS"
    policy = FailurePolicy.WARN
    failure_message = "Could not apply sysctl settings. May require a system restart."

    def run(self, ctx: InstallContext) -> None:
        apply_sysctl_file(ctx.runner, str(host_path(ctx.root_dir, SYSCTL_PATH)))


class WriteLogrotateStep:
    step_id = "95_write_logrotate"
    title = "PERFORMING POST-INSTALLATION TASKS"
    policy = FailurePolicy.FATAL

    def run(self, ctx: InstallContext) -> None:
        if not host_path(ctx.root_dir, LOGROTATE_DIR).is_dir():
            logger.info("%s not present; skipping log rotation setup.", LOGROTATE_DIR)
            return
        write_config_file(ctx.root_dir, logrotate_config(), dry_run=ctx.dry_run)
        logger.info("Configured log rotation for Docker container logs.")
