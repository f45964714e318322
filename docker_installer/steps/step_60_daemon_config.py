from __future__ import annotations

import json
import logging
from typing import Any, Dict

from ..context import InstallContext
from ..lib.files import ConfigFile, write_config_file
from ..pipeline import FailurePolicy

logger = logging.getLogger(__name__)

DAEMON_JSON_PATH = "/etc/docker/daemon.json"

DAEMON_SETTINGS: Dict[str, Any] = {
    "log-driver": "json-file",
    "log-opts": {
        "max-size": "10m",
        "max-file": "3",
    },
    "default-ulimits": {
        "nofile": {
            "Name": "nofile",
            "Hard": 64000,
            "Soft": 64000,
        }
    },
}


def daemon_config() -> ConfigFile:
    return ConfigFile(
        path=DAEMON_JSON_PATH,
        content=json.dumps(DAEMON_SETTINGS, indent=2) + "\n",
        only_if_absent=True,
    )


class WriteDaemonConfigStep:
    step_id = "60_write_daemon_config"
    title = "CONFIGURING DOCKER"
    policy = FailurePolicy.FATAL

    def run(self, ctx: InstallContext) -> None:
        if write_config_file(ctx.root_dir, daemon_config(), dry_run=ctx.dry_run):
            logger.info("Created default Docker daemon configuration.")
