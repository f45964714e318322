from __future__ import annotations

import logging
from typing import List

from .context import InstallContext
from .pipeline import PipelineResult, section

logger = logging.getLogger(__name__)


def summary_lines(ctx: InstallContext, result: PipelineResult) -> List[str]:
    user = ctx.user or "root"
    lines = [
        "Docker has been installed and configured.",
        f"Installation log saved to: {ctx.log_path}",
    ]
    if result.warnings:
        lines.append(f"Steps that reported problems: {', '.join(result.warnings)}")
    lines += [
        "",
        f"To verify installation, run as {user}:",
        "  docker run hello-world",
        "",
        "If you encounter permission errors, try logging out and back in,",
        f"or run 'newgrp {ctx.settings.service_group}' to refresh group membership.",
    ]
    return lines


def print_summary(ctx: InstallContext, result: PipelineResult) -> None:
    """Log the closing summary (console and log file)."""

    section("INSTALLATION COMPLETED")
    for line in summary_lines(ctx, result):
        logger.info("%s", line)
