from __future__ import annotations

import argparse
import logging
import os
from typing import Mapping, Optional

from .context import InstallContext
from .lib.command import Runner, SubprocessRunner
from .lib.os_release import OS_RELEASE_PATH
from .logging_utils import configure_logging, default_log_path
from .pipeline import PipelineResult, StepFailed, run_pipeline
from .preflight import PreflightError, run_preflight
from .report import print_summary
from .settings import load_settings
from .steps import (
    ApplySysctlStep,
    EnableServiceStep,
    FixBrokenStep,
    GrantGroupAccessStep,
    InstallCredentialHelperStep,
    InstallEngineStep,
    InstallPrerequisitesStep,
    RefreshIndexStep,
    RegisterRepositoryStep,
    RemoveLegacyStep,
    StartServiceStep,
    UpdateIndexStep,
    UpgradeSystemStep,
    VerifyComposeStep,
    VerifyEngineStep,
    WriteDaemonConfigStep,
    WriteLogrotateStep,
    WriteSysctlStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        UpdateIndexStep(),
        UpgradeSystemStep(),
        RemoveLegacyStep(),
        InstallPrerequisitesStep(),
        RegisterRepositoryStep(),
        RefreshIndexStep(),
        InstallEngineStep(),
        FixBrokenStep(),
        WriteDaemonConfigStep(),
        EnableServiceStep(),
        StartServiceStep(),
        GrantGroupAccessStep(),
        VerifyEngineStep(),
        VerifyComposeStep(),
        InstallCredentialHelperStep(),
        WriteSysctlStep(),
        ApplySysctlStep(),
        WriteLogrotateStep(),
    ]


def run(ctx: InstallContext) -> PipelineResult:
    """Run every installation step against an already-resolved context."""

    result = run_pipeline(ctx=ctx, steps=build_steps())
    print_summary(ctx, result)
    return result


def main(
    argv: Optional[list[str]] = None,
    *,
    runner: Optional[Runner] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    p = argparse.ArgumentParser(
        prog="docker-installer",
        description="Install and configure Docker Engine on Debian-family systems.",
    )
    p.add_argument("--config", default=None, help="Optional YAML settings file")
    p.add_argument("--log", default=None, help="Path to the run log (default: /tmp/docker_install_<timestamp>.log)")
    p.add_argument("--os-release", default=OS_RELEASE_PATH, help="OS release metadata file")
    p.add_argument("--root", default="/", help="Prefix for every file written (default: /)")
    p.add_argument("--dry-run", action="store_true", help="Log commands and writes without executing them")
    p.add_argument("--verbose", action="store_true", help="Also log command output")

    args = p.parse_args(argv)

    log_path = configure_logging(
        log_path=args.log or default_log_path(),
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    try:
        settings = load_settings(args.config)
    except (ValueError, FileNotFoundError) as e:
        logger.error("Invalid settings file %s: %s", args.config, e)
        return 1

    runner = runner or SubprocessRunner(dry_run=bool(args.dry_run))

    try:
        ctx = run_preflight(
            runner=runner,
            settings=settings,
            os_release_path=args.os_release,
            environ=os.environ if environ is None else environ,
            root_dir=args.root,
            dry_run=bool(args.dry_run),
            log_path=log_path,
        )
    except PreflightError as e:
        logger.error("%s", e)
        return 1

    try:
        run(ctx)
    except StepFailed as e:
        logger.error("%s", e)
        logger.error("Installation aborted. See %s for details.", log_path)
        return e.returncode
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
