from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

from .context import InstallContext
from .lib.command import CommandError, fmt_argv
from .logging_utils import SECTION

logger = logging.getLogger(__name__)


class FailurePolicy(enum.Enum):
    FATAL = "fatal"
    WARN = "warn"
    IGNORE = "ignore"


class Step(Protocol):
    """A single idempotent step."""

    step_id: str
    title: str
    policy: FailurePolicy

    def run(self, ctx: InstallContext) -> None:
        ...


class StepFailed(RuntimeError):
    def __init__(self, step_id: str, returncode: int, cause: BaseException) -> None:
        self.step_id = step_id
        self.returncode = returncode
        super().__init__(f"Step {step_id} failed: {cause}")


@dataclass
class PipelineResult:
    ran_steps: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    ignored: List[str] = field(default_factory=list)


def section(title: str) -> None:
    logger.log(SECTION, "===================== %s =====================", title)


def _returncode(exc: BaseException) -> int:
    if not isinstance(exc, CommandError) or not exc.returncode:
        return 1
    if exc.returncode < 0:
        # killed by signal N -> 128+N
        return 128 - exc.returncode
    return exc.returncode


def run_pipeline(*, ctx: InstallContext, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order; the first FATAL failure stops the run."""

    result = PipelineResult()
    current_title = None

    for step in steps:
        if step.title != current_title:
            section(step.title)
            current_title = step.title

        logger.debug("Running step %s (%s)", step.step_id, step.policy.value)
        try:
            step.run(ctx)
        except Exception as e:
            if step.policy is FailurePolicy.IGNORE:
                logger.debug("Ignoring failure in %s: %s", step.step_id, e)
                result.ignored.append(step.step_id)
            elif step.policy is FailurePolicy.WARN:
                level = getattr(step, "failure_level", logging.WARNING)
                message = getattr(step, "failure_message", f"Step {step.step_id} failed.")
                logger.log(level, "%s (%s)", message, e)
                result.warnings.append(step.step_id)
            else:
                if isinstance(e, CommandError):
                    logger.error("Command \"%s\" failed with exit code %s", fmt_argv(e.argv), e.returncode)
                    if e.stderr:
                        logger.error("%s", e.stderr.strip())
                raise StepFailed(step.step_id, _returncode(e), e) from e
        result.ran_steps.append(step.step_id)

    return result
