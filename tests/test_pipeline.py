import unittest

from docker_installer.lib.command import CommandError
from docker_installer.pipeline import FailurePolicy, StepFailed, run_pipeline

from tests.fakes import make_ctx


class RecordingStep:
    title = "TEST"

    def __init__(self, step_id, policy, journal, error=None):
        self.step_id = step_id
        self.policy = policy
        self.journal = journal
        self.error = error

    def run(self, ctx):
        self.journal.append(self.step_id)
        if self.error is not None:
            raise self.error


class RunPipelineTests(unittest.TestCase):
    def test_steps_run_in_declared_order(self):
        journal = []
        steps = [RecordingStep(s, FailurePolicy.FATAL, journal) for s in ("a", "b", "c")]
        result = run_pipeline(ctx=make_ctx(), steps=steps)
        self.assertEqual(journal, ["a", "b", "c"])
        self.assertEqual(result.ran_steps, ["a", "b", "c"])

    def test_ignored_failure_continues_silently(self):
        journal = []
        steps = [
            RecordingStep("remove", FailurePolicy.IGNORE, journal, CommandError(["apt-get"], 100)),
            RecordingStep("install", FailurePolicy.FATAL, journal),
        ]
        result = run_pipeline(ctx=make_ctx(), steps=steps)
        self.assertEqual(journal, ["remove", "install"])
        self.assertEqual(result.ignored, ["remove"])
        self.assertEqual(result.warnings, [])

    def test_warn_failure_is_logged_and_continues(self):
        journal = []
        steps = [
            RecordingStep("update", FailurePolicy.WARN, journal, CommandError(["apt", "update"], 1)),
            RecordingStep("next", FailurePolicy.FATAL, journal),
        ]
        with self.assertLogs("docker_installer.pipeline", level="WARNING"):
            result = run_pipeline(ctx=make_ctx(), steps=steps)
        self.assertEqual(journal, ["update", "next"])
        self.assertEqual(result.warnings, ["update"])

    def test_fatal_failure_stops_with_command_status(self):
        journal = []
        steps = [
            RecordingStep("install", FailurePolicy.FATAL, journal, CommandError(["apt-get", "install"], 100)),
            RecordingStep("after", FailurePolicy.FATAL, journal),
        ]
        with self.assertLogs("docker_installer.pipeline", level="ERROR"):
            with self.assertRaises(StepFailed) as caught:
                run_pipeline(ctx=make_ctx(), steps=steps)
        self.assertEqual(caught.exception.step_id, "install")
        self.assertEqual(caught.exception.returncode, 100)
        self.assertEqual(journal, ["install"])

    def test_signal_killed_command_maps_to_shell_status(self):
        steps = [RecordingStep("install", FailurePolicy.FATAL, [], CommandError(["apt", "install"], -9))]
        with self.assertLogs("docker_installer.pipeline", level="ERROR"):
            with self.assertRaises(StepFailed) as caught:
                run_pipeline(ctx=make_ctx(), steps=steps)
        self.assertEqual(caught.exception.returncode, 137)

    def test_fatal_non_command_error_exits_with_one(self):
        steps = [RecordingStep("write", FailurePolicy.FATAL, [], OSError("read-only"))]
        with self.assertRaises(StepFailed) as caught:
            run_pipeline(ctx=make_ctx(), steps=steps)
        self.assertEqual(caught.exception.returncode, 1)


if __name__ == "__main__":
    unittest.main()
