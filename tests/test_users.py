import unittest

from docker_installer.lib.users import resolve_invoking_user

from tests.fakes import FakeRunner


class ResolveInvokingUserTests(unittest.TestCase):
    def test_sudo_user_is_used_directly(self):
        runner = FakeRunner()
        self.assertEqual(resolve_invoking_user({"SUDO_USER": "alice"}, runner), "alice")
        self.assertEqual(runner.calls, [])

    def test_root_sudo_user_falls_back_to_terminal_login(self):
        runner = FakeRunner(outputs={("who", "am", "i"): "bob      pts/0        2026-10-16 09:12\n"})
        with self.assertLogs("docker_installer.lib.users", level="WARNING"):
            user = resolve_invoking_user({"SUDO_USER": "root"}, runner)
        self.assertEqual(user, "bob")

    def test_no_usable_account_returns_none(self):
        runner = FakeRunner(outputs={("who", "am", "i"): "root pts/0\n"})
        with self.assertLogs("docker_installer.lib.users", level="WARNING") as logs:
            user = resolve_invoking_user({}, runner)
        self.assertIsNone(user)
        self.assertTrue(any("only be usable by root" in line for line in logs.output))

    def test_failed_who_returns_none(self):
        runner = FakeRunner(failures={("who",): 1})
        with self.assertLogs("docker_installer.lib.users", level="WARNING"):
            self.assertIsNone(resolve_invoking_user({}, runner))


if __name__ == "__main__":
    unittest.main()
