from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from docker_installer.lib.command import CmdResult, CommandError


class FakeRunner:
    """Records argv and answers from scripted prefixes instead of running anything."""

    def __init__(
        self,
        *,
        failures: Dict[Tuple[str, ...], int] | None = None,
        outputs: Dict[Tuple[str, ...], str] | None = None,
    ) -> None:
        self.failures = dict(failures or {})
        self.outputs = {("dpkg", "--print-architecture"): "amd64\n", **(outputs or {})}
        self.calls: List[List[str]] = []
        self.inputs: List[str | None] = []
        self.read_only: List[bool] = []

    @staticmethod
    def _match(table: Dict[Tuple[str, ...], object], argv: Sequence[str]):
        for prefix, value in table.items():
            if tuple(argv[: len(prefix)]) == prefix:
                return value
        return None

    def run(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        input_text: str | None = None,
        read_only: bool = False,
    ) -> CmdResult:
        argv_list = list(argv)
        self.calls.append(argv_list)
        self.inputs.append(input_text)
        self.read_only.append(read_only)
        rc = self._match(self.failures, argv_list) or 0
        stdout = self._match(self.outputs, argv_list) or ""
        if check and rc != 0:
            raise CommandError(argv_list, rc, "scripted failure")
        return CmdResult(argv=argv_list, returncode=rc, stdout=stdout, stderr="")

    def ran(self, *prefix: str) -> bool:
        return any(tuple(c[: len(prefix)]) == prefix for c in self.calls)

    def index_of(self, *prefix: str) -> int:
        for i, c in enumerate(self.calls):
            if tuple(c[: len(prefix)]) == prefix:
                return i
        raise AssertionError(f"{prefix} was never run")


def make_ctx(runner=None, *, root_dir: str = "/", user: str | None = "alice", distro_id: str = "debian"):
    from docker_installer.context import InstallContext
    from docker_installer.lib.os_release import DistroInfo

    return InstallContext(
        distro=DistroInfo(id=distro_id, codename="bookworm", pretty_name="Debian GNU/Linux 12 (bookworm)"),
        user=user,
        runner=runner or FakeRunner(),
        root_dir=root_dir,
        log_path="/tmp/docker_install_test.log",
    )
