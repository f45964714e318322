from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .lib.command import Runner
from .lib.os_release import DistroInfo
from .settings import Settings


@dataclass(frozen=True)
class InstallContext:
    """Everything preflight resolved, passed read-only into each step."""

    distro: DistroInfo
    user: Optional[str]
    runner: Runner
    settings: Settings = field(default_factory=Settings)
    root_dir: str = "/"
    dry_run: bool = False
    log_path: str = ""

    @property
    def distro_supported(self) -> bool:
        return self.distro.id in self.settings.supported_distros
