from .step_10_system_update import UpdateIndexStep, UpgradeSystemStep
from .step_20_remove_legacy import RemoveLegacyStep
from .step_30_prerequisites import InstallPrerequisitesStep
from .step_40_repository import RefreshIndexStep, RegisterRepositoryStep
from .step_50_install_engine import FixBrokenStep, InstallEngineStep
from .step_60_daemon_config import WriteDaemonConfigStep
from .step_70_service import EnableServiceStep, GrantGroupAccessStep, StartServiceStep
from .step_80_verify import InstallCredentialHelperStep, VerifyComposeStep, VerifyEngineStep
from .step_90_tuning import ApplySysctlStep, WriteLogrotateStep, WriteSysctlStep

__all__ = [
    "UpdateIndexStep",
    "UpgradeSystemStep",
    "RemoveLegacyStep",
    "InstallPrerequisitesStep",
    "RegisterRepositoryStep",
    "RefreshIndexStep",
    "InstallEngineStep",
    "FixBrokenStep",
    "WriteDaemonConfigStep",
    "EnableServiceStep",
    "StartServiceStep",
    "GrantGroupAccessStep",
    "VerifyEngineStep",
    "VerifyComposeStep",
    "InstallCredentialHelperStep",
    "WriteSysctlStep",
    "ApplySysctlStep",
    "WriteLogrotateStep",
]
