from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_LEGACY_PACKAGES = ["docker", "docker-engine", "docker.io", "containerd", "runc"]

DEFAULT_PREREQUISITES = [
    "apt-transport-https",
    "ca-certificates",
    "curl",
    "gnupg",
    "lsb-release",
    "software-properties-common",
]

DEFAULT_ENGINE_PACKAGES = [
    "docker-ce",
    "docker-ce-cli",
    "containerd.io",
    "docker-buildx-plugin",
    "docker-compose-plugin",
]

DEFAULT_CREDENTIAL_HELPERS = ["docker-credential-helpers", "golang-docker-credential-helpers"]

DEFAULT_SUPPORTED_DISTROS = [
    "ubuntu",
    "debian",
    "linuxmint",
    "elementary",
    "pop",
    "zorin",
    "kali",
    "parrot",
    "deepin",
    "mx",
]


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    return raw.get(name) or {}


def _str_list(value: Any, default: List[str]) -> List[str]:
    if value is None:
        return list(default)
    if not isinstance(value, list):
        raise ValueError(f"Expected a list of package names, got {type(value).__name__}")
    return [str(v).strip() for v in value if str(v).strip()]


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def legacy_packages(self) -> List[str]:
        return _str_list(_section(self.raw, "packages").get("legacy"), DEFAULT_LEGACY_PACKAGES)

    @property
    def prerequisite_packages(self) -> List[str]:
        return _str_list(_section(self.raw, "packages").get("prerequisites"), DEFAULT_PREREQUISITES)

    @property
    def engine_packages(self) -> List[str]:
        return _str_list(_section(self.raw, "packages").get("engine"), DEFAULT_ENGINE_PACKAGES)

    @property
    def credential_helper_packages(self) -> List[str]:
        return _str_list(
            _section(self.raw, "packages").get("credential_helpers"), DEFAULT_CREDENTIAL_HELPERS
        )

    @property
    def repo_base_url(self) -> str:
        return str(_section(self.raw, "repository").get("base_url") or "https://download.docker.com/linux")

    @property
    def repo_channel(self) -> str:
        return str(_section(self.raw, "repository").get("channel") or "stable")

    @property
    def keyring_path(self) -> str:
        return str(_section(self.raw, "repository").get("keyring") or "/etc/apt/keyrings/docker.gpg")

    @property
    def sources_list_path(self) -> str:
        return str(
            _section(self.raw, "repository").get("sources_list") or "/etc/apt/sources.list.d/docker.list"
        )

    @property
    def service_name(self) -> str:
        return str(_section(self.raw, "service").get("name") or "docker")

    @property
    def service_group(self) -> str:
        return str(_section(self.raw, "service").get("group") or "docker")

    @property
    def supported_distros(self) -> List[str]:
        return [d.lower() for d in _str_list(self.raw.get("supported_distros"), DEFAULT_SUPPORTED_DISTROS)]


LIST_KEYS = {
    "packages": ("legacy", "prerequisites", "engine", "credential_helpers"),
}


def validate_settings(raw: Dict[str, Any], source: str = "settings") -> None:
    """Reject shapes the properties cannot read, before any step runs."""

    for name in ("packages", "repository", "service"):
        value = raw.get(name)
        if value is not None and not isinstance(value, dict):
            raise ValueError(f"{source}: {name} must be a mapping, got {type(value).__name__}")

    for name, keys in LIST_KEYS.items():
        section = raw.get(name) or {}
        for key in keys:
            value = section.get(key)
            if value is not None and not isinstance(value, list):
                raise ValueError(f"{source}: {name}.{key} must be a list, got {type(value).__name__}")

    distros = raw.get("supported_distros")
    if distros is not None and not isinstance(distros, list):
        raise ValueError(f"{source}: supported_distros must be a list, got {type(distros).__name__}")


def load_settings(path: Optional[str]) -> Settings:
    """Load installer settings from YAML; no path means built-in defaults."""

    if not path:
        return Settings()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("installer settings must be YAML")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"{path} is not valid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping/object")

    validate_settings(raw, source=path)
    return Settings(raw=raw)
