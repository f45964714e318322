from __future__ import annotations

import logging
from pathlib import Path

from .command import Runner
from .files import host_path
from .pkg import dpkg_architecture

logger = logging.getLogger(__name__)


def repository_line(
    *,
    base_url: str,
    distro_id: str,
    codename: str,
    arch: str,
    keyring: str,
    channel: str = "stable",
) -> str:
    """Render the one-line APT source for the vendor repository.

    Example:
      deb [arch=amd64 signed-by=/etc/apt/keyrings/docker.gpg] https://download.docker.com/linux/debian bookworm stable
    """

    url = f"{base_url.rstrip('/')}/{distro_id}"
    return f"deb [arch={arch} signed-by={keyring}] {url} {codename} {channel}\n"


def install_signing_key(
    runner: Runner,
    *,
    key_url: str,
    keyring: str,
    root: str = "/",
) -> None:
    """Fetch an ASCII-armored key and store it dearmored at keyring."""

    dest = host_path(root, keyring)
    runner.run(["install", "-m", "0755", "-d", str(dest.parent)])
    r = runner.run(["curl", "-fsSL", key_url])
    runner.run(["gpg", "--batch", "--yes", "--dearmor", "-o", str(dest)], input_text=r.stdout)
    runner.run(["chmod", "a+r", str(dest)])


def register_vendor_repo(
    runner: Runner,
    *,
    base_url: str,
    distro_id: str,
    codename: str,
    keyring: str,
    sources_list: str,
    channel: str = "stable",
    root: str = "/",
    dry_run: bool = False,
) -> str:
    """Install the vendor key and write its sources list; return the line written."""

    install_signing_key(
        runner,
        key_url=f"{base_url.rstrip('/')}/{distro_id}/gpg",
        keyring=keyring,
        root=root,
    )

    line = repository_line(
        base_url=base_url,
        distro_id=distro_id,
        codename=codename,
        arch=dpkg_architecture(runner),
        keyring=keyring,
        channel=channel,
    )

    p: Path = host_path(root, sources_list)
    if dry_run:
        logger.info("Would write %s: %s", str(p), line.strip())
        return line
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(line, encoding="utf-8")
    logger.info("Configured vendor apt repo: %s", line.strip())
    return line
