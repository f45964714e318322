"""Docker Engine installer for Debian-family hosts.

Core design goals:
- Ordered, idempotent steps
- Explicit failure policy per step (fatal, warn, ignore)
- Host state resolved once in preflight and passed to every step
- Centralized logging
"""

__all__ = []
