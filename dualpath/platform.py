"""Host platform query used as the default path dialect.

Centralising the lookup keeps the ``sys.platform`` mapping in one place and
lets tests emulate another host without spawning a different OS.
"""

from __future__ import annotations

import logging
import os
import sys
import typing as t

from .dialect import Dialect

logger = logging.getLogger(__name__)

# Tests set this override to emulate alternative hosts (for example Windows)
# without touching ``sys.platform``.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "DUALPATH_PLATFORM_OVERRIDE"


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring test overrides."""
    if platform:
        return platform

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        logger.debug(
            "Using platform override %r from %s", override, PLATFORM_OVERRIDE_ENV
        )
        return override

    return sys.platform


def host_dialect(platform: str | None = None) -> Dialect:
    """Return the path dialect of *platform* (default: the current host)."""
    return Dialect.coerce(_current_platform(platform))


def is_windows(platform: str | None = None) -> bool:
    """Return ``True`` when *platform* (default: current) uses Windows paths."""
    return host_dialect(platform) is Dialect.WINDOWS


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "host_dialect",
    "is_windows",
]
