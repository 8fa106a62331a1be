"""Exception hierarchy for dualpath."""

from __future__ import annotations


class DualPathError(Exception):
    """Base class for all dualpath errors."""


class PathMisuseError(DualPathError, TypeError):
    """Raised when an operation is called with arguments it cannot accept.

    Parsing never fails, so this only signals programmer error such as
    calling :func:`dualpath.join` without fragments or passing a
    :class:`~dualpath.dialect.Dialect` where a path string was expected.
    """


class UnknownDialectError(DualPathError, ValueError):
    """Raised when a dialect name cannot be mapped to a known dialect."""

    def __init__(self, name: str) -> None:
        msg = f"unknown path dialect: {name!r}"
        super().__init__(msg)
        self.name = name


class WorkingDirectoryError(DualPathError, RuntimeError):
    """Raised when a working-directory provider returns a non-string value."""


__all__ = [
    "DualPathError",
    "PathMisuseError",
    "UnknownDialectError",
    "WorkingDirectoryError",
]
