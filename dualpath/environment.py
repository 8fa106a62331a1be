"""Working-directory provider with a stack-scoped override.

Relative paths are resolved against a working directory supplied from
outside the pure string operations. Production code reads it from the
operating system; tests push a fixed value with :func:`working_directory`
so results do not depend on where the suite happens to run.
"""

from __future__ import annotations

import contextlib
import logging
import os
import threading
import typing as t

from ._validators import validate_working_directory

logger = logging.getLogger(__name__)

CwdProvider = t.Callable[[], str]
CwdArg = t.Union[str, "os.PathLike[str]", CwdProvider, None]


class WorkingDirectoryStack:
    """Thread-local stack of working-directory overrides.

    Each thread sees only the overrides it pushed itself, and the innermost
    override wins.
    """

    _state: t.ClassVar[threading.local] = threading.local()

    @classmethod
    def _stack(cls) -> list[str]:
        stack = getattr(cls._state, "stack", None)
        if stack is None:
            stack = []
            cls._state.stack = stack
        return stack

    @classmethod
    def push(cls, path: str) -> None:
        """Make *path* the active override for the current thread."""
        cls._stack().append(path)
        logger.debug("Pushed working directory override %s", path)

    @classmethod
    def pop(cls) -> str:
        """Remove and return the innermost override."""
        stack = cls._stack()
        if not stack:
            msg = "no working directory override is active"
            raise RuntimeError(msg)
        path = stack.pop()
        logger.debug("Popped working directory override %s", path)
        return path

    @classmethod
    def peek(cls) -> str | None:
        """Return the innermost override, or ``None`` when none is active."""
        stack = cls._stack()
        return stack[-1] if stack else None

    @classmethod
    def depth(cls) -> int:
        """Return how many overrides are active on the current thread."""
        return len(cls._stack())

    @classmethod
    def reset(cls) -> None:
        """Discard every override for the current thread."""
        cls._state.stack = []


@contextlib.contextmanager
def working_directory(path: str | os.PathLike[str]) -> t.Iterator[str]:
    """Temporarily resolve relative paths against *path*.

    The override is popped on every exit path, including exceptions, and
    overrides may be nested.
    """
    value = validate_working_directory(path)
    WorkingDirectoryStack.push(value)
    try:
        yield value
    finally:
        WorkingDirectoryStack.pop()


def current_working_directory() -> str:
    """Return the active override or, failing that, the process directory."""
    override = WorkingDirectoryStack.peek()
    if override is not None:
        return override
    return os.getcwd()


def resolve_cwd(cwd: CwdArg = None) -> str:
    """Return the working directory described by *cwd*.

    *cwd* may be a path, a zero-argument provider, or ``None`` to use
    :func:`current_working_directory`.
    """
    if cwd is None:
        return current_working_directory()
    if callable(cwd):
        return validate_working_directory(cwd())
    return validate_working_directory(cwd)


__all__ = [
    "CwdProvider",
    "WorkingDirectoryStack",
    "current_working_directory",
    "resolve_cwd",
    "working_directory",
]
