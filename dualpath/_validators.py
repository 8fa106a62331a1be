"""Shared validation helpers."""

from __future__ import annotations

import os

from .errors import PathMisuseError, WorkingDirectoryError


def coerce_path(value: object, *, name: str = "path") -> str:
    """Return *value* as a ``str`` path or raise :class:`PathMisuseError`."""
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        path = os.fspath(value)
        if isinstance(path, str):
            return path
    msg = f"{name} must be a str or os.PathLike[str], got {type(value).__name__}"
    raise PathMisuseError(msg)


def coerce_fragments(fragments: tuple[object, ...]) -> list[str]:
    """Validate the positional arguments given to ``join``."""
    if not fragments:
        msg = "join() requires at least one path fragment"
        raise PathMisuseError(msg)
    return [
        coerce_path(fragment, name=f"fragment {index}")
        for index, fragment in enumerate(fragments)
    ]


def validate_working_directory(value: object) -> str:
    """Ensure a working-directory provider produced a string."""
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if not isinstance(value, str):
        msg = (
            "working directory provider must return a str, "
            f"got {type(value).__name__}"
        )
        raise WorkingDirectoryError(msg)
    return value
