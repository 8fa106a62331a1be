"""Dual-dialect path operations.

Every function takes an optional ``dialect`` (a :class:`Dialect`, a
platform-like name such as ``"win32"``, or ``None`` for the host) and works
purely on strings. Only :func:`absolute_path` and :func:`relative_path`
consult the working directory, and they accept it explicitly via ``cwd``.
"""

from __future__ import annotations

import typing as t

from ._validators import coerce_fragments, coerce_path
from .dialect import Dialect
from .environment import resolve_cwd
from .normalizer import CURRENT_DIRECTORY, PARENT_DIRECTORY
from .normalizer import normalize as _normalize

if t.TYPE_CHECKING:
    import os

    from .environment import CwdArg

    PathArg = t.Union[str, os.PathLike[str]]


def separator(dialect: Dialect | str | None = None) -> str:
    """Return the canonical component separator."""
    return Dialect.coerce(dialect).sep


def delimiter(dialect: Dialect | str | None = None) -> str:
    """Return the delimiter between entries of a search-path list."""
    return Dialect.coerce(dialect).rules.delimiter


def is_absolute(path: PathArg, dialect: Dialect | str | None = None) -> bool:
    """Return ``True`` when *path* is absolute under *dialect*.

    On Windows only ``<letter>:`` followed by a separator qualifies: ``C:``
    is drive-relative and a bare leading ``\\`` is relative to the current
    drive.
    """
    text = coerce_path(path)
    return Dialect.coerce(dialect).rules.absolute.match(text) is not None


def normalize(path: PathArg, dialect: Dialect | str | None = None) -> str:
    """Return the canonical form of *path*."""
    return _normalize(coerce_path(path), dialect)


def join(*fragments: PathArg, dialect: Dialect | str | None = None) -> str:
    """Join *fragments* with the dialect separator and normalize the result.

    An empty first fragment keeps the result rooted, so ``join("", "tmp")``
    gives ``/tmp`` on POSIX, and ``join("C:", "")`` gives the drive root
    ``C:\\`` on Windows. Trailing separators on every fragment but the last
    are dropped before joining, so ``join("C:\\", "x")`` is ``C:\\x``.

    Raises
    ------
    PathMisuseError
        If no fragments are given or a fragment is not a path.
    """
    parts = coerce_fragments(fragments)
    resolved = Dialect.coerce(dialect)
    if len(parts) == 1:
        return _normalize(parts[0], resolved)
    separators = resolved.rules.separators
    heads = [part.rstrip(separators) for part in parts[:-1]]
    return _normalize(resolved.sep.join([*heads, parts[-1]]), resolved)


def absolute_path(
    path: PathArg, dialect: Dialect | str | None = None, *, cwd: CwdArg = None
) -> str:
    """Return *path* as an absolute canonical path.

    Relative paths are joined onto *cwd*, which may be a string or a
    zero-argument provider. When omitted the active
    :func:`~dualpath.environment.working_directory` override is used, or the
    process working directory when no override is active.
    """
    text = coerce_path(path)
    resolved = Dialect.coerce(dialect)
    if is_absolute(text, resolved):
        return _normalize(text, resolved)
    return join(resolve_cwd(cwd), text, dialect=resolved)


def split_components(path: PathArg, dialect: Dialect | str | None = None) -> list[str]:
    """Split *path* literally on the canonical separator.

    No separator runs are collapsed and no lead is recognised, so an absolute
    POSIX path starts with an empty component. Use :func:`normalize` first
    when ``.`` and ``..`` need collapsing.
    """
    return coerce_path(path).split(Dialect.coerce(dialect).sep)


def _strip_trailing_marker(parts: list[str]) -> tuple[list[str], bool]:
    if len(parts) > 1 and parts[-1] == "":
        return parts[:-1], True
    return parts, False


def relative_path(
    source: PathArg,
    target: PathArg,
    dialect: Dialect | str | None = None,
    *,
    cwd: CwdArg = None,
) -> str:
    """Return the path that leads from *source* to *target*.

    Both inputs are made absolute first. A trailing separator on either input
    does not change which components are considered shared; the result ends
    with a separator exactly when the canonical *target* does, so walking up
    to a drive root gives ``..\\..\\`` rather than ``..\\..``.

    Examples
    --------
    >>> relative_path("/home/bob/lib/janet", "/home/bob/include", "posix")
    '../../include'
    """
    resolved = Dialect.coerce(dialect)
    if cwd is not None and callable(cwd):
        # Both sides must see the same directory even if the provider is not
        # stable between calls.
        cwd = resolve_cwd(cwd)
    source_abs = absolute_path(source, resolved, cwd=cwd)
    target_abs = absolute_path(target, resolved, cwd=cwd)

    source_parts, _ = _strip_trailing_marker(split_components(source_abs, resolved))
    target_parts, trailing = _strip_trailing_marker(
        split_components(target_abs, resolved)
    )

    common = 0
    for left, right in zip(source_parts, target_parts):
        if left != right:
            break
        common += 1

    walk = [PARENT_DIRECTORY] * (len(source_parts) - common)
    walk.extend(target_parts[common:])
    if trailing:
        walk.append("")
    if not walk:
        return CURRENT_DIRECTORY
    return join(*walk, dialect=resolved)


def _last_separator(text: str, dialect: Dialect) -> int:
    rules = dialect.rules
    return max(text.rfind(char) for char in rules.separators)


def basename(path: PathArg, dialect: Dialect | str | None = None) -> str:
    """Return the text after the last separator of *path*."""
    text = coerce_path(path)
    index = _last_separator(text, Dialect.coerce(dialect))
    return text[index + 1 :]


def dirname(path: PathArg, dialect: Dialect | str | None = None) -> str:
    """Return *path* up to and including its last separator.

    A path without separators lives in the current directory, which is
    returned as ``./`` (or ``.\\`` on Windows).
    """
    text = coerce_path(path)
    resolved = Dialect.coerce(dialect)
    index = _last_separator(text, resolved)
    if index < 0:
        return resolved.rules.current_directory
    return text[: index + 1]


def extension(path: PathArg, dialect: Dialect | str | None = None) -> str | None:
    """Return the extension of *path* including its dot, or ``None``.

    Only the final component is examined: ``a.d/file`` has no extension.
    """
    name = basename(path, dialect)
    index = name.rfind(".")
    if index < 0:
        return None
    return name[index:]


__all__ = [
    "absolute_path",
    "basename",
    "delimiter",
    "dirname",
    "extension",
    "is_absolute",
    "join",
    "normalize",
    "relative_path",
    "separator",
    "split_components",
]
