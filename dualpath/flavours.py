"""Path operations bound to a single dialect.

``dualpath.posix`` and ``dualpath.windows`` mirror the module-level API
without the ``dialect`` argument, which is convenient when a caller always
works with one syntax regardless of the host.
"""

from __future__ import annotations

import typing as t

from . import paths
from .dialect import Dialect
from .normalizer import CanonicalBuilder
from .tokens import tokenize

if t.TYPE_CHECKING:
    import os

    from .environment import CwdArg
    from .tokens import PathToken

    PathArg = t.Union[str, os.PathLike[str]]


class PathFlavour:
    """The dualpath operations with the dialect fixed."""

    def __init__(self, dialect: Dialect | str) -> None:
        self.dialect = Dialect.coerce(dialect)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"PathFlavour({self.dialect.value!r})"

    @property
    def sep(self) -> str:
        """Canonical separator."""
        return self.dialect.sep

    @property
    def delimiter(self) -> str:
        """Search-path list delimiter."""
        return self.dialect.rules.delimiter

    def tokenize(self, path: str) -> tuple[PathToken, ...]:
        """Return the token stream for *path*."""
        return tokenize(path, self.dialect)

    def builder(self) -> CanonicalBuilder:
        """Return an empty canonical builder for this dialect."""
        return CanonicalBuilder(self.dialect)

    def is_absolute(self, path: PathArg) -> bool:
        """Return ``True`` when *path* is absolute."""
        return paths.is_absolute(path, self.dialect)

    def normalize(self, path: PathArg) -> str:
        """Return the canonical form of *path*."""
        return paths.normalize(path, self.dialect)

    def join(self, *fragments: PathArg) -> str:
        """Join *fragments* and normalize the result."""
        return paths.join(*fragments, dialect=self.dialect)

    def absolute_path(self, path: PathArg, *, cwd: CwdArg = None) -> str:
        """Return *path* as an absolute canonical path."""
        return paths.absolute_path(path, self.dialect, cwd=cwd)

    def split_components(self, path: PathArg) -> list[str]:
        """Split *path* literally on the separator."""
        return paths.split_components(path, self.dialect)

    def relative_path(
        self, source: PathArg, target: PathArg, *, cwd: CwdArg = None
    ) -> str:
        """Return the path that leads from *source* to *target*."""
        return paths.relative_path(source, target, self.dialect, cwd=cwd)

    def basename(self, path: PathArg) -> str:
        """Return the text after the last separator."""
        return paths.basename(path, self.dialect)

    def dirname(self, path: PathArg) -> str:
        """Return *path* up to and including its last separator."""
        return paths.dirname(path, self.dialect)

    def extension(self, path: PathArg) -> str | None:
        """Return the extension of *path*, or ``None``."""
        return paths.extension(path, self.dialect)


posix = PathFlavour(Dialect.POSIX)
windows = PathFlavour(Dialect.WINDOWS)

_FLAVOURS: t.Final[dict[Dialect, PathFlavour]] = {
    Dialect.POSIX: posix,
    Dialect.WINDOWS: windows,
}


def flavour_for(dialect: Dialect | str | None = None) -> PathFlavour:
    """Return the shared :class:`PathFlavour` for *dialect* (default: host)."""
    return _FLAVOURS[Dialect.coerce(dialect)]


__all__ = ["PathFlavour", "flavour_for", "posix", "windows"]
