"""Canonicalization of token streams.

Normalization is a single left-to-right pass. A list accumulates the output
components and an integer, the cancel depth, counts how many real components
at the tail of that list a later ``..`` may still remove. Whenever the depth
is positive the last accumulated entry is a real component, so a ``..`` can
simply pop it; when the depth is zero the ``..`` cannot be resolved and is
kept verbatim.
"""

from __future__ import annotations

import typing as t

from .dialect import Dialect
from .tokens import Lead, tokenize

if t.TYPE_CHECKING:
    from collections import abc as cabc

    from .tokens import PathToken

CURRENT_DIRECTORY: t.Final[str] = "."
PARENT_DIRECTORY: t.Final[str] = ".."


class CanonicalBuilder:
    """Accumulate tokens into a canonical path string."""

    def __init__(self, dialect: Dialect | str | None = None) -> None:
        self.dialect = Dialect.coerce(dialect)
        self.lead: str | None = None
        self.parts: list[str] = []
        self.depth = 0

    def feed(self, token: PathToken) -> None:
        """Apply a single token to the accumulator."""
        if isinstance(token, Lead):
            self.lead = token.text
        elif token.is_current:
            return
        elif token.is_parent:
            self._ascend()
        else:
            self.depth += 1
            self.parts.append(token.text)

    def feed_all(self, tokens: cabc.Iterable[PathToken]) -> CanonicalBuilder:
        """Apply every token in *tokens* and return ``self``."""
        for token in tokens:
            self.feed(token)
        return self

    def _ascend(self) -> None:
        if self.depth == 0:
            self.parts.append(PARENT_DIRECTORY)
            return
        self.depth -= 1
        self.parts.pop()

    @property
    def unresolved(self) -> int:
        """Return the number of ``..`` components that could not be cancelled."""
        return sum(1 for part in self.parts if part == PARENT_DIRECTORY)

    def build(self) -> str:
        """Return the canonical path accumulated so far."""
        rules = self.dialect.rules
        result = (self.lead or "") + rules.sep.join(self.parts)
        if self.lead is None and rules.absolute.match(result):
            # A drive-like component surfaced only after collapsing; keep the
            # path relative.
            return rules.current_directory + result
        return result or CURRENT_DIRECTORY


def normalize_tokens(
    tokens: cabc.Iterable[PathToken], dialect: Dialect | str | None = None
) -> str:
    """Return the canonical path for an already tokenized stream."""
    return CanonicalBuilder(dialect).feed_all(tokens).build()


def normalize(path: str, dialect: Dialect | str | None = None) -> str:
    """Return the canonical form of *path*.

    ``.`` components disappear, ``..`` cancels the preceding real component
    where one exists, and an empty result becomes ``"."``. A trailing
    separator is preserved.

    Examples
    --------
    >>> normalize("/tmp/../usr/local/../bin", "posix")
    '/usr/bin'
    >>> normalize("a/b/../../..", "posix")
    '..'
    """
    resolved = Dialect.coerce(dialect)
    return normalize_tokens(tokenize(path, resolved), resolved)


__all__ = [
    "CURRENT_DIRECTORY",
    "PARENT_DIRECTORY",
    "CanonicalBuilder",
    "normalize",
    "normalize_tokens",
]
