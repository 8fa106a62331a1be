"""pytest-bdd steps that pin the working directory."""

from __future__ import annotations

import typing as t

from pytest_bdd import given, parsers

from dualpath.environment import WorkingDirectoryStack

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    import pytest


@given(parsers.cfparse('the working directory is "{cwd}"'))
def pin_working_directory(request: pytest.FixtureRequest, cwd: str) -> None:
    """Resolve relative paths against *cwd* for the rest of the scenario."""
    WorkingDirectoryStack.push(cwd)
    request.addfinalizer(WorkingDirectoryStack.pop)
