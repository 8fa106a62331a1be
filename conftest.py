"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

import dualpath.environment
from dualpath.platform import PLATFORM_OVERRIDE_ENV

pytest_plugins = ("dualpath.pytest_plugin",)


@pytest.fixture(autouse=True)
def reset_working_directory_state() -> t.Generator[None, None, None]:
    """Ensure no working-directory override leaks between tests."""
    dualpath.environment.WorkingDirectoryStack.reset()
    yield
    dualpath.environment.WorkingDirectoryStack.reset()


@pytest.fixture(autouse=True)
def clear_platform_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from the real host platform."""
    monkeypatch.delenv(PLATFORM_OVERRIDE_ENV, raising=False)
