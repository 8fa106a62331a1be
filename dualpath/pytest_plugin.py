"""Pytest plugin providing the ``dualpath`` fixture.

The fixture yields a :class:`~dualpath.flavours.PathFlavour` for the
configured dialect and, when a working directory is configured, keeps a
:func:`~dualpath.environment.working_directory` override active for the
duration of the test.
"""

from __future__ import annotations

import contextlib
import logging
import typing as t

import pytest

from .dialect import Dialect
from .environment import working_directory
from .flavours import PathFlavour, flavour_for

logger = logging.getLogger(__name__)

_SETTINGS: t.Final[tuple[str, ...]] = ("dialect", "cwd")


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line and ini options for the plugin."""
    group = parser.getgroup("dualpath")
    group.addoption(
        "--dualpath-dialect",
        action="store",
        dest="dualpath_dialect",
        default=None,
        help=(
            "Path dialect used by the dualpath fixture (posix or windows). "
            "Overrides the pytest.ini setting."
        ),
    )
    parser.addini(
        "dualpath_dialect",
        "Path dialect used by the dualpath fixture; empty means the host.",
        default="",
    )
    parser.addini(
        "dualpath_cwd",
        "Working directory override active while the dualpath fixture is used.",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "dualpath(dialect: str | None = None, cwd: str | None = None): "
            "override the dualpath fixture dialect or working directory for a "
            "single test."
        ),
    )


def _get_marker_setting(request: pytest.FixtureRequest, key: str) -> str | None:
    """Return the marker override for *key* if present."""
    marker = request.node.get_closest_marker("dualpath")
    if marker is None:
        return None
    return marker.kwargs.get(key)


def _get_param_setting(request: pytest.FixtureRequest, key: str) -> str | None:
    """Return the fixture parameter override for *key* if present."""
    param = getattr(request, "param", None)
    if param is None:
        return None
    if isinstance(param, dict):
        unknown = sorted(set(param) - set(_SETTINGS))
        if unknown:
            msg = f"dualpath fixture param dict has unknown keys: {unknown}"
            raise TypeError(msg)
        return param.get(key)
    if isinstance(param, Dialect):
        param = param.value
    if isinstance(param, str):
        return param if key == "dialect" else None
    msg = (
        "dualpath fixture param must be a dialect or a dict with 'dialect'/'cwd' "
        f"keys, got {type(param).__name__}"
    )
    raise TypeError(msg)


def _resolve_setting(request: pytest.FixtureRequest, key: str) -> str | None:
    """Return the effective value of *key*."""
    # Priority order: marker > fixture param > CLI option > INI setting

    marker_value = _get_marker_setting(request, key)
    if marker_value is not None:
        return marker_value

    param_value = _get_param_setting(request, key)
    if param_value is not None:
        return param_value

    config = request.config
    if key == "dialect":
        cli_value = config.getoption("dualpath_dialect")
        if cli_value:
            return str(cli_value)

    ini_value = config.getini(f"dualpath_{key}")
    return str(ini_value) if ini_value else None


@pytest.fixture
def dualpath(request: pytest.FixtureRequest) -> t.Iterator[PathFlavour]:
    """Provide the path operations for the configured dialect."""
    try:
        flavour = flavour_for(_resolve_setting(request, "dialect"))
        cwd = _resolve_setting(request, "cwd")
    except Exception:
        logger.exception("Error during dualpath fixture setup")
        raise

    with contextlib.ExitStack() as stack:
        if cwd is not None:
            stack.enter_context(working_directory(cwd))
        yield flavour
