from __future__ import annotations

import pytest

from beepack.context import new
from beepack.reporters import RecordingReporter
from beepack.settings import (
    NO_COLOR_ENV_VARS,
    Settings,
    configure,
    get_settings,
    reset_settings,
    settings_from_env,
)


@pytest.mark.parametrize(
    ("environ", "no_color"),
    [
        ({}, False),
        ({"BEE_NOCOLOR": "1"}, True),
        ({"NO_COLOR": "yes"}, True),
        ({"NO_COLOR": ""}, False),
        ({"BEE_NOCOLOR": "  "}, False),
    ],
)
def test_settings_from_env(environ: dict[str, str], no_color: bool) -> None:
    assert settings_from_env(environ) == Settings(no_color=no_color)


def test_env_var_names() -> None:
    assert NO_COLOR_ENV_VARS == ("BEE_NOCOLOR", "NO_COLOR")


def test_get_settings_initializes_from_environment_once(monkeypatch: pytest.MonkeyPatch) -> None:
    reset_settings()
    monkeypatch.setenv("BEE_NOCOLOR", "1")

    assert get_settings().no_color is True

    monkeypatch.delenv("BEE_NOCOLOR")
    assert get_settings().no_color is True


def test_configure_replaces_settings() -> None:
    assert configure(no_color=True) == Settings(no_color=True)
    assert get_settings().no_color is True
    assert configure() == Settings(no_color=False)
    assert get_settings().no_color is False


def test_global_no_color_strips_color_from_new_contexts() -> None:
    configure(no_color=True)
    reporter = RecordingReporter()

    new(reporter).equal(1, 2)

    assert reporter.failures == ["1 != 2"]


def test_contexts_read_settings_at_construction() -> None:
    reporter = RecordingReporter()
    bee = new(reporter)

    configure(no_color=True)
    bee.equal(1, 2)

    assert reporter.failures == ["\x1b[38;2;250;40;25m1\x1b[0m != \x1b[38;2;18;181;32m2\x1b[0m"]
