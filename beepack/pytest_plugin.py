"""pytest integration: ``--nocolor`` switch and the ``bee`` fixture."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from beepack.context import Bee, new
from beepack.reporters import RecordingReporter
from beepack.settings import configure

_REPORTER_KEY = pytest.StashKey[RecordingReporter]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("bee")
    group.addoption(
        "--nocolor",
        action="store_true",
        default=False,
        help="Disable color in bee assertion output.",
    )


def pytest_configure(config: pytest.Config) -> None:
    if config.getoption("nocolor"):
        configure(no_color=True)


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Iterator[None]:
    result = yield
    reporter = item.stash.get(_REPORTER_KEY, None)
    if reporter is not None and reporter.failed:
        pytest.fail(reporter.summary(), pytrace=False)
    return result


@pytest.fixture
def bee(request: pytest.FixtureRequest) -> Bee:
    """Assertion context whose failures fail the requesting test."""
    reporter = RecordingReporter()
    request.node.stash[_REPORTER_KEY] = reporter
    return new(reporter)
