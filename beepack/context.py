"""Assertion contexts: the entry points test code calls."""

from __future__ import annotations

import logging
from typing import Any

from beepack.diff.engine import first_divergence, is_nil
from beepack.diff.formatting import stringify, truncate
from beepack.diff.models import Relation
from beepack.reporters import FailureReporter
from beepack.settings import get_settings
from beepack.style.columns import exceeds_columns, join_columns
from beepack.style.config import StyleConfig
from beepack.style.options import StyleOption, build_style_config, no_color

logger = logging.getLogger(__name__)


class Bee:
    """Deep-equality assertions bound to one failure reporter.

    Create one per test. Each failing assertion sends exactly one message to
    ``reporter.fail`` and, when the values are too long to read inline, one
    side-by-side rendering to ``reporter.log``. Assertions return whether
    they passed.
    """

    __slots__ = ("_reporter", "_cfg")

    def __init__(self, reporter: FailureReporter, cfg: StyleConfig) -> None:
        self._reporter = reporter
        self._cfg = cfg

    @property
    def style(self) -> StyleConfig:
        return self._cfg

    def nil(self, actual: Any) -> bool:
        if is_nil(actual):
            return True
        self._error(actual, None, "", "!=")
        return False

    def not_nil(self, actual: Any) -> bool:
        if not is_nil(actual):
            return True
        self._error(actual, None, "", "==")
        return False

    def true(self, actual: Any) -> bool:
        return self.equal(actual, True)

    def false(self, actual: Any) -> bool:
        return self.equal(actual, False)

    def equal(self, actual: Any, expected: Any) -> bool:
        divergence = first_divergence(actual, expected)
        if divergence is None:
            return True
        self._error(divergence.actual, divergence.expected, divergence.path, "!=")
        return False

    def _error(self, actual: Any, expected: Any, what: str, relation: Relation) -> None:
        cfg = self._cfg
        s_actual = stringify(actual)
        s_expected = stringify(expected)

        message = (
            f"{cfg.actual_text.render(truncate(s_actual, cfg.actual_text.max_width))} "
            f"{relation} "
            f"{cfg.expected_text.render(truncate(s_expected, cfg.expected_text.max_width))}"
        )
        if what:
            message += f" ({cfg.what_text.render(what)})"

        logger.debug("bee assertion failed: relation=%s path=%r", relation, what)
        self._reporter.fail(message)

        if exceeds_columns(
            s_actual,
            s_expected,
            actual_column=cfg.actual_column,
            expected_column=cfg.expected_column,
        ):
            columns = join_columns(
                s_actual,
                s_expected,
                actual_column=cfg.actual_column,
                expected_column=cfg.expected_column,
            )
            self._reporter.log(f"\n{columns}")


def new(reporter: FailureReporter, *options: StyleOption) -> Bee:
    """Create an assertion context.

    Options apply after the defaults, left to right. When the process-wide
    settings disable colour, ``no_color()`` is applied last.
    """
    resolved = list(options)
    settings = get_settings()
    if settings.no_color:
        resolved.append(no_color())

    cfg = build_style_config(*resolved)
    logger.debug(
        "bee context created: no_color=%s column_width=%d",
        cfg.no_color,
        cfg.actual_column.width,
    )
    return Bee(reporter, cfg)
