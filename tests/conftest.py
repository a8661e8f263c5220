from __future__ import annotations

from collections.abc import Iterator

import pytest

from beepack.settings import configure, reset_settings


@pytest.fixture(autouse=True)
def color_enabled_settings() -> Iterator[None]:
    configure(no_color=False)
    yield
    reset_settings()
