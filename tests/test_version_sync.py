from __future__ import annotations

from pathlib import Path
import re

from typer.testing import CliRunner

import beekit
from beepack.cli.app import app


def _pyproject_version() -> str:
    pyproject_path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    content = pyproject_path.read_text(encoding="utf-8")
    match = re.search(r'(?m)^\s*version\s*=\s*"([^"]+)"\s*$', content)
    assert match is not None, "Could not find [project].version in pyproject.toml"
    return match.group(1)


def test_facade_version_matches_pyproject() -> None:
    assert beekit.__version__ == _pyproject_version()


def test_cli_version_matches_pyproject() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == _pyproject_version()


def test_pytest_plugin_is_registered_under_bee() -> None:
    content = (Path(__file__).resolve().parents[1] / "pyproject.toml").read_text(encoding="utf-8")

    assert re.search(r'(?m)^\[project\.entry-points\.pytest11\]\nbee = "beepack\.pytest_plugin"$', content)
    assert re.search(r'(?m)^bee = "beepack\.cli\.app:main"$', content)
