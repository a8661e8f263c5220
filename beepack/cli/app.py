from importlib.metadata import PackageNotFoundError, version as package_version
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from beepack.context import new
from beepack.diff import first_divergence
from beepack.reporters import RecordingReporter
from beepack.style import (
    DEFAULT_COLUMN_WIDTH,
    StyleConfigError,
    StyleOption,
    column_width,
    no_color,
)

app = typer.Typer(help="Bee deep-equality CLI")


@dataclass(slots=True)
class _OutputOptions:
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("bee-assert")
    except PackageNotFoundError:
        from beekit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show Bee version and exit.",
    ),
    no_color_output: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.no_color = no_color_output
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False) -> None:
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=False)


def _load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


@app.command()
def compare(
    actual: Path = typer.Argument(..., help="Path to the actual JSON document."),
    expected: Path = typer.Argument(..., help="Path to the expected JSON document."),
    width: int = typer.Option(
        DEFAULT_COLUMN_WIDTH,
        "--column-width",
        help="Inline truncation width and side-by-side column width.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable comparison output.",
    ),
) -> None:
    """Compare two JSON documents and report the first divergence."""
    try:
        actual_value = _load_json(actual)
        expected_value = _load_json(expected)
        options: list[StyleOption] = [column_width(width)]
    except (OSError, ValueError, StyleConfigError) as error:
        message = f"compare failed: {error}"
        if json_output:
            _echo_json(
                {
                    "status": "error",
                    "exit_code": 2,
                    "message": message,
                    "actual_path": str(actual),
                    "expected_path": str(expected),
                }
            )
        else:
            _echo(message, err=True)
        raise typer.Exit(code=2) from error

    if json_output:
        divergence = first_divergence(actual_value, expected_value)
        passed = divergence is None
        _echo_json(
            {
                "status": "pass" if passed else "fail",
                "exit_code": 0 if passed else 1,
                "actual_path": str(actual),
                "expected_path": str(expected),
                "divergence": divergence.to_dict() if divergence is not None else None,
            }
        )
    else:
        if _OUTPUT_OPTIONS.no_color:
            options.append(no_color())
        reporter = RecordingReporter()
        passed = new(reporter, *options).equal(actual_value, expected_value)
        if passed:
            _echo("equal")
        for message in reporter.failures:
            _echo(message)
        for message in reporter.logs:
            _echo(message)

    if not passed:
        raise typer.Exit(code=1)


def main() -> None:
    app()
