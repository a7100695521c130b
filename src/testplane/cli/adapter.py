"""Adapter protocol commands: discover, run-file-test, detect-workspace.

Each command selects a runner with ``--test-kind`` and prints one JSON
document on stdout.
"""

import json
from pathlib import Path

import click

from testplane.core.errors import TestPlaneError
from testplane.testing.models import TestKind
from testplane.testing.runners import TestRunner, get_runner

_test_kind_option = click.option(
    "--test-kind",
    required=True,
    type=click.Choice(TestKind.values()),
    help="Test framework to drive",
)
_extra_arg_option = click.option(
    "--extra-arg",
    "extra_args",
    multiple=True,
    help="Argument forwarded to the native tool (repeatable)",
)
_files_argument = click.argument("files", nargs=-1, type=click.Path(path_type=Path))


def _absolute(files: tuple[Path, ...]) -> list[str]:
    return [str(f.absolute()) for f in files]


def _runner(test_kind: str) -> TestRunner:
    try:
        return get_runner(test_kind)
    except TestPlaneError as e:
        raise click.ClickException(str(e)) from e


@click.command()
@_test_kind_option
@_files_argument
def discover_command(test_kind: str, files: tuple[Path, ...]) -> None:
    """Print the tests declared in FILES."""
    discovered = _runner(test_kind).discover(_absolute(files))
    click.echo(json.dumps({"data": [d.to_dict() for d in discovered]}))


@click.command()
@_test_kind_option
@click.option(
    "--workspace",
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory the native tool runs in",
)
@_extra_arg_option
@_files_argument
def run_file_test_command(
    test_kind: str,
    workspace: Path,
    extra_args: tuple[str, ...],
    files: tuple[Path, ...],
) -> None:
    """Run the tests in FILES and print diagnostics grouped by file."""
    runner = _runner(test_kind)
    try:
        outcome = runner.run(_absolute(files), workspace.absolute(), extra_args)
    except TestPlaneError as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(outcome.to_dict()))


@click.command()
@_test_kind_option
@_files_argument
def detect_workspace_command(test_kind: str, files: tuple[Path, ...]) -> None:
    """Print workspace roots with the FILES that belong to each."""
    workspaces = _runner(test_kind).detect_workspaces(_absolute(files))
    click.echo(json.dumps({"data": workspaces}))
