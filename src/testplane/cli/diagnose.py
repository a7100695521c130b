"""Repository-level commands driven by configuration or auto-detection."""

import json
from pathlib import Path

import click

from testplane.config import load_config
from testplane.core.errors import TestPlaneError
from testplane.core.logging import configure_logging, get_log_file_path
from testplane.testing.detection import config_from_detected, detect_projects
from testplane.testing.models import RunOutcome
from testplane.testing.service import DiagnosticsService

_root_argument = click.argument(
    "root",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)


def _service(root: Path) -> DiagnosticsService:
    repo_root = root.resolve()
    try:
        config = load_config(repo_root)
    except TestPlaneError as e:
        raise click.ClickException(str(e)) from e
    logging_config = config.logging
    if (click.get_current_context().obj or {}).get("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    return DiagnosticsService(repo_root, config)


def _emit(outcome: RunOutcome) -> None:
    log_file = get_log_file_path()
    if log_file is not None and outcome.messages:
        outcome.messages.append(f"Logs: {log_file}")
    click.echo(json.dumps(outcome.to_dict()))


@click.command()
@_root_argument
def detect_command(root: Path) -> None:
    """Print the test kinds detected in ROOT and their default adapter settings.

    ROOT is the repository root (default: current directory).
    """
    projects = detect_projects(root.resolve())
    click.echo(
        json.dumps(
            {
                "data": [
                    {
                        "test_kind": p.test_kind.value,
                        "root": p.root,
                        "adapter": config_from_detected(p).model_dump(),
                    }
                    for p in projects
                ]
            }
        )
    )


@click.command()
@_root_argument
@click.option("--list", "list_only", is_flag=True, help="Print workspaces without running tests")
def diagnose_command(root: Path, list_only: bool) -> None:
    """Run every configured adapter over ROOT and print diagnostics per file."""
    service = _service(root)
    if list_only:
        snapshot = service.refresh()
        click.echo(json.dumps({**snapshot.to_dict(), "messages": list(snapshot.warnings)}))
        return
    _emit(service.diagnose_workspace())


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--root",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Repository root (default: current directory)",
)
def check_file_command(file: Path, root: Path) -> None:
    """Run the tests of FILE in each workspace that contains it."""
    service = _service(root)
    _emit(service.check_file(str(file.resolve()), refresh_needed=True))
