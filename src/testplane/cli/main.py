"""TestPlane CLI - testplane command."""

import click

from testplane.cli.adapter import detect_workspace_command, discover_command, run_file_test_command
from testplane.cli.diagnose import check_file_command, detect_command, diagnose_command
from testplane.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="testplane")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """TestPlane - run tests with native tools and report failures as diagnostics."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    # Logs go to stderr; stdout carries JSON only
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(discover_command, name="discover")
cli.add_command(run_file_test_command, name="run-file-test")
cli.add_command(detect_workspace_command, name="detect-workspace")
cli.add_command(detect_command, name="detect")
cli.add_command(diagnose_command, name="diagnose")
cli.add_command(check_file_command, name="check-file")


if __name__ == "__main__":
    cli()
