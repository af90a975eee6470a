"""Command-line entry point for filepr."""

from __future__ import annotations

import sys
from typing import Optional

import typer

from . import __version__, config
from . import log as filepr_log
from .io import die, warn
from .services import SelectionCancelledError, ServiceFailure
from .services.ship_file import ShipFileRequest, ShipFileService

app = typer.Typer(
    add_completion=False,
    help="Pick a file with fzf, copy it into a repository, and open a pull request.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _log_level_callback(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not filepr_log.is_known_level(value):
        choices = ", ".join(filepr_log.LEVEL_NAMES)
        raise typer.BadParameter(f"expected one of: {choices}")
    return value


@app.command()
def ship(
    ctx: typer.Context,
    search: Optional[str] = typer.Option(
        None, "--search", help="directory to search for files (required)"
    ),
    target: str = typer.Option(
        ".", "--target", help="target directory (defaults to current directory)"
    ),
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        help="branch name (generated from the filename and date when omitted)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="trace, debug, info, success, warning or error",
        callback=_log_level_callback,
    ),
    no_color: bool = typer.Option(False, "--no-color", help="disable colored output"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="show the version and exit",
    ),
) -> None:
    """Copy one file into TARGET on a new branch and open a pull request."""
    del version
    if log_level is not None:
        filepr_log.set_level(log_level)
    if no_color:
        filepr_log.set_no_color(True)

    if not search:
        print("error: search directory is required", file=sys.stderr)
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=1)

    try:
        settings = config.load_config()
        service = ShipFileService(settings)
        outcome = service(ShipFileRequest(search=search, target=target, branch=branch))
    except SelectionCancelledError as exc:
        print(str(exc), file=sys.stderr)
        raise typer.Exit(code=1) from exc
    except ServiceFailure as exc:
        if exc.recovery_hint:
            warn(exc.recovery_hint)
        die(str(exc))

    filepr_log.debug(f"branch {outcome.branch}: {', '.join(outcome.steps)}")
    filepr_log.success("successfully completed all operations! 🎉")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
