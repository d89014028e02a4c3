"""CLI interface for nmclean."""

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from nmclean import __version__
from nmclean.analyzer import count_matches, measure_matches
from nmclean.cleaner import delete_matches
from nmclean.display import (
    console,
    err_console,
    show_count_report,
    show_delete_result,
    show_delete_summary,
    show_size_result,
    show_size_total,
    show_unexpected_error,
    show_unknown_action,
)
from nmclean.models import Action
from nmclean.recursive_scanner import find_node_modules

logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="nmclean",
    help="Find, measure, count or delete every node_modules folder under a directory.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"nmclean version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send package logs to stderr through rich."""
    package_logger = logging.getLogger("nmclean")
    package_logger.handlers.clear()

    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def run_action(action: Action, root: Path) -> None:
    """Discover node_modules folders under root and apply the action."""
    if not root.exists():
        logger.warning("Path does not exist: %s", root)
    elif not root.is_dir():
        logger.warning("Not a directory: %s", root)

    paths = find_node_modules(root)

    if action == Action.SIZE:
        report = measure_matches(paths, progress_callback=show_size_result)
        show_size_total(report)
    elif action == Action.COUNT:
        report = count_matches(paths)
        show_count_report(report)
    elif action == Action.DELETE:
        report = delete_matches(paths, progress_callback=show_delete_result)
        show_delete_summary(report)


@app.command()
def main(
    action: str = typer.Argument(
        Action.DELETE.value,
        help="One of: size, count, delete. Defaults to delete, which removes folders without asking.",
        show_default=True,
    ),
    path: Path = typer.Argument(
        Path("."),
        help="Directory to scan (defaults to the current directory).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log skipped paths and other recovered errors to stderr.",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Operate on all node_modules folders found recursively under PATH."""
    if action not in Action.names():
        show_unknown_action(action, Action.names())
        raise typer.Exit(1)

    configure_logging(verbose)

    try:
        run_action(Action(action), path)
    except Exception as e:
        logger.debug("Unhandled failure", exc_info=True)
        show_unexpected_error(e)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
