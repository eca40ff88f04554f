import logging
import sys
from pathlib import Path
from typing import Optional

import typer  # type: ignore

from . import _paths
from .errors import CopyError, InitError
from .fixture_copier import list_fixtures
from .installer import InstallRequest, install
from .tree_snapshot import diff_trees

app = typer.Typer()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure console logging."""
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers = []  # Clear default handlers
    root_logger.addHandler(console_handler)


@app.command()
def main(
    target_directory: Optional[Path] = typer.Argument(
        None, help="Directory to install the fixture into"
    ),
    fixture: Optional[str] = typer.Option(
        None, help=f"Fixture to install (default: {_paths.DEFAULT_FIXTURE})"
    ),
    setup_script: Optional[Path] = typer.Option(
        None, help="Initializer to run instead of the bundled git setup"
    ),
    verify: bool = typer.Option(
        False, "--verify", help="Check the target matches the fixture afterwards"
    ),
    list_only: bool = typer.Option(
        False, "--list", help="List available fixtures and exit"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """
    Install a fixture tree into TARGET_DIRECTORY and initialize it as a git
    repository.
    """
    setup_logging(verbose)

    if list_only:
        for name in list_fixtures():
            print(name)
        raise typer.Exit(0)

    if target_directory is None:
        logger.error("Missing argument TARGET_DIRECTORY.")
        raise typer.Exit(2)

    request = InstallRequest(
        target_directory=target_directory,
        fixture=fixture,
        setup_script=setup_script,
    )

    try:
        result = install(request)
    except CopyError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    except InitError as e:
        logger.error(str(e))
        raise typer.Exit(e.returncode)

    if verify:
        diff = diff_trees(result.fixture_dir, result.target_directory)
        if not diff.clean:
            for path in diff.missing:
                logger.error(f"Missing: {path}")
            for path in diff.modified:
                logger.error(f"Modified: {path}")
            for path in diff.extra:
                logger.error(f"Extra: {path}")
            raise typer.Exit(1)
        logger.info("Target matches fixture.")


if __name__ == "__main__":
    app()
