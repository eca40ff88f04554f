"""Initialize an installed fixture as a git repository.

The bundled initializer runs in its own process so that it is invoked the
same way as a custom ``setup_script``: one argument (the target directory),
and its exit status decides success.
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import typer  # type: ignore

from .errors import InitError

app = typer.Typer()
logger = logging.getLogger(__name__)

GIT_USER_EMAIL = "fixture-installer@example.com"
GIT_USER_NAME = "Fixture Installer"
INITIAL_BRANCH = "main"
INITIAL_COMMIT_MESSAGE = "Initial"


def _git(args: List[str], target: Path) -> subprocess.CompletedProcess:
    cmd = ["git", "-C", str(target)] + args
    logger.debug(f"Running command: {' '.join(cmd)}")
    result = subprocess.run(cmd, capture_output=True, text=True)
    if result.returncode != 0:
        raise InitError(
            result.returncode,
            f"{' '.join(cmd)} failed: {result.stderr.strip()}",
        )
    return result


def init_repository(target: Path) -> None:
    """Create a repository in ``target`` and commit everything in it."""
    logger.info(f"Initializing git repository in {target}")
    _git(["init", "--quiet", f"--initial-branch={INITIAL_BRANCH}"], target)
    _git(["config", "user.email", GIT_USER_EMAIL], target)
    _git(["config", "user.name", GIT_USER_NAME], target)
    _git(["add", "."], target)
    _git(
        ["commit", "--quiet", "--no-gpg-sign", "-m", INITIAL_COMMIT_MESSAGE],
        target,
    )


def _exit_status(returncode: int) -> int:
    """Report a signal death as the shell does: 128 + signal number."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_initializer(target: Path, setup_script: Optional[Path] = None) -> int:
    """Run the repository initializer against ``target``.

    Uses ``setup_script`` when given, otherwise the bundled initializer in a
    fresh interpreter. Returns the initializer's exit status, with signal
    deaths mapped to 128 + signal number.
    """
    if setup_script is not None:
        if not setup_script.exists():
            raise InitError(127, f"Setup script not found: {setup_script}")
        # A bare relative name would otherwise be looked up on $PATH
        cmd = [str(setup_script.absolute()), str(target)]
    else:
        cmd = [sys.executable, "-m", "py_fixture_installer.git_setup", str(target)]

    logger.info(f"Running command: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd)
    except PermissionError as e:
        raise InitError(126, f"Setup script is not executable: {e}") from e
    except OSError as e:
        raise InitError(126, f"Cannot execute setup script: {e}") from e
    return _exit_status(result.returncode)


@app.command()
def main(target: Path = typer.Argument(..., help="Directory to initialize")):
    """Initialize TARGET as a git repository with an initial commit."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        init_repository(target)
    except InitError as e:
        logger.error(str(e))
        raise typer.Exit(e.returncode)
    except FileNotFoundError:
        logger.error("git executable not found")
        raise typer.Exit(127)


if __name__ == "__main__":
    app()
