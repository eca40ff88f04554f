"""Install a fixture tree into a target directory and initialize it.

Two steps, strictly in order: copy the fixture, then run the repository
initializer with the target as its only argument. The initializer never
runs when the copy fails.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import _paths
from .errors import InitError
from .fixture_copier import copy_fixture, resolve_fixture_dir
from .git_setup import run_initializer
from .utils import timed

logger = logging.getLogger(__name__)


@dataclass
class InstallRequest:
    """A single installation, built from the command line."""

    target_directory: Path
    fixture: Optional[str] = None  # None -> configured default fixture
    setup_script: Optional[Path] = None  # None -> configured or bundled initializer


@dataclass
class InstallResult:
    target_directory: Path
    fixture_dir: Path
    files_copied: int
    copy_seconds: float = 0.0
    init_seconds: float = 0.0


@timed
def install(request: InstallRequest) -> InstallResult:
    """Copy the fixture into the target, then initialize the repository.

    Raises CopyError if the copy fails and InitError if the initializer
    exits non-zero.
    """
    fixture = request.fixture or _paths.DEFAULT_FIXTURE
    setup_script = request.setup_script or _paths.SETUP_SCRIPT
    source = resolve_fixture_dir(fixture)
    target = request.target_directory

    started = time.perf_counter()
    files_copied = copy_fixture(source, target)
    copied_at = time.perf_counter()
    logger.debug(f"Copy step took {copied_at - started:.3f}s")

    returncode = run_initializer(target, setup_script)
    initialized_at = time.perf_counter()
    logger.debug(f"Initializer finished in {initialized_at - copied_at:.3f}s")
    if returncode != 0:
        raise InitError(returncode)

    logger.info(f"Installed fixture '{fixture}' into {target}")
    return InstallResult(
        target_directory=target,
        fixture_dir=source,
        files_copied=files_copied,
        copy_seconds=copied_at - started,
        init_seconds=initialized_at - copied_at,
    )
