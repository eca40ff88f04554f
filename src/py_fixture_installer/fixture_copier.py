"""Copy fixture trees into target directories.

The copy behaves like ``cp -a <fixture>/. <target>/``: hidden entries are
included, symlinks stay symlinks, timestamps and permission bits are kept,
and files already present in the target are overwritten.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional

from . import _paths
from .errors import CopyError

logger = logging.getLogger(__name__)


def resolve_fixture_dir(name: str, fixtures_dir: Optional[Path] = None) -> Path:
    """Return the source directory of the fixture called ``name``."""
    root = fixtures_dir if fixtures_dir is not None else _paths.get_fixtures_dir()
    return root / name


def list_fixtures(fixtures_dir: Optional[Path] = None) -> List[str]:
    """List fixture names available under the fixtures directory."""
    root = fixtures_dir if fixtures_dir is not None else _paths.get_fixtures_dir()
    if not root.is_dir():
        return []
    return sorted(
        item.name
        for item in root.iterdir()
        if item.is_dir() and not item.name.startswith(".")
    )


def _remove_replaced_links(source: Path, target: Path) -> None:
    """Unlink target entries that a symlink in the fixture will replace.

    ``os.symlink`` refuses to overwrite, so a second install over the same
    target would otherwise fail on every link.
    """
    if not target.is_dir():
        return
    for dirpath, dirnames, filenames in os.walk(source):
        rel = Path(dirpath).relative_to(source)
        for name in dirnames + filenames:
            if not (Path(dirpath) / name).is_symlink():
                continue
            existing = target / rel / name
            if existing.is_symlink() or existing.is_file():
                logger.debug(f"Replacing existing entry {existing}")
                existing.unlink()


def copy_fixture(source: Path, target: Path) -> int:
    """Recursively copy the contents of ``source`` into ``target``.

    Returns the number of regular files copied.
    Raises CopyError if the source is missing or the target cannot be written.
    """
    if not source.is_dir():
        raise CopyError(f"Fixture source does not exist: {source}")

    copied: List[str] = []

    def _copy(src: str, dst: str) -> str:
        copied.append(dst)
        return shutil.copy2(src, dst)

    logger.info(f"Copying {source} -> {target}")
    try:
        _remove_replaced_links(source, target)
        shutil.copytree(
            source,
            target,
            symlinks=True,
            copy_function=_copy,
            dirs_exist_ok=True,
        )
    except (shutil.Error, OSError) as e:
        raise CopyError(f"Failed to copy {source} to {target}: {e}") from e

    logger.debug(f"Copied {len(copied)} files")
    return len(copied)
