"""Content snapshots of directory trees.

Used to check that an installed target holds exactly the entries of its
fixture. Paths are relative POSIX strings; the ``.git`` directory created by
the initializer is not part of a snapshot.
"""

import hashlib
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

logger = logging.getLogger(__name__)

IGNORED_DIRS = {".git"}


def compute_file_hash(file_path: Path) -> str:
    """Compute MD5 hash of a file."""
    # MD5 for speed, this is a content comparison, not a security check
    hash_md5 = hashlib.md5()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(4096), b""):
            hash_md5.update(chunk)
    return hash_md5.hexdigest()


def snapshot_tree(root: Path) -> Dict[str, str]:
    """Map every entry under ``root`` to a content marker.

    Files map to their content hash, directories to ``dir:`` so that empty
    ones count, and symlinks to their link target instead of being followed.
    """
    snapshot: Dict[str, str] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        base = Path(dirpath)
        if base == root:
            dirnames[:] = [d for d in dirnames if d not in IGNORED_DIRS]
        for name in filenames + dirnames:
            path = base / name
            rel_path = path.relative_to(root).as_posix()
            if path.is_symlink():
                snapshot[rel_path] = f"link:{os.readlink(path)}"
            elif path.is_dir():
                snapshot[rel_path] = "dir:"
            else:
                snapshot[rel_path] = compute_file_hash(path)
    return snapshot


@dataclass
class TreeDiff:
    """Differences between an expected and an actual tree."""

    missing: List[str] = field(default_factory=list)
    extra: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not (self.missing or self.extra or self.modified)


def diff_trees(expected_root: Path, actual_root: Path) -> TreeDiff:
    """Compare the files under ``actual_root`` with those under ``expected_root``."""
    expected = snapshot_tree(expected_root)
    actual = snapshot_tree(actual_root)

    diff = TreeDiff()
    for path, expected_hash in sorted(expected.items()):
        if path not in actual:
            logger.debug(f"File missing: {path}")
            diff.missing.append(path)
        elif actual[path] != expected_hash:
            logger.debug(f"File modified: {path}")
            diff.modified.append(path)

    for path in sorted(actual):
        if path not in expected:
            logger.debug(f"Extra file: {path}")
            diff.extra.append(path)

    return diff
