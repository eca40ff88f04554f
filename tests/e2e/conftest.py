"""Shared fixtures for E2E tests."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture(scope="session", autouse=True)
def require_git() -> None:
    if shutil.which("git") is None:
        pytest.skip("git executable not available")


@pytest.fixture
def run_cli():
    """Run ``python -m py_fixture_installer.cli`` with the given arguments."""

    def _run(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
        env = {
            **os.environ,
            "PYTHONPATH": os.pathsep.join(
                [str(_PROJECT_ROOT / "src"), os.environ.get("PYTHONPATH", "")]
            ),
            # Keep the user's git config out of the initial commit
            "GIT_CONFIG_GLOBAL": os.devnull,
            "GIT_CONFIG_NOSYSTEM": "1",
        }
        return subprocess.run(
            [sys.executable, "-m", "py_fixture_installer.cli", *args],
            cwd=cwd or _PROJECT_ROOT,
            capture_output=True,
            text=True,
            env=env,
        )

    return _run


def git(target: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", "-C", str(target), *args],
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()
