import os
import sys
from pathlib import Path

import pytest

# Make the src layout importable when running from the repo root without installation
SCRIPT_SRC = Path(__file__).resolve().parent.parent / "src"
if str(SCRIPT_SRC) not in sys.path:
    sys.path.insert(0, str(SCRIPT_SRC))


@pytest.fixture
def fixtures_root(tmp_path):
    """
    Create a fixtures directory holding one small fixture.
    fixtures/
      sample/
        .hidden
        README.md
        bin/run.sh       (executable)
        pkg/nested/data.txt
    """
    root = tmp_path / "fixtures"
    sample = root / "sample"
    (sample / "bin").mkdir(parents=True)
    (sample / "pkg" / "nested").mkdir(parents=True)

    (sample / ".hidden").write_text("secret\n")
    (sample / "README.md").write_text("# sample\n")
    script = sample / "bin" / "run.sh"
    script.write_text("#!/bin/sh\necho run\n")
    script.chmod(0o755)
    data = sample / "pkg" / "nested" / "data.txt"
    data.write_bytes(b"\x00\x01binary\xff")
    os.utime(data, (1_000_000_000, 1_000_000_000))

    return root


@pytest.fixture
def mock_paths(monkeypatch, fixtures_root):
    """
    Point _paths at the temporary fixtures directory.
    """
    from py_fixture_installer import _paths

    monkeypatch.setattr(_paths, "FIXTURES_DIR", fixtures_root)
    monkeypatch.setattr(_paths, "DEFAULT_FIXTURE", "sample")
    monkeypatch.setattr(_paths, "SETUP_SCRIPT", None)

    return _paths


def _write_script(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


@pytest.fixture
def make_setup_script(tmp_path):
    """Factory for fake initializer scripts that record their argument."""

    def _make(exit_code: int = 0) -> Path:
        log = tmp_path / "setup_calls.log"
        return _write_script(
            tmp_path / f"setup_{exit_code}.sh",
            f'echo "$1" >> "{log}"\nexit {exit_code}\n',
        )

    return _make


@pytest.fixture
def setup_calls(tmp_path):
    """Read back the arguments passed to fake initializer scripts."""

    def _calls():
        log = tmp_path / "setup_calls.log"
        if not log.exists():
            return []
        return log.read_text().splitlines()

    return _calls


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by setup_logging()."""
    import logging

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
