"""Path constants for the fixture installer.

The bundled fixtures and the default repository initializer are located
relative to this package, never relative to the caller's working directory.
Optional overrides are read from ``pyproject.toml`` ``[tool.py-fixture-installer]``
in the current working directory.

Supported configuration keys in ``[tool.py-fixture-installer]``::

    fixtures_dir = "tests/_fixtures"     # Fixture trees (default: bundled)
    default_fixture = "basic_monorepo"   # Fixture to install (default: basic_monorepo)
    setup_script = "tests/setup_git.sh"  # Custom initializer (default: bundled)
"""

import tomllib
from pathlib import Path
from typing import Optional


def _load_config(repo_root: Path) -> dict:
    """Load fixture installer config from pyproject.toml [tool.py-fixture-installer]."""
    pyproject = repo_root / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("tool", {}).get("py-fixture-installer", {})
        except Exception:
            return {}
    return {}


def _discover_fixtures_dir(repo_root: Path, config: dict) -> Path:
    """Find the directory holding fixture trees."""
    if "fixtures_dir" in config:
        return repo_root / config["fixtures_dir"]
    return BUNDLED_FIXTURES_DIR


def _discover_default_fixture(config: dict) -> str:
    return config.get("default_fixture", "basic_monorepo")


def _discover_setup_script(repo_root: Path, config: dict) -> Optional[Path]:
    """Custom initializer script, or None to use the bundled one."""
    if "setup_script" in config:
        return repo_root / config["setup_script"]
    return None


# ── Tool location ─────────────────────────────────────────────────────
TOOL_DIR = Path(__file__).resolve().parent
BUNDLED_FIXTURES_DIR = TOOL_DIR / "_fixtures"

# ── Project root ──────────────────────────────────────────────────────
REPO_ROOT = Path.cwd()

# ── Configuration ─────────────────────────────────────────────────────
_CONFIG = _load_config(REPO_ROOT)

FIXTURES_DIR = _discover_fixtures_dir(REPO_ROOT, _CONFIG)
DEFAULT_FIXTURE = _discover_default_fixture(_CONFIG)
SETUP_SCRIPT = _discover_setup_script(REPO_ROOT, _CONFIG)


def get_fixtures_dir() -> Path:
    """Get the fixtures directory."""
    return FIXTURES_DIR
