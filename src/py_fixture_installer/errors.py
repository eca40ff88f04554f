"""Errors raised while installing a fixture."""


class FixtureInstallerError(Exception):
    """Base class for fixture installer failures."""


class CopyError(FixtureInstallerError):
    """The fixture tree could not be copied into the target directory."""


class InitError(FixtureInstallerError):
    """The repository initializer exited with a non-zero status."""

    def __init__(self, returncode: int, message: str = ""):
        self.returncode = returncode
        super().__init__(message or f"Repository initializer exited with {returncode}")
