"""Seed throw-away workspaces with fixture trees and initialize them as git repos."""

__version__ = "0.1.0"


def main() -> None:
    print("This package installs fixture trees and initializes them as git repositories.")
