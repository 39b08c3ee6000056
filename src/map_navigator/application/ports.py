"""Application ports for host capabilities."""

from __future__ import annotations

from typing import Protocol


class Opener(Protocol):
    """Hand a URL to the host OS (native app or browser)."""

    def open(self, url: str) -> None:
        """Open ``url``; raise ``OpenError`` when the host refuses it."""


class PackageLister(Protocol):
    """List installed application package identifiers on the device."""

    def list_installed_packages(self) -> set[str]:
        """Return package entries; raise ``OSError`` when listing fails."""
