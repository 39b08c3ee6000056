"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedURL:
    """A resolved navigation URL."""

    url: str
    native: bool
    provider: str

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True)
class NavigationOutcome:
    """Structured navigation outcome.

    ``success`` is ``True`` when the first choice opened (the native app on
    mobile, the browser on desktop) and ``False`` when only the web fallback
    opened. Total failure is raised as ``OpenFailedError`` instead.
    """

    success: bool
    message: str
    url: str | None = None


@dataclass(frozen=True)
class MapApp:
    """Catalogue entry describing a supported map app."""

    name: str
    label: str
    value: str
    scheme: str
