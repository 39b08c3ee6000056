"""Exception hierarchy for map navigation."""

from __future__ import annotations


class MapNavigationError(Exception):
    """Base class for all map navigation failures."""

    exit_code = 1


class UnsupportedProviderError(MapNavigationError, ValueError):
    """Raised when a provider name is not registered."""

    exit_code = 2

    def __init__(self, provider: str, available: list[str] | None = None) -> None:
        self.provider = provider
        self.available = list(available or [])
        message = f"Unsupported map provider '{provider}'."
        if self.available:
            message += f" Available providers: {', '.join(self.available)}"
        super().__init__(message)


class MissingDestinationError(MapNavigationError, ValueError):
    """Raised when a destination has neither coordinates nor a name."""

    exit_code = 2

    def __init__(
        self,
        message: str = "Destination needs both latitude and longitude, or a non-empty name.",
    ) -> None:
        super().__init__(message)


class OpenError(MapNavigationError):
    """Raised by an opener when the host refuses to launch a URL."""


class OpenFailedError(MapNavigationError):
    """Raised when no attempt to open a navigation URL succeeded."""

    exit_code = 3

    def __init__(self, url: str, reason: object) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to open {url}: {reason}")


class ProviderPluginError(MapNavigationError):
    """Raised when a provider plugin is malformed or cannot be imported."""
