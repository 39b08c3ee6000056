"""Application-layer use-cases, ports and result objects."""

from __future__ import annotations

from map_navigator.application.ports import Opener, PackageLister
from map_navigator.application.results import MapApp, NavigationOutcome, ResolvedURL
from map_navigator.schemas import Destination
from map_navigator.types import PlatformLike


def navigate(
    *,
    provider: str,
    destination: Destination,
    direct_nav: bool,
    platform: PlatformLike,
    opener: Opener,
    **kwargs: object,
) -> NavigationOutcome:
    """Open a map destination via lazy use-case import."""
    from map_navigator.application.use_cases import navigate as _impl

    return _impl(
        provider=provider,
        destination=destination,
        direct_nav=direct_nav,
        platform=platform,
        opener=opener,
        **kwargs,
    )


def is_installed(
    *,
    provider: str,
    platform: PlatformLike,
    package_lister: PackageLister | None,
    **kwargs: object,
) -> bool:
    """Check map app installation via lazy use-case import."""
    from map_navigator.application.use_cases import is_installed as _impl

    return _impl(
        provider=provider,
        platform=platform,
        package_lister=package_lister,
        **kwargs,
    )


__all__ = [
    "MapApp",
    "NavigationOutcome",
    "Opener",
    "PackageLister",
    "ResolvedURL",
    "is_installed",
    "navigate",
]
