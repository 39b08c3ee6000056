"""Open destinations in native map apps, falling back to the web map."""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_navigator.errors import (
    MapNavigationError,
    MissingDestinationError,
    OpenError,
    OpenFailedError,
    UnsupportedProviderError,
)
from map_navigator.schemas import Destination
from map_navigator.types import LinkKind, Platform

if TYPE_CHECKING:
    from map_navigator.application.ports import Opener, PackageLister
    from map_navigator.application.results import MapApp, NavigationOutcome, ResolvedURL

__version__ = "0.1.0"


def open_map_navigation(
    lat: float | None = None,
    lng: float | None = None,
    name: str | None = None,
    provider: str = "amap",
    direct_nav: bool = False,
    *,
    platform: Platform | str | None = None,
    opener: Opener | None = None,
) -> NavigationOutcome:
    """Open map navigation, trying the native app before the web map.

    Parameters
    ----------
    lat, lng : float, optional
        Destination coordinates. Both are needed for them to count.
    name : str, optional
        Destination name or address.
    provider : str, default="amap"
        One of ``amap``, ``baidu``, ``tencent`` (or a loaded plugin).
    direct_nav : bool, default=False
        Start guidance immediately where the provider supports it (AMap).
    platform : Platform | str | None, optional
        Target platform; detected from settings/interpreter when omitted.
    opener : Opener | None, optional
        Host capability used to open URLs; a platform default otherwise.

    Returns
    -------
    NavigationOutcome
        ``success=True`` when the native app (or browser on desktop) opened,
        ``success=False`` when the web fallback opened instead.

    Raises
    ------
    UnsupportedProviderError
        Unknown provider.
    MissingDestinationError
        Neither coordinates nor a name given.
    OpenFailedError
        Nothing could be opened.
    """
    from .api import open_map_navigation as _impl

    return _impl(
        lat=lat,
        lng=lng,
        name=name,
        provider=provider,
        direct_nav=direct_nav,
        platform=platform,
        opener=opener,
    )


def check_map_installed(
    provider: str,
    *,
    platform: Platform | str | None = None,
    package_lister: PackageLister | None = None,
) -> bool:
    """Check whether a provider's native map app is installed.

    Only Android can actually check; other platforms always report ``True``.

    Raises
    ------
    UnsupportedProviderError
        Unknown provider.
    """
    from .api import check_map_installed as _impl

    return _impl(provider, platform=platform, package_lister=package_lister)


def resolve_map_url(
    lat: float | None = None,
    lng: float | None = None,
    name: str | None = None,
    provider: str = "amap",
    link_kind: LinkKind | str = LinkKind.SCHEME,
    direct_nav: bool = False,
    *,
    platform: Platform | str | None = None,
) -> ResolvedURL:
    """Resolve a native scheme or web URL without opening it."""
    from .api import resolve_map_url as _impl

    return _impl(
        lat=lat,
        lng=lng,
        name=name,
        provider=provider,
        link_kind=link_kind,
        direct_nav=direct_nav,
        platform=platform,
    )


def get_map_apps(platform: Platform | str | None = None) -> list[MapApp]:
    """List supported map apps with their display labels and schemes."""
    from .api import get_map_apps as _impl

    return _impl(platform)


__all__ = [
    "Destination",
    "LinkKind",
    "MapNavigationError",
    "MissingDestinationError",
    "OpenError",
    "OpenFailedError",
    "Platform",
    "UnsupportedProviderError",
    "check_map_installed",
    "get_map_apps",
    "open_map_navigation",
    "resolve_map_url",
]
