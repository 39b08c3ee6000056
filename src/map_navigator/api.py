"""Public navigation API (delegates to application use-cases)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from map_navigator.adapters.openers import AndroidIntentOpener, BrowserOpener
from map_navigator.adapters.package_listers import PmPackageLister
from map_navigator.application.ports import Opener, PackageLister
from map_navigator.application.results import MapApp, NavigationOutcome, ResolvedURL
from map_navigator.application.use_cases import (
    build_destination,
    is_installed,
    list_map_apps,
    navigate,
)
from map_navigator.config import Settings, load_settings
from map_navigator.detect import detect_platform
from map_navigator.providers.registry import ProviderRegistry, create_default_registry
from map_navigator.resolver import resolve
from map_navigator.types import LinkKindLike, Platform, PlatformLike


def _platform(platform: Optional[PlatformLike], settings: Settings) -> Platform:
    if platform is not None:
        return Platform(platform)
    return detect_platform(override=settings.platform)


def provider_registry(
    settings: Optional[Settings] = None,
    provider_modules: Optional[Sequence[str]] = None,
) -> ProviderRegistry:
    """Return built-in providers plus those from settings and ``provider_modules``.

    Raises
    ------
    ProviderPluginError
        If an extra provider module cannot be loaded.
    """
    settings = settings or load_settings()
    return create_default_registry([*settings.provider_modules, *(provider_modules or ())])


def default_opener(platform: Platform, settings: Optional[Settings] = None) -> Opener:
    """Return the opener suited to ``platform``."""
    settings = settings or load_settings()
    if platform is Platform.ANDROID:
        return AndroidIntentOpener(
            use_adb=settings.use_adb,
            adb_serial=settings.adb_serial,
            timeout=settings.command_timeout,
        )
    return BrowserOpener()


def default_package_lister(
    platform: Platform,
    settings: Optional[Settings] = None,
) -> Optional[PackageLister]:
    """Return a package lister on Android, ``None`` elsewhere."""
    if platform is not Platform.ANDROID:
        return None
    settings = settings or load_settings()
    return PmPackageLister(
        use_adb=settings.use_adb,
        adb_serial=settings.adb_serial,
        timeout=settings.command_timeout,
    )


def open_map_navigation(
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    name: Optional[str] = None,
    provider: str = "amap",
    direct_nav: bool = False,
    *,
    platform: Optional[PlatformLike] = None,
    opener: Optional[Opener] = None,
    settings: Optional[Settings] = None,
    provider_modules: Optional[Sequence[str]] = None,
) -> NavigationOutcome:
    """Open navigation to a destination in ``provider``'s map app or web map."""
    settings = settings or load_settings()
    target_platform = _platform(platform, settings)
    return navigate(
        provider=provider,
        destination=build_destination(lat, lng, name),
        direct_nav=direct_nav,
        platform=target_platform,
        opener=opener or default_opener(target_platform, settings),
        source=settings.source,
        registry=provider_registry(settings, provider_modules),
    )


def check_map_installed(
    provider: str,
    *,
    platform: Optional[PlatformLike] = None,
    package_lister: Optional[PackageLister] = None,
    settings: Optional[Settings] = None,
    provider_modules: Optional[Sequence[str]] = None,
) -> bool:
    """Check whether ``provider``'s native app is installed."""
    settings = settings or load_settings()
    target_platform = _platform(platform, settings)
    return is_installed(
        provider=provider,
        platform=target_platform,
        package_lister=package_lister
        or default_package_lister(target_platform, settings),
        registry=provider_registry(settings, provider_modules),
    )


def resolve_map_url(
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    name: Optional[str] = None,
    provider: str = "amap",
    link_kind: LinkKindLike = "scheme",
    direct_nav: bool = False,
    *,
    platform: Optional[PlatformLike] = None,
    settings: Optional[Settings] = None,
    provider_modules: Optional[Sequence[str]] = None,
) -> ResolvedURL:
    """Resolve a single navigation URL without opening it."""
    settings = settings or load_settings()
    return resolve(
        provider,
        build_destination(lat, lng, name),
        link_kind,
        _platform(platform, settings),
        direct_nav,
        source=settings.source,
        registry=provider_registry(settings, provider_modules),
    )


def get_map_apps(
    platform: Optional[PlatformLike] = None,
    *,
    settings: Optional[Settings] = None,
    provider_modules: Optional[Sequence[str]] = None,
) -> list[MapApp]:
    """Return the supported map apps for ``platform``."""
    settings = settings or load_settings()
    return list_map_apps(
        platform=_platform(platform, settings),
        registry=provider_registry(settings, provider_modules),
    )
