"""Application use-cases: navigation with web fallback and install checks."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from map_navigator.application.ports import Opener, PackageLister
from map_navigator.application.results import MapApp, NavigationOutcome
from map_navigator.config import DEFAULT_SOURCE
from map_navigator.errors import MissingDestinationError, OpenError, OpenFailedError
from map_navigator.providers.registry import ProviderRegistry, create_default_registry
from map_navigator.resolver import resolve
from map_navigator.schemas import Destination
from map_navigator.types import LinkKind, Platform, PlatformLike

logger = logging.getLogger(__name__)

NATIVE_LAUNCHED = "native app launched"
WEB_FALLBACK_OPENED = "native app unavailable, opened web fallback"
BROWSER_OPENED = "opened in browser"

PACKAGE_PREFIX = "package:"


def build_destination(
    lat: float | None = None,
    lng: float | None = None,
    name: str | None = None,
) -> Destination:
    """Build a destination from loose caller arguments."""
    try:
        return Destination(latitude=lat, longitude=lng, name=name)
    except ValidationError as exc:
        raise MissingDestinationError(f"Invalid destination: {exc}") from exc


def navigate(
    *,
    provider: str,
    destination: Destination,
    direct_nav: bool,
    platform: PlatformLike,
    opener: Opener,
    source: str = DEFAULT_SOURCE,
    registry: ProviderRegistry | None = None,
) -> NavigationOutcome:
    """Use-case: open the native map app, falling back to the web map once.

    On android/ios the native scheme URL is tried first; if the opener refuses
    it the web URL for the same inputs is tried exactly once. Desktop goes
    straight to the web URL.

    Raises
    ------
    UnsupportedProviderError, MissingDestinationError
        On invalid input, before anything is opened.
    OpenFailedError
        When the last attempted URL could not be opened.
    """
    registry = registry or create_default_registry()
    target_platform = Platform(platform)

    if not target_platform.is_mobile:
        web = resolve(
            provider,
            destination,
            LinkKind.WEB,
            target_platform,
            direct_nav,
            source=source,
            registry=registry,
        )
        _open_or_fail(opener, web.url)
        logger.info("opened %s web map in browser", web.provider)
        return NavigationOutcome(success=True, message=BROWSER_OPENED, url=web.url)

    scheme = resolve(
        provider,
        destination,
        LinkKind.SCHEME,
        target_platform,
        direct_nav,
        source=source,
        registry=registry,
    )
    try:
        opener.open(scheme.url)
    except OpenError as exc:
        logger.info("native %s app did not open (%s); trying web", scheme.provider, exc)
    else:
        logger.info("launched native %s app", scheme.provider)
        return NavigationOutcome(success=True, message=NATIVE_LAUNCHED, url=scheme.url)

    web = resolve(
        provider,
        destination,
        LinkKind.WEB,
        target_platform,
        direct_nav,
        source=source,
        registry=registry,
    )
    _open_or_fail(opener, web.url)
    logger.info("opened %s web fallback", web.provider)
    return NavigationOutcome(success=False, message=WEB_FALLBACK_OPENED, url=web.url)


def _open_or_fail(opener: Opener, url: str) -> None:
    try:
        opener.open(url)
    except OpenError as exc:
        raise OpenFailedError(url, exc) from exc


def is_installed(
    *,
    provider: str,
    platform: PlatformLike,
    package_lister: PackageLister | None,
    registry: ProviderRegistry | None = None,
) -> bool:
    """Use-case: report whether the provider's native app is installed.

    Only Android can list packages. Every other platform reports ``True``
    because there is no detection mechanism there; it is not ground truth.
    A failing package lister counts as "not installed".
    """
    registry = registry or create_default_registry()
    map_provider = registry.get(provider)
    if Platform(platform) is not Platform.ANDROID:
        return True
    if package_lister is None:
        logger.warning("no package lister available; assuming %s is not installed", provider)
        return False

    try:
        packages = package_lister.list_installed_packages()
    except OSError as exc:
        logger.warning("listing installed packages failed: %s", exc)
        return False

    installed = {entry.strip().removeprefix(PACKAGE_PREFIX) for entry in packages}
    return map_provider.package_id in installed


def list_map_apps(
    *,
    platform: PlatformLike,
    registry: ProviderRegistry | None = None,
) -> list[MapApp]:
    """Use-case: describe registered providers for a picker UI."""
    registry = registry or create_default_registry()
    target_platform = Platform(platform)
    apps: list[MapApp] = []
    for provider in registry.providers():
        scheme = (
            f"{provider.scheme_prefix(target_platform)}://"
            if target_platform.is_mobile
            else ""
        )
        apps.append(
            MapApp(
                name=provider.label,
                label=provider.label,
                value=provider.name,
                scheme=scheme,
            )
        )
    return apps
