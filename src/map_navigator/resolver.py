"""Pure URL resolution for map deep links and their web fallbacks."""

from __future__ import annotations

from map_navigator.application.results import ResolvedURL
from map_navigator.config import DEFAULT_SOURCE
from map_navigator.errors import MissingDestinationError
from map_navigator.providers.registry import ProviderRegistry, create_default_registry
from map_navigator.schemas import Destination
from map_navigator.types import LinkKind, LinkKindLike, Platform, PlatformLike
from map_navigator.urls import encode_text


def resolve(
    provider: str,
    destination: Destination,
    link_kind: LinkKindLike = LinkKind.SCHEME,
    platform: PlatformLike = Platform.ANDROID,
    direct_nav: bool = False,
    *,
    source: str = DEFAULT_SOURCE,
    registry: ProviderRegistry | None = None,
) -> ResolvedURL:
    """Resolve the URL that opens ``destination`` in ``provider``'s map.

    Parameters
    ----------
    provider : str
        Registered provider name (``amap``, ``baidu``, ``tencent``).
    destination : Destination
        Target; needs both coordinates or a non-empty name.
    link_kind : LinkKind | str, default=LinkKind.SCHEME
        ``scheme`` for the native app deep link, ``web`` for the browser page.
    platform : Platform | str, default=Platform.ANDROID
        Platform the link is built for. Desktop has no native apps, so a
        ``scheme`` request resolves to the web URL there.
    direct_nav : bool, default=False
        Ask for immediate turn-by-turn guidance. Honoured by AMap when
        coordinates are present; every other combination plans a route.
    source : str, default=DEFAULT_SOURCE
        Caller identification forwarded to the provider.
    registry : ProviderRegistry | None, optional
        Provider lookup; defaults to the built-in providers.

    Returns
    -------
    ResolvedURL
        The URL and whether it targets a native scheme.

    Raises
    ------
    UnsupportedProviderError
        If ``provider`` is not registered.
    MissingDestinationError
        If ``destination`` has neither coordinates nor a name.
    """
    registry = registry or create_default_registry()
    map_provider = registry.get(provider)
    if not destination.is_valid:
        raise MissingDestinationError()

    kind = LinkKind(link_kind)
    target_platform = Platform(platform)
    encoded_source = encode_text(source)

    if kind is LinkKind.SCHEME and target_platform.is_mobile:
        url = map_provider.scheme_url(
            destination,
            target_platform,
            direct_nav,
            encoded_source,
        )
        return ResolvedURL(url=url, native=True, provider=map_provider.name)

    url = map_provider.web_url(destination, encoded_source)
    return ResolvedURL(url=url, native=False, provider=map_provider.name)
