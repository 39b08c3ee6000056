"""Provider protocol for map deep-link builders."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from map_navigator.schemas import Destination
from map_navigator.types import Platform


@runtime_checkable
class MapProvider(Protocol):
    """Protocol implemented by map providers.

    Providers receive destinations that already passed validation: either
    ``destination.coordinates`` or ``destination.name`` is set.
    """

    name: str
    label: str
    package_id: str

    def scheme_prefix(self, platform: Platform) -> str:
        """Return the URL scheme (without ``://``) used on ``platform``.

        Parameters
        ----------
        platform : Platform
            Mobile platform the native app runs on.

        Returns
        -------
        str
            Scheme name, e.g. ``"baidumap"``.
        """

    def scheme_url(
        self,
        destination: Destination,
        platform: Platform,
        direct_nav: bool,
        source: str,
    ) -> str:
        """Build the native app URL.

        Parameters
        ----------
        destination : Destination
            Validated navigation target.
        platform : Platform
            Mobile platform the URL is built for.
        direct_nav : bool
            Request turn-by-turn guidance immediately. Providers without a
            direct navigation entry point ignore it.
        source : str
            Caller identification passed to the provider.

        Returns
        -------
        str
            Native scheme URL.
        """

    def web_url(self, destination: Destination, source: str) -> str:
        """Build the route-planning web URL used as fallback.

        Parameters
        ----------
        destination : Destination
            Validated navigation target.
        source : str
            Caller identification passed to the provider.

        Returns
        -------
        str
            ``https`` URL of the provider's web map.
        """
