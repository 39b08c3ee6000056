"""Runtime platform detection."""

from __future__ import annotations

import re
import sys

from map_navigator.types import Platform

_IOS_AGENT = re.compile(r"iphone|ipad|ipod", re.IGNORECASE)


def detect_platform(
    user_agent: str | None = None,
    override: Platform | str | None = None,
) -> Platform:
    """Guess the platform the navigation request originates from.

    Parameters
    ----------
    user_agent : str | None, optional
        Browser/webview user agent. When given it takes precedence over the
        interpreter's own platform.
    override : Platform | str | None, optional
        Explicit platform, typically from settings. Always wins.

    Returns
    -------
    Platform
        Detected platform, ``Platform.DESKTOP`` when nothing matches.
    """
    if override:
        return Platform(override)
    if user_agent is not None:
        if "android" in user_agent.lower():
            return Platform.ANDROID
        if _IOS_AGENT.search(user_agent):
            return Platform.IOS
        return Platform.DESKTOP
    if sys.platform == "android":
        return Platform.ANDROID
    if sys.platform == "ios":
        return Platform.IOS
    return Platform.DESKTOP
