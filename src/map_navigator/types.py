"""Shared enums and type aliases."""

from __future__ import annotations

from enum import StrEnum


class Platform(StrEnum):
    """Runtime platform that decides scheme prefixes and fallback behaviour."""

    ANDROID = "android"
    IOS = "ios"
    DESKTOP = "desktop"

    @property
    def is_mobile(self) -> bool:
        return self in {Platform.ANDROID, Platform.IOS}


class LinkKind(StrEnum):
    """Whether a URL targets a native app scheme or a web page."""

    SCHEME = "scheme"
    WEB = "web"


type PlatformLike = Platform | str
type LinkKindLike = LinkKind | str
