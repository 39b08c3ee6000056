"""Pydantic schemas for destinations and transport payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from map_navigator.types import LinkKind, Platform


class Destination(BaseModel):
    """Navigation target: coordinates, a name, or both.

    Partial coordinates (only one of latitude/longitude) are accepted here and
    treated as absent; whether the destination is usable at all is decided by
    the resolver so it can raise ``MissingDestinationError``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    latitude: float | None = None
    longitude: float | None = None
    name: str | None = None

    @field_validator("name")
    @classmethod
    def _normalize_name(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    @property
    def coordinates(self) -> tuple[float, float] | None:
        """Return ``(lat, lng)`` only when both components are present."""
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)

    @property
    def has_coordinates(self) -> bool:
        return self.coordinates is not None

    @property
    def has_name(self) -> bool:
        return self.name is not None

    @property
    def is_valid(self) -> bool:
        return self.has_coordinates or self.has_name


class NavigationRequest(BaseModel):
    """Validated transport payload for resolving navigation links."""

    model_config = ConfigDict(extra="forbid")

    provider: str = Field(min_length=1)
    lat: float | None = None
    lng: float | None = None
    name: str | None = None
    direct_nav: bool = False
    platform: Platform = Platform.ANDROID

    def destination(self) -> Destination:
        return Destination(latitude=self.lat, longitude=self.lng, name=self.name)


class ResolvedLink(BaseModel):
    """Serialized form of a single resolved URL."""

    model_config = ConfigDict(extra="forbid")

    url: str
    kind: LinkKind
    native: bool


class NavigationLinksResponse(BaseModel):
    """Native and web links for one destination/provider pair."""

    model_config = ConfigDict(extra="forbid")

    provider: str
    platform: Platform
    scheme: ResolvedLink
    web: ResolvedLink


class MapAppResponse(BaseModel):
    """Serialized catalogue entry for a supported map app."""

    model_config = ConfigDict(extra="forbid")

    name: str
    label: str
    value: str
    scheme: str
