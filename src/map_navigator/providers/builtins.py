"""Built-in providers: AMap (Gaode), Baidu Maps and Tencent Maps."""

from __future__ import annotations

from map_navigator.schemas import Destination
from map_navigator.types import Platform
from map_navigator.urls import QueryPair, build_url, encode_text, format_coordinate, latlng


def _name(destination: Destination) -> str | None:
    return encode_text(destination.name) if destination.name else None


class AmapProvider:
    """AMap URI API.

    The only provider with a direct navigation entry point (``navi``). The web
    endpoint takes longitude before latitude.
    """

    name = "amap"
    label = "高德地图"
    package_id = "com.autonavi.minimap"

    def scheme_prefix(self, platform: Platform) -> str:
        return "iosamap" if platform is Platform.IOS else "androidamap"

    def scheme_url(
        self,
        destination: Destination,
        platform: Platform,
        direct_nav: bool,
        source: str,
    ) -> str:
        prefix = self.scheme_prefix(platform)
        coords = destination.coordinates
        if direct_nav and coords is not None:
            lat, lng = coords
            return build_url(
                f"{prefix}://navi",
                [
                    ("sourceApplication", source),
                    ("poiname", _name(destination)),
                    ("lat", format_coordinate(lat)),
                    ("lon", format_coordinate(lng)),
                    ("dev", "0"),
                    ("style", "2"),
                ],
            )

        pairs: list[QueryPair] = [("sourceApplication", source)]
        if coords is not None:
            pairs += [
                ("dlat", format_coordinate(coords[0])),
                ("dlon", format_coordinate(coords[1])),
            ]
        pairs += [("dname", _name(destination)), ("dev", "0"), ("t", "0")]
        return build_url(f"{prefix}://route/plan", pairs)

    def web_url(self, destination: Destination, source: str) -> str:
        coords = destination.coordinates
        if coords is None:
            return build_url(
                "https://uri.amap.com/search",
                [("keyword", _name(destination)), ("src", source), ("callnative", "0")],
            )
        lat, lng = coords
        target = f"{format_coordinate(lng)},{format_coordinate(lat)}"
        if destination.name:
            target = f"{target},{_name(destination)}"
        return build_url(
            "https://uri.amap.com/navigation",
            [("to", target), ("mode", "car"), ("src", source), ("callnative", "0")],
        )


class BaiduProvider:
    """Baidu Maps direction API (GCJ-02 coordinates)."""

    name = "baidu"
    label = "百度地图"
    package_id = "com.baidu.BaiduMap"

    def scheme_prefix(self, platform: Platform) -> str:
        del platform
        return "baidumap"

    def _direction_query(self, destination: Destination) -> list[QueryPair]:
        coords = destination.coordinates
        if coords is None:
            return [("destination", _name(destination))]
        target = latlng(*coords)
        if destination.name:
            target = f"latlng:{target}|name:{_name(destination)}"
        return [("destination", target), ("coord_type", "gcj02")]

    def scheme_url(
        self,
        destination: Destination,
        platform: Platform,
        direct_nav: bool,
        source: str,
    ) -> str:
        del direct_nav
        return build_url(
            f"{self.scheme_prefix(platform)}://map/direction",
            [*self._direction_query(destination), ("mode", "driving"), ("src", source)],
        )

    def web_url(self, destination: Destination, source: str) -> str:
        return build_url(
            "https://api.map.baidu.com/direction",
            [
                *self._direction_query(destination),
                ("mode", "driving"),
                ("output", "html"),
                ("src", source),
            ],
        )


class TencentProvider:
    """Tencent Maps route planning URI."""

    name = "tencent"
    label = "腾讯地图"
    package_id = "com.tencent.map"

    def scheme_prefix(self, platform: Platform) -> str:
        del platform
        return "qqmap"

    def _routeplan_query(self, destination: Destination, source: str) -> list[QueryPair]:
        coords = destination.coordinates
        return [
            ("type", "drive"),
            ("to", _name(destination)),
            ("tocoord", latlng(*coords) if coords is not None else None),
            ("referer", source),
        ]

    def scheme_url(
        self,
        destination: Destination,
        platform: Platform,
        direct_nav: bool,
        source: str,
    ) -> str:
        del direct_nav
        return build_url(
            f"{self.scheme_prefix(platform)}://map/routeplan",
            self._routeplan_query(destination, source),
        )

    def web_url(self, destination: Destination, source: str) -> str:
        return build_url(
            "https://apis.map.qq.com/uri/v1/routeplan",
            self._routeplan_query(destination, source),
        )


BUILTIN_PROVIDERS = (AmapProvider, BaiduProvider, TencentProvider)
