"""Unit tests for provider registry resolution and module loading helpers."""

from __future__ import annotations

import types
from pathlib import Path

import pytest

from map_navigator.errors import ProviderPluginError, UnsupportedProviderError
from map_navigator.providers import MapProvider
from map_navigator.providers.registry import (
    ProviderRegistry,
    _import_module_or_path,
    _register_from_module,
    create_default_registry,
)
from map_navigator.resolver import resolve
from map_navigator.schemas import Destination
from map_navigator.types import Platform


class _Provider:
    """Minimal provider test double."""

    label = "Test Maps"
    package_id = "org.example.maps"

    def __init__(self, name: str) -> None:
        self.name = name

    def scheme_prefix(self, platform: Platform) -> str:
        del platform
        return "testmaps"

    def scheme_url(
        self,
        destination: Destination,
        platform: Platform,
        direct_nav: bool,
        source: str,
    ) -> str:
        del destination, direct_nav
        return f"{self.scheme_prefix(platform)}://go?src={source}"

    def web_url(self, destination: Destination, source: str) -> str:
        del destination
        return f"https://maps.example.org/go?src={source}"


def test_default_registry_holds_builtin_providers() -> None:
    registry = create_default_registry()
    assert registry.names() == ["amap", "baidu", "tencent"]
    assert all(isinstance(provider, MapProvider) for provider in registry.providers())


def test_builtin_package_ids() -> None:
    registry = create_default_registry()
    assert registry.get("amap").package_id == "com.autonavi.minimap"
    assert registry.get("baidu").package_id == "com.baidu.BaiduMap"
    assert registry.get("tencent").package_id == "com.tencent.map"


def test_register_requires_non_empty_name() -> None:
    """Reject providers without a non-empty name."""
    registry = ProviderRegistry()
    with pytest.raises(ProviderPluginError, match="non-empty 'name'"):
        registry.register(_Provider(name="  "))


def test_get_unknown_provider_lists_available_names() -> None:
    registry = create_default_registry()
    with pytest.raises(UnsupportedProviderError) as excinfo:
        registry.get("here")
    assert excinfo.value.provider == "here"
    assert excinfo.value.available == ["amap", "baidu", "tencent"]
    assert "amap, baidu, tencent" in str(excinfo.value)


def test_get_matches_names_exactly() -> None:
    """Provider names are case- and whitespace-sensitive."""
    registry = create_default_registry()
    assert "baidu" in registry
    for name in ("AMAP", " baidu ", "Tencent"):
        with pytest.raises(UnsupportedProviderError):
            registry.get(name)


def test_register_keeps_provider_name_as_given() -> None:
    registry = ProviderRegistry()
    registry.register(_Provider("OSM"))
    assert registry.names() == ["OSM"]
    assert registry.get("OSM").name == "OSM"
    with pytest.raises(UnsupportedProviderError):
        registry.get("osm")


def test_registered_provider_is_resolvable() -> None:
    """Extra providers plug into the resolver through the registry."""
    registry = create_default_registry()
    registry.register(_Provider("test"))
    resolved = resolve(
        "test",
        Destination(name="x"),
        "scheme",
        "android",
        registry=registry,
    )
    assert resolved.url == "testmaps://go?src=map_navigator"
    assert resolved.native is True


def test_register_from_module_prefers_register_function() -> None:
    registry = ProviderRegistry()
    module = types.ModuleType("providers_fn")

    def register_providers(target: ProviderRegistry) -> None:
        target.register(_Provider("fn"))

    module.register_providers = register_providers  # type: ignore[attr-defined]
    _register_from_module(module, registry)
    assert registry.names() == ["fn"]


def test_register_from_module_accepts_providers_list() -> None:
    registry = ProviderRegistry()
    module = types.ModuleType("providers_list")
    module.PROVIDERS = [_Provider("a"), _Provider("b")]  # type: ignore[attr-defined]
    _register_from_module(module, registry)
    assert registry.names() == ["a", "b"]


def test_register_from_module_without_exports_raises() -> None:
    with pytest.raises(ProviderPluginError, match="must expose"):
        _register_from_module(types.ModuleType("empty"), ProviderRegistry())


def test_import_missing_module_raises_plugin_error() -> None:
    with pytest.raises(ProviderPluginError, match="Unable to import provider module"):
        _import_module_or_path("map_navigator_missing_provider_module")


def test_load_module_from_file(osm_provider_file: Path) -> None:
    registry = create_default_registry(extra_modules=[str(osm_provider_file)])
    assert registry.names() == ["amap", "baidu", "tencent", "osm"]
    resolved = resolve("osm", Destination(name="Target"), "web", "desktop", registry=registry)
    assert resolved.url == "https://www.openstreetmap.org/search?query=Target"
