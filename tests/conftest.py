"""Shared pytest configuration, marker assignment and host capability fakes."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from map_navigator.errors import OpenError


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class FakeOpener:
    """Opener double that records URLs and fails on request."""

    def __init__(self, fail_scheme: bool = False, fail_web: bool = False) -> None:
        self.fail_scheme = fail_scheme
        self.fail_web = fail_web
        self.calls: list[str] = []

    def open(self, url: str) -> None:
        self.calls.append(url)
        is_web = url.startswith(("http://", "https://"))
        if (is_web and self.fail_web) or (not is_web and self.fail_scheme):
            raise OpenError(f"refused {url.split(':', 1)[0]}")


class FakePackageLister:
    """Package lister double returning a fixed set or raising."""

    def __init__(
        self,
        packages: set[str] | None = None,
        error: OSError | None = None,
    ) -> None:
        self.packages = packages or set()
        self.error = error
        self.calls = 0

    def list_installed_packages(self) -> set[str]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return set(self.packages)


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer MAP_NAVIGATOR_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("MAP_NAVIGATOR_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_opener() -> Callable[..., FakeOpener]:
    return FakeOpener


@pytest.fixture
def make_package_lister() -> Callable[..., FakePackageLister]:
    return FakePackageLister


OSM_PROVIDER_SOURCE = '''\
class Osm:
    name = "osm"
    label = "OpenStreetMap"
    package_id = "net.osmand"

    def scheme_prefix(self, platform):
        return "geo"

    def scheme_url(self, destination, platform, direct_nav, source):
        return f"geo:{destination.latitude},{destination.longitude}"

    def web_url(self, destination, source):
        return f"https://www.openstreetmap.org/search?query={destination.name}"


PROVIDER = Osm()
'''


@pytest.fixture
def osm_provider_file(tmp_path: Path) -> Path:
    """Write a provider module exposing ``PROVIDER`` named ``osm``."""
    plugin_file = tmp_path / "osm_provider.py"
    plugin_file.write_text(OSM_PROVIDER_SOURCE, encoding="utf-8")
    return plugin_file
