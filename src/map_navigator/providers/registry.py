"""Provider registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from map_navigator.errors import ProviderPluginError, UnsupportedProviderError
from map_navigator.providers.base import MapProvider
from map_navigator.providers.builtins import BUILTIN_PROVIDERS


class ProviderRegistry:
    """Registry of map providers keyed by name, in registration order."""

    def __init__(self) -> None:
        self._providers: dict[str, MapProvider] = {}

    def register(self, provider: MapProvider) -> None:
        """Register provider instance by unique name.

        Parameters
        ----------
        provider : MapProvider
            Provider instance to register. Re-registering a name replaces the
            previous provider.

        Raises
        ------
        ProviderPluginError
            If the provider does not define a non-empty name.
        """
        name = getattr(provider, "name", "")
        if not isinstance(name, str) or not name.strip():
            raise ProviderPluginError("Provider must define a non-empty 'name'.")
        self._providers[name] = provider

    def names(self) -> list[str]:
        """Return registered provider names in registration order."""
        return list(self._providers)

    def providers(self) -> list[MapProvider]:
        return list(self._providers.values())

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def get(self, name: str) -> MapProvider:
        """Get provider by its exact registered name.

        Raises
        ------
        UnsupportedProviderError
            If no provider with this name is registered.
        """
        try:
            return self._providers[name]
        except (KeyError, TypeError) as exc:
            raise UnsupportedProviderError(str(name), self.names()) from exc

    def load_module(self, module_or_path: str) -> None:
        """Load providers from a module name or a Python file path.

        .. warning::
            This executes code from the given module. Only load providers from
            trusted sources.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Raises
    ------
    ProviderPluginError
        If the import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise ProviderPluginError(f"Unable to load provider module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise ProviderPluginError(
            f"Unable to import provider module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: ProviderRegistry) -> None:
    """Register provider definitions found in module.

    A module exposes ``register_providers(registry)``, ``PROVIDERS`` or
    ``PROVIDER``, checked in that order.
    """
    if hasattr(module, "register_providers"):
        module.register_providers(registry)
        return

    providers_obj = getattr(module, "PROVIDERS", None)
    if providers_obj is not None:
        for provider in providers_obj:
            registry.register(provider)
        return

    provider_obj = getattr(module, "PROVIDER", None)
    if provider_obj is not None:
        registry.register(provider_obj)
        return

    raise ProviderPluginError(
        "Provider module must expose register_providers(registry), PROVIDERS, or PROVIDER."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> ProviderRegistry:
    """Create a registry with the built-in providers plus optional extras.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional provider modules to load.

    Returns
    -------
    ProviderRegistry
        Registry with ``amap``, ``baidu``, ``tencent`` and any extras.
    """
    registry = ProviderRegistry()
    for provider_cls in BUILTIN_PROVIDERS:
        registry.register(provider_cls())
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
