"""Map providers and the registry that resolves them by name."""

from .base import MapProvider
from .builtins import AmapProvider, BaiduProvider, TencentProvider
from .registry import ProviderRegistry, create_default_registry

__all__ = [
    "AmapProvider",
    "BaiduProvider",
    "MapProvider",
    "ProviderRegistry",
    "TencentProvider",
    "create_default_registry",
]
