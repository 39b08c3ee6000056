"""HTTP service that resolves navigation links for web front ends."""

from __future__ import annotations

import argparse
import logging
from types import ModuleType
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from map_navigator.application.use_cases import list_map_apps
from map_navigator.config import Settings, configure_logging, load_settings
from map_navigator.errors import MapNavigationError
from map_navigator.providers.registry import ProviderRegistry, create_default_registry
from map_navigator.resolver import resolve
from map_navigator.schemas import (
    MapAppResponse,
    NavigationLinksResponse,
    NavigationRequest,
    ResolvedLink,
)
from map_navigator.types import LinkKind, Platform

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from fastapi import FastAPI

_fastapi_module: ModuleType | None
try:
    import fastapi as _fastapi_module
except ModuleNotFoundError:  # pragma: no cover
    _fastapi_module = None

_uvicorn_module: ModuleType | None
try:
    import uvicorn as _uvicorn_module
except ModuleNotFoundError:  # pragma: no cover
    _uvicorn_module = None


def _require_http_runtime() -> ModuleType:
    """Return the fastapi module or fail with an install hint."""
    if _fastapi_module is None:
        raise RuntimeError(
            "fastapi is required to run map-navigator-http. Install with extra: .[server]"
        )
    return _fastapi_module


class HealthResponse(BaseModel):
    """Health response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str


def resolve_links(
    request: NavigationRequest,
    source: str,
    registry: ProviderRegistry | None = None,
) -> NavigationLinksResponse:
    """Resolve both the native and the web link for one request."""
    destination = request.destination()
    links: dict[str, ResolvedLink] = {}
    for kind in LinkKind:
        resolved = resolve(
            request.provider,
            destination,
            kind,
            request.platform,
            request.direct_nav,
            source=source,
            registry=registry,
        )
        links[kind.value] = ResolvedLink(url=resolved.url, kind=kind, native=resolved.native)
    return NavigationLinksResponse(
        provider=request.provider,
        platform=request.platform,
        scheme=links[LinkKind.SCHEME.value],
        web=links[LinkKind.WEB.value],
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the navigation link HTTP application."""
    fastapi: Any = _require_http_runtime()
    settings = settings or load_settings()
    registry = create_default_registry(settings.provider_modules)
    app = fastapi.FastAPI(
        title="Map Navigator",
        version="0.1.0",
        description="Resolve native map deep links and their web fallbacks.",
    )

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/readyz", response_model=HealthResponse)
    async def readyz() -> HealthResponse:
        return HealthResponse(status="ready")

    @app.post("/v1/links", response_model=NavigationLinksResponse)
    async def links(request: NavigationRequest) -> NavigationLinksResponse:
        """Return the scheme and web URLs for a destination."""
        try:
            return resolve_links(request, settings.source, registry)
        except MapNavigationError as exc:
            raise fastapi.HTTPException(
                status_code=fastapi.status.HTTP_400_BAD_REQUEST,
                detail=str(exc),
            ) from exc
        except Exception as exc:  # pragma: no cover
            logger.exception("unexpected error while resolving navigation links")
            raise fastapi.HTTPException(
                status_code=fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="internal server error",
            ) from exc

    @app.get("/v1/apps", response_model=list[MapAppResponse])
    async def apps(platform: Platform = Platform.ANDROID) -> list[MapAppResponse]:
        """List supported map apps for a platform."""
        return [
            MapAppResponse(
                name=item.name,
                label=item.label,
                value=item.value,
                scheme=item.scheme,
            )
            for item in list_map_apps(platform=platform, registry=registry)
        ]

    return app


def main() -> None:
    """Run the navigation link HTTP entrypoint."""
    _require_http_runtime()
    if _uvicorn_module is None:
        raise RuntimeError("uvicorn is required to run map-navigator-http")
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Map navigator HTTP server.")
    parser.add_argument("--host", default=settings.http_host)
    parser.add_argument("--port", type=int, default=settings.http_port)
    args = parser.parse_args()
    configure_logging(settings.log_level)
    _uvicorn_module.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
