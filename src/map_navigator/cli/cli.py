#!/usr/bin/env python3
"""
map_navigator.cli.cli

Typer-based CLI for resolving and opening map navigation links.

Examples
--------
Print the AMap deep link for a destination:

    map-navigator resolve --provider amap --lat 39.9042 --lng 116.4074 --name 天安门

Open Baidu Maps on a connected Android device (web fallback on failure):

    MAP_NAVIGATOR_ADB_SERIAL=emulator-5554 map-navigator open --provider baidu --name 外滩
"""

from __future__ import annotations

import logging
import traceback

import typer

from map_navigator.config import configure_logging, load_settings
from map_navigator.errors import MapNavigationError
from map_navigator.types import LinkKind, Platform

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="map-navigator",
    help="Resolve and open native map navigation links (AMap / Baidu / Tencent).",
    no_args_is_help=True,
)

PROVIDER_HELP = "Map provider: amap, baidu or tencent."
PLATFORM_HELP = "Target platform: android, ios or desktop (detected when omitted)."
LAT_HELP = "Destination latitude (needs --lng)."
LNG_HELP = "Destination longitude (needs --lat)."
NAME_HELP = "Destination name or address."
DIRECT_HELP = "Start guidance immediately (AMap only)."


def _print_navigation_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code.

    Parameters
    ----------
    exc : Exception
        Exception raised by the command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _parse_platform(value: str | None) -> Platform | None:
    if value is None:
        return None
    try:
        return Platform(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(item.value for item in Platform)
        raise typer.BadParameter(f"Unknown platform '{value}'. Use one of: {choices}.") from exc


def _parse_link_kind(value: str) -> LinkKind:
    try:
        return LinkKind(value.strip().lower())
    except ValueError as exc:
        raise typer.BadParameter("Link kind must be 'scheme' or 'web'.") from exc


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Verbose logging and full tracebacks."),
    provider_modules: list[str] | None = typer.Option(
        None,
        "--provider-module",
        help="Extra provider module name or .py file (repeatable).",
    ),
) -> None:
    """Initialize shared CLI state."""
    try:
        settings = load_settings()
    except MapNavigationError as exc:
        raise typer.Exit(code=_print_navigation_error(exc, debug))
    configure_logging("DEBUG" if debug else settings.log_level)
    ctx.obj = {"debug": debug, "provider_modules": list(provider_modules or [])}


# -----------------------------
# Commands
# -----------------------------
@app.command("resolve")
def resolve_cmd(
    ctx: typer.Context,
    provider: str = typer.Option(..., "--provider", "-p", help=PROVIDER_HELP),
    lat: float | None = typer.Option(None, "--lat", help=LAT_HELP),
    lng: float | None = typer.Option(None, "--lng", help=LNG_HELP),
    name: str | None = typer.Option(None, "--name", help=NAME_HELP),
    kind: str = typer.Option("scheme", "--kind", help="Link kind: scheme or web."),
    platform: str | None = typer.Option(None, "--platform", help=PLATFORM_HELP),
    direct_nav: bool = typer.Option(False, "--direct", help=DIRECT_HELP),
) -> None:
    """Print the navigation URL for a destination without opening it."""
    debug: bool = bool(ctx.obj.get("debug", False))
    link_kind = _parse_link_kind(kind)
    target_platform = _parse_platform(platform)

    try:
        from map_navigator.api import resolve_map_url

        resolved = resolve_map_url(
            lat=lat,
            lng=lng,
            name=name,
            provider=provider,
            link_kind=link_kind,
            direct_nav=direct_nav,
            platform=target_platform,
            provider_modules=ctx.obj["provider_modules"],
        )
    except MapNavigationError as exc:
        raise typer.Exit(code=_print_navigation_error(exc, debug))
    typer.echo(resolved.url)


@app.command("open")
def open_cmd(
    ctx: typer.Context,
    provider: str = typer.Option(..., "--provider", "-p", help=PROVIDER_HELP),
    lat: float | None = typer.Option(None, "--lat", help=LAT_HELP),
    lng: float | None = typer.Option(None, "--lng", help=LNG_HELP),
    name: str | None = typer.Option(None, "--name", help=NAME_HELP),
    platform: str | None = typer.Option(None, "--platform", help=PLATFORM_HELP),
    direct_nav: bool = typer.Option(False, "--direct", help=DIRECT_HELP),
) -> None:
    """Open the native map app, falling back to the web map.

    Notes
    -----
    - Exit code 0 covers both the native launch and the web fallback.
    - Exit code 3 means neither URL could be opened.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    target_platform = _parse_platform(platform)

    try:
        from map_navigator.api import open_map_navigation

        outcome = open_map_navigation(
            lat=lat,
            lng=lng,
            name=name,
            provider=provider,
            direct_nav=direct_nav,
            platform=target_platform,
            provider_modules=ctx.obj["provider_modules"],
        )
    except MapNavigationError as exc:
        raise typer.Exit(code=_print_navigation_error(exc, debug))
    except Exception as exc:
        logger.debug("unexpected error while opening navigation", exc_info=True)
        raise typer.Exit(code=_print_navigation_error(exc, debug))

    marker = "✓" if outcome.success else "!"
    typer.echo(f"{marker} {outcome.message}: {outcome.url}")


@app.command("installed")
def installed_cmd(
    ctx: typer.Context,
    provider: str = typer.Argument(..., help=PROVIDER_HELP),
    platform: str | None = typer.Option(None, "--platform", help=PLATFORM_HELP),
) -> None:
    """Report whether a provider's native app is installed.

    Notes
    -----
    - Only Android is actually checked; other platforms always report installed.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    target_platform = _parse_platform(platform)

    try:
        from map_navigator.api import check_map_installed

        installed = check_map_installed(
            provider,
            platform=target_platform,
            provider_modules=ctx.obj["provider_modules"],
        )
    except MapNavigationError as exc:
        raise typer.Exit(code=_print_navigation_error(exc, debug))
    typer.echo(f"{provider}: {'installed' if installed else 'not installed'}")


@app.command("apps")
def apps_cmd(
    ctx: typer.Context,
    platform: str | None = typer.Option(None, "--platform", help=PLATFORM_HELP),
) -> None:
    """List supported map apps."""
    debug: bool = bool(ctx.obj.get("debug", False))
    target_platform = _parse_platform(platform)

    try:
        from map_navigator.api import get_map_apps

        map_apps = get_map_apps(target_platform, provider_modules=ctx.obj["provider_modules"])
    except MapNavigationError as exc:
        raise typer.Exit(code=_print_navigation_error(exc, debug))
    for map_app in map_apps:
        scheme = map_app.scheme or "-"
        typer.echo(f"{map_app.value}\t{map_app.label}\t{scheme}")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
