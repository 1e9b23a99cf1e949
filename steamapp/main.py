"""Command line interface for Steam App Catalog lookups."""

from __future__ import annotations

from typing import Optional

import requests
import typer

from steamapp.config import config
from steamapp.core.logging import logger, setup_logging_from_config
from steamapp.integrations.steam_web_api import SteamWebService
from steamapp.services.catalog_index import CatalogIndex
from steamapp.services.catalog_loader import CatalogLoader
from steamapp.version import __app_name__, __version__

__all__ = ["app", "main"]

app = typer.Typer(help="Look up Steam apps by name or id.", no_args_is_help=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{__app_name__} {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    ctx: typer.Context,
    refresh: bool = typer.Option(False, "--refresh", help="Refetch the app list even if the cache is fresh."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    setup_logging_from_config(config, verbose=verbose)
    ctx.obj = {"refresh": refresh}


def _load_index(ctx: typer.Context) -> CatalogIndex:
    """Loads the catalog for one command, exiting with status 2 when offline."""
    loader = CatalogLoader.from_config(config)
    try:
        index = loader.load(force_refresh=ctx.obj["refresh"])
    except requests.ConnectionError as exc:
        logger.debug("Catalog load failed", exc_info=True)
        typer.echo(f"Could not reach the Steam Web API: {exc}", err=True)
        raise typer.Exit(code=2)
    if not len(index):
        typer.echo("The app list is empty; try again with --refresh.", err=True)
    return index


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Case-sensitive substring of the app name."),
    limit: int = typer.Option(20, "--limit", "-n", min=0, help="Maximum rows to print (0 for all)."),
) -> None:
    """Print every app whose name contains QUERY."""
    matches = _load_index(ctx).filter_by_name(query)
    shown = matches if limit == 0 else matches[:limit]
    for steam_app in shown:
        typer.echo(f"{steam_app.app_id}\t{steam_app.name}")
    if len(shown) < len(matches):
        typer.echo(f"... {len(matches) - len(shown)} more", err=True)
    if not matches:
        raise typer.Exit(code=1)


@app.command()
def name(
    ctx: typer.Context,
    app_id: int = typer.Argument(..., min=0, help="Steam app id."),
) -> None:
    """Print the name of the app with APP_ID."""
    found = _load_index(ctx).name_by_id(app_id)
    if found is None:
        typer.echo(f"No app with id {app_id}", err=True)
        raise typer.Exit(code=1)
    typer.echo(found)


@app.command()
def resolve(
    ctx: typer.Context,
    app_name: str = typer.Argument(..., metavar="NAME", help="App name to resolve."),
    exact: bool = typer.Option(False, "--exact", help="Require the whole name to match."),
) -> None:
    """Print the app id for NAME (first substring match unless --exact)."""
    index = _load_index(ctx)
    app_id = index.id_by_exact_name(app_name) if exact else index.id_by_fuzzy_name(app_name)
    if app_id is None:
        typer.echo(f"No app matching {app_name!r}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(app_id))


@app.command()
def profile(
    steam_id: Optional[str] = typer.Argument(None, help="SteamID64; defaults to STEAM_USER_ID."),
) -> None:
    """Print the public profile summary of a Steam account."""
    target = steam_id or config.STEAM_USER_ID
    if not target:
        typer.echo("No Steam id given and STEAM_USER_ID is not set.", err=True)
        raise typer.Exit(code=2)
    api_key = (config.STEAM_API_KEY or "").strip()
    if not api_key:
        typer.echo("STEAM_API_KEY is required for profile lookups.", err=True)
        raise typer.Exit(code=2)

    try:
        summary = SteamWebService(api_key, timeout=config.REQUEST_TIMEOUT).get_player_summary(target)
    except requests.ConnectionError as exc:
        typer.echo(f"Could not reach the Steam Web API: {exc}", err=True)
        raise typer.Exit(code=2)
    if summary is None:
        typer.echo(f"No profile for {target}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{summary.persona_name} ({summary.steam_id})")
    typer.echo(summary.profile_url)
    typer.echo("public" if summary.is_public else "private")


@app.command("clear-cache")
def clear_cache() -> None:
    """Delete the cached app list."""
    CatalogLoader.from_config(config).clear_cache()


def main() -> None:
    """Execute the Typer application."""
    app()


if __name__ == "__main__":
    main()
