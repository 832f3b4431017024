"""Click CLI definitions."""

from __future__ import annotations

from typing import Any

import click
import httpx
from rich.console import Console
from rich.table import Table

from tvdbv2 import __version__
from tvdbv2.core.errors import TVDBError
from tvdbv2.core.options import (
    QueryOption,
    with_absolute_episode_number,
    with_aired_episode_number,
    with_aired_season_number,
    with_dvd_episode_number,
    with_dvd_season_number,
)
from tvdbv2.services.client import TVDBClient
from tvdbv2.utils.config import build_config, client_options
from tvdbv2.utils.logger import setup_logging

SECRET_KEYS = ("api_key", "user_key")


def _open_client(config: dict[str, Any]) -> TVDBClient:
    if not config.get("api_key") and not (config.get("user_key") and config.get("username")):
        raise click.ClickException(
            "Credentials required. Use --api-key or set TVDB_API_KEY."
        )
    try:
        return TVDBClient(
            client_options(config),
            base_url=config["base_url"],
            timeout=config["timeout"],
        )
    except TVDBError as e:
        raise click.ClickException(str(e))


def _mask(val: str) -> str:
    return val[:4] + "..." + val[-4:] if len(val) > 8 else "***"


@click.group()
@click.version_option(version=__version__, prog_name="tvdb")
@click.option("--api-key", default=None, help="TVDB API key")
@click.option("--user-key", default=None, help="TVDB user key")
@click.option("--username", default=None, help="TVDB username")
@click.option("--language", "-l", default=None, help="Result language (e.g., en, fr)")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds (default: 15)")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose output")
@click.option("--debug", is_flag=True, default=False, help="Debug mode: log file and line of each message")
@click.pass_context
def cli(
    ctx: click.Context,
    api_key: str | None,
    user_key: str | None,
    username: str | None,
    language: str | None,
    timeout: float | None,
    verbose: bool,
    debug: bool,
) -> None:
    """Query The TVDB from the command line."""
    setup_logging(verbose=verbose, debug=debug)
    ctx.obj = build_config(cli_args={
        "api_key": api_key,
        "user_key": user_key,
        "username": username,
        "language": language,
        "timeout": timeout,
    })


@cli.command("languages")
@click.pass_obj
def list_languages(config: dict[str, Any]) -> None:
    """List languages supported by TVDB."""
    with _open_client(config) as client:
        try:
            languages = client.languages()
        except (TVDBError, httpx.HTTPError, ValueError) as e:
            raise click.ClickException(str(e))

    table = Table("Code", "English name", "Name", "ID")
    for lang in sorted(languages, key=lambda lang: lang.abbreviation):
        table.add_row(lang.abbreviation, lang.english_name, lang.name, str(lang.id))
    Console().print(table)


@cli.command()
@click.argument("name")
@click.pass_obj
def search(config: dict[str, Any], name: str) -> None:
    """Search series by NAME."""
    with _open_client(config) as client:
        try:
            results = client.search_series_by_name(name)
        except (TVDBError, httpx.HTTPError, ValueError) as e:
            raise click.ClickException(str(e))

    click.echo(f"Found {len(results)} serie(s) matching '{name}':")
    for s in results:
        click.echo(f"* {s.series_name} (id: {s.id})")


@cli.command()
@click.argument("series_id", type=int)
@click.pass_obj
def series(config: dict[str, Any], series_id: int) -> None:
    """Show details of the series SERIES_ID."""
    with _open_client(config) as client:
        try:
            s = client.series_by_id(series_id)
        except (TVDBError, httpx.HTTPError, ValueError) as e:
            raise click.ClickException(str(e))

    if not s.id:
        raise click.ClickException(f"No series found with id {series_id}")

    click.echo(f"{s.series_name} (id: {s.id})")
    for label, val in (
        ("Status", s.status),
        ("Network", s.network),
        ("First aired", s.first_aired),
        ("Runtime", f"{s.runtime} min" if s.runtime else ""),
        ("Genre", ", ".join(s.genre)),
        ("Rating", f"{s.site_rating} ({s.site_rating_count} votes)" if s.site_rating_count else ""),
        ("IMDB", s.imdb_id),
    ):
        if val:
            click.echo(f"  {label}: {val}")
    if s.overview:
        click.echo(f"\n{s.overview}")


@cli.command()
@click.argument("series_id", type=int)
@click.option("--aired-season", type=int, default=None, help="Aired season number")
@click.option("--aired-episode", type=int, default=None, help="Aired episode number")
@click.option("--dvd-season", type=int, default=None, help="DVD season number")
@click.option("--dvd-episode", type=int, default=None, help="DVD episode number")
@click.option("--absolute", type=int, default=None, help="Absolute episode number")
@click.pass_obj
def episodes(
    config: dict[str, Any],
    series_id: int,
    aired_season: int | None,
    aired_episode: int | None,
    dvd_season: int | None,
    dvd_episode: int | None,
    absolute: int | None,
) -> None:
    """List episodes of the series SERIES_ID."""
    filters: list[QueryOption] = []
    if aired_season is not None:
        filters.append(with_aired_season_number(aired_season))
    if aired_episode is not None:
        filters.append(with_aired_episode_number(aired_episode))
    if dvd_season is not None:
        filters.append(with_dvd_season_number(dvd_season))
    if dvd_episode is not None:
        filters.append(with_dvd_episode_number(dvd_episode))
    if absolute is not None:
        filters.append(with_absolute_episode_number(absolute))

    with _open_client(config) as client:
        try:
            eps = client.episodes_by_series_id(series_id, *filters)
        except (TVDBError, httpx.HTTPError, ValueError) as e:
            raise click.ClickException(str(e))

    click.echo(f"Series has {len(eps)} episode(s)")
    for ep in eps:
        click.echo(f"- S{ep.aired_season:02d}E{ep.aired_episode_number:02d}: {ep.episode_name}")


@cli.command()
@click.pass_obj
def config(config: dict[str, Any]) -> None:
    """Show current configuration."""
    for key, val in sorted(config.items()):
        if key in SECRET_KEYS and val:
            val = _mask(val)
        click.echo(f"  {key}: {val}")
