"""Request and query options applied before a request is sent.

Options are plain callables editing a carrier in place: request options edit
the outgoing headers, query options edit the query parameters. They are
applied left to right and overwrite on repeated keys, so the last value wins.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping

RequestOption = Callable[[MutableMapping[str, str]], None]
QueryOption = Callable[[dict[str, str]], None]


def with_language(language: str) -> RequestOption:
    """Ask for results in ``language``. Empty means the API default."""

    def apply(headers: MutableMapping[str, str]) -> None:
        if language:
            headers["Accept-Language"] = language

    return apply


def with_aired_season_number(season_number: int) -> QueryOption:
    """Filter episodes by aired season. Use with ``episodes_by_series_id``."""
    return with_query_int_option("airedSeason", season_number)


def with_aired_episode_number(episode_number: int) -> QueryOption:
    """Filter episodes by aired episode number. Use with ``episodes_by_series_id``."""
    return with_query_int_option("airedEpisode", episode_number)


def with_dvd_season_number(season_number: int) -> QueryOption:
    """Filter episodes by DVD season. Use with ``episodes_by_series_id``."""
    return with_query_int_option("dvdSeason", season_number)


def with_dvd_episode_number(episode_number: int) -> QueryOption:
    """Filter episodes by DVD episode number. Use with ``episodes_by_series_id``."""
    return with_query_int_option("dvdEpisode", episode_number)


def with_absolute_episode_number(episode_number: int) -> QueryOption:
    """Filter episodes by absolute number. Use with ``episodes_by_series_id``."""
    return with_query_int_option("absoluteNumber", episode_number)


def with_query_int_option(name: str, value: int) -> QueryOption:
    return with_query_option(name, f"{int(value):d}")


def with_query_option(name: str, value: str) -> QueryOption:
    def apply(query: dict[str, str]) -> None:
        query[name] = value

    return apply


def apply_query_options(*options: QueryOption) -> dict[str, str]:
    """Fold query options into a fresh parameter dict."""
    query: dict[str, str] = {}
    for option in options:
        option(query)
    return query


def apply_request_options(
    headers: MutableMapping[str, str], *options: RequestOption
) -> MutableMapping[str, str]:
    for option in options:
        option(headers)
    return headers
