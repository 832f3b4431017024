"""Client for The TVDB API v2."""

__version__ = "0.1.0"

from tvdbv2.core.errors import APIError, LoginError, ResponseDecodeError, TVDBError
from tvdbv2.core.models import Episode, Language, Pages, QueryErrors, Series, SeriesSearchResult
from tvdbv2.core.options import (
    with_absolute_episode_number,
    with_aired_episode_number,
    with_aired_season_number,
    with_dvd_episode_number,
    with_dvd_season_number,
)
from tvdbv2.services.client import DEFAULT_BASE_URL, ClientOptions, TVDBClient

__all__ = [
    "APIError",
    "ClientOptions",
    "DEFAULT_BASE_URL",
    "Episode",
    "Language",
    "LoginError",
    "Pages",
    "QueryErrors",
    "ResponseDecodeError",
    "Series",
    "SeriesSearchResult",
    "TVDBClient",
    "TVDBError",
    "with_absolute_episode_number",
    "with_aired_episode_number",
    "with_aired_season_number",
    "with_dvd_episode_number",
    "with_dvd_season_number",
]
