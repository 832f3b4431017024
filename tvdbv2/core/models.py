"""Typed records decoded from TVDB API v2 JSON payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tvdbv2.core.errors import ResponseDecodeError


def _int(value: Any) -> int:
    try:
        return int(value) if value else 0
    except (TypeError, ValueError) as e:
        raise ResponseDecodeError(f"expected a number, got {value!r}") from e


def _float(value: Any) -> float:
    try:
        return float(value) if value else 0.0
    except (TypeError, ValueError) as e:
        raise ResponseDecodeError(f"expected a number, got {value!r}") from e


def _str(value: Any) -> str:
    return str(value) if value is not None else ""


def _strs(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if not isinstance(value, list):
        raise ResponseDecodeError(f"expected a list of strings, got {type(value).__name__}")
    return tuple(_str(v) for v in value)


def _object(value: Any, name: str) -> dict[str, Any]:
    """Return a JSON object member; null counts as an empty object."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ResponseDecodeError(f"expected an object for {name!r}, got {type(value).__name__}")
    return value


def _objects(value: Any, name: str) -> list[dict[str, Any]]:
    """Return a JSON array of objects; null items decode as empty records."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResponseDecodeError(f"expected an array for {name!r}, got {type(value).__name__}")
    return [_object(item, name) for item in value]


@dataclass(frozen=True)
class Token:
    value: str = ""
    error: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Token:
        return cls(value=_str(data.get("token")), error=_str(data.get("Error")))


@dataclass(frozen=True)
class QueryErrors:
    """Query problems reported by the API next to an otherwise valid payload."""

    invalid_filters: tuple[str, ...] = ()
    invalid_language: str = ""
    invalid_query_params: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> QueryErrors:
        data = _object(data, "errors")
        return cls(
            invalid_filters=_strs(data.get("invalidFilters")),
            invalid_language=_str(data.get("invalidLanguage")),
            invalid_query_params=_strs(data.get("invalidQueryParams")),
        )

    def __bool__(self) -> bool:
        return bool(self.invalid_filters or self.invalid_language or self.invalid_query_params)


@dataclass(frozen=True)
class Language:
    id: int = 0
    abbreviation: str = ""
    english_name: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Language:
        return cls(
            id=_int(data.get("id")),
            abbreviation=_str(data.get("abbreviation")),
            english_name=_str(data.get("englishName")),
            name=_str(data.get("name")),
        )


@dataclass(frozen=True)
class SeriesSearchResult:
    id: int = 0
    series_name: str = ""
    aliases: tuple[str, ...] = ()
    slug: str = ""
    overview: str = ""
    network: str = ""
    status: str = ""
    first_aired: str = ""
    banner: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SeriesSearchResult:
        return cls(
            id=_int(data.get("id")),
            series_name=_str(data.get("seriesName")),
            aliases=_strs(data.get("aliases")),
            slug=_str(data.get("slug")),
            overview=_str(data.get("overview")),
            network=_str(data.get("network")),
            status=_str(data.get("status")),
            first_aired=_str(data.get("firstAired")),
            banner=_str(data.get("banner")),
        )


@dataclass(frozen=True)
class Series:
    id: int = 0
    series_name: str = ""
    aliases: tuple[str, ...] = ()
    slug: str = ""
    overview: str = ""
    network: str = ""
    network_id: str = ""
    status: str = ""
    first_aired: str = ""
    banner: str = ""
    added: str = ""
    airs_day_of_week: str = ""
    airs_time: str = ""
    genre: tuple[str, ...] = ()
    imdb_id: str = ""
    zap2it_id: str = ""
    series_id: str = ""
    last_updated: int = 0  # unix timestamp
    rating: str = ""
    runtime: str = ""  # minutes, as sent by the API
    site_rating: float = 0.0
    site_rating_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Series:
        data = _object(data, "data")
        if not data:
            return cls()
        return cls(
            id=_int(data.get("id")),
            series_name=_str(data.get("seriesName")),
            aliases=_strs(data.get("aliases")),
            slug=_str(data.get("slug")),
            overview=_str(data.get("overview")),
            network=_str(data.get("network")),
            network_id=_str(data.get("networkId")),
            status=_str(data.get("status")),
            first_aired=_str(data.get("firstAired")),
            banner=_str(data.get("banner")),
            added=_str(data.get("added")),
            airs_day_of_week=_str(data.get("airsDayOfWeek")),
            airs_time=_str(data.get("airsTime")),
            genre=_strs(data.get("genre")),
            imdb_id=_str(data.get("imdbId")),
            zap2it_id=_str(data.get("zap2itId")),
            series_id=_str(data.get("seriesId")),
            last_updated=_int(data.get("lastUpdated")),
            rating=_str(data.get("rating")),
            runtime=_str(data.get("runtime")),
            site_rating=_float(data.get("siteRating")),
            site_rating_count=_int(data.get("siteRatingCount")),
        )


@dataclass(frozen=True)
class Episode:
    id: int = 0
    series_id: int = 0
    aired_season: int = 0
    aired_episode_number: int = 0
    dvd_season: int = 0
    dvd_episode_number: int = 0
    dvd_chapter: int = 0
    dvd_discid: str = ""
    absolute_number: int = 0
    airs_after_season: int = 0
    airs_before_episode: int = 0
    airs_before_season: int = 0
    episode_name: str = ""
    overview: str = ""
    first_aired: str = ""
    director: str = ""
    directors: tuple[str, ...] = ()
    writers: tuple[str, ...] = ()
    guest_stars: tuple[str, ...] = ()
    imdb_id: str = ""
    production_code: str = ""
    show_url: str = ""
    last_updated: int = 0
    last_updated_by: int = 0
    site_rating: float = 0.0
    site_rating_count: int = 0
    filename: str = ""  # thumbnail path
    thumb_added: str = ""
    thumb_author: int = 0
    thumb_height: str = ""
    thumb_width: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Episode:
        return cls(
            id=_int(data.get("id")),
            series_id=_int(data.get("seriesId")),
            aired_season=_int(data.get("airedSeason")),
            aired_episode_number=_int(data.get("airedEpisodeNumber")),
            dvd_season=_int(data.get("dvdSeason")),
            dvd_episode_number=_int(data.get("dvdEpisodeNumber")),
            dvd_chapter=_int(data.get("dvdChapter")),
            dvd_discid=_str(data.get("dvdDiscid")),
            absolute_number=_int(data.get("absoluteNumber")),
            airs_after_season=_int(data.get("airsAfterSeason")),
            airs_before_episode=_int(data.get("airsBeforeEpisode")),
            airs_before_season=_int(data.get("airsBeforeSeason")),
            episode_name=_str(data.get("episodeName")),
            overview=_str(data.get("overview")),
            first_aired=_str(data.get("firstAired")),
            director=_str(data.get("director")),
            directors=_strs(data.get("directors")),
            writers=_strs(data.get("writers")),
            guest_stars=_strs(data.get("guestStars")),
            imdb_id=_str(data.get("imdbId")),
            production_code=_str(data.get("productionCode")),
            show_url=_str(data.get("showUrl")),
            last_updated=_int(data.get("lastUpdated")),
            last_updated_by=_int(data.get("lastUpdatedBy")),
            site_rating=_float(data.get("siteRating")),
            site_rating_count=_int(data.get("siteRatingCount")),
            filename=_str(data.get("filename")),
            thumb_added=_str(data.get("thumbAdded")),
            thumb_author=_int(data.get("thumbAuthor")),
            thumb_height=_str(data.get("thumbHeight")),
            thumb_width=_str(data.get("thumbWidth")),
        )


@dataclass(frozen=True)
class Pages:
    """Page cursor returned with episode listings. Absent pages are 0.

    The API names the previous page ``prev``; ``previous`` is accepted too.
    """

    first: int = 0
    last: int = 0
    next: int = 0
    previous: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Pages:
        data = _object(data, "links")
        return cls(
            first=_int(data.get("first")),
            last=_int(data.get("last")),
            next=_int(data.get("next")),
            previous=_int(data.get("prev", data.get("previous"))),
        )


# Envelopes: one per resource, since the API wraps each payload differently.


@dataclass(frozen=True)
class LanguageData:
    data: list[Language] = field(default_factory=list)
    error: str = ""

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> LanguageData:
        return cls(
            data=[Language.from_dict(item) for item in _objects(payload.get("data"), "data")],
            error=_str(payload.get("Error")),
        )


@dataclass(frozen=True)
class SeriesData:
    data: Series = field(default_factory=Series)
    errors: QueryErrors = field(default_factory=QueryErrors)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> SeriesData:
        return cls(
            data=Series.from_dict(payload.get("data")),
            errors=QueryErrors.from_dict(payload.get("errors")),
        )


@dataclass(frozen=True)
class SeriesSearchResults:
    data: list[SeriesSearchResult] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> SeriesSearchResults:
        return cls(
            data=[SeriesSearchResult.from_dict(item) for item in _objects(payload.get("data"), "data")],
        )


@dataclass(frozen=True)
class SeriesEpisodesData:
    data: list[Episode] = field(default_factory=list)
    errors: QueryErrors = field(default_factory=QueryErrors)
    pages: Pages = field(default_factory=Pages)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> SeriesEpisodesData:
        return cls(
            data=[Episode.from_dict(item) for item in _objects(payload.get("data"), "data")],
            errors=QueryErrors.from_dict(payload.get("errors")),
            pages=Pages.from_dict(payload.get("links")),
        )
