"""TVDB API v2 client: login, authenticated GETs and resource accessors."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, TypeVar

import httpx

from tvdbv2.core.errors import APIError, LoginError, ResponseDecodeError, TVDBError
from tvdbv2.core.models import (
    Episode,
    Language,
    LanguageData,
    Series,
    SeriesData,
    SeriesEpisodesData,
    SeriesSearchResult,
    SeriesSearchResults,
    Token,
)
from tvdbv2.core.options import (
    QueryOption,
    RequestOption,
    apply_query_options,
    apply_request_options,
    with_language,
    with_query_int_option,
    with_query_option,
)
from tvdbv2.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.thetvdb.com"
DEFAULT_TIMEOUT = 15.0

T = TypeVar("T")


@dataclass
class ClientOptions:
    """Credentials and default language for a TVDB client.

    Either ``api_key`` or ``user_key`` and ``username`` are needed to log in.
    ``language`` is a hint for the language of returned results and can be
    changed later with ``TVDBClient.with_language``.
    """

    api_key: str = ""
    user_key: str = ""
    username: str = ""
    language: str = ""


class TVDBClient:
    """Synchronous TVDB API v2 client.

    The constructor logs in immediately; if that fails, ``LoginError`` is
    raised and no client is returned. The token is reused for the lifetime of
    the client and never refreshed. Instances are not safe to share between
    threads without external locking.
    """

    def __init__(
        self,
        options: ClientOptions,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._options = options
        self._token = ""
        self._token_time: float = 0
        self._http = httpx.Client(timeout=timeout)
        try:
            self._login()
        except (httpx.HTTPError, ValueError, TVDBError) as e:
            self.close()
            raise LoginError(f"login failed, {e}") from e

    def __enter__(self) -> TVDBClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()

    @property
    def token(self) -> str:
        """JWT used for authentication."""
        return self._token

    @property
    def token_time(self) -> float:
        """Unix time at which the token was obtained."""
        return self._token_time

    @property
    def options(self) -> ClientOptions:
        """A copy of the options used by the client."""
        return replace(self._options)

    def with_language(self, language: str) -> TVDBClient:
        """Change the default language of this client and return it.

        The client is updated in place; no copy is made.
        """
        self._options.language = language
        return self

    def url(self, path: str, *options: QueryOption) -> httpx.URL:
        """Build the request URL for ``path`` with query options applied."""
        return httpx.URL(f"{self.base_url}{path}", params=apply_query_options(*options))

    def languages(self) -> list[Language]:
        """Return the languages supported by TVDB.

        Raises ``APIError`` when the API reports an error; the decoded list,
        possibly partial, is available on the exception's ``data``.
        """
        result = self._get(self.url("/languages"), LanguageData.from_dict)
        if result.error:
            raise APIError(result.error, data=result.data)
        return result.data

    def series_by_id(self, series_id: int) -> Series:
        """Return a single series given its TVDB ID.

        An unknown ID is not treated specially: the API's error payload has no
        ``data`` member, so an empty ``Series()`` comes back.
        """
        result = self._get(
            self.url(f"/series/{series_id}"),
            SeriesData.from_dict,
            with_language(self._options.language),
        )
        if result.errors:
            logger.warning("TVDB: series %s reported query errors: %s", series_id, result.errors)
        return result.data

    def search_series_by_name(self, name: str) -> list[SeriesSearchResult]:
        """Return the series matching ``name``, in the client language."""
        result = self._get(
            self.url("/search/series", with_query_option("name", name)),
            SeriesSearchResults.from_dict,
            with_language(self._options.language),
        )
        return result.data

    def episodes_by_series_id(self, series_id: int, *filters: QueryOption) -> list[Episode]:
        """Return the episodes of a series, optionally filtered.

        Without filters every episode of the series is returned. Filters such
        as ``with_aired_season_number`` narrow the listing, e.g. to one season
        or to a single episode of a season.

        All result pages are fetched in order. If any page fails, the error is
        raised and nothing is returned.
        """
        path = f"/series/{series_id}/episodes"
        if filters:
            path += "/query"

        episodes: list[Episode] = []
        page = 1
        while True:
            result = self._get(
                self.url(path, *filters, with_query_int_option("page", page)),
                SeriesEpisodesData.from_dict,
                with_language(self._options.language),
            )
            if result.errors:
                logger.warning(
                    "TVDB: episodes of series %s reported query errors: %s",
                    series_id, result.errors,
                )
            episodes.extend(result.data)
            # The page count is only known from the server's response.
            last = result.pages.last
            logger.debug("TVDB: series %s episodes page %d/%d", series_id, page, last)
            if page >= last:
                break
            page += 1
        return episodes

    def _login(self) -> None:
        """Exchange credentials for a bearer token."""
        body = {
            "apiKey": self._options.api_key,
            "userKey": self._options.user_key,
            "username": self._options.username,
        }
        resp = self._http.post(str(self.url("/login")), json=body)
        token = self._decode(resp, Token.from_dict)
        if token.error:
            raise APIError(token.error)
        self._token = token.value
        self._token_time = time.time()
        logger.debug("TVDB: authenticated successfully")

    def _get(
        self,
        url: httpx.URL,
        decode: Callable[[dict[str, Any]], T],
        *options: RequestOption,
    ) -> T:
        """Authenticated GET decoded with ``decode``.

        Transport and JSON errors propagate as they are; envelope errors are
        left for the caller to interpret.
        """
        headers = apply_request_options({}, *options)
        headers["Authorization"] = f"Bearer {self._token}"
        headers["Accept"] = "application/json"
        logger.debug("GET %s", url)
        resp = self._http.get(url, headers=headers)
        return self._decode(resp, decode)

    @staticmethod
    def _decode(resp: httpx.Response, decode: Callable[[dict[str, Any]], T]) -> T:
        payload = resp.json()
        if not isinstance(payload, dict):
            raise ResponseDecodeError(
                f"expected a JSON object from {resp.url}, got {type(payload).__name__}"
            )
        return decode(payload)
