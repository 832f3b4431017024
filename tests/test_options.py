"""Tests for request and query option composition."""

import pytest

from tvdbv2.core.options import (
    apply_query_options,
    apply_request_options,
    with_absolute_episode_number,
    with_aired_episode_number,
    with_aired_season_number,
    with_dvd_episode_number,
    with_dvd_season_number,
    with_language,
    with_query_int_option,
    with_query_option,
)


class TestQueryOptions:
    @pytest.mark.parametrize(
        "option, key",
        [
            (with_aired_season_number, "airedSeason"),
            (with_aired_episode_number, "airedEpisode"),
            (with_dvd_season_number, "dvdSeason"),
            (with_dvd_episode_number, "dvdEpisode"),
            (with_absolute_episode_number, "absoluteNumber"),
        ],
    )
    def test_filter_keys(self, option, key):
        assert apply_query_options(option(12)) == {key: "12"}

    def test_season_zero_is_kept(self):
        assert apply_query_options(with_aired_season_number(0)) == {"airedSeason": "0"}

    def test_int_encoded_as_decimal(self):
        assert apply_query_options(with_query_int_option("page", 7)) == {"page": "7"}

    def test_string_option(self):
        assert apply_query_options(with_query_option("name", "The Simpsons")) == {
            "name": "The Simpsons"
        }

    def test_no_options(self):
        assert apply_query_options() == {}

    def test_repeated_key_last_wins(self):
        query = apply_query_options(
            with_aired_season_number(1),
            with_aired_episode_number(3),
            with_aired_season_number(2),
            with_aired_season_number(5),
        )
        assert query == {"airedSeason": "5", "airedEpisode": "3"}

    def test_replaying_converges(self):
        options = [with_dvd_season_number(1), with_dvd_season_number(9)]
        assert apply_query_options(*options, *options) == apply_query_options(*options)


class TestRequestOptions:
    def test_language_header(self):
        headers = apply_request_options({}, with_language("fr"))
        assert headers == {"Accept-Language": "fr"}

    def test_empty_language_skipped(self):
        headers = apply_request_options({}, with_language(""))
        assert headers == {}

    def test_empty_language_keeps_previous(self):
        headers = apply_request_options({}, with_language("de"), with_language(""))
        assert headers == {"Accept-Language": "de"}

    def test_last_language_wins(self):
        headers = apply_request_options({}, with_language("en"), with_language("ja"))
        assert headers == {"Accept-Language": "ja"}
