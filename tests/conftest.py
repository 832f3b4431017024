"""Shared fixtures: a respx router standing in for api.thetvdb.com."""

import httpx
import pytest
import respx

from tests.fixtures.tvdb_responses import BASE_URL, TVDB_LOGIN_RESPONSE
from tvdbv2.services.client import ClientOptions, TVDBClient


@pytest.fixture
def api_key() -> str:
    return "test-api-key-12345"


@pytest.fixture
def api():
    """Mocked TVDB API with a working /login route."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        router.post("/login", name="login").mock(
            return_value=httpx.Response(200, json=TVDB_LOGIN_RESPONSE)
        )
        yield router


@pytest.fixture
def client(api, api_key):
    c = TVDBClient(ClientOptions(api_key=api_key, language="en"))
    yield c
    c.close()
