"""Shared fixtures: a session backed by a fake identity backend and an NWS
client whose network call is replaced by an AsyncMock spy."""
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from weather_auth.identity import SignedInUser
from weather_auth.nws import NWSClient
from weather_auth.outcome import Denied, Ok
from weather_auth.session import Session
from weather_auth.tools import WeatherTools

USER = SignedInUser(uid="uid-123", email="user@example.com", id_token="token")


@pytest.fixture
def identity():
    backend = AsyncMock()
    backend.sign_in = AsyncMock(return_value=Denied("INVALID_LOGIN_CREDENTIALS"))
    return backend


@pytest.fixture
def session(identity):
    return Session(identity)


@pytest.fixture
def nws():
    client = NWSClient(base_url="https://api.weather.gov")
    client.fetch = AsyncMock()
    return client


@pytest.fixture
def tools(session, nws):
    return WeatherTools(session, nws)


@pytest_asyncio.fixture
async def signed_in(session, identity):
    identity.sign_in.return_value = Ok(USER)
    assert isinstance(await session.sign_in("user@example.com", "secret"), Ok)
    return session
