"""Tests for the HTTP client module."""

import httpx
import pytest
from pydantic import ValidationError

from tyria.exceptions import (
    AuthenticationError,
    ConnectionError as ClientConnectionError,
    NetworkError,
    TimeoutError as ClientTimeoutError,
)
from tyria.http import AsyncHTTPClient, ClientSession


class TestClientSession:
    """Tests for the ClientSession model."""

    def test_defaults(self):
        session = ClientSession()
        assert session.lang == "en"
        assert session.token is None
        assert not session.is_authenticated()

    def test_with_token(self):
        session = ClientSession(lang="de", token="abc")
        assert session.is_authenticated()

    def test_is_frozen(self):
        session = ClientSession()
        with pytest.raises(ValidationError):
            session.lang = "fr"

    def test_repr_hides_token(self):
        session = ClientSession(token="secret-key")
        assert "secret-key" not in repr(session)
        assert "token=set" in repr(session)


class TestAsyncHTTPClient:
    """Tests for the AsyncHTTPClient class."""

    def test_initialization(self, base_url):
        client = AsyncHTTPClient(base_url=base_url)
        assert client.base_url == base_url
        assert client.timeout == 30.0
        assert client.session == ClientSession()

    def test_initialization_with_trailing_slash(self):
        client = AsyncHTTPClient(base_url="https://api.guildwars2.com/")
        assert client.base_url == "https://api.guildwars2.com"

    def test_build_headers(self, base_url):
        client = AsyncHTTPClient(base_url=base_url, session=ClientSession(lang="fr"))
        headers = client._build_headers()
        assert headers["Accept-Language"] == "fr"
        assert headers["Accept"] == "application/json"
        assert "Authorization" not in headers

    def test_build_headers_with_defaults_and_extra(self, base_url):
        client = AsyncHTTPClient(base_url=base_url, headers={"X-Custom": "value"})
        headers = client._build_headers({"X-Extra": "1"})
        assert headers["X-Custom"] == "value"
        assert headers["X-Extra"] == "1"

    def test_session_headers_cannot_be_overridden(self, base_url):
        client = AsyncHTTPClient(
            base_url=base_url,
            session=ClientSession(lang="de"),
            headers={"accept-language": "fr", "Authorization": "Bearer other"},
        )
        headers = client._build_headers({"Accept-Language": "es"})
        assert headers["Accept-Language"] == "de"
        assert {name.lower() for name in headers} == {"accept", "accept-language"}

    @pytest.mark.asyncio
    async def test_default_authorization_not_sent_to_public_endpoint(self, api, base_url):
        route = api.get(f"{base_url}/v2/races").mock(return_value=httpx.Response(200, json=[]))
        client = AsyncHTTPClient(base_url=base_url, headers={"Authorization": "Bearer leaked"})

        async with client:
            await client.get("/v2/races")

        assert "Authorization" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    async def test_public_request_has_no_authorization(self, api, base_url):
        route = api.get(f"{base_url}/v2/races").mock(return_value=httpx.Response(200, json=[]))
        client = AsyncHTTPClient(base_url=base_url, session=ClientSession(token="abc"))

        async with client:
            response = await client.get("/v2/races")

        assert response.status_code == 200
        request = route.calls.last.request
        assert "Authorization" not in request.headers
        assert request.headers["Accept-Language"] == "en"

    @pytest.mark.asyncio
    async def test_authenticated_request_sends_bearer_token(self, api, base_url):
        route = api.get(f"{base_url}/v2/account").mock(return_value=httpx.Response(200, json={}))
        client = AsyncHTTPClient(base_url=base_url, session=ClientSession(token="abc"))

        async with client:
            await client.get("/v2/account", authenticated=True)

        assert route.calls.last.request.headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_authenticated_request_without_token(self, api, base_url):
        route = api.get(f"{base_url}/v2/account")
        client = AsyncHTTPClient(base_url=base_url)

        with pytest.raises(AuthenticationError):
            await client.get("/v2/account", authenticated=True)

        assert not route.called
        await client.close()

    @pytest.mark.asyncio
    async def test_error_status_is_returned_not_raised(self, api, base_url):
        api.get(f"{base_url}/v2/skills").mock(return_value=httpx.Response(503))
        client = AsyncHTTPClient(base_url=base_url)

        response = await client.get("/v2/skills")

        assert response.status_code == 503
        await client.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "side_effect, expected",
        [
            (httpx.ConnectTimeout, ClientTimeoutError),
            (httpx.ReadTimeout, ClientTimeoutError),
            (httpx.ConnectError, ClientConnectionError),
            (httpx.RemoteProtocolError, NetworkError),
        ],
    )
    async def test_transport_errors_are_mapped(self, api, base_url, side_effect, expected):
        api.get(f"{base_url}/v2/skills").mock(side_effect=side_effect)
        client = AsyncHTTPClient(base_url=base_url)

        with pytest.raises(expected) as exc_info:
            await client.get("/v2/skills")

        assert isinstance(exc_info.value.__cause__, side_effect)
        await client.close()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, base_url):
        client = AsyncHTTPClient(base_url=base_url)
        await client._get_client()
        await client.close()
        await client.close()
        assert client._client is None
