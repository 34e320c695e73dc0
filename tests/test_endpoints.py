"""Tests for the endpoint clients against a mocked API."""

import re
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from tyria.client import TyriaClient
from tyria.exceptions import ApiError, AuthenticationError, MalformedResponseError, UnknownStatusError
from tyria.models import Account, Achievement, APIKey, Race
from tyria.result import Err, Ok

BASE_URL = "https://api.guildwars2.com"


@pytest.fixture
def client():
    return TyriaClient(base_url=BASE_URL)


@pytest.fixture
def keyed_client():
    return TyriaClient(base_url=BASE_URL, token="abc")


def character_url(path: str) -> str:
    return rf"^{re.escape(BASE_URL)}/v2/characters/{path}$"


# ============================================================================
# Account
# ============================================================================


class TestAccountClient:
    """Tests for authenticated account endpoints."""

    @pytest.mark.asyncio
    async def test_get_account(self, api, keyed_client, account_data):
        route = api.get(f"{BASE_URL}/v2/account").mock(
            return_value=httpx.Response(200, json=account_data)
        )

        result = await keyed_client.account.get()

        assert isinstance(result, Ok)
        assert isinstance(result.value, Account)
        assert result.value.id == "123"
        assert result.value.fractal_level == 0
        assert route.calls.last.request.headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_get_account_without_token(self, api, client):
        route = api.get(f"{BASE_URL}/v2/account")

        with pytest.raises(AuthenticationError):
            await client.account.get()

        assert not route.called

    @pytest.mark.asyncio
    async def test_missing_scope(self, api, keyed_client):
        api.get(f"{BASE_URL}/v2/account/wallet").mock(
            return_value=httpx.Response(403, json={"text": "requires scope wallet"})
        )

        result = await keyed_client.account.wallet()

        assert result == Err(ApiError("requires scope wallet", status_code=403))

    @pytest.mark.asyncio
    async def test_bank_with_empty_slots(self, api, keyed_client):
        api.get(f"{BASE_URL}/v2/account/bank").mock(
            return_value=httpx.Response(200, json=[{"id": 19721, "count": 250}, None])
        )

        bank = (await keyed_client.account.bank()).unwrap()

        assert bank[0].id == 19721
        assert bank[1] is None

    @pytest.mark.asyncio
    async def test_token_info(self, api, keyed_client):
        api.get(f"{BASE_URL}/v2/tokeninfo").mock(
            return_value=httpx.Response(
                200, json={"id": "abc", "name": "tools", "permissions": ["account", "wallet"]}
            )
        )

        info = (await keyed_client.account.token_info()).unwrap()

        assert info == APIKey(id="abc", name="tools", permissions=["account", "wallet"])


# ============================================================================
# Bulk endpoints
# ============================================================================


class TestBulkEndpoints:
    """Tests for resources in the ids/id layout."""

    @pytest.mark.asyncio
    async def test_ids(self, api, client):
        api.get(f"{BASE_URL}/v2/achievements").mock(return_value=httpx.Response(200, json=[1, 2]))

        assert await client.achievements.ids() == Ok([1, 2])

    @pytest.mark.asyncio
    async def test_get_single(self, api, client, achievement_data):
        route = api.get(f"{BASE_URL}/v2/achievements", params={"id": "1"}).mock(
            return_value=httpx.Response(200, json=achievement_data)
        )

        result = await client.achievements.get(1)

        assert isinstance(result.value, Achievement)
        assert result.value.name == "Centaur Slayer"
        assert "Authorization" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    async def test_get_single_not_found(self, api, client):
        api.get(f"{BASE_URL}/v2/achievements", params={"id": "42"}).mock(
            return_value=httpx.Response(404, json={"text": "achievement not found"})
        )

        result = await client.achievements.get(42)

        assert result.is_err()
        assert result.error.message == "achievement not found"
        assert result.error.status_code == 404

    @pytest.mark.asyncio
    async def test_get_many_partial(self, api, client, race_data):
        route = api.get(f"{BASE_URL}/v2/races", params={"ids": "Asura,Sylvari"}).mock(
            return_value=httpx.Response(206, json=[race_data])
        )

        result = await client.races.get_many(["Asura", "Sylvari"])

        assert result == Ok([Race(**race_data)])

    @pytest.mark.asyncio
    async def test_get_many_unknown_status(self, api, client):
        api.get(f"{BASE_URL}/v2/skills", params={"ids": "1,2"}).mock(
            return_value=httpx.Response(500, json={"text": "oops"})
        )

        result = await client.skills.get_many([1, 2])

        assert result == Err(UnknownStatusError(500))

    @pytest.mark.asyncio
    async def test_get_many_empty(self, api, client):
        with pytest.raises(ValueError):
            await client.skills.get_many([])

        assert not api.calls

    @pytest.mark.asyncio
    async def test_malformed_body(self, api, client):
        api.get(f"{BASE_URL}/v2/races", params={"id": "Asura"}).mock(
            return_value=httpx.Response(200, json={"id": "Asura"})
        )

        with pytest.raises(MalformedResponseError):
            await client.races.get("Asura")

    @pytest.mark.asyncio
    async def test_repeated_calls_are_equal(self, api, client):
        api.get(f"{BASE_URL}/v2/achievements", params={"id": "42"}).mock(
            return_value=httpx.Response(404, json={"text": "achievement not found"})
        )

        first = await client.achievements.get(42)
        second = await client.achievements.get(42)

        assert first == second

    @pytest.mark.asyncio
    async def test_locale_header(self, api, race_data):
        route = api.get(f"{BASE_URL}/v2/races", params={"id": "Asura"}).mock(
            return_value=httpx.Response(200, json=race_data)
        )

        async with TyriaClient(base_url=BASE_URL, lang="de") as client:
            await client.races.get("Asura")

        assert route.calls.last.request.headers["Accept-Language"] == "de"


# ============================================================================
# Characters
# ============================================================================


class TestCharactersClient:
    """Tests for character endpoints."""

    @pytest.mark.asyncio
    async def test_name_is_percent_encoded(self, api, keyed_client):
        route = api.get(url__regex=character_url("Zojja%20the%20Great/heropoints")).mock(
            return_value=httpx.Response(200, json=["1-1", "1-2"])
        )

        result = await keyed_client.characters.heropoints("Zojja the Great")

        assert result == Ok(["1-1", "1-2"])
        assert route.calls.last.request.url.raw_path == b"/v2/characters/Zojja%20the%20Great/heropoints"

    @pytest.mark.asyncio
    async def test_unknown_character(self, api, keyed_client):
        api.get(url__regex=character_url("Nobody/core")).mock(
            return_value=httpx.Response(404, json={"text": "no such character"})
        )

        result = await keyed_client.characters.core("Nobody")

        assert result.error == ApiError("no such character", status_code=404)

    @pytest.mark.asyncio
    async def test_bad_request_is_documented(self, api, keyed_client):
        api.get(url__regex=character_url("x/skills")).mock(
            return_value=httpx.Response(400, json={"text": "invalid character"})
        )

        result = await keyed_client.characters.skills("x")

        assert not isinstance(result.error, UnknownStatusError)
        assert result.error.status_code == 400

    @pytest.mark.asyncio
    async def test_names(self, api, keyed_client):
        api.get(f"{BASE_URL}/v2/characters").mock(
            return_value=httpx.Response(200, json=["Zojja", "Snaff"])
        )

        assert (await keyed_client.characters.names()).unwrap() == ["Zojja", "Snaff"]


# ============================================================================
# Commerce
# ============================================================================


class TestCommerceClient:
    """Tests for trading post and exchange endpoints."""

    @pytest.mark.asyncio
    async def test_coins_to_gems(self, api, client):
        api.get(f"{BASE_URL}/v2/commerce/exchange/coins", params={"quantity": "100000"}).mock(
            return_value=httpx.Response(200, json={"coins_per_gem": 2935, "quantity": 34})
        )

        rate = (await client.commerce.coins_to_gems(100000)).unwrap()

        assert rate.coins_per_gem == 2935
        assert rate.quantity == 34

    @pytest.mark.asyncio
    async def test_quantity_too_low(self, api, client):
        api.get(f"{BASE_URL}/v2/commerce/exchange/gems", params={"quantity": "0"}).mock(
            return_value=httpx.Response(400, json={"text": "invalid quantity"})
        )

        result = await client.commerce.gems_to_coins(0)

        assert result.error.message == "invalid quantity"

    @pytest.mark.asyncio
    async def test_transactions(self, api, keyed_client):
        route = api.get(f"{BASE_URL}/v2/commerce/transactions/current/buys").mock(
            return_value=httpx.Response(
                200,
                json=[{
                    "id": 1,
                    "item_id": 19721,
                    "price": 120,
                    "quantity": 5,
                    "created": "2024-01-01T10:00:00+00:00",
                }],
            )
        )

        transactions = (await keyed_client.commerce.current_buys()).unwrap()

        assert transactions[0].purchased is None
        assert route.calls.last.request.headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_prices_partial(self, api, client):
        price = {"unit_price": 100, "quantity": 10}
        api.get(f"{BASE_URL}/v2/commerce/prices", params={"ids": "19721,1"}).mock(
            return_value=httpx.Response(206, json=[{"id": 19721, "buys": price, "sells": price}])
        )

        prices = (await client.prices.get_many([19721, 1])).unwrap()

        assert [item.id for item in prices] == [19721]


# ============================================================================
# Status handling shared by every bulk resource
# ============================================================================


BULK_CLIENTS = [
    ("achievements", "/v2/achievements", 1),
    ("achievement_categories", "/v2/achievements/categories", 1),
    ("achievement_groups", "/v2/achievements/groups", "65B4B678-607E-4D97-B458-076C3E96A810"),
    ("listings", "/v2/commerce/listings", 19721),
    ("prices", "/v2/commerce/prices", 19721),
    ("masteries", "/v2/masteries", 1),
    ("outfits", "/v2/outfits", 1),
    ("pets", "/v2/pets", 1),
    ("professions", "/v2/professions", "Guardian"),
    ("races", "/v2/races", "Asura"),
    ("specializations", "/v2/specializations", 1),
    ("skills", "/v2/skills", 1),
    ("traits", "/v2/traits", 1),
    ("legends", "/v2/legends", "Legend1"),
]


class TestBulkStatusHandling:
    """Every bulk resource classifies statuses the same way."""

    @pytest.fixture
    def mocked_get(self, client):
        with patch.object(client.http, "get", new_callable=AsyncMock) as mock_get:
            yield mock_get

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, path, some_id", BULK_CLIENTS)
    async def test_get_not_found(self, client, mocked_get, response, name, path, some_id):
        mocked_get.return_value = response(404, {"text": "not found"})

        result = await getattr(client, name).get(some_id)

        assert result == Err(ApiError("not found", status_code=404))
        mocked_get.assert_awaited_once_with(f"{path}?id={some_id}", authenticated=False)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [200, 206])
    @pytest.mark.parametrize("name, path, some_id", BULK_CLIENTS)
    async def test_get_many_full_or_partial(
        self, client, mocked_get, response, name, path, some_id, status_code
    ):
        mocked_get.return_value = response(status_code, [])

        result = await getattr(client, name).get_many([some_id, some_id])

        assert result == Ok([])
        mocked_get.assert_awaited_once_with(f"{path}?ids={some_id},{some_id}", authenticated=False)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, path, some_id", BULK_CLIENTS)
    async def test_get_single_rejects_partial(self, client, mocked_get, response, name, path, some_id):
        mocked_get.return_value = response(206, {})

        result = await getattr(client, name).get(some_id)

        assert isinstance(result.error, UnknownStatusError)
        assert "206" in result.error.message

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, path, some_id", BULK_CLIENTS)
    async def test_ids_unknown_status(self, client, mocked_get, response, name, path, some_id):
        mocked_get.return_value = response(500, text="Internal Server Error")

        result = await getattr(client, name).ids()

        assert result == Err(UnknownStatusError(500))
        assert "500" in result.error.message
        mocked_get.assert_awaited_once_with(path, authenticated=False)
