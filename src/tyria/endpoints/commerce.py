"""
Trading post and currency exchange endpoints.
"""

from typing import List

from tyria.base import (
    BAD_REQUEST_OR_NOT_FOUND,
    BaseEndpointClient,
    BulkEndpointClient,
    Route,
    authenticated,
)
from tyria.models.commerce import ExchangeRate, TPItem, TPItemInfo, TPTransaction
from tyria.params import number_to_param
from tyria.paths import Endpoint
from tyria.result import Result

EXCHANGE = Route(Endpoint.EXCHANGE, List[str])
EXCHANGE_COINS = Route(Endpoint.EXCHANGE_COINS, ExchangeRate, invalid=BAD_REQUEST_OR_NOT_FOUND)
EXCHANGE_GEMS = Route(Endpoint.EXCHANGE_GEMS, ExchangeRate, invalid=BAD_REQUEST_OR_NOT_FOUND)
CURRENT_BUYS = authenticated(Endpoint.TRANSACTIONS_CURRENT_BUY, List[TPTransaction])
CURRENT_SELLS = authenticated(Endpoint.TRANSACTIONS_CURRENT_SELL, List[TPTransaction])
HISTORY_BUYS = authenticated(Endpoint.TRANSACTIONS_HISTORY_BUY, List[TPTransaction])
HISTORY_SELLS = authenticated(Endpoint.TRANSACTIONS_HISTORY_SELL, List[TPTransaction])


class ListingsClient(BulkEndpointClient[TPItem, int]):
    """Buy and sell listings per item."""

    index = Endpoint.LISTINGS
    lookup = Endpoint.LISTINGS_BY_ID
    model = TPItem


class PricesClient(BulkEndpointClient[TPItemInfo, int]):
    """Best buy and sell price per item."""

    index = Endpoint.PRICES
    lookup = Endpoint.PRICES_BY_ID
    model = TPItemInfo


class CommerceClient(BaseEndpointClient):
    """
    Client for the currency exchange and the account's trading post
    transactions.

    Transactions need an API key with the ``tradingpost`` scope.
    """

    async def exchange(self) -> Result[List[str]]:
        """Available exchange directions (``coins``, ``gems``)."""
        return await self._call(EXCHANGE)

    async def coins_to_gems(self, quantity: int) -> Result[ExchangeRate]:
        """
        Current rate for exchanging coins into gems.

        Args:
            quantity: Amount of coins to exchange

        Returns:
            ``Ok`` with the rate, or ``Err`` (HTTP 400) if the quantity is too low
        """
        return await self._call(EXCHANGE_COINS, number_to_param("quantity", quantity))

    async def gems_to_coins(self, quantity: int) -> Result[ExchangeRate]:
        """
        Current rate for exchanging gems into coins.

        Args:
            quantity: Amount of gems to exchange
        """
        return await self._call(EXCHANGE_GEMS, number_to_param("quantity", quantity))

    async def current_buys(self) -> Result[List[TPTransaction]]:
        """Unfulfilled buy orders."""
        return await self._call(CURRENT_BUYS)

    async def current_sells(self) -> Result[List[TPTransaction]]:
        """Unfulfilled sell offers."""
        return await self._call(CURRENT_SELLS)

    async def history_buys(self) -> Result[List[TPTransaction]]:
        """Fulfilled buy orders of the past 90 days."""
        return await self._call(HISTORY_BUYS)

    async def history_sells(self) -> Result[List[TPTransaction]]:
        """Fulfilled sell offers of the past 90 days."""
        return await self._call(HISTORY_SELLS)
