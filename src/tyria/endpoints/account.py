"""
Account endpoints.

All of them need an API key; a key without the required scope gets 403.
"""

from typing import List, Optional

from tyria.base import BaseEndpointClient, authenticated
from tyria.models.account import (
    APIKey,
    Account,
    AccountAchievement,
    AccountCurrency,
    AccountFinisher,
    AccountMastery,
    AccountMaterial,
    BankSlot,
    Cat,
    InventorySlot,
)
from tyria.paths import Endpoint
from tyria.result import Result

ACCOUNT = authenticated(Endpoint.ACCOUNT, Account)
ACHIEVEMENTS = authenticated(Endpoint.ACCOUNT_ACHIEVEMENTS, List[AccountAchievement])
BANK = authenticated(Endpoint.ACCOUNT_BANK, List[Optional[BankSlot]])
DUNGEONS = authenticated(Endpoint.ACCOUNT_DUNGEONS, List[str])
DYES = authenticated(Endpoint.ACCOUNT_DYES, List[int])
FINISHERS = authenticated(Endpoint.ACCOUNT_FINISHERS, List[AccountFinisher])
CATS = authenticated(Endpoint.ACCOUNT_CATS, List[Cat])
NODES = authenticated(Endpoint.ACCOUNT_NODES, List[str])
INVENTORY = authenticated(Endpoint.ACCOUNT_INVENTORY, List[Optional[InventorySlot]])
MASTERIES = authenticated(Endpoint.ACCOUNT_MASTERIES, List[AccountMastery])
MATERIALS = authenticated(Endpoint.ACCOUNT_MATERIALS, List[AccountMaterial])
MINIS = authenticated(Endpoint.ACCOUNT_MINIS, List[int])
OUTFITS = authenticated(Endpoint.ACCOUNT_OUTFITS, List[int])
RAIDS = authenticated(Endpoint.ACCOUNT_RAIDS, List[str])
RECIPES = authenticated(Endpoint.ACCOUNT_RECIPES, List[int])
SKINS = authenticated(Endpoint.ACCOUNT_SKINS, List[int])
TITLES = authenticated(Endpoint.ACCOUNT_TITLES, List[int])
WALLET = authenticated(Endpoint.ACCOUNT_WALLET, List[AccountCurrency])
TOKEN_INFO = authenticated(Endpoint.TOKEN_INFO, APIKey)


class AccountClient(BaseEndpointClient):
    """
    Client for the account of the configured API key.
    """

    async def get(self) -> Result[Account]:
        """Details of the account."""
        return await self._call(ACCOUNT)

    async def achievements(self) -> Result[List[AccountAchievement]]:
        """Achievements the account has progress on."""
        return await self._call(ACHIEVEMENTS)

    async def bank(self) -> Result[List[Optional[BankSlot]]]:
        """Item slots in the account vault, None where a slot is empty."""
        return await self._call(BANK)

    async def dungeons(self) -> Result[List[str]]:
        """Dungeon paths completed since the daily reset."""
        return await self._call(DUNGEONS)

    async def dyes(self) -> Result[List[int]]:
        return await self._call(DYES)

    async def finishers(self) -> Result[List[AccountFinisher]]:
        return await self._call(FINISHERS)

    async def home_cats(self) -> Result[List[Cat]]:
        """Cats unlocked in the home instance."""
        return await self._call(CATS)

    async def home_nodes(self) -> Result[List[str]]:
        """Gathering nodes unlocked in the home instance."""
        return await self._call(NODES)

    async def inventory(self) -> Result[List[Optional[InventorySlot]]]:
        """Shared inventory slots, None where a slot is empty."""
        return await self._call(INVENTORY)

    async def masteries(self) -> Result[List[AccountMastery]]:
        return await self._call(MASTERIES)

    async def materials(self) -> Result[List[AccountMaterial]]:
        """Materials stored in the vault."""
        return await self._call(MATERIALS)

    async def minis(self) -> Result[List[int]]:
        return await self._call(MINIS)

    async def outfits(self) -> Result[List[int]]:
        return await self._call(OUTFITS)

    async def raids(self) -> Result[List[str]]:
        """Raid encounters completed since the weekly reset."""
        return await self._call(RAIDS)

    async def recipes(self) -> Result[List[int]]:
        return await self._call(RECIPES)

    async def skins(self) -> Result[List[int]]:
        return await self._call(SKINS)

    async def titles(self) -> Result[List[int]]:
        return await self._call(TITLES)

    async def wallet(self) -> Result[List[AccountCurrency]]:
        """Currencies held by the account."""
        return await self._call(WALLET)

    async def token_info(self) -> Result[APIKey]:
        """Name and scopes of the API key in use."""
        return await self._call(TOKEN_INFO)
