"""
Character endpoints.

Characters are addressed by name. Names are percent-encoded into the path,
so spaces and reserved characters are safe to pass as-is. All endpoints need
an API key with the ``characters`` scope.
"""

from typing import List

from tyria.base import (
    CHARACTER_ERRORS,
    FORBIDDEN_OR_NOT_FOUND,
    BaseEndpointClient,
    authenticated,
)
from tyria.models.characters import (
    Character,
    CharacterBackstory,
    CharacterCore,
    CharacterCrafting,
    CharacterEquipment,
    CharacterInventory,
    CharacterRecipes,
    CharacterSkills,
    CharacterSpecializations,
    CharacterTraining,
    SABProgress,
)
from tyria.paths import Endpoint
from tyria.result import Result

NAMES = authenticated(Endpoint.CHARACTERS, List[str])
CHARACTER = authenticated(Endpoint.CHARACTER, Character, FORBIDDEN_OR_NOT_FOUND)
BACKSTORY = authenticated(Endpoint.CHARACTER_BACKSTORY, CharacterBackstory, CHARACTER_ERRORS)
CORE = authenticated(Endpoint.CHARACTER_CORE, CharacterCore, CHARACTER_ERRORS)
CRAFTING = authenticated(Endpoint.CHARACTER_CRAFTING, CharacterCrafting, CHARACTER_ERRORS)
EQUIPMENT = authenticated(Endpoint.CHARACTER_EQUIPMENT, CharacterEquipment, CHARACTER_ERRORS)
HEROPOINTS = authenticated(Endpoint.CHARACTER_HEROPOINTS, List[str], CHARACTER_ERRORS)
INVENTORY = authenticated(Endpoint.CHARACTER_INVENTORY, CharacterInventory, CHARACTER_ERRORS)
RECIPES = authenticated(Endpoint.CHARACTER_RECIPES, CharacterRecipes, CHARACTER_ERRORS)
SAB = authenticated(Endpoint.CHARACTER_SAB, SABProgress, FORBIDDEN_OR_NOT_FOUND)
SKILLS = authenticated(Endpoint.CHARACTER_SKILLS, CharacterSkills, CHARACTER_ERRORS)
SPECIALIZATIONS = authenticated(
    Endpoint.CHARACTER_SPECIALIZATIONS, CharacterSpecializations, CHARACTER_ERRORS
)
TRAINING = authenticated(Endpoint.CHARACTER_TRAINING, CharacterTraining, CHARACTER_ERRORS)


class CharactersClient(BaseEndpointClient):
    """
    Client for the characters of the configured account.
    """

    async def names(self) -> Result[List[str]]:
        """Names of all characters on the account."""
        return await self._call(NAMES)

    async def get(self, name: str) -> Result[Character]:
        """
        Full details of a character.

        Args:
            name: Character name

        Returns:
            ``Ok`` with the character, or ``Err`` with HTTP 403/404
        """
        return await self._call(CHARACTER, name)

    async def backstory(self, name: str) -> Result[CharacterBackstory]:
        """Backstory answer IDs chosen at character creation."""
        return await self._call(BACKSTORY, name)

    async def core(self, name: str) -> Result[CharacterCore]:
        """Name, race, profession, level and other core details."""
        return await self._call(CORE, name)

    async def crafting(self, name: str) -> Result[CharacterCrafting]:
        return await self._call(CRAFTING, name)

    async def equipment(self, name: str) -> Result[CharacterEquipment]:
        return await self._call(EQUIPMENT, name)

    async def heropoints(self, name: str) -> Result[List[str]]:
        """IDs of the hero challenges completed."""
        return await self._call(HEROPOINTS, name)

    async def inventory(self, name: str) -> Result[CharacterInventory]:
        return await self._call(INVENTORY, name)

    async def recipes(self, name: str) -> Result[CharacterRecipes]:
        return await self._call(RECIPES, name)

    async def sab(self, name: str) -> Result[SABProgress]:
        """Super Adventure Box progress."""
        return await self._call(SAB, name)

    async def skills(self, name: str) -> Result[CharacterSkills]:
        return await self._call(SKILLS, name)

    async def specializations(self, name: str) -> Result[CharacterSpecializations]:
        return await self._call(SPECIALIZATIONS, name)

    async def training(self, name: str) -> Result[CharacterTraining]:
        return await self._call(TRAINING, name)
