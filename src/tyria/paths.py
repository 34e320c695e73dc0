"""
Endpoint path templates for the v2 API.

Every remote operation the client knows about is a member of ``Endpoint``.
A template holds at most one ``{}`` substitution point, either a path
segment (``/v2/characters/{}``) or the whole query string
(``/v2/achievements?{}``).
"""

from enum import Enum, unique
from typing import Optional
from urllib.parse import quote


@unique
class Endpoint(str, Enum):
    """Closed set of endpoint templates."""

    # Account (authenticated)
    ACCOUNT = "/v2/account"
    ACCOUNT_ACHIEVEMENTS = "/v2/account/achievements"
    ACCOUNT_BANK = "/v2/account/bank"
    ACCOUNT_DUNGEONS = "/v2/account/dungeons"
    ACCOUNT_DYES = "/v2/account/dyes"
    ACCOUNT_FINISHERS = "/v2/account/finishers"
    ACCOUNT_CATS = "/v2/account/home/cats"
    ACCOUNT_NODES = "/v2/account/home/nodes"
    ACCOUNT_INVENTORY = "/v2/account/inventory"
    ACCOUNT_MASTERIES = "/v2/account/masteries"
    ACCOUNT_MATERIALS = "/v2/account/materials"
    ACCOUNT_MINIS = "/v2/account/minis"
    ACCOUNT_OUTFITS = "/v2/account/outfits"
    ACCOUNT_RAIDS = "/v2/account/raids"
    ACCOUNT_RECIPES = "/v2/account/recipes"
    ACCOUNT_SKINS = "/v2/account/skins"
    ACCOUNT_TITLES = "/v2/account/titles"
    ACCOUNT_WALLET = "/v2/account/wallet"
    TOKEN_INFO = "/v2/tokeninfo"

    # Achievements
    ACHIEVEMENTS = "/v2/achievements"
    ACHIEVEMENTS_BY_ID = "/v2/achievements?{}"
    DAILY_ACHIEVEMENTS = "/v2/achievements/daily"
    DAILY_ACHIEVEMENTS_TOMORROW = "/v2/achievements/daily/tomorrow"
    ACHIEVEMENT_GROUPS = "/v2/achievements/groups"
    ACHIEVEMENT_GROUPS_BY_ID = "/v2/achievements/groups?{}"
    ACHIEVEMENT_CATEGORIES = "/v2/achievements/categories"
    ACHIEVEMENT_CATEGORIES_BY_ID = "/v2/achievements/categories?{}"

    # Characters (authenticated)
    CHARACTERS = "/v2/characters"
    CHARACTER = "/v2/characters/{}"
    CHARACTER_BACKSTORY = "/v2/characters/{}/backstory"
    CHARACTER_CORE = "/v2/characters/{}/core"
    CHARACTER_CRAFTING = "/v2/characters/{}/crafting"
    CHARACTER_EQUIPMENT = "/v2/characters/{}/equipment"
    CHARACTER_HEROPOINTS = "/v2/characters/{}/heropoints"
    CHARACTER_INVENTORY = "/v2/characters/{}/inventory"
    CHARACTER_RECIPES = "/v2/characters/{}/recipes"
    CHARACTER_SAB = "/v2/characters/{}/sab"
    CHARACTER_SKILLS = "/v2/characters/{}/skills"
    CHARACTER_SPECIALIZATIONS = "/v2/characters/{}/specializations"
    CHARACTER_TRAINING = "/v2/characters/{}/training"

    # Commerce
    EXCHANGE = "/v2/commerce/exchange"
    EXCHANGE_COINS = "/v2/commerce/exchange/coins?{}"
    EXCHANGE_GEMS = "/v2/commerce/exchange/gems?{}"
    LISTINGS = "/v2/commerce/listings"
    LISTINGS_BY_ID = "/v2/commerce/listings?{}"
    PRICES = "/v2/commerce/prices"
    PRICES_BY_ID = "/v2/commerce/prices?{}"
    TRANSACTIONS_CURRENT_BUY = "/v2/commerce/transactions/current/buys"
    TRANSACTIONS_CURRENT_SELL = "/v2/commerce/transactions/current/sells"
    TRANSACTIONS_HISTORY_BUY = "/v2/commerce/transactions/history/buys"
    TRANSACTIONS_HISTORY_SELL = "/v2/commerce/transactions/history/sells"

    # Game mechanics
    MASTERIES = "/v2/masteries"
    MASTERIES_BY_ID = "/v2/masteries?{}"
    OUTFITS = "/v2/outfits"
    OUTFITS_BY_ID = "/v2/outfits?{}"
    PETS = "/v2/pets"
    PETS_BY_ID = "/v2/pets?{}"
    PROFESSIONS = "/v2/professions"
    PROFESSIONS_BY_ID = "/v2/professions?{}"
    RACES = "/v2/races"
    RACES_BY_ID = "/v2/races?{}"
    SPECIALIZATIONS = "/v2/specializations"
    SPECIALIZATIONS_BY_ID = "/v2/specializations?{}"
    SKILLS = "/v2/skills"
    SKILLS_BY_ID = "/v2/skills?{}"
    TRAITS = "/v2/traits"
    TRAITS_BY_ID = "/v2/traits?{}"
    LEGENDS = "/v2/legends"
    LEGENDS_BY_ID = "/v2/legends?{}"

    @property
    def template(self) -> str:
        return self.value

    @property
    def is_static(self) -> bool:
        """True if the template has no substitution point."""
        return "{}" not in self.value

    @property
    def takes_query(self) -> bool:
        """True if the substitution point is the query string."""
        return self.value.endswith("?{}")

    def resolve(self, param: Optional[str] = None) -> str:
        """Build the relative request path for this endpoint."""
        return resolve(self, param)


def resolve(endpoint: Endpoint, param: Optional[str] = None) -> str:
    """
    Build a relative request path from an endpoint template.

    Args:
        endpoint: Endpoint to resolve
        param: For query endpoints, an encoded fragment such as ``ids=1,2``
            (see ``tyria.params``). For path endpoints, the raw identifier,
            which is percent-encoded here.

    Returns:
        Path relative to the API origin

    Raises:
        ValueError: If ``param`` is missing for a parameterized template or
            given for a static one
    """
    if endpoint.is_static:
        if param is not None:
            raise ValueError(f"{endpoint.name} takes no parameter")
        return endpoint.template

    if param is None:
        raise ValueError(f"{endpoint.name} requires a parameter")

    if endpoint.takes_query:
        return endpoint.template.format(param)
    return endpoint.template.format(quote(param, safe=""))
