"""
Endpoint clients, one per API area.
"""

from tyria.endpoints.account import AccountClient
from tyria.endpoints.achievements import (
    AchievementCategoriesClient,
    AchievementGroupsClient,
    AchievementsClient,
)
from tyria.endpoints.characters import CharactersClient
from tyria.endpoints.commerce import CommerceClient, ListingsClient, PricesClient
from tyria.endpoints.mechanics import (
    LegendsClient,
    MasteriesClient,
    OutfitsClient,
    PetsClient,
    ProfessionsClient,
    RacesClient,
    SkillsClient,
    SpecializationsClient,
    TraitsClient,
)

__all__ = [
    "AccountClient",
    "AchievementCategoriesClient",
    "AchievementGroupsClient",
    "AchievementsClient",
    "CharactersClient",
    "CommerceClient",
    "LegendsClient",
    "ListingsClient",
    "MasteriesClient",
    "OutfitsClient",
    "PetsClient",
    "PricesClient",
    "ProfessionsClient",
    "RacesClient",
    "SkillsClient",
    "SpecializationsClient",
    "TraitsClient",
]
