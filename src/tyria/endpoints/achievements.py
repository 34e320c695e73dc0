"""
Achievement endpoints.
"""

from tyria.base import BulkEndpointClient, Route
from tyria.models.achievements import (
    Achievement,
    AchievementCategory,
    AchievementGroup,
    DailyAchievements,
)
from tyria.paths import Endpoint
from tyria.result import Result

DAILY = Route(Endpoint.DAILY_ACHIEVEMENTS, DailyAchievements)
DAILY_TOMORROW = Route(Endpoint.DAILY_ACHIEVEMENTS_TOMORROW, DailyAchievements)


class AchievementsClient(BulkEndpointClient[Achievement, int]):
    """
    Client for achievements.

    Example:
        ```python
        result = await client.achievements.get_many([1, 2, 3])
        ```
    """

    index = Endpoint.ACHIEVEMENTS
    lookup = Endpoint.ACHIEVEMENTS_BY_ID
    model = Achievement

    async def daily(self) -> Result[DailyAchievements]:
        """Today's daily achievements."""
        return await self._call(DAILY)

    async def daily_tomorrow(self) -> Result[DailyAchievements]:
        """Tomorrow's daily achievements."""
        return await self._call(DAILY_TOMORROW)


class AchievementGroupsClient(BulkEndpointClient[AchievementGroup, str]):
    """Achievement groups, keyed by GUID."""

    index = Endpoint.ACHIEVEMENT_GROUPS
    lookup = Endpoint.ACHIEVEMENT_GROUPS_BY_ID
    model = AchievementGroup
    id_type = str


class AchievementCategoriesClient(BulkEndpointClient[AchievementCategory, int]):
    index = Endpoint.ACHIEVEMENT_CATEGORIES
    lookup = Endpoint.ACHIEVEMENT_CATEGORIES_BY_ID
    model = AchievementCategory
