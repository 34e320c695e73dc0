from typing import List

from pydantic import Field

from tyria.models.base import TyriaModel


class AchievementTier(TyriaModel):
    """Item count needed to unlock a tier and the points it awards."""

    count: int
    points: int


class AchievementReward(TyriaModel):
    """
    Achievement reward.

    Reward types may be:

    - "Coins": uses ``count``
    - "Item": uses ``id`` and ``count``
    - "Mastery": uses ``id`` and ``region``
    - "Title": uses ``id``
    """

    reward_type: str = Field(alias="type")
    id: int = 0
    count: int = 0
    region: str = ""


class AchievementBit(TyriaModel):
    bit_type: str = Field(alias="type", description="Text, Item, Minipet or Skin")
    id: int = Field(0, description="Item, mini or skin ID, if applicable")
    text: str = Field("", description="Text for the bit if type is Text")


class Achievement(TyriaModel):
    id: int = Field(description="Achievement ID")
    icon: str = Field("", description="Icon URL")
    name: str
    description: str
    requirement: str = Field(description="Requirement as listed in-game")
    locked_text: str = Field(description="Description before unlocking")
    achievement_type: str = Field(alias="type")
    flags: List[str]
    tiers: List[AchievementTier]
    prerequisites: List[int] = Field(default_factory=list, description="Achievement IDs required first")
    rewards: List[AchievementReward] = Field(default_factory=list)
    bits: List[AchievementBit] = Field(default_factory=list)
    point_cap: int = Field(0, description="Maximum AP a repeatable achievement can award")


class AchievementCategory(TyriaModel):
    id: int
    name: str
    description: str
    order: int = Field(description="Sort order within its group, lowest first")
    icon: str
    achievements: List[int] = Field(description="Achievement IDs in this category")


class AchievementGroup(TyriaModel):
    id: str
    name: str
    description: str
    order: int = Field(description="Sort order among groups, lowest first")
    categories: List[int] = Field(description="Category IDs in this group")


class DailyAchievementLevel(TyriaModel):
    min: int
    max: int


class DailyAchievement(TyriaModel):
    id: int
    level: DailyAchievementLevel = Field(description="Level range that sees this daily")
    required_access: List[str] = Field(description="Campaigns required to see this daily")


class DailyAchievements(TyriaModel):
    pve: List[DailyAchievement]
    pvp: List[DailyAchievement]
    wvw: List[DailyAchievement]
    fractals: List[DailyAchievement]
    special: List[DailyAchievement]
