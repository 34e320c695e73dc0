from datetime import datetime
from typing import List, Optional

from pydantic import Field

from tyria.models.base import TyriaModel


class EquipmentAttributes(TyriaModel):
    """Stat summary of an item. The API uses PascalCase keys."""

    power: int = Field(0, alias="Power")
    precision: int = Field(0, alias="Precision")
    toughness: int = Field(0, alias="Toughness")
    vitality: int = Field(0, alias="Vitality")
    condition_damage: int = Field(0, alias="ConditionDamage")
    condition_duration: int = Field(0, alias="ConditionDuration")
    critical_damage: int = Field(0, alias="CritDamage")
    healing: int = Field(0, alias="Healing")
    boon_duration: int = Field(0, alias="BoonDuration")


class EquipmentStats(TyriaModel):
    id: int = Field(description="Itemstat ID")
    attributes: Optional[EquipmentAttributes] = None


class Equipment(TyriaModel):
    id: int = Field(description="Item ID")
    slot: str = Field(description="Slot the item is equipped in")
    infusions: List[int] = Field(default_factory=list)
    upgrades: List[int] = Field(default_factory=list)
    skin: int = 0
    stats: Optional[EquipmentStats] = None
    binding: str = ""
    charges: int = 0
    bound_to: str = ""
    dyes: List[Optional[int]] = Field(default_factory=list, description="Selected dyes, None where unset")


class BagSlot(TyriaModel):
    id: int
    count: int = Field(description="Stack size (1-250)")
    infusions: List[int] = Field(default_factory=list)
    upgrades: List[int] = Field(default_factory=list)
    skin: int = 0
    stats: Optional[EquipmentStats] = None
    binding: str = ""
    bound_to: str = ""


class Bag(TyriaModel):
    id: int = Field(description="Item ID of the bag")
    size: int = Field(description="Number of slots")
    inventory: List[Optional[BagSlot]] = Field(default_factory=list, description="Slots, None where empty")


class CraftingDiscipline(TyriaModel):
    discipline: str
    rating: int
    active: bool


class CharacterPvPEquipment(TyriaModel):
    amulet: int
    rune: int
    sigils: List[Optional[int]]


class CharacterSkillSet(TyriaModel):
    heal: int
    utilities: List[int]
    elite: int


class CharacterSkillSets(TyriaModel):
    pve: CharacterSkillSet
    pvp: CharacterSkillSet
    wvw: CharacterSkillSet


class CharacterSpecialization(TyriaModel):
    id: int
    traits: List[int]


class CharacterSpecializationSet(TyriaModel):
    pve: List[CharacterSpecialization]
    pvp: List[CharacterSpecialization]
    wvw: List[CharacterSpecialization]


class CharacterSkillTree(TyriaModel):
    id: int
    spent: int = Field(description="Hero points spent in this tree")
    done: bool


class CharacterWvWAbility(TyriaModel):
    id: int
    rank: int


class CharacterCore(TyriaModel):
    name: str
    race: str
    gender: str
    profession: str
    level: int
    guild: str = Field("", description="Represented guild ID, if any")
    age: int = Field(description="Seconds played")
    created: datetime
    deaths: int
    title: int = Field(0, description="Selected title ID")


class Character(CharacterCore):
    backstory: List[str] = Field(default_factory=list, description="Backstory answer IDs")
    crafting: List[CraftingDiscipline]
    equipment: List[Equipment]
    equipment_pvp: CharacterPvPEquipment
    bags: List[Optional[Bag]]
    recipes: List[int]
    skills: CharacterSkillSets
    specializations: CharacterSpecializationSet
    training: List[CharacterSkillTree]
    wvw_abilities: List[CharacterWvWAbility]


class CharacterBackstory(TyriaModel):
    backstory: List[str]


class CharacterCrafting(TyriaModel):
    crafting: List[CraftingDiscipline] = Field(default_factory=list)


class CharacterEquipment(TyriaModel):
    equipment: List[Equipment] = Field(default_factory=list)


class CharacterInventory(TyriaModel):
    bags: List[Optional[Bag]] = Field(default_factory=list)


class CharacterRecipes(TyriaModel):
    recipes: List[int] = Field(default_factory=list)


class CharacterSkills(TyriaModel):
    skills: CharacterSkillSets


class CharacterSpecializations(TyriaModel):
    specializations: CharacterSpecializationSet


class CharacterTraining(TyriaModel):
    training: List[CharacterSkillTree] = Field(default_factory=list)


# Super Adventure Box

class SABZone(TyriaModel):
    id: int
    mode: str = Field(description="Difficulty cleared")
    world: int
    zone: int


class SABUnlock(TyriaModel):
    id: int
    name: str


class SABSong(TyriaModel):
    id: int
    name: str


class SABProgress(TyriaModel):
    zones: List[SABZone] = Field(default_factory=list)
    unlocks: List[SABUnlock] = Field(default_factory=list)
    songs: List[SABSong] = Field(default_factory=list)
