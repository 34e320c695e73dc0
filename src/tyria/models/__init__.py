"""Response models for the v2 API."""

from tyria.models.base import TyriaModel
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
from tyria.models.achievements import (
    Achievement,
    AchievementBit,
    AchievementCategory,
    AchievementGroup,
    AchievementReward,
    AchievementTier,
    DailyAchievement,
    DailyAchievementLevel,
    DailyAchievements,
)
from tyria.models.characters import (
    Bag,
    BagSlot,
    Character,
    CharacterBackstory,
    CharacterCore,
    CharacterCrafting,
    CharacterEquipment,
    CharacterInventory,
    CharacterPvPEquipment,
    CharacterRecipes,
    CharacterSkillSet,
    CharacterSkillSets,
    CharacterSkillTree,
    CharacterSkills,
    CharacterSpecialization,
    CharacterSpecializationSet,
    CharacterSpecializations,
    CharacterTraining,
    CharacterWvWAbility,
    CraftingDiscipline,
    Equipment,
    EquipmentAttributes,
    EquipmentStats,
    SABProgress,
    SABSong,
    SABUnlock,
    SABZone,
)
from tyria.models.commerce import (
    ExchangeRate,
    TPItem,
    TPItemInfo,
    TPItemInfoPrice,
    TPItemListing,
    TPTransaction,
)
from tyria.models.mechanics import (
    Fact,
    FactPrefix,
    Legend,
    Mastery,
    MasteryLevel,
    Outfit,
    Pet,
    PetSkill,
    Profession,
    ProfessionSkill,
    ProfessionTraining,
    ProfessionTrainingItem,
    ProfessionWeapon,
    ProfessionWeaponSkill,
    Race,
    Skill,
    SkillFact,
    SkillTraitedFact,
    Specialization,
    Trait,
    TraitFact,
    TraitTraitedFact,
)

__all__ = [
    "TyriaModel",
    # Account
    "APIKey",
    "Account",
    "AccountAchievement",
    "AccountCurrency",
    "AccountFinisher",
    "AccountMastery",
    "AccountMaterial",
    "BankSlot",
    "Cat",
    "InventorySlot",
    # Achievements
    "Achievement",
    "AchievementBit",
    "AchievementCategory",
    "AchievementGroup",
    "AchievementReward",
    "AchievementTier",
    "DailyAchievement",
    "DailyAchievementLevel",
    "DailyAchievements",
    # Characters
    "Bag",
    "BagSlot",
    "Character",
    "CharacterBackstory",
    "CharacterCore",
    "CharacterCrafting",
    "CharacterEquipment",
    "CharacterInventory",
    "CharacterPvPEquipment",
    "CharacterRecipes",
    "CharacterSkillSet",
    "CharacterSkillSets",
    "CharacterSkillTree",
    "CharacterSkills",
    "CharacterSpecialization",
    "CharacterSpecializationSet",
    "CharacterSpecializations",
    "CharacterTraining",
    "CharacterWvWAbility",
    "CraftingDiscipline",
    "Equipment",
    "EquipmentAttributes",
    "EquipmentStats",
    "SABProgress",
    "SABSong",
    "SABUnlock",
    "SABZone",
    # Commerce
    "ExchangeRate",
    "TPItem",
    "TPItemInfo",
    "TPItemInfoPrice",
    "TPItemListing",
    "TPTransaction",
    # Game mechanics
    "Fact",
    "FactPrefix",
    "Legend",
    "Mastery",
    "MasteryLevel",
    "Outfit",
    "Pet",
    "PetSkill",
    "Profession",
    "ProfessionSkill",
    "ProfessionTraining",
    "ProfessionTrainingItem",
    "ProfessionWeapon",
    "ProfessionWeaponSkill",
    "Race",
    "Skill",
    "SkillFact",
    "SkillTraitedFact",
    "Specialization",
    "Trait",
    "TraitFact",
    "TraitTraitedFact",
]
