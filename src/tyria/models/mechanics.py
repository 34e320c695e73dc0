from typing import Dict, List, Optional, Union

from pydantic import Field

from tyria.models.base import TyriaModel


class MasteryLevel(TyriaModel):
    name: str
    description: str
    instruction: str
    icon: str
    point_cost: int = Field(description="Mastery points needed to unlock")
    exp_cost: int = Field(description="Experience needed to train, non-cumulative")


class Mastery(TyriaModel):
    id: int
    name: str
    requirement: str = Field(description="Requirement to unlock the track")
    order: int
    background: str
    region: str
    levels: List[MasteryLevel]


class Outfit(TyriaModel):
    id: int
    name: str
    icon: str
    unlock_items: List[int] = Field(description="Item IDs that unlock this outfit")


class PetSkill(TyriaModel):
    id: int


class Pet(TyriaModel):
    id: int
    name: str
    description: str
    icon: str
    skills: List[PetSkill]


class Race(TyriaModel):
    id: str
    name: str
    skills: List[int] = Field(description="Racial skill IDs")


class Legend(TyriaModel):
    """Revenant legend."""

    id: str
    swap: int = Field(description="Profession skill ID")
    heal: int
    elite: int
    utilities: List[int]


class Specialization(TyriaModel):
    id: int
    name: str
    profession: str
    elite: bool
    icon: str
    background: str
    minor_traits: List[int]
    major_traits: List[int]


# Professions

class ProfessionSkill(TyriaModel):
    id: int
    slot: str
    skill_type: str = Field(alias="type")


class ProfessionTrainingItem(TyriaModel):
    cost: int
    item_type: str = Field(alias="type", description="Skill or Trait")
    skill_id: int = 0
    trait_id: int = 0


class ProfessionTraining(TyriaModel):
    id: int = Field(description="ID of the skill or specialization named by category")
    category: str = Field(description="Skills, Specializations or EliteSpecializations")
    name: str
    track: List[ProfessionTrainingItem]


class ProfessionWeaponSkill(TyriaModel):
    id: int
    slot: str
    offhand: str = ""
    attunement: str = Field("", description="Required Elementalist attunement")
    source: str = Field("", description="Profession the skill was stolen from (Thief)")


class ProfessionWeapon(TyriaModel):
    specialization: int = Field(0, description="Specialization required to wield the weapon")
    skills: List[ProfessionWeaponSkill]
    flags: List[str]


class Profession(TyriaModel):
    id: str
    name: str
    icon: str
    icon_big: str
    specializations: List[int]
    training: List[ProfessionTraining]
    flags: List[str] = Field(default_factory=list, description="NoRacialSkills, NoWeaponSwap")
    skills: List[ProfessionSkill]
    weapons: Dict[str, ProfessionWeapon]


# Skill and trait facts

class FactPrefix(TyriaModel):
    """Icon shown before a PrefixedBuff fact."""

    text: str
    icon: str
    status: str
    description: str


class Fact(TyriaModel):
    """
    Effect description shared by skill and trait facts.

    Which optional fields are set depends on ``fact_type``: AttributeAdjust,
    Buff, ComboField, ComboFinisher, Damage, Distance, Duration, Heal,
    HealingAdjust, NoData, Number, Percent, PrefixedBuff, Radius, Range,
    Recharge, Time or Unblockable.
    """

    text: str = ""
    icon: str = ""
    fact_type: str = Field(alias="type")
    # Unblockable facts carry a boolean here
    value: Optional[Union[int, bool]] = None
    target: Optional[str] = Field(None, description="Attribute adjusted; Ferocity is CritDamage")
    status: Optional[str] = None
    description: Optional[str] = None
    apply_count: Optional[int] = None
    duration: Optional[int] = Field(None, description="Seconds")
    field_type: Optional[str] = None
    finisher_type: Optional[str] = None
    percent: Optional[float] = None
    hit_count: Optional[int] = None
    distance: Optional[int] = None
    prefix: Optional[FactPrefix] = None


class TraitedFactMixin(TyriaModel):
    requires_trait: int = Field(description="Trait that must be selected for this fact to apply")
    overrides: Optional[int] = Field(
        None,
        description="Index of the fact this one replaces; appended when absent",
    )


class SkillFact(Fact):
    dmg_multiplier: Optional[float] = None


class SkillTraitedFact(SkillFact, TraitedFactMixin):
    pass


class TraitFact(Fact):
    source: Optional[str] = Field(None, description="Attribute converted from (BuffConversion)")


class TraitTraitedFact(TraitFact, TraitedFactMixin):
    pass


class Skill(TyriaModel):
    id: int
    name: str
    description: str = ""
    icon: str
    chat_link: str
    skill_type: str = Field(alias="type", description="Bundle, Elite, Heal, Profession, Utility or Weapon")
    weapon_type: str = Field("None", description="Weapon the skill is on, or None")
    professions: List[str]
    slot: str
    facts: List[SkillFact] = Field(default_factory=list)
    traited_facts: List[SkillTraitedFact] = Field(default_factory=list)


class Trait(TyriaModel):
    id: int
    name: str
    icon: str
    description: str
    specialization: int
    tier: int = Field(description="Adept, Master or Grandmaster on a 0-3 scale")
    slot: str = Field(description="Major or Minor")
    facts: List[TraitFact] = Field(default_factory=list)
    traited_facts: List[TraitTraitedFact] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
