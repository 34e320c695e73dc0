from datetime import datetime
from typing import List

from pydantic import Field

from tyria.models.base import TyriaModel


class APIKey(TyriaModel):
    id: str = Field(description="Requested API key")
    name: str = Field(description="Name given to the key by the account owner (not escaped)")
    permissions: List[str] = Field(description="Scopes granted to the key")


class Account(TyriaModel):
    id: str = Field(description="Unique persistent account GUID")
    age: int = Field(description="Age of the account in seconds")
    name: str = Field(description="Unique account name with numerical suffix")
    world: int = Field(description="Home world ID")
    guilds: List[str] = Field(default_factory=list, description="Guilds the account belongs to")
    guild_leader: List[str] = Field(default_factory=list, description="Guilds the account leads")
    created: datetime = Field(description="Account creation timestamp")
    access: List[str] = Field(description="Game content the account has access to")
    commander: bool = Field(description="True if the player bought a commander tag")
    # progression scope
    fractal_level: int = 0
    daily_ap: int = 0
    monthly_ap: int = 0
    wvw_rank: int = 0


class AccountAchievement(TyriaModel):
    id: int = Field(description="Achievement ID")
    current: int = Field(0, description="Current progress towards the achievement")
    max: int = Field(0, description="Amount needed to complete; most WvW achievements use -1")
    done: bool = Field(description="Whether the achievement is done")
    repeated: int = Field(0, description="Times completed, if repeatable")
    bits: List[int] = Field(default_factory=list, description="Progress bits")


class AccountCurrency(TyriaModel):
    id: int = Field(description="Currency ID")
    value: int = Field(description="Amount held")


class AccountFinisher(TyriaModel):
    id: int = Field(description="Finisher ID")
    permanent: bool = Field(description="Permanent or temporary unlock")
    quantity: int = Field(0, description="Remaining uses if not permanent")


class AccountMastery(TyriaModel):
    id: int
    level: int


class AccountMaterial(TyriaModel):
    id: int = Field(description="Item ID of the material")
    category: int = Field(description="Material category")
    count: int = Field(description="Amount stored in the vault")


class BankSlot(TyriaModel):
    id: int = Field(description="Item ID")
    count: int = Field(description="Stack size")
    skin: int = Field(0, description="Applied skin, if different from the default")
    upgrades: List[int] = Field(default_factory=list, description="Rune or sigil item IDs")
    infusions: List[int] = Field(default_factory=list, description="Infusion item IDs")
    binding: str = Field("", description="Account or Character")
    charges: int = Field(0, description="Remaining charges")
    bound_to: str = Field("", description="Character the item is bound to")


class Cat(TyriaModel):
    id: int
    hint: str = ""


class InventorySlot(TyriaModel):
    id: int = Field(description="Item ID")
    count: int = Field(description="Stack size")
    binding: str = Field("", description="Scope of the slot")
