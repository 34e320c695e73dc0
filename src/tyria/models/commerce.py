from datetime import datetime
from typing import List, Optional

from pydantic import Field

from tyria.models.base import TyriaModel


class ExchangeRate(TyriaModel):
    coins_per_gem: int = Field(description="Coins paid or received per gem")
    quantity: int = Field(description="Gems or coins obtained for the requested quantity")


class TPItemListing(TyriaModel):
    listings: int = Field(description="Individual listings at this price")
    unit_price: int = Field(description="Price in coins")
    quantity: int


class TPItem(TyriaModel):
    """Order book for an item on the trading post."""

    id: int
    buys: List[TPItemListing] = Field(default_factory=list, description="Ascending from lowest buy order")
    sells: List[TPItemListing] = Field(default_factory=list, description="Ascending from lowest sell offer")


class TPItemInfoPrice(TyriaModel):
    unit_price: int = Field(description="Highest buy order or lowest sell offer in coins")
    quantity: int


class TPItemInfo(TyriaModel):
    """Aggregated prices for an item on the trading post."""

    id: int
    whitelisted: bool = Field(False, description="Tradeable by free to play accounts")
    buys: TPItemInfoPrice
    sells: TPItemInfoPrice


class TPTransaction(TyriaModel):
    id: int
    item_id: int
    price: int = Field(description="Price in coins")
    quantity: int
    created: datetime
    purchased: Optional[datetime] = Field(None, description="Only set for past transactions")
