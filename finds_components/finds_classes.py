from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional

from finds_components.card_utils.deck import validate_deck

class Rarity(str, Enum):
    LEGENDARY = "Legendary"
    EXTRAORDINARY = "Extraordinary"
    VERY_RARE = "Very Rare"
    RARE = "Rare"
    UNCOMMON = "Uncommon"
    COMMON = "Common"

# rarest first; also the sort key for detect()
RARITY_ORDER: Dict[Rarity, int] = {rarity: i for i, rarity in enumerate(Rarity)}

# badge colour per rarity
RARITY_COLORS: Dict[Rarity, str] = {
    Rarity.COMMON: "#6b7280",
    Rarity.UNCOMMON: "#34d399",
    Rarity.RARE: "#60a5fa",
    Rarity.VERY_RARE: "#a78bfa",
    Rarity.EXTRAORDINARY: "#fb7185",
    Rarity.LEGENDARY: "#fbbf24",
}

class Find(BaseModel):
    """One detected pattern instance."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    icon: str
    rarity: Rarity
    positions: List[int] = Field(min_length=1)
    color: str = ""
    # Filled in by the viewer-history hook in detect(); detectors leave it unset.
    is_new: Optional[bool] = Field(default=None, alias="isNew")

    def model_post_init(self, __context) -> None:
        if not self.color:
            self.color = RARITY_COLORS[self.rarity]

    def overlaps(self, other: "Find") -> bool:
        return not set(self.positions).isdisjoint(other.positions)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

class DetectRequest(BaseModel):
    deck: List[str]

    @field_validator("deck")
    @classmethod
    def check_deck(cls, deck: List[str]) -> List[str]:
        # InvalidDeck is a ValueError, so pydantic reports it as a ValidationError
        return validate_deck(deck)

class DetectResponse(BaseModel):
    finds: List[Find]
    factory_count: int
    rarity_counts: Dict[str, int]

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
