from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .item import Item

ESRB_RATINGS = ["E - Everyone", "E - Everyone 10+", "Teen", "M - Mature 17+", "A - Adult only"]


@dataclass
class Game:
    item: Item = field(default_factory=Item)
    number_of_discs: int = 1
    number_of_players: int = 1
    platform_id: Optional[int] = None      # item number of a console
    esrb_rating: str = ESRB_RATINGS[0]

    kind = "game"

    @property
    def item_number(self) -> int:
        return self.item.item_number
