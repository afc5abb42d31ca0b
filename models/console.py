from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .item import Item


@dataclass
class Console:
    item: Item = field(default_factory=Item)
    color: str = ""
    disk_space: str = ""
    model_number: str = ""
    included_game_ids: List[int] = field(default_factory=list)
    controllers_included: int = 1

    kind = "console"

    @property
    def item_number(self) -> int:
        return self.item.item_number
