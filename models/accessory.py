from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .item import Item


@dataclass
class Accessory:
    item: Item = field(default_factory=Item)
    color: str = ""
    model_number: str = ""
    platform_id: Optional[int] = None      # item number of a console

    kind = "accessory"

    @property
    def item_number(self) -> int:
        return self.item.item_number
