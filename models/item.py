"""Base inventory item shared by every product kind.

An ``Item`` only knows its own fields. Games, accessories and consoles wrap
one (see ``game.py`` and friends) instead of inheriting from it, so the same
object can be handed to the item mapper for the shared columns.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass, field


@dataclass
class PackageDimension:
    height: float = 0.0
    width: float = 0.0
    depth: float = 0.0
    weight: float = 0.0

    def __post_init__(self):
        for name in ("height", "width", "depth", "weight"):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number")
            if value < 0:
                raise ValueError(f"{name} cannot be negative")
            setattr(self, name, value)


@dataclass
class Item:
    item_number: int = 0
    product_name: str = ""
    product_description: str = ""
    units_in_stock: int = 0
    unit_cost: float = 0.0
    manufacture: str = ""
    release_date: dt.date = field(default_factory=dt.date.today)
    package_dimension: PackageDimension = field(default_factory=PackageDimension)

    def __post_init__(self):
        if self.units_in_stock < 0:
            raise ValueError("units_in_stock cannot be negative")
        if not math.isfinite(self.unit_cost):
            raise ValueError("unit_cost must be a finite number")
        if self.unit_cost < 0:
            raise ValueError("unit_cost cannot be negative")

    @property
    def is_saved(self) -> bool:
        # 0 or negative means the row was never inserted
        return self.item_number > 0
