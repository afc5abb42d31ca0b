"""Inventory table helpers: listing, filtering and saving items of any kind."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Union

from database import InventoryStore, InvalidFilterError, ItemReferenceError
from models import ITEM_KINDS

logger = logging.getLogger(__name__)

# Column headers of the inventory table, in display order
COLUMNS = [
    "Item Number", "Name", "Description", "Type",
    "Units in Stock", "Unit Cost", "Manufacture", "Release Date",
]


def table_row(obj) -> Dict[str, Any]:
    item = obj.item
    return {
        "item_number": item.item_number,
        "name": item.product_name,
        "description": item.product_description,
        "type": obj.kind,
        "units_in_stock": item.units_in_stock,
        "unit_cost": item.unit_cost,
        "manufacture": item.manufacture,
        "release_date": item.release_date.isoformat(),
    }


class InventoryTable:
    def __init__(self, store: InventoryStore):
        self.store = store

    def mapper_for(self, obj_or_kind: Union[str, Any]):
        mappers = self.store.subtype_mappers()
        if isinstance(obj_or_kind, str):
            kind = obj_or_kind
        else:
            kind = getattr(obj_or_kind, "kind", None)
            if kind not in ITEM_KINDS or not isinstance(obj_or_kind, ITEM_KINDS[kind]):
                raise ItemReferenceError(
                    f"No editor for {type(obj_or_kind).__name__} items"
                )
        if kind not in mappers:
            raise ItemReferenceError(f"Unknown item type: {kind}")
        return mappers[kind]

    def rows(self) -> List[Any]:
        found: List[Any] = []
        for mapper in self.store.subtype_mappers().values():
            found.extend(mapper.get_all())
        return sorted(found, key=lambda obj: obj.item_number)

    def filter(self, pattern: str) -> List[Any]:
        """Items whose name or description matches ``pattern`` (a regex)."""
        if not pattern:
            raise InvalidFilterError("No filter provided.")
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            raise InvalidFilterError(f"Invalid filter provided: {exc}") from exc
        return [
            obj for obj in self.rows()
            if regex.search(obj.item.product_name or "")
            or regex.search(obj.item.product_description or "")
        ]

    def find(self, kind: str, item_number: int):
        return self.mapper_for(kind).find(item_number)

    def save(self, obj) -> int:
        mapper = self.mapper_for(obj)
        if obj.item.is_saved:
            mapper.update(obj)
            logger.info("inventory save updated kind=%s item_number=%s", obj.kind, obj.item_number)
        else:
            mapper.add(obj)
            logger.info("inventory save added kind=%s item_number=%s", obj.kind, obj.item_number)
        return obj.item_number

    def delete(self, obj) -> None:
        self.mapper_for(obj).delete(obj)
        logger.info("inventory delete kind=%s item_number=%s", obj.kind, obj.item_number)


__all__ = ["COLUMNS", "InventoryTable", "table_row"]
