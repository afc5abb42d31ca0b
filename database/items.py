"""Mapper for the ``item`` table holding the columns every product shares."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

import sqlalchemy as sa

from models import Item, PackageDimension
from .errors import ItemReferenceError
from .manufactures import ManufactureMapper
from .mapper import EntityMapper

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y/%m/%d"


def _check_item(item) -> Item:
    if item is None:
        raise ItemReferenceError("Item cannot be None")
    if not isinstance(item, Item):
        raise ItemReferenceError(f"Expected an Item, got {type(item).__name__}")
    return item


class ItemMapper(EntityMapper):
    table = "item"
    create_table_sql = """
        CREATE TABLE IF NOT EXISTS item (
            itemId INTEGER PRIMARY KEY,
            name TEXT UNIQUE NOT NULL,
            description TEXT NOT NULL,
            manufactureId INTEGER NOT NULL REFERENCES manufacture(manufactureId),
            releaseDate TEXT NOT NULL,
            unitCost REAL DEFAULT 0.00 NOT NULL,
            unitsInStock INTEGER DEFAULT 0 NOT NULL,
            width REAL DEFAULT 0.000 NOT NULL,
            height REAL DEFAULT 0.000 NOT NULL,
            depth REAL DEFAULT 0.000 NOT NULL,
            weight REAL DEFAULT 0.000 NOT NULL
        )
    """

    def __init__(self, database, manufactures: ManufactureMapper):
        super().__init__(database)
        self.manufactures = manufactures

    def _params(self, item: Item) -> dict:
        manufacture = self.manufactures.add_manufacture(item.manufacture)
        dims = item.package_dimension or PackageDimension()
        return {
            "name": item.product_name,
            "description": item.product_description,
            "manufacture_id": manufacture.manufacture_id,
            "release_date": item.release_date.strftime(DATE_FORMAT),
            "unit_cost": float(item.unit_cost),
            "units_in_stock": int(item.units_in_stock),
            "width": dims.width,
            "height": dims.height,
            "depth": dims.depth,
            "weight": dims.weight,
        }

    def load_item(self, item: Item) -> bool:
        """Fill ``item`` from the row matching its ``item_number``.

        Returns False (leaving ``item`` untouched) when there is no such row.
        """
        _check_item(item)
        with self.database.connect() as conn:
            row = conn.execute(
                sa.text("SELECT * FROM item WHERE itemId = :item_id"),
                {"item_id": item.item_number},
            ).first()
        if row is None:
            return False

        manufacture = self.manufactures.find_manufacture(row.manufactureId)
        item.product_name = row.name
        item.product_description = row.description
        item.manufacture = manufacture.name if manufacture else ""
        item.release_date = dt.datetime.strptime(row.releaseDate, DATE_FORMAT).date()
        item.unit_cost = row.unitCost
        item.units_in_stock = row.unitsInStock
        item.package_dimension = PackageDimension(
            height=row.height, width=row.width, depth=row.depth, weight=row.weight
        )
        return True

    def find_item(self, item_number: int) -> Optional[Item]:
        item = Item(item_number=item_number)
        return item if self.load_item(item) else None

    def add_item(self, item: Item) -> int:
        """Insert ``item`` and store the new identity on it."""
        _check_item(item)
        params = self._params(item)
        with self.database.connect() as conn:
            result = conn.execute(
                sa.text(
                    "INSERT INTO item (name, description, manufactureId, releaseDate, unitCost, "
                    "unitsInStock, width, height, depth, weight) VALUES "
                    "(:name, :description, :manufacture_id, :release_date, :unit_cost, "
                    ":units_in_stock, :width, :height, :depth, :weight)"
                ),
                params,
            )
            item.item_number = result.lastrowid
        logger.info("add_item item_number=%s name=%s", item.item_number, item.product_name)
        return item.item_number

    def update_item(self, item: Item) -> None:
        _check_item(item)
        if not item.is_saved:
            raise ItemReferenceError("Item has not been saved yet and cannot be updated")
        params = self._params(item)
        params["item_id"] = item.item_number
        with self.database.connect() as conn:
            result = conn.execute(
                sa.text(
                    "UPDATE item SET name = :name, description = :description, "
                    "manufactureId = :manufacture_id, releaseDate = :release_date, "
                    "unitCost = :unit_cost, unitsInStock = :units_in_stock, width = :width, "
                    "height = :height, depth = :depth, weight = :weight "
                    "WHERE itemId = :item_id"
                ),
                params,
            )
            if result.rowcount != 1:
                raise ItemReferenceError(f"Item {item.item_number} not found")
        logger.info("update_item item_number=%s", item.item_number)

    def delete_item(self, item: Item) -> None:
        _check_item(item)
        with self.database.connect() as conn:
            result = conn.execute(
                sa.text("DELETE FROM item WHERE itemId = :item_id"),
                {"item_id": item.item_number},
            )
            deleted = result.rowcount
        logger.info("delete_item item_number=%s deleted=%s", item.item_number, deleted)
