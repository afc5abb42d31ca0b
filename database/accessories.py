from __future__ import annotations

from models import Accessory
from .subtypes import SubtypeMapper


class AccessoryMapper(SubtypeMapper):
    table = "accessory"
    model = Accessory
    key_column = "accessoryId"
    create_table_sql = """
        CREATE TABLE IF NOT EXISTS accessory (
            accessoryId INTEGER PRIMARY KEY REFERENCES item(itemId) ON DELETE RESTRICT,
            color TEXT NOT NULL,
            consoleId INTEGER REFERENCES console(consoleId) ON DELETE RESTRICT,
            modelNumber TEXT NOT NULL
        )
    """
    insert_sql = (
        "INSERT INTO accessory (accessoryId, color, consoleId, modelNumber) "
        "VALUES (:key, :color, :console_id, :model_number)"
    )
    update_sql = (
        "UPDATE accessory SET color = :color, consoleId = :console_id, "
        "modelNumber = :model_number WHERE accessoryId = :key"
    )

    def to_params(self, accessory: Accessory) -> dict:
        return {
            "color": accessory.color,
            "console_id": accessory.platform_id,
            "model_number": accessory.model_number,
        }

    def from_row(self, row, item) -> Accessory:
        return Accessory(
            item=item,
            color=row.color,
            platform_id=row.consoleId,
            model_number=row.modelNumber,
        )

    get_accessories = SubtypeMapper.get_all
    add_accessory = SubtypeMapper.add
    update_accessory = SubtypeMapper.update
    delete_accessory = SubtypeMapper.delete
