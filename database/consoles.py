from __future__ import annotations

from typing import List, Optional

from models import Console
from .subtypes import SubtypeMapper


def join_game_ids(game_ids) -> str:
    return ",".join(str(int(g)) for g in (game_ids or []))


def split_game_ids(text: Optional[str]) -> List[int]:
    if not text:
        return []
    return [int(part) for part in text.split(",") if part.strip()]


class ConsoleMapper(SubtypeMapper):
    table = "console"
    model = Console
    key_column = "consoleId"
    create_table_sql = """
        CREATE TABLE IF NOT EXISTS console (
            consoleId INTEGER PRIMARY KEY REFERENCES item(itemId) ON DELETE RESTRICT,
            color TEXT NOT NULL,
            controllersIncluded INTEGER,
            diskSpace TEXT NOT NULL,
            includedGameIds TEXT DEFAULT '',
            modelNumber TEXT NOT NULL
        )
    """
    insert_sql = (
        "INSERT INTO console (consoleId, color, controllersIncluded, diskSpace, "
        "includedGameIds, modelNumber) "
        "VALUES (:key, :color, :controllers, :disk_space, :game_ids, :model_number)"
    )
    update_sql = (
        "UPDATE console SET color = :color, controllersIncluded = :controllers, "
        "diskSpace = :disk_space, includedGameIds = :game_ids, modelNumber = :model_number "
        "WHERE consoleId = :key"
    )

    def to_params(self, console: Console) -> dict:
        return {
            "color": console.color,
            "controllers": console.controllers_included,
            "disk_space": console.disk_space,
            "game_ids": join_game_ids(console.included_game_ids),
            "model_number": console.model_number,
        }

    def from_row(self, row, item) -> Console:
        return Console(
            item=item,
            color=row.color,
            controllers_included=row.controllersIncluded or 0,
            disk_space=row.diskSpace,
            included_game_ids=split_game_ids(row.includedGameIds),
            model_number=row.modelNumber,
        )

    get_consoles = SubtypeMapper.get_all
    add_console = SubtypeMapper.add
    update_console = SubtypeMapper.update
    delete_console = SubtypeMapper.delete
