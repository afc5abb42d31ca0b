from __future__ import annotations

from models import Game
from .subtypes import SubtypeMapper


class GameMapper(SubtypeMapper):
    table = "game"
    model = Game
    key_column = "gameId"
    create_table_sql = """
        CREATE TABLE IF NOT EXISTS game (
            gameId INTEGER PRIMARY KEY REFERENCES item(itemId) ON DELETE RESTRICT,
            numberOfDiscs INTEGER NOT NULL,
            numberOfPlayers INTEGER NOT NULL,
            consoleId INTEGER REFERENCES console(consoleId) ON DELETE RESTRICT,
            esrbRating TEXT NOT NULL
        )
    """
    insert_sql = (
        "INSERT INTO game (gameId, numberOfDiscs, numberOfPlayers, consoleId, esrbRating) "
        "VALUES (:key, :discs, :players, :console_id, :rating)"
    )
    update_sql = (
        "UPDATE game SET numberOfDiscs = :discs, numberOfPlayers = :players, "
        "consoleId = :console_id, esrbRating = :rating WHERE gameId = :key"
    )

    def to_params(self, game: Game) -> dict:
        return {
            "discs": game.number_of_discs,
            "players": game.number_of_players,
            "console_id": game.platform_id,
            "rating": game.esrb_rating,
        }

    def from_row(self, row, item) -> Game:
        return Game(
            item=item,
            number_of_discs=row.numberOfDiscs,
            number_of_players=row.numberOfPlayers,
            platform_id=row.consoleId,
            esrb_rating=row.esrbRating,
        )

    get_games = SubtypeMapper.get_all
    add_game = SubtypeMapper.add
    update_game = SubtypeMapper.update
    delete_game = SubtypeMapper.delete
