import datetime as dt

import pytest

from database import InventoryStore, ItemReferenceError, StorageError
from models import Console, Game, Item, PackageDimension


def make_item(name, **overrides):
    fields = dict(
        product_name=name,
        product_description=f"{name} description",
        units_in_stock=5,
        unit_cost=49.5,
        manufacture="Nintendo",
        release_date=dt.date(2017, 3, 3),
        package_dimension=PackageDimension(6.75, 4.25, 0.5, 0.125),
    )
    fields.update(overrides)
    return Item(**fields)


def setup_store(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    console = Console(item=make_item("Switch"), color="Neon", disk_space="32 GB",
                      model_number="HAC-001", controllers_included=2)
    store.consoles.add(console)
    return store, console


def test_add_then_get_all(tmp_path):
    store, console = setup_store(tmp_path)
    game = Game(item=make_item("Zelda BOTW"), number_of_discs=1, number_of_players=1,
                platform_id=console.item_number, esrb_rating="E - Everyone 10+")
    store.games.add(game)
    assert game.item_number > 0
    assert store.games.get_all() == [game]


def test_get_all_empty_is_list(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    assert store.games.get_all() == []
    assert store.games.get_games() == []


def test_update_changes_fields_not_identity(tmp_path):
    store, console = setup_store(tmp_path)
    game = Game(item=make_item("Mario Kart 8"), number_of_players=4, platform_id=console.item_number)
    store.games.add(game)
    number = game.item_number
    game.number_of_players = 8
    game.esrb_rating = "E - Everyone"
    game.item.units_in_stock = 40
    store.games.update(game)
    reloaded = store.games.find(number)
    assert reloaded.item_number == number
    assert reloaded.number_of_players == 8
    assert reloaded.item.units_in_stock == 40


def test_delete_removes_game_and_item(tmp_path):
    store, console = setup_store(tmp_path)
    game = Game(item=make_item("Splatoon"), platform_id=console.item_number)
    store.games.add(game)
    store.games.delete(game)
    assert store.games.get_all() == []
    assert store.games.find(game.item_number) is None
    assert store.items.find_item(game.item_number) is None


def test_item_row_cannot_go_before_game_row(tmp_path):
    store, _ = setup_store(tmp_path)
    game = Game(item=make_item("Metroid"))
    store.games.add(game)
    with pytest.raises(StorageError):
        store.items.delete_item(game.item)
    assert store.games.find(game.item_number) == game


def test_console_in_use_cannot_be_deleted(tmp_path):
    store, console = setup_store(tmp_path)
    store.games.add(Game(item=make_item("Kirby"), platform_id=console.item_number))
    with pytest.raises(StorageError):
        store.consoles.delete(console)


def test_wrong_kind_rejected(tmp_path):
    store, console = setup_store(tmp_path)
    with pytest.raises(ItemReferenceError):
        store.games.add(console)
    with pytest.raises(ItemReferenceError):
        store.games.add(None)
    with pytest.raises(ItemReferenceError):
        store.games.update(Game(item=make_item("Unsaved")))


def test_update_of_other_kind_rejected(tmp_path):
    store, console = setup_store(tmp_path)
    impostor = Game(item=console.item)
    with pytest.raises(ItemReferenceError):
        store.games.update(impostor)


def test_orphan_row_skipped(tmp_path):
    store, _ = setup_store(tmp_path)
    with store.database.connect(enforce_foreign_keys=False) as conn:
        conn.exec_driver_sql(
            "INSERT INTO game (gameId, numberOfDiscs, numberOfPlayers, consoleId, esrbRating) "
            "VALUES (500, 1, 1, NULL, 'Teen')"
        )
    assert store.games.get_all() == []


def test_kind_named_aliases(tmp_path):
    store, console = setup_store(tmp_path)
    game = Game(item=make_item("Pikmin"), platform_id=console.item_number)
    store.games.add_game(game)
    game.number_of_discs = 2
    store.games.update_game(game)
    assert store.games.get_games()[0].number_of_discs == 2
    store.games.delete_game(game)
    assert store.games.get_games() == []
