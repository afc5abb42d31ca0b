import datetime as dt

import pytest

from database import InventoryStore, ItemReferenceError
from models import Accessory, Console, Item, PackageDimension


def make_item(name, **overrides):
    fields = dict(
        product_name=name,
        product_description=f"{name} for the couch",
        units_in_stock=20,
        unit_cost=69.99,
        manufacture="Sony",
        release_date=dt.date(2020, 11, 12),
        package_dimension=PackageDimension(4.0, 6.5, 2.25, 0.75),
    )
    fields.update(overrides)
    return Item(**fields)


def setup_store(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    console = Console(item=make_item("PlayStation 5"), color="White", disk_space="825 GB",
                      model_number="CFI-1015A", controllers_included=1)
    store.consoles.add(console)
    return store, console


def test_add_update_delete_round_trip(tmp_path):
    store, console = setup_store(tmp_path)
    pad = Accessory(item=make_item("DualSense"), color="Midnight Black",
                    model_number="CFI-ZCT1W", platform_id=console.item_number)
    store.accessories.add(pad)
    assert store.accessories.get_all() == [pad]

    pad.color = "Cosmic Red"
    pad.item.unit_cost = 74.99
    store.accessories.update(pad)
    reloaded = store.accessories.find(pad.item_number)
    assert reloaded.color == "Cosmic Red"
    assert reloaded.item.unit_cost == pytest.approx(74.99)

    store.accessories.delete(pad)
    assert store.accessories.get_accessories() == []
    assert store.items.find_item(pad.item_number) is None


def test_accessory_without_platform(tmp_path):
    store, _ = setup_store(tmp_path)
    cable = Accessory(item=make_item("HDMI Cable", manufacture="Generic"), color="Black",
                      model_number="HDMI-2.1")
    store.accessories.add_accessory(cable)
    assert store.accessories.find(cable.item_number).platform_id is None


def test_unknown_platform_rejected(tmp_path):
    store, console = setup_store(tmp_path)
    pad = Accessory(item=make_item("Mystery Pad"), color="Grey", model_number="X",
                    platform_id=9999)
    with pytest.raises(ItemReferenceError):
        store.accessories.add(pad)
    assert pad.item_number == 0
    assert store.accessories.get_all() == []
    assert store.items.find_item(console.item_number + 1) is None

    pad.platform_id = console.item_number
    store.accessories.add(pad)
    assert store.accessories.find(pad.item_number).item.product_name == "Mystery Pad"


def test_update_to_unknown_platform_leaves_rows_alone(tmp_path):
    store, console = setup_store(tmp_path)
    pad = Accessory(item=make_item("DualSense Edge"), color="White",
                    model_number="CFI-ZCP1", platform_id=console.item_number)
    store.accessories.add(pad)
    pad.item.units_in_stock = 0
    pad.platform_id = 9999
    with pytest.raises(ItemReferenceError):
        store.accessories.update(pad)
    reloaded = store.accessories.find(pad.item_number)
    assert reloaded.platform_id == console.item_number
    assert reloaded.item.units_in_stock == 20
