import datetime as dt

import pytest

from database import InventoryStore, ItemReferenceError, StorageError
from models import Item, PackageDimension


def make_item(name="Halo Infinite", **overrides):
    fields = dict(
        product_name=name,
        product_description="Sci-fi shooter",
        units_in_stock=12,
        unit_cost=59.99,
        manufacture="Microsoft",
        release_date=dt.date(2021, 12, 8),
        package_dimension=PackageDimension(height=7.5, width=5.25, depth=0.5, weight=0.25),
    )
    fields.update(overrides)
    return Item(**fields)


def test_add_item_assigns_identity(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    item = make_item()
    assert not item.is_saved
    item_number = store.items.add_item(item)
    assert item_number > 0
    assert item.item_number == item_number
    assert store.items.find_item(item_number) == item


def test_load_item_fills_base_fields(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    original = make_item()
    store.items.add_item(original)
    loaded = Item(item_number=original.item_number)
    assert store.items.load_item(loaded) is True
    assert loaded.product_name == "Halo Infinite"
    assert loaded.release_date == dt.date(2021, 12, 8)
    assert loaded.package_dimension.width == pytest.approx(5.25)
    assert loaded.manufacture == "Microsoft"


def test_load_missing_item_returns_false(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    assert store.items.load_item(Item(item_number=999)) is False
    assert store.items.find_item(999) is None


def test_update_item_keeps_identity(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    item = make_item()
    store.items.add_item(item)
    number = item.item_number
    item.units_in_stock = 3
    item.manufacture = "Xbox Game Studios"
    store.items.update_item(item)
    assert item.item_number == number
    reloaded = store.items.find_item(number)
    assert reloaded.units_in_stock == 3
    assert reloaded.manufacture == "Xbox Game Studios"


def test_update_unsaved_item_rejected(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    with pytest.raises(ItemReferenceError):
        store.items.update_item(make_item())


def test_update_missing_item_rejected(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    with pytest.raises(ItemReferenceError):
        store.items.update_item(make_item(item_number=42))


def test_none_and_wrong_type_rejected(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    with pytest.raises(ItemReferenceError):
        store.items.add_item(None)
    with pytest.raises(ItemReferenceError):
        store.items.add_item("Halo")


def test_delete_item(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    item = make_item()
    store.items.add_item(item)
    store.items.delete_item(item)
    assert store.items.find_item(item.item_number) is None


def test_duplicate_name_is_storage_error(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    store.items.add_item(make_item())
    with pytest.raises(StorageError):
        store.items.add_item(make_item())


def test_manufactures_shared_case_insensitively(tmp_path):
    store = InventoryStore(tmp_path / "inventory.db")
    store.items.add_item(make_item("Halo", manufacture="Microsoft"))
    store.items.add_item(make_item("Gears", manufacture="MICROSOFT"))
    names = [m.name for m in store.manufactures.get_manufactures()]
    assert names == ["Microsoft"]
    found = store.manufactures.find_manufacture_by_name("microsoft")
    assert found is not None
    assert store.manufactures.find_manufacture(found.manufacture_id) == found
    # loading reports the stored spelling
    assert store.items.find_item(2).manufacture == "Microsoft"


def test_negative_values_rejected_by_model():
    with pytest.raises(ValueError):
        make_item(units_in_stock=-1)
    with pytest.raises(ValueError):
        make_item(unit_cost=-0.01)
    with pytest.raises(ValueError):
        PackageDimension(height=-1)


def test_non_finite_values_rejected_by_model():
    for bad in (float("inf"), float("nan")):
        with pytest.raises(ValueError):
            make_item(unit_cost=bad)
        with pytest.raises(ValueError):
            PackageDimension(weight=bad)
    with pytest.raises(ValueError):
        make_item(package_dimension=PackageDimension(width=float("-inf")))
