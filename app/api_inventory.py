"""Inventory table and per-kind item editors.

Routes live under ``/api``. Any logged-in user can browse, add and edit
items; deleting needs an administrator.
"""
import datetime as dt
from dataclasses import asdict

from flask import Blueprint, jsonify, request
from flask_login import login_required

from models import Accessory, Console, Game, Item, PackageDimension
from services.inventory import COLUMNS, table_row
from .context import get_inventory
from .security import admin_required


bp = Blueprint("inventory_api", __name__, url_prefix="/api")

KINDS = {"games": "game", "accessories": "accessory", "consoles": "console"}


class BadPayload(ValueError):
    pass


def _serialize(obj):
    """Flatten a Game/Accessory/Console into one JSON object."""
    data = asdict(obj)
    item = data.pop("item")
    item["release_date"] = obj.item.release_date.isoformat()
    return {"type": obj.kind, **item, **data}


def _int(data, key, default=0):
    try:
        return int(data.get(key, default) or 0)
    except (TypeError, ValueError):
        raise BadPayload(f"{key} must be a whole number.")


def _float(data, key, default=0.0):
    try:
        return float(data.get(key, default) or 0)
    except (TypeError, ValueError):
        raise BadPayload(f"{key} must be a number.")


def _platform(data):
    value = data.get("platform_id")
    if value in (None, "", 0):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BadPayload("platform_id must be an item number.")


def _parse_item(data, item_number=0) -> Item:
    name = (data.get("product_name") or "").strip()
    if not name:
        raise BadPayload("product_name required.")
    try:
        release_date = dt.date.fromisoformat(data.get("release_date") or dt.date.today().isoformat())
    except (TypeError, ValueError):
        raise BadPayload("release_date must be YYYY-MM-DD.")
    dims = data.get("package_dimension") or {}
    try:
        return Item(
            item_number=item_number,
            product_name=name,
            product_description=(data.get("product_description") or "").strip(),
            units_in_stock=_int(data, "units_in_stock"),
            unit_cost=_float(data, "unit_cost"),
            manufacture=(data.get("manufacture") or "").strip(),
            release_date=release_date,
            package_dimension=PackageDimension(
                height=_float(dims, "height"), width=_float(dims, "width"),
                depth=_float(dims, "depth"), weight=_float(dims, "weight"),
            ),
        )
    except BadPayload:
        raise
    except ValueError as e:
        raise BadPayload(str(e))


def _parse(kind, data, item_number=0):
    item = _parse_item(data, item_number)
    if kind == "game":
        return Game(
            item=item,
            number_of_discs=_int(data, "number_of_discs", 1),
            number_of_players=_int(data, "number_of_players", 1),
            platform_id=_platform(data),
            esrb_rating=data.get("esrb_rating") or Game().esrb_rating,
        )
    if kind == "accessory":
        return Accessory(
            item=item,
            color=(data.get("color") or "").strip(),
            model_number=(data.get("model_number") or "").strip(),
            platform_id=_platform(data),
        )
    try:
        game_ids = [int(g) for g in (data.get("included_game_ids") or [])]
    except (TypeError, ValueError):
        raise BadPayload("included_game_ids must be item numbers.")
    return Console(
        item=item,
        color=(data.get("color") or "").strip(),
        disk_space=(data.get("disk_space") or "").strip(),
        model_number=(data.get("model_number") or "").strip(),
        included_game_ids=game_ids,
        controllers_included=_int(data, "controllers_included", 1),
    )


@bp.errorhandler(BadPayload)
def _bad_payload(e):
    return jsonify(error=str(e), code="E_BAD_INPUT"), 400


@bp.get("/inventory")
@login_required
def inventory_table():
    """Every item as inventory table rows, optionally narrowed by ``?filter=``."""
    inventory = get_inventory()
    pattern = request.args.get("filter")
    rows = inventory.filter(pattern) if pattern is not None else inventory.rows()
    return jsonify(columns=COLUMNS, items=[table_row(obj) for obj in rows])


@bp.get("/<any(games, accessories, consoles):kinds>")
@login_required
def list_items(kinds):
    mapper = get_inventory().mapper_for(KINDS[kinds])
    return jsonify(items=[_serialize(obj) for obj in mapper.get_all()])


@bp.post("/<any(games, accessories, consoles):kinds>")
@login_required
def create_item(kinds):
    data = request.get_json(force=True, silent=True) or {}
    obj = _parse(KINDS[kinds], data)
    get_inventory().save(obj)
    return jsonify(_serialize(obj)), 201


@bp.get("/<any(games, accessories, consoles):kinds>/<int:item_number>")
@login_required
def get_item(kinds, item_number):
    obj = get_inventory().find(KINDS[kinds], item_number)
    if obj is None:
        return jsonify(error="Item not found", code="E_NOT_FOUND"), 404
    return jsonify(_serialize(obj))


@bp.put("/<any(games, accessories, consoles):kinds>/<int:item_number>")
@login_required
def update_item(kinds, item_number):
    inventory = get_inventory()
    if inventory.find(KINDS[kinds], item_number) is None:
        return jsonify(error="Item not found", code="E_NOT_FOUND"), 404
    data = request.get_json(force=True, silent=True) or {}
    obj = _parse(KINDS[kinds], data, item_number)
    inventory.save(obj)
    return jsonify(_serialize(obj))


@bp.delete("/<any(games, accessories, consoles):kinds>/<int:item_number>")
@admin_required
def delete_item(kinds, item_number):
    inventory = get_inventory()
    obj = inventory.find(KINDS[kinds], item_number)
    if obj is None:
        return jsonify(error="Item not found", code="E_NOT_FOUND"), 404
    inventory.delete(obj)
    return jsonify(ok=True, item_number=item_number)
