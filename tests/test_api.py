import pytest

from app import create_app


GAME = {
    "product_name": "Halo Infinite",
    "product_description": "Master Chief returns",
    "units_in_stock": 4,
    "unit_cost": 59.99,
    "manufacture": "Microsoft",
    "release_date": "2021-12-08",
    "package_dimension": {"height": 7.5, "width": 5.3, "depth": 0.6, "weight": 0.2},
    "number_of_players": 4,
    "esrb_rating": "Teen",
}

CONSOLE = {
    "product_name": "Xbox Series X",
    "product_description": "Fastest Xbox ever",
    "units_in_stock": 1,
    "unit_cost": 499.0,
    "manufacture": "Microsoft",
    "release_date": "2020-11-10",
    "color": "Black",
    "disk_space": "1 TB",
    "model_number": "RRT-00001",
    "controllers_included": 1,
}


@pytest.fixture()
def app(tmp_path):
    return create_app({
        "INVENTORY_DB": str(tmp_path / "inventory.db"),
        "TESTING": True,
        "SECRET_KEY": "test",
    })


@pytest.fixture()
def client(app):
    return app.test_client()


def login(client, username="admin", password="admin"):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_requires_login(client):
    r = client.get("/api/inventory")
    assert r.status_code == 401
    assert r.get_json()["error"] == "Login required."


def test_login_and_me(client):
    r = login(client)
    assert r.status_code == 200
    assert r.get_json()["administrator"] is True
    assert client.get("/api/auth/me").get_json()["username"] == "admin"
    assert client.post("/api/auth/logout").status_code == 200
    assert client.get("/api/auth/me").status_code == 401


def test_login_attempts_are_limited(client):
    for attempt in (1, 2, 3):
        r = login(client, password="wrong")
        assert r.status_code == 401
        assert r.get_json()["attempts"] == attempt
        assert f"Attempt {attempt} of 3" in r.get_json()["error"]
    r = login(client)
    assert r.status_code == 403


def test_login_needs_both_fields(client):
    assert client.post("/api/auth/login", json={"username": "admin"}).status_code == 400


def test_create_list_and_filter_items(client):
    login(client)
    r = client.post("/api/consoles", json=CONSOLE)
    assert r.status_code == 201
    console_id = r.get_json()["item_number"]

    r = client.post("/api/games", json=dict(GAME, platform_id=console_id))
    assert r.status_code == 201
    game = r.get_json()
    assert game["type"] == "game"
    assert game["platform_id"] == console_id

    body = client.get("/api/inventory").get_json()
    assert [row["name"] for row in body["items"]] == ["Xbox Series X", "Halo Infinite"]
    assert body["columns"][0] == "Item Number"

    body = client.get("/api/inventory?filter=Chief").get_json()
    assert [row["name"] for row in body["items"]] == ["Halo Infinite"]

    r = client.get("/api/inventory?filter=(")
    assert r.status_code == 400
    assert r.get_json()["code"] == "E_FILTER"


def test_update_and_delete_item(client):
    login(client)
    game_id = client.post("/api/games", json=GAME).get_json()["item_number"]

    r = client.put(f"/api/games/{game_id}", json=dict(GAME, units_in_stock=0))
    assert r.status_code == 200
    assert client.get(f"/api/games/{game_id}").get_json()["units_in_stock"] == 0

    assert client.delete(f"/api/games/{game_id}").status_code == 200
    assert client.get(f"/api/games/{game_id}").status_code == 404
    assert client.get("/api/games").get_json()["items"] == []


def test_bad_payload_rejected(client):
    login(client)
    r = client.post("/api/games", json=dict(GAME, units_in_stock="lots"))
    assert r.status_code == 400
    assert r.get_json()["code"] == "E_BAD_INPUT"
    r = client.post("/api/games", json=dict(GAME, unit_cost=-1))
    assert r.status_code == 400


def test_only_admins_delete_items(client):
    login(client)
    game_id = client.post("/api/games", json=GAME).get_json()["item_number"]
    r = client.post("/api/users", json={
        "username": "clerk", "password": "pw", "first_name": "Store", "last_name": "Clerk",
    })
    assert r.status_code == 201
    client.post("/api/auth/logout")

    login(client, "clerk", "pw")
    assert client.get("/api/games").status_code == 200
    assert client.delete(f"/api/games/{game_id}").status_code == 403
    assert client.get("/api/users").status_code == 403


def test_last_admin_protected(client):
    r = login(client)
    admin_id = r.get_json()["user_id"]
    r = client.put(f"/api/users/{admin_id}", json={
        "username": "admin", "password": "", "first_name": "Administrative",
        "last_name": "User", "administrator": False,
    })
    assert r.status_code == 409
    assert r.get_json()["code"] == "E_LAST_ADMIN"
    assert client.delete(f"/api/users/{admin_id}").status_code == 409
    assert client.delete("/api/users/999").status_code == 404


def test_invalid_user_rejected(client):
    login(client)
    r = client.post("/api/users", json={"username": "a b", "password": "pw",
                                        "first_name": "A", "last_name": "B"})
    assert r.status_code == 400
    assert r.get_json()["code"] == "E_USER_ATTR"


def test_export_then_import(client):
    login(client)
    client.post("/api/consoles", json=CONSOLE)
    r = client.get("/api/admin/export")
    assert r.status_code == 200
    assert r.mimetype == "text/plain"
    dump = r.get_data(as_text=True)
    assert "INSERT INTO console" in dump

    client.delete("/api/consoles/1")
    r = client.post("/api/admin/import?overwrite=1", data=dump)
    assert r.get_json() == {"ok": True, "imported": len(dump.splitlines()), "overwrite": True}
    assert len(client.get("/api/consoles").get_json()["items"]) == 1

    r = client.post("/api/admin/import", data=dump)
    assert r.status_code == 500
    assert r.get_json()["code"] == "E_STORAGE"


def test_unknown_platform_and_non_finite_cost_rejected(client):
    login(client)
    r = client.post("/api/accessories", json=dict(CONSOLE, platform_id=9999))
    assert r.status_code == 400
    assert r.get_json()["code"] == "E_ITEM_REF"
    r = client.post("/api/accessories", json=dict(CONSOLE, unit_cost="inf"))
    assert r.status_code == 400
    assert r.get_json()["code"] == "E_BAD_INPUT"
    assert client.get("/api/inventory").get_json()["items"] == []
    assert client.post("/api/accessories", json=CONSOLE).status_code == 201
