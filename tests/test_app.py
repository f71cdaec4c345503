import pytest

from bstlab import app as app_module


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(app_module, "DEFAULT_SEED", "7,1,9,8,11")
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        r = c.post("/api/tree/reset")
        assert r.status_code == 200
        yield c


def test_reset_seeds_tree(client):
    body = client.post("/api/tree/reset").get_json()
    assert body == {"ok": True, "data": {"elements": [1, 7, 8, 9, 11]}}


def test_status(client):
    data = client.get("/api/status").get_json()["data"]
    assert data["size"] == 5
    assert data["height"] == 2
    assert data["min"] == 1
    assert data["max"] == 11
    assert data["is_full"] is True
    assert data["seeded"] is True


def test_status_on_empty_tree(client):
    client.post("/api/tree/remove", json={"values": [7, 1, 9, 8, 11]})
    data = client.get("/api/status").get_json()["data"]
    assert data["is_empty"] is True
    assert data["min"] is None
    assert data["max"] is None
    assert data["height"] == -1


def test_levels(client):
    data = client.get("/api/tree/levels").get_json()["data"]
    assert data["levels"] == [
        {"level": 1, "elements": [7]},
        {"level": 2, "elements": [1, 9]},
        {"level": 3, "elements": [8, 11]},
    ]


def test_contains(client):
    assert client.get("/api/tree/contains/8").get_json()["data"]["contains"] is True
    assert client.get("/api/tree/contains/-3").get_json()["data"]["contains"] is False

    r = client.get("/api/tree/contains/abc")
    assert r.status_code == 400
    assert r.get_json()["ok"] is False


def test_insert_and_remove(client):
    r = client.post("/api/tree/insert", json={"values": [4, 10, 7]})
    assert r.get_json()["data"]["size"] == 7
    inorder = client.get("/api/tree/inorder").get_json()["data"]["elements"]
    assert inorder == [1, 4, 7, 8, 9, 10, 11]

    r = client.post("/api/tree/remove", json={"values": [7, 42]})
    assert r.get_json()["data"] == {"removed": [7], "size": 6}
    inorder = client.get("/api/tree/inorder").get_json()["data"]["elements"]
    assert inorder == [1, 4, 8, 9, 10, 11]


@pytest.mark.parametrize("body", [{}, {"value": "x"}, {"values": 3}, {"values": [1, 2.5]}])
def test_insert_rejects_bad_body(client, body):
    r = client.post("/api/tree/insert", json=body)
    assert r.status_code == 400
    assert r.get_json()["ok"] is False


def test_rotate(client):
    r = client.post("/api/tree/rotate", json={"value": 7, "direction": "right"})
    data = r.get_json()["data"]
    assert data["pivot"] == 1
    assert [row["elements"] for row in data["levels"]] == [[1], [7], [9], [8, 11]]

    r = client.post("/api/tree/rotate", json={"value": 1, "direction": "left"})
    data = r.get_json()["data"]
    assert data["pivot"] == 7
    assert [row["elements"] for row in data["levels"]] == [[7], [1, 9], [8, 11]]


def test_rotate_errors(client):
    r = client.post("/api/tree/rotate", json={"value": 1, "direction": "right"})
    assert r.status_code == 409

    r = client.post("/api/tree/rotate", json={"value": 42, "direction": "right"})
    assert r.status_code == 404

    r = client.post("/api/tree/rotate", json={"value": 7, "direction": "up"})
    assert r.status_code == 400


@pytest.mark.parametrize("body", [
    {"value": 7, "direction": 5},
    {"value": 7},
    [7, "right"],
])
def test_rotate_rejects_malformed_body(client, body):
    r = client.post("/api/tree/rotate", json=body)
    assert r.status_code == 400
    assert r.get_json()["ok"] is False
    inorder = client.get("/api/tree/levels").get_json()["data"]["levels"]
    assert [row["elements"] for row in inorder] == [[7], [1, 9], [8, 11]]


def test_rotate_direction_is_case_insensitive(client):
    r = client.post("/api/tree/rotate", json={"value": 7, "direction": " Right "})
    assert r.get_json()["data"]["pivot"] == 1


def test_compare_rejects_list_body(client):
    r = client.post("/api/tree/compare", json=["values"])
    assert r.status_code == 400


def test_compare(client):
    data = client.post("/api/tree/compare", json={"values": [7, 9, 1, 11, 8]}).get_json()["data"]
    assert data["equals"] is True
    assert data["compare_structure"] is True
    assert data["is_mirror"] is False

    data = client.post("/api/tree/compare", json={"values": [7, 9, 1, 11, 8, 12]}).get_json()["data"]
    assert data["equals"] is False


def test_home_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert b"BST Inspector" in r.data


def test_parse_seed_skips_bad_tokens(capsys):
    assert app_module.parse_seed("3, x, 1,,2") == [3, 1, 2]
    assert "Skipping" in capsys.readouterr().out
