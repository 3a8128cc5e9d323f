import pytest


@pytest.fixture
def names(client):
    for name in ["admin", "administrator", "user", "a_b", "axb"]:
        resp = client.post("/reserved-name", json={"reserved_name": name})
        assert resp.status_code == 201


def _search(client, text):
    resp = client.get(f"/reserved-name/{text}")
    assert resp.status_code == 200
    return sorted(r["reserved_name"] for r in resp.json()["data"])


def test_similar_names_match_substring(client, names):
    assert _search(client, "adm") == ["admin", "administrator"]
    assert _search(client, "strat") == ["administrator"]


def test_similar_names_without_match_is_empty(client, names):
    assert _search(client, "zzz") == []


def test_wildcards_match_literally(client, names):
    assert _search(client, "_") == ["a_b"]
    assert _search(client, "%25") == []


def test_duplicate_reserved_name_is_storage_error(client, names):
    resp = client.post("/reserved-name", json={"reserved_name": "admin"})
    assert resp.status_code == 500
    assert resp.json()["status"] is False


def test_empty_reserved_name_is_rejected(client):
    resp = client.post("/reserved-name", json={"reserved_name": ""})
    assert resp.status_code == 400


def test_delete_reserved_name(client, names):
    listed = client.get("/reserved-name").json()["data"]
    target = next(r for r in listed if r["reserved_name"] == "user")

    assert client.delete(f"/reserved-name/{target['id']}").status_code == 200
    assert _search(client, "user") == []
    assert client.delete(f"/reserved-name/{target['id']}").status_code == 404
