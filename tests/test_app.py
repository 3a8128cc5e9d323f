def test_root_uses_success_envelope(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"status": True, "message": "Welcome to the Form Builder API"}


def test_health_reports_database_and_pool(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "up"
    assert "pool" in body
    assert "timestamp" in body


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"status": False, "error": "Not Found", "code": 404}


def test_malformed_path_parameter_is_bad_request(client):
    resp = client.get("/users/abc")
    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] is False
    assert body["code"] == 400
    assert "user_id" in body["error"]


def test_missing_required_body_field_is_bad_request(client):
    resp = client.post("/groups", json={})
    assert resp.status_code == 400
    assert "group_name" in resp.json()["error"]


def test_default_data_types_are_seeded(client, settings):
    resp = client.get("/data-types")
    assert resp.status_code == 200
    names = [d["data_type"] for d in resp.json()["data"]]
    assert names == settings.DEFAULT_DATA_TYPES


def test_handlers_share_one_naming_convention(client):
    names = {route.name for route in client.app.routes if route.path.startswith("/forms")}
    assert names == {
        "create_form", "list_forms", "get_form",
        "update_form", "update_form_status", "delete_form",
    }
    assert not [route.name for route in client.app.routes if route.name.startswith("api_")]
