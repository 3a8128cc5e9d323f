import pytest


@pytest.fixture
def bound_form(make_field, make_form):
    """A form with three bound fields plus one field that belongs nowhere."""
    fields = [
        make_field("Name"),
        make_field("Age", data_type_id=2, meta={"min": 0}),
        make_field("Email", data_type_id=5, is_required=True),
    ]
    stray = make_field("Stray")
    form = make_form("Registration", field_ids=[f["id"] for f in fields])
    return form, [f["id"] for f in fields], stray["id"]


def _group_ids_by_field(client, form_id):
    resp = client.get("/form-fields", params={"form_id": form_id})
    assert resp.status_code == 200
    return {row["field_id"]: row["group_id"] for row in resp.json()["data"]}


def test_group_crud(client, make_group):
    group = make_group("Personal")
    assert group["group_name"] == "Personal"

    resp = client.put(f"/groups/{group['id']}", json={"group_name": "Personal details"})
    assert resp.status_code == 200
    assert resp.json()["data"]["group_name"] == "Personal details"

    resp = client.get("/groups")
    assert [g["group_name"] for g in resp.json()["data"]] == ["Personal details"]

    assert client.delete(f"/groups/{group['id']}").status_code == 200
    assert client.get(f"/groups/{group['id']}").status_code == 404


def test_duplicate_group_name_is_storage_error(client, make_group):
    make_group("Contact")
    resp = client.post("/groups", json={"group_name": "Contact"})
    assert resp.status_code == 500
    body = resp.json()
    assert body["status"] is False
    assert body["error"].startswith("Error creating group")


def test_add_fields_to_group_moves_only_requested_fields(client, bound_form, make_group):
    form, (name_id, age_id, email_id), _ = bound_form
    group = make_group("Basics")

    resp = client.post(
        "/groups/add-fields",
        json={"form_id": form["id"], "group_id": group["id"], "field_ids": [name_id, age_id]},
    )
    assert resp.status_code == 200
    assert resp.json() == {"status": True, "message": "Fields added to group successfully"}

    assert _group_ids_by_field(client, form["id"]) == {
        name_id: group["id"],
        age_id: group["id"],
        email_id: None,
    }


def test_add_fields_to_group_is_all_or_nothing(client, bound_form, make_group):
    form, (name_id, age_id, email_id), stray_id = bound_form
    group = make_group("Basics")

    resp = client.post(
        "/groups/add-fields",
        json={"form_id": form["id"], "group_id": group["id"], "field_ids": [name_id, age_id, stray_id]},
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] is False
    assert str(stray_id) in body["error"]
    assert str(form["id"]) in body["error"]

    assert _group_ids_by_field(client, form["id"]) == {name_id: None, age_id: None, email_id: None}


def test_add_fields_to_group_rejects_unknown_field_ids(client, bound_form, make_group):
    form, (name_id, _, _), _ = bound_form
    group = make_group("Basics")

    resp = client.post(
        "/groups/add-fields",
        json={"form_id": form["id"], "group_id": group["id"], "field_ids": [name_id, 999]},
    )
    assert resp.status_code == 400
    assert _group_ids_by_field(client, form["id"])[name_id] is None


def test_add_fields_to_group_repeated_ids_collapse(client, bound_form, make_group):
    form, (name_id, _, _), _ = bound_form
    group = make_group("Basics")

    resp = client.post(
        "/groups/add-fields",
        json={"form_id": form["id"], "group_id": group["id"], "field_ids": [name_id, name_id]},
    )
    assert resp.status_code == 200
    assert _group_ids_by_field(client, form["id"])[name_id] == group["id"]


def test_add_fields_to_group_empty_list_is_bad_request(client, bound_form, make_group):
    form, _, _ = bound_form
    group = make_group("Basics")
    resp = client.post(
        "/groups/add-fields",
        json={"form_id": form["id"], "group_id": group["id"], "field_ids": []},
    )
    assert resp.status_code == 400


@pytest.mark.parametrize("missing", ["form", "group"])
def test_add_fields_to_group_unknown_target_is_not_found(client, bound_form, make_group, missing):
    form, (name_id, _, _), _ = bound_form
    group = make_group("Basics")
    body = {"form_id": form["id"], "group_id": group["id"], "field_ids": [name_id]}
    body[f"{missing}_id"] = 999

    resp = client.post("/groups/add-fields", json=body)
    assert resp.status_code == 404


def test_moving_fields_again_reassigns_them(client, bound_form, make_group):
    form, (name_id, age_id, _), _ = bound_form
    first = make_group("First")
    second = make_group("Second")

    client.post("/groups/add-fields", json={"form_id": form["id"], "group_id": first["id"], "field_ids": [name_id, age_id]})
    client.post("/groups/add-fields", json={"form_id": form["id"], "group_id": second["id"], "field_ids": [age_id]})

    groups = _group_ids_by_field(client, form["id"])
    assert groups[name_id] == first["id"]
    assert groups[age_id] == second["id"]


def test_get_group_fields_returns_field_details(client, bound_form, make_group):
    form, (name_id, age_id, email_id), _ = bound_form
    group = make_group("Basics")
    client.post(
        "/groups/add-fields",
        json={"form_id": form["id"], "group_id": group["id"], "field_ids": [age_id, email_id]},
    )

    resp = client.get("/groups/get-fields", params={"form_id": form["id"], "group_id": group["id"]})
    assert resp.status_code == 200
    rows = resp.json()["data"]
    assert [r["field_id"] for r in rows] == [age_id, email_id]

    age, email = rows
    assert age["label"] == "Age"
    assert age["type"] == "number"
    assert age["meta"] == {"min": 0}
    assert age["is_required"] is False
    assert email["type"] == "email"
    assert email["is_required"] is True
    assert all(r["group_id"] == group["id"] and r["form_id"] == form["id"] for r in rows)


def test_get_group_fields_empty_group(client, bound_form, make_group):
    form, _, _ = bound_form
    group = make_group("Empty")
    resp = client.get("/groups/get-fields", params={"form_id": form["id"], "group_id": group["id"]})
    assert resp.status_code == 200
    assert resp.json()["data"] == []


def test_deleting_group_ungroups_bindings(client, bound_form, make_group):
    form, (name_id, _, _), _ = bound_form
    group = make_group("Basics")
    client.post("/groups/add-fields", json={"form_id": form["id"], "group_id": group["id"], "field_ids": [name_id]})

    assert client.delete(f"/groups/{group['id']}").status_code == 200
    assert _group_ids_by_field(client, form["id"])[name_id] is None
