from formbuilder.crud.form_fields import field_projection
from formbuilder.models.form_field import FormField


def test_create_form_with_fields(client, make_field):
    name = make_field("Name")
    dob = make_field("Date of birth", data_type_id=3)

    resp = client.post("/forms", json={
        "name": "Contact",
        "description": "Who you are",
        "fields": [
            {"field_id": name["id"], "field_name": "full_name", "field_row": 1},
            {"field_id": dob["id"], "validation": {"required": True}},
        ],
    })
    assert resp.status_code == 201
    form = resp.json()["data"]
    assert form["name"] == "Contact"
    assert [f["label"] for f in form["fields"]] == ["Name", "Date of birth"]
    assert [f["type"] for f in form["fields"]] == ["text", "date"]
    assert form["fields"][0]["field_name"] == "full_name"
    assert form["fields"][1]["validation"] == {"required": True}

    resp = client.get(f"/forms/{form['id']}")
    assert resp.status_code == 200
    assert len(resp.json()["data"]["fields"]) == 2


def test_create_form_with_unknown_field_stores_nothing(client, make_field):
    name = make_field("Name")
    resp = client.post("/forms", json={"name": "Broken", "fields": [{"field_id": name["id"]}, {"field_id": 404}]})
    assert resp.status_code == 404
    assert resp.json()["error"] == "Field not found"

    assert client.get("/forms").json()["data"] == []
    assert client.get("/form-fields").json()["data"] == []


def test_update_form_and_status(client, make_form):
    form = make_form("Draft")

    resp = client.put(f"/forms/{form['id']}", json={"name": "Final", "description": "Ready"})
    assert resp.status_code == 200
    assert resp.json()["data"]["description"] == "Ready"

    resp = client.patch(f"/forms/{form['id']}/status", json={"status": True})
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] is True
    assert resp.json()["data"]["name"] == "Final"


def test_form_with_unknown_service_is_not_found(client):
    resp = client.post("/forms", json={"name": "Orphan", "service_id": 77})
    assert resp.status_code == 404


def test_deleted_form_is_hidden(client, make_form, make_group, make_field):
    field = make_field("Name")
    form = make_form("Temporary", field_ids=[field["id"]])
    group = make_group("Basics")

    assert client.delete(f"/forms/{form['id']}").status_code == 200
    assert client.get(f"/forms/{form['id']}").status_code == 404
    assert client.get("/forms").json()["data"] == []
    assert client.delete(f"/forms/{form['id']}").status_code == 404

    resp = client.post(
        "/groups/add-fields",
        json={"form_id": form["id"], "group_id": group["id"], "field_ids": [field["id"]]},
    )
    assert resp.status_code == 404


def test_deleted_form_bindings_are_hidden(client, make_form, make_group, make_field):
    field = make_field("Name")
    form = make_form("Temporary", field_ids=[field["id"]])
    group = make_group("Basics")
    client.post(
        "/groups/add-fields",
        json={"form_id": form["id"], "group_id": group["id"], "field_ids": [field["id"]]},
    )
    binding = client.get("/form-fields", params={"form_id": form["id"]}).json()["data"][0]

    assert client.delete(f"/forms/{form['id']}").status_code == 200

    resp = client.get("/groups/get-fields", params={"form_id": form["id"], "group_id": group["id"]})
    assert resp.status_code == 404
    assert client.get("/form-fields", params={"form_id": form["id"]}).json()["data"] == []
    assert client.get("/form-fields").json()["data"] == []
    assert client.get(f"/form-fields/{binding['id']}").status_code == 404
    assert client.delete(f"/form-fields/{binding['id']}").status_code == 404


def test_bound_field_cannot_be_deleted(client, make_field, make_form):
    field = make_field("Name")
    make_form(field_ids=[field["id"]])

    resp = client.delete(f"/fields/{field['id']}")
    assert resp.status_code == 409
    assert client.get(f"/fields/{field['id']}").status_code == 200


def test_unbound_field_crud(client, make_field):
    field = make_field("Color", meta={"options": ["red", "blue"]})
    assert field["type"] == "text"

    resp = client.put(f"/fields/{field['id']}", json={"label": "Colour", "data_type_id": 1, "is_required": True})
    assert resp.status_code == 200
    assert resp.json()["data"]["label"] == "Colour"
    assert resp.json()["data"]["is_required"] is True

    assert client.delete(f"/fields/{field['id']}").status_code == 200
    assert client.get(f"/fields/{field['id']}").status_code == 404


def test_field_with_unknown_data_type_is_not_found(client):
    resp = client.post("/fields", json={"label": "Mystery", "data_type_id": 99})
    assert resp.status_code == 404
    assert resp.json()["error"] == "Data type not found"


def test_create_multiple_form_fields(client, make_field, make_form):
    first = make_field("First")
    second = make_field("Second")
    form = make_form("Batch")

    resp = client.post("/form-fields/multiple", json=[
        {"form_id": form["id"], "field_id": first["id"], "field_span": 6},
        {"form_id": form["id"], "field_id": second["id"], "field_span": 6},
    ])
    assert resp.status_code == 201
    assert [ff["field_id"] for ff in resp.json()["data"]] == [first["id"], second["id"]]


def test_create_multiple_form_fields_is_all_or_nothing(client, make_field, make_form):
    first = make_field("First")
    form = make_form("Batch")

    resp = client.post("/form-fields/multiple", json=[
        {"form_id": form["id"], "field_id": first["id"]},
        {"form_id": form["id"], "field_id": 999},
    ])
    assert resp.status_code == 404
    assert client.get("/form-fields", params={"form_id": form["id"]}).json()["data"] == []


def test_form_field_update_with_form_group(client, make_field, make_form):
    field = make_field("Name")
    form = make_form("Layout", field_ids=[field["id"]])
    binding = client.get("/form-fields", params={"form_id": form["id"]}).json()["data"][0]

    resp = client.post("/form-groups", json={"group_name": "Header", "group_span": 12, "group_row": 1})
    assert resp.status_code == 201
    form_group = resp.json()["data"]

    resp = client.put(f"/form-fields/{binding['id']}", json={
        "form_id": form["id"],
        "field_id": field["id"],
        "form_group_id": form_group["id"],
        "field_span": 4,
    })
    assert resp.status_code == 200
    assert resp.json()["data"]["form_group_id"] == form_group["id"]
    assert resp.json()["data"]["field_span"] == 4

    assert client.delete(f"/form-groups/{form_group['id']}").status_code == 200
    assert client.get(f"/form-fields/{binding['id']}").json()["data"]["form_group_id"] is None


def test_dangling_binding_is_skipped():
    assert field_projection(FormField(id=7, form_id=1, field_id=99)) is None
