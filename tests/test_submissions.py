import pytest


@pytest.fixture
def survey(client, make_field, make_form):
    service = client.post("/services", json={"service_name": "Permits"}).json()["data"]
    user = client.post("/users", json={"email": "ada@example.com", "first_name": "Ada"}).json()["data"]
    form = make_form("Permit", field_ids=[make_field("Name")["id"], make_field("Age", data_type_id=2)["id"]])
    bindings = client.get("/form-fields", params={"form_id": form["id"]}).json()["data"]
    return service, user, [b["id"] for b in bindings]


def test_submit_form_stores_every_answer(client, survey):
    service, user, (name_ff, age_ff) = survey

    resp = client.post("/submission", json={
        "service_id": service["id"],
        "created_by": user["id"],
        "answers": [
            {"form_field_id": name_ff, "answer": "Ada"},
            {"form_field_id": age_ff, "answer": "36"},
        ],
    })
    assert resp.status_code == 201
    submission = resp.json()["data"]
    assert submission["service_id"] == service["id"]
    assert submission["created_by"] == user["id"]
    assert [a["answer"] for a in submission["answers"]] == ["Ada", "36"]
    assert all(a["submission_id"] == submission["id"] for a in submission["answers"])

    resp = client.get(f"/submission/{submission['id']}")
    assert len(resp.json()["data"]["answers"]) == 2

    resp = client.get(f"/submission/service/{service['id']}")
    assert [s["id"] for s in resp.json()["data"]] == [submission["id"]]


def test_submission_with_unknown_form_field_stores_nothing(client, survey):
    service, _, (name_ff, _) = survey
    resp = client.post("/submission", json={
        "service_id": service["id"],
        "answers": [{"form_field_id": name_ff, "answer": "Ada"}, {"form_field_id": 999, "answer": "x"}],
    })
    assert resp.status_code == 404
    assert client.get("/submission").json()["data"] == []


def test_submission_requires_answers(client, survey):
    service, _, _ = survey
    resp = client.post("/submission", json={"service_id": service["id"], "answers": []})
    assert resp.status_code == 400


def test_answer_longer_than_limit_is_rejected(client, survey):
    _, _, (name_ff, _) = survey
    resp = client.post("/submission", json={"answers": [{"form_field_id": name_ff, "answer": "x" * 251}]})
    assert resp.status_code == 400


def test_submission_for_unknown_user_is_not_found(client, survey):
    _, _, (name_ff, _) = survey
    resp = client.post("/submission", json={"created_by": 42, "answers": [{"form_field_id": name_ff, "answer": "A"}]})
    assert resp.status_code == 404
    assert resp.json()["error"] == "User not found"


def test_deleting_submission_removes_answers(client, survey):
    _, _, (name_ff, _) = survey
    submission = client.post("/submission", json={"answers": [{"form_field_id": name_ff, "answer": "Ada"}]}).json()["data"]
    answer_id = submission["answers"][0]["id"]

    assert client.delete(f"/submission/{submission['id']}").status_code == 200
    assert client.get(f"/submission/{submission['id']}").status_code == 404
    assert client.get(f"/answers/{answer_id}").status_code == 404


def test_answer_crud(client, survey):
    _, _, (name_ff, age_ff) = survey
    submission = client.post("/submission", json={"answers": [{"form_field_id": name_ff, "answer": "Ada"}]}).json()["data"]

    resp = client.post("/answers", json={"form_field_id": age_ff, "answer": "36", "submission_id": submission["id"]})
    assert resp.status_code == 201
    answer = resp.json()["data"]

    resp = client.put(f"/answers/{answer['id']}", json={"form_field_id": age_ff, "answer": "37", "submission_id": submission["id"]})
    assert resp.json()["data"]["answer"] == "37"

    assert len(client.get(f"/submission/{submission['id']}").json()["data"]["answers"]) == 2

    assert client.delete(f"/answers/{answer['id']}").status_code == 200
    assert client.delete(f"/answers/{answer['id']}").status_code == 404
