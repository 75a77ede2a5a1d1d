"""
Integration tests for the doctors endpoints.

Each test runs against a fresh SQLite file created by the application
lifespan, so row ids start at 1.

To run the tests:

```
pytest -q tests
```
"""

import logging

from fastapi.testclient import TestClient


def test_list_empty(client):
    response = client.get("/api/doctors")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "results": 0, "data": {"doctors": []}}


def test_create_returns_row_with_assigned_id(client):
    response = client.post(
        "/api/doctors",
        json={"name": "Ada", "city": "Boston", "specialty": "Cardiology"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "success"
    assert body["data"]["doctor"] == {
        "id": 1,
        "name": "Ada",
        "city": "Boston",
        "specialty": "Cardiology",
    }


def test_create_with_missing_fields_stores_null(client):
    response = client.post("/api/doctors", json={"name": "Grace"})

    assert response.status_code == 201
    doctor = response.json()["data"]["doctor"]
    assert doctor["name"] == "Grace"
    assert doctor["city"] is None
    assert doctor["specialty"] is None


def test_create_without_body_stores_null_row(client):
    response = client.post("/api/doctors")

    assert response.status_code == 201
    assert response.json()["data"]["doctor"] == {"id": 1, "name": None, "city": None, "specialty": None}


def test_create_passes_numbers_to_store(client):
    response = client.post(
        "/api/doctors",
        json={"name": 123, "city": "Boston", "specialty": "Cardiology"},
    )

    assert response.status_code == 201
    # The TEXT column stores the number as text.
    assert response.json()["data"]["doctor"]["name"] == "123"


def test_get_one_returns_stored_row(client, ada):
    response = client.get(f"/api/doctors/{ada['id']}")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": {"doctor": ada}}


def test_get_one_unknown_id_is_not_an_error(client, ada):
    response = client.get("/api/doctors/9999")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": {"doctor": None}}


def test_get_one_non_numeric_id_matches_nothing(client, ada):
    response = client.get("/api/doctors/abc")

    assert response.status_code == 200
    assert response.json()["data"]["doctor"] is None


def test_list_count_matches_rows(client):
    for name in ("Ada", "Grace", "Barbara"):
        client.post("/api/doctors", json={"name": name, "city": "Boston", "specialty": "Surgery"})

    body = client.get("/api/doctors").json()

    assert body["results"] == 3
    assert [d["name"] for d in body["data"]["doctors"]] == ["Ada", "Grace", "Barbara"]


def test_update_overwrites_all_fields(client, ada):
    response = client.put(
        f"/api/doctors/{ada['id']}",
        json={"name": "Ada L.", "city": "Cambridge", "specialty": "Neurology"},
    )

    assert response.status_code == 200
    updated = {"id": ada["id"], "name": "Ada L.", "city": "Cambridge", "specialty": "Neurology"}
    assert response.json() == {"status": "success", "data": {"doctor": updated}}
    assert client.get(f"/api/doctors/{ada['id']}").json()["data"]["doctor"] == updated


def test_update_is_not_partial(client, ada):
    client.put(f"/api/doctors/{ada['id']}", json={"name": "Ada L."})

    doctor = client.get(f"/api/doctors/{ada['id']}").json()["data"]["doctor"]
    assert doctor == {"id": ada["id"], "name": "Ada L.", "city": None, "specialty": None}


def test_update_without_body_clears_fields(client, ada):
    response = client.put(f"/api/doctors/{ada['id']}")

    assert response.status_code == 200
    cleared = {"id": ada["id"], "name": None, "city": None, "specialty": None}
    assert response.json() == {"status": "success", "data": {"doctor": cleared}}


def test_update_unknown_id(client):
    response = client.put("/api/doctors/42", json={"name": "Nobody"})

    assert response.status_code == 200
    assert response.json()["data"]["doctor"] is None
    assert client.get("/api/doctors").json()["results"] == 0


def test_delete_returns_empty_204(client, ada):
    response = client.delete(f"/api/doctors/{ada['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/api/doctors/{ada['id']}").json()["data"]["doctor"] is None


def test_delete_unknown_id(client, ada):
    response = client.delete("/api/doctors/9999")

    assert response.status_code == 204
    assert client.get("/api/doctors").json()["results"] == 1


def test_full_lifecycle(client):
    created = client.post(
        "/api/doctors",
        json={"name": "Ada", "city": "Boston", "specialty": "Cardiology"},
    )
    assert created.status_code == 201

    doctors = client.get("/api/doctors").json()["data"]["doctors"]
    assert len(doctors) == 1
    doctor_id = doctors[0]["id"]
    assert {k: doctors[0][k] for k in ("name", "city", "specialty")} == {
        "name": "Ada",
        "city": "Boston",
        "specialty": "Cardiology",
    }

    client.put(
        f"/api/doctors/{doctor_id}",
        json={"name": "Ada L.", "city": "Boston", "specialty": "Cardiology"},
    )
    assert client.get(f"/api/doctors/{doctor_id}").json()["data"]["doctor"]["name"] == "Ada L."

    assert client.delete(f"/api/doctors/{doctor_id}").status_code == 204
    assert client.get(f"/api/doctors/{doctor_id}").json()["data"]["doctor"] is None


def test_rows_survive_restart(app):
    with TestClient(app) as first:
        first.post("/api/doctors", json={"name": "Ada", "city": "Boston", "specialty": "Cardiology"})

    with TestClient(app) as second:
        assert second.get("/api/doctors").json()["results"] == 1


def test_store_failure_returns_error_envelope(client, caplog):
    # Closing the shared connection makes every statement fail.
    client.app.state.db.close()

    with caplog.at_level(logging.ERROR, logger="doctors_api.app.main"):
        responses = [
            client.get("/api/doctors"),
            client.get("/api/doctors/1"),
            client.post("/api/doctors", json={"name": "Ada"}),
            client.put("/api/doctors/1", json={"name": "Ada"}),
            client.delete("/api/doctors/1"),
        ]

    for response in responses:
        assert response.status_code == 500
        assert response.json() == {"status": "error", "message": "Internal server error"}
    assert len([r for r in caplog.records if r.name == "doctors_api.app.main"]) == 5
