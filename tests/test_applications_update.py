def _create(client, principal=1000, duration=12) -> str:
    r = client.post("/api/v1/applications", json={"principal": principal, "duration": duration})
    assert r.status_code == 201, r.text
    return r.json()["application"]["id"]


def test_update_recomputes_interest_from_new_values(client):
    app_id = _create(client)
    before = client.get(f"/api/v1/applications/{app_id}").json()

    r = client.put(f"/api/v1/applications/{app_id}", json={"principal": 2000, "duration": 24})
    assert r.status_code == 200, r.text
    assert r.json()["message"] == (
        f"You have updated an application with ID {app_id} to have a principal amount "
        "of 2000 and duration of 24 months"
    )

    after = client.get(f"/api/v1/applications/{app_id}").json()
    assert after["id"] == app_id
    assert after["principal"] == 2000
    assert after["duration"] == 24
    assert after["interest"] == 80.0
    assert after["total_amount"] == 2080.0
    assert after["interest_rate"] == before["interest_rate"]
    assert after["status"] == "pending"
    assert after["created_at"] == before["created_at"]
    assert after["updated_at"] is not None


def test_update_unknown_id_returns_404_before_payload_validation(client):
    r = client.put("/api/v1/applications/missing", json={"principal": 0, "duration": 0})
    assert r.status_code == 404
    assert r.json()["detail"] == "The application with ID missing is not found"


def test_update_invalid_payload_returns_422_and_keeps_record(client):
    app_id = _create(client)

    r = client.put(f"/api/v1/applications/{app_id}", json={"principal": 1000, "duration": 0})
    assert r.status_code == 422
    assert r.json()["detail"] == "Invalid payload provided."

    current = client.get(f"/api/v1/applications/{app_id}").json()
    assert current["duration"] == 12
    assert current["updated_at"] is None


def test_update_does_not_add_records(client):
    app_id = _create(client)
    client.put(f"/api/v1/applications/{app_id}", json={"principal": 3000, "duration": 6})
    client.put("/api/v1/applications/missing", json={"principal": 3000, "duration": 6})

    items = client.get("/api/v1/applications").json()
    assert [i["id"] for i in items] == [app_id]


def test_update_with_empty_id_is_not_found(client):
    r = client.put(
        "/api/v1/applications/",
        json={"principal": 1000, "duration": 12},
        follow_redirects=False,
    )
    assert r.status_code == 404
    assert r.json()["detail"] == "The application with ID  is not found"
