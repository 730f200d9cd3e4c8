from loan_ledger.scripts.seed_dev_data import DEMO_APPLICATIONS, seed_dev_data


def test_seed_dev_data_is_idempotent(database_url, client):
    r1 = seed_dev_data(database_url)
    r2 = seed_dev_data(database_url)

    assert r1.created_ids == r1.application_ids
    assert r2.created_ids == ()
    assert r1.application_ids == r2.application_ids

    items = client.get("/api/v1/applications").json()
    assert [i["id"] for i in items] == sorted(spec.id for spec in DEMO_APPLICATIONS)


def test_seeded_applications_have_derived_fields(database_url, client):
    seed_dev_data(database_url)

    r = client.get(f"/api/v1/applications/{DEMO_APPLICATIONS[1].id}")
    assert r.status_code == 200, r.text

    data = r.json()
    assert data["principal"] == 1200
    assert data["duration"] == 6
    assert data["interest"] == 12.0
    assert data["total_amount"] == 1212.0
    assert data["status"] == "pending"
