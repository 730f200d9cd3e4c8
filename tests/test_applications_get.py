def test_get_unknown_application_returns_404(client):
    r = client.get("/api/v1/applications/does-not-exist")
    assert r.status_code == 404
    assert r.json()["detail"] == "The application with ID does-not-exist is not found"


def test_get_with_empty_id_is_invalid_payload_not_a_redirect(client):
    r = client.get("/api/v1/applications/", follow_redirects=False)
    assert r.status_code == 422
    assert r.json()["detail"] == "Invalid ID provided."
