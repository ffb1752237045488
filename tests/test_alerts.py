import pytest


@pytest.fixture
def alert_body(student, tablet):
    return {
        "studentId": student["id"],
        "tabletId": tablet["id"],
        "alertType": "inappropriate_content",
        "severity": "high",
        "title": "Contenido inapropiado detectado",
    }


def _ids(resp):
    return {a["id"] for a in resp.json()}


def test_alert_resolution_flow(client, alert_body):
    resp = client.post("/api/alerts", json=alert_body)
    assert resp.status_code == 200
    alert = resp.json()
    assert alert["isResolved"] is False
    assert alert["resolvedAt"] is None

    assert alert["id"] in _ids(client.get("/api/alerts", params={"resolved": "false"}))

    resp = client.put(f"/api/alerts/{alert['id']}/resolve", json={"resolvedBy": None})
    assert resp.status_code == 200
    assert resp.json()["isResolved"] is True
    assert resp.json()["resolvedAt"] is not None

    assert alert["id"] not in _ids(client.get("/api/alerts", params={"resolved": "false"}))
    assert alert["id"] in _ids(client.get("/api/alerts", params={"resolved": "true"}))


def test_resolved_filter_partitions_all_alerts(client, alert_body):
    created = [client.post("/api/alerts", json=alert_body).json() for _ in range(4)]
    client.put(f"/api/alerts/{created[0]['id']}/resolve", json={})
    client.put(f"/api/alerts/{created[2]['id']}/resolve", json={})

    every = _ids(client.get("/api/alerts"))
    unresolved = _ids(client.get("/api/alerts", params={"resolved": "false"}))
    resolved = _ids(client.get("/api/alerts", params={"resolved": "true"}))

    assert unresolved | resolved == every
    assert unresolved & resolved == set()
    assert resolved == {created[0]["id"], created[2]["id"]}


def test_resolving_twice_overwrites_resolved_at(client, alert_body):
    alert = client.post("/api/alerts", json=alert_body).json()
    first = client.put(f"/api/alerts/{alert['id']}/resolve", json={}).json()
    second = client.put(f"/api/alerts/{alert['id']}/resolve", json={}).json()
    assert second["isResolved"] is True
    assert second["resolvedAt"] is not None
    assert second["resolvedAt"] >= first["resolvedAt"]


def test_resolve_records_resolver(client, alert_body):
    user = client.post("/api/users", json={"username": "mgonzalez", "password": "secreto", "name": "María González"}).json()
    alert = client.post("/api/alerts", json=alert_body).json()
    resp = client.put(f"/api/alerts/{alert['id']}/resolve", json={"resolvedBy": user["id"]})
    assert resp.json()["resolvedBy"] == user["id"]


def test_resolve_unknown_alert_fails(client):
    resp = client.put("/api/alerts/missing/resolve", json={})
    assert resp.status_code == 500


def test_alert_list_includes_student_and_tablet(client, alert_body, student, tablet):
    client.post("/api/alerts", json=alert_body)
    alerts = client.get("/api/alerts").json()
    assert alerts[0]["student"] == {"id": student["id"], "name": student["name"]}
    assert alerts[0]["tablet"] == {"id": tablet["id"], "tabletNumber": tablet["tabletNumber"]}


def test_severity_defaults_to_medium(client, alert_body):
    del alert_body["severity"]
    assert client.post("/api/alerts", json=alert_body).json()["severity"] == "medium"


def test_invalid_severity_is_rejected(client, alert_body):
    alert_body["severity"] = "critical"
    assert client.post("/api/alerts", json=alert_body).status_code == 400


def test_alert_for_unknown_student_is_rejected(client, alert_body):
    alert_body["studentId"] = "ghost"
    assert client.post("/api/alerts", json=alert_body).status_code == 400


def test_alert_created_resolved_gets_resolved_at(client, alert_body):
    alert_body["isResolved"] = True
    alert = client.post("/api/alerts", json=alert_body).json()
    assert alert["resolvedAt"] is not None


def test_resolve_with_unknown_resolver_is_rejected(client, alert_body):
    alert = client.post("/api/alerts", json=alert_body).json()
    resp = client.put(f"/api/alerts/{alert['id']}/resolve", json={"resolvedBy": "ghost"})
    assert resp.status_code == 400

    unresolved = _ids(client.get("/api/alerts", params={"resolved": "false"}))
    assert alert["id"] in unresolved


def test_create_alert_with_unknown_resolver_is_rejected(client, alert_body):
    alert_body.update({"isResolved": True, "resolvedBy": "ghost"})
    assert client.post("/api/alerts", json=alert_body).status_code == 400
