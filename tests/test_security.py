def test_blocked_site_crud(client):
    resp = client.post("/api/blocked-sites", json={"url": "juegos.example.com", "category": "gaming", "reason": "Horario de clase"})
    assert resp.status_code == 200
    site = resp.json()
    assert site["isActive"] is True

    assert [s["id"] for s in client.get("/api/blocked-sites").json()] == [site["id"]]

    assert client.delete(f"/api/blocked-sites/{site['id']}").status_code == 204
    assert client.get("/api/blocked-sites").json() == []
    assert client.delete(f"/api/blocked-sites/{site['id']}").status_code == 404


def test_blocked_site_requires_category(client):
    assert client.post("/api/blocked-sites", json={"url": "x.example.com"}).status_code == 400


def test_security_policies(client):
    rules = {"maxScreenTime": 60, "blockedCategories": ["social", "gaming"]}
    resp = client.post("/api/security-policies", json={"name": "Horario escolar", "rules": rules})
    assert resp.status_code == 200
    policy = resp.json()
    assert policy["rules"] == rules

    client.post("/api/security-policies", json={"name": "Inactiva", "rules": {}, "isActive": False})
    listed = client.get("/api/security-policies").json()
    assert [p["name"] for p in listed] == ["Horario escolar"]

    resp = client.put(f"/api/security-policies/{policy['id']}", json={"isActive": False})
    assert resp.status_code == 200
    assert resp.json()["rules"] == rules
    assert client.get("/api/security-policies").json() == []


def test_update_unknown_policy_fails(client):
    assert client.put("/api/security-policies/missing", json={"name": "x"}).status_code == 500


def test_create_user_hashes_password(client, db_session):
    resp = client.post("/api/users", json={"username": "mgonzalez", "password": "secreto", "name": "María González"})
    assert resp.status_code == 200
    user = resp.json()
    assert user["role"] == "teacher"
    assert "password" not in user

    from app.services.user_service import get_user_by_username
    from passlib.hash import bcrypt

    stored = get_user_by_username(db_session, "mgonzalez")
    assert stored.password != "secreto"
    assert bcrypt.verify("secreto", stored.password)

    assert client.get(f"/api/users/{user['id']}").json()["username"] == "mgonzalez"
    assert client.get("/api/users/unknown").status_code == 404


def test_duplicate_username_conflicts(client):
    body = {"username": "admin", "password": "x", "name": "Admin"}
    client.post("/api/users", json=body)
    assert client.post("/api/users", json=body).status_code == 409
