from app.services.dashboard_service import get_dashboard_stats


def test_dashboard_stats_empty(client):
    resp = client.get("/api/dashboard/stats")
    assert resp.status_code == 200
    assert resp.json() == {
        "activeTablets": 0,
        "totalTablets": 0,
        "activeAlerts": 0,
        "averageTime": 0,
        "blockedSites": 0,
    }


def test_dashboard_stats_two_online_tablets(client):
    resp = client.post("/api/tablets", json={"tabletNumber": "T-01", "status": "online", "screenTime": 40})
    assert resp.status_code == 200
    resp = client.post("/api/tablets", json={"tabletNumber": "T-02", "status": "online", "screenTime": 20})
    assert resp.status_code == 200

    stats = client.get("/api/dashboard/stats").json()
    assert stats["activeTablets"] == 2
    assert stats["totalTablets"] == 2
    assert stats["averageTime"] == 30


def test_average_time_ignores_tablets_that_are_not_online(client, make_tablet):
    make_tablet(status="online", screenTime=10)
    make_tablet(status="offline", screenTime=500)
    make_tablet(status="warning", screenTime=300)
    make_tablet(status="blocked", screenTime=200)

    stats = client.get("/api/dashboard/stats").json()
    assert stats["totalTablets"] == 4
    assert stats["activeTablets"] == 1
    assert stats["averageTime"] == 10


def test_average_time_is_zero_when_nothing_online(client, make_tablet):
    make_tablet(status="offline", screenTime=90)
    stats = client.get("/api/dashboard/stats").json()
    assert stats["activeTablets"] == 0
    assert stats["averageTime"] == 0


def test_average_time_rounds_half_up(db_session, make_tablet):
    make_tablet(status="online", screenTime=40)
    make_tablet(status="online", screenTime=21)
    assert get_dashboard_stats(db_session).average_time == 31


def test_dashboard_counts_unresolved_alerts_and_active_sites(client, student, tablet):
    base = {"studentId": student["id"], "tabletId": tablet["id"], "alertType": "excessive_time", "title": "Tiempo excedido"}
    first = client.post("/api/alerts", json=base).json()
    client.post("/api/alerts", json=base)
    client.put(f"/api/alerts/{first['id']}/resolve", json={})

    client.post("/api/blocked-sites", json={"url": "games.example.com", "category": "gaming"})
    client.post("/api/blocked-sites", json={"url": "old.example.com", "category": "social", "isActive": False})

    stats = client.get("/api/dashboard/stats").json()
    assert stats["activeAlerts"] == 1
    assert stats["blockedSites"] == 1


def test_average_time_rounds_negative_means_like_math_round(db_session):
    from app.models.tablet import Tablet

    for number, minutes in (("T-01", -3), ("T-02", -3), ("T-03", -2)):
        db_session.add(Tablet(tablet_number=number, status="online", screen_time=minutes))
    db_session.commit()

    assert get_dashboard_stats(db_session).average_time == -3
