import main


def test_health_ok(client):
     resp = client.get("/health")
     assert resp.status_code == 200
     assert resp.json() == {"status": "ok"}


def test_health_reports_database_failure(client, monkeypatch):
     monkeypatch.setattr(main, "check_connection", lambda: False)
     resp = client.get("/health")
     assert resp.status_code == 500
     assert resp.json() == {"status": "error", "db": False}
