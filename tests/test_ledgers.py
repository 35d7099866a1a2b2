def test_rent_log_create_defaults(client, make_property):
     prop = make_property()
     resp = client.post("/api/rentlog", json={"property_id": prop["property_id"], "month": "Feb", "year": 2025})
     assert resp.status_code == 200
     row = resp.json()
     assert float(row["rent_amount"]) == 0
     assert row["date_deposited"] is not None


def test_rent_log_upsert_keeps_omitted_fields(client, make_property):
     prop = make_property()
     key = {"property_id": prop["property_id"], "month": "Jan", "year": 2025}

     first = client.post("/api/rentlog", json={
          **key,
          "rent_amount": 1850,
          "check_number": 1042,
          "notes": "on time",
          "date_deposited": "2025-01-03T00:00:00",
     }).json()
     assert first["date_deposited"].startswith("2025-01-03")

     second = client.post("/api/rentlog", json={**key, "notes": None, "check_number": None}).json()
     assert second["rent_id"] == first["rent_id"]
     assert float(second["rent_amount"]) == 1850
     assert second["check_number"] == 1042
     assert second["notes"] == "on time"

     third = client.post("/api/rentlog", json={**key, "notes": "bounced"}).json()
     assert third["notes"] == "bounced"
     assert third["date_deposited"] == second["date_deposited"]


def test_rent_log_stamps_deposit_date_when_rent_entered(client, make_property):
     prop = make_property()
     key = {"property_id": prop["property_id"], "month": "Jan", "year": 2025}
     client.post("/api/rentlog", json={**key, "date_deposited": "2025-01-03"})

     row = client.post("/api/rentlog", json={**key, "check_number": 1043}).json()
     assert row["check_number"] == 1043
     assert not row["date_deposited"].startswith("2025-01-03")

     row = client.post("/api/rentlog", json={**key, "rent_amount": 1900, "date_deposited": "2025-01-09"}).json()
     assert row["date_deposited"].startswith("2025-01-09")


def test_rent_log_listing_order_and_alias(client, make_property):
     prop = make_property()
     for year, month in ((2025, "Mar"), (2024, "Dec"), (2025, "Jan"), (2025, "Oct")):
          client.post("/api/rentroll", json={"property_id": prop["property_id"], "month": month, "year": year})

     rows = client.get("/api/rentlog", params={"property_id": prop["property_id"]}).json()
     assert [(r["year"], r["month"]) for r in rows] == [
          (2024, "Dec"), (2025, "Jan"), (2025, "Mar"), (2025, "Oct"),
     ]

     rows = client.get("/api/rentroll", params={"property_id": prop["property_id"], "year": 2025}).json()
     assert [r["month"] for r in rows] == ["Jan", "Mar", "Oct"]


def test_rent_log_validation(client, make_property):
     prop = make_property()
     assert client.get("/api/rentlog").status_code == 400
     assert client.post("/api/rentlog", json={"property_id": prop["property_id"], "month": "Jan"}).status_code == 400
     resp = client.post("/api/rentlog", json={"property_id": 9999, "month": "Jan", "year": 2025})
     assert resp.status_code == 404


def test_payment_log_upsert(client, make_property):
     prop = make_property()
     key = {"property_id": prop["property_id"], "month": "Apr", "year": 2025}

     created = client.post("/api/paymentlog", json=key).json()
     assert float(created["payment_amount"]) == 0
     assert created["date_paid"] is None

     updated = client.post("/api/paymentlog", json={**key, "payment_amount": "612.40", "date_paid": "2025-04-02"}).json()
     assert updated["id"] == created["id"]
     assert float(updated["payment_amount"]) == 612.40
     assert updated["date_paid"].startswith("2025-04-02")

     kept = client.post("/api/paymentlog", json={**key, "payment_amount": None, "check_number": 2001}).json()
     assert float(kept["payment_amount"]) == 612.40
     assert kept["check_number"] == 2001


def test_payment_log_listing(client, make_property):
     prop = make_property()
     for month in ("Jun", "Feb", "Nov"):
          client.post("/api/paymentlog", json={"property_id": prop["property_id"], "month": month, "year": 2025})
     client.post("/api/paymentlog", json={"property_id": prop["property_id"], "month": "Jan", "year": 2024})

     rows = client.get("/api/paymentlog", params={"property_id": prop["property_id"], "year": 2025}).json()
     assert [r["month"] for r in rows] == ["Feb", "Jun", "Nov"]

     assert client.get("/api/paymentlog", params={"property_id": prop["property_id"]}).status_code == 400


def test_tenant_upsert(client, make_property):
     prop = make_property()
     body = {
          "property_id": prop["property_id"],
          "tenant_name": "Jordan Smith",
          "lease_start": "2025-01-01",
          "rent_amount": 1850,
     }

     resp = client.post("/api/tenant", json=body)
     assert resp.status_code == 201
     created = resp.json()
     assert created["tenant_status"] == "Inactive"

     resp = client.post("/api/tenant", json={**body, "tenant_status": "Active", "rent_amount": 1900})
     assert resp.status_code == 201
     assert resp.json()["tenant_id"] == created["tenant_id"]
     assert resp.json()["tenant_status"] == "Active"

     client.post("/api/tenant", json={**body, "lease_start": "2026-01-01"})
     rows = client.get("/api/tenant", params={"property_id": prop["property_id"]}).json()
     assert len(rows) == 2
     assert rows[0]["tenant_id"] == created["tenant_id"]


def test_tenant_patch_and_delete(client, make_property):
     prop = make_property()
     tenant = client.post("/api/tenant", json={"property_id": prop["property_id"], "tenant_name": "Ada"}).json()
     url = f"/api/tenant/{tenant['tenant_id']}"

     resp = client.patch(url, json={"lease_end": "2025-12-31", "tenant_name": None})
     assert resp.status_code == 200
     assert resp.json()["lease_end"].startswith("2025-12-31")
     assert resp.json()["tenant_name"] == "Ada"

     assert client.delete(url).status_code == 204
     assert client.patch(url, json={"tenant_status": "Active"}).status_code == 404
     assert client.get("/api/tenant").status_code == 400


def test_tenant_status_defaults_only_when_missing(client, make_property):
     prop = make_property()
     body = {"property_id": prop["property_id"], "tenant_name": "Lee", "lease_start": "2025-03-01"}

     assert client.post("/api/tenant", json={**body, "tenant_status": None}).json()["tenant_status"] == "Inactive"
     assert client.post("/api/tenant", json={**body, "tenant_status": ""}).json()["tenant_status"] == ""
