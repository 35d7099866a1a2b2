def _add(client, property_id, amount, date, **extra):
     resp = client.post("/api/transactions", json={"property_id": property_id, "amount": amount, "date": date, **extra})
     assert resp.status_code == 201, resp.text
     return resp.json()


def test_create_transaction(client, make_property):
     prop = make_property()
     row = _add(client, prop["property_id"], 425.50, "2025-03-14T00:00:00.000Z", transaction_type="Repair", notes="Water heater")
     assert row["transaction_date"] == "2025-03-14"
     assert float(row["transaction_amount"]) == 425.50
     assert row["transaction_type"] == "Repair"


def test_create_transaction_validation(client, make_property):
     prop = make_property()
     resp = client.post("/api/transactions", json={"property_id": prop["property_id"], "date": "2025-03-14"})
     assert resp.status_code == 400
     assert resp.json()["error"] == "amount: Field required"

     resp = client.post("/api/transactions", json={"property_id": 9999, "amount": 1, "date": "2025-03-14"})
     assert resp.status_code == 404


def test_list_transactions_newest_first_and_by_year(client, make_property):
     prop = make_property()
     pid = prop["property_id"]
     _add(client, pid, 10, "2024-12-31")
     _add(client, pid, 20, "2025-02-01")
     _add(client, pid, 30, "2025-06-15")

     rows = client.get("/api/transactions", params={"property_id": pid}).json()
     assert [r["transaction_date"] for r in rows] == ["2025-06-15", "2025-02-01", "2024-12-31"]

     rows = client.get("/api/transactions", params={"property_id": pid, "year": 2025}).json()
     assert [float(r["transaction_amount"]) for r in rows] == [30, 20]

     assert client.get("/api/transactions").status_code == 400


def test_patch_transaction(client, make_property):
     prop = make_property()
     row = _add(client, prop["property_id"], 10, "2025-01-01")
     url = f"/api/transactions/{row['transaction_id']}"

     resp = client.patch(url, json={"transaction_amount": "99.95", "transaction_date": "2025-01-20"})
     assert resp.status_code == 200
     assert float(resp.json()["transaction_amount"]) == 99.95
     assert resp.json()["transaction_date"] == "2025-01-20"

     assert client.patch(url, json={"transaction_amount": "abc"}).status_code == 400
     assert client.patch(url, json={"transaction_amount": ""}).status_code == 400
     assert client.patch(url, json={"transaction_date": "not a date"}).status_code == 400
     assert client.patch("/api/transactions/9999", json={"notes": "x"}).status_code == 404


def test_delete_transaction(client, make_property):
     prop = make_property()
     row = _add(client, prop["property_id"], 10, "2025-01-01")
     assert client.delete(f"/api/transactions/{row['transaction_id']}").status_code == 204
     assert client.delete(f"/api/transactions/{row['transaction_id']}").status_code == 404
