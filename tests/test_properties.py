from models import RentLog
from database import SessionLocal


def test_create_infers_income_producing_from_status(make_property):
     assert make_property(status="Leased")["income_producing"] == "YES"
     assert make_property(address="1 Elm St", status="vacant")["income_producing"] == "NO"
     assert make_property(address="2 Elm St", status="Under Review")["income_producing"] == "NO"


def test_create_keeps_explicit_income_producing(make_property):
     prop = make_property(status="Vacant", income_producing="YES")
     assert prop["income_producing"] == "YES"


def test_create_requires_core_fields(client):
     resp = client.post("/api/properties", json={"property_name": "No Owner"})
     assert resp.status_code == 400
     body = resp.json()
     assert "Field required" in body["error"]
     assert {d["field"] for d in body["details"]} >= {"owner", "address", "type", "status"}


def test_create_fills_city_state_from_zipcode(make_property, geocoder):
     prop = make_property(zipcode="02134")
     assert prop["zipcode"] == "02134"
     assert (prop["city"], prop["state"]) == ("Boston", "MA")
     assert geocoder.zip_calls == ["02134"]


def test_sent_city_state_win_over_lookup(make_property, geocoder):
     prop = make_property(zipcode="02134", city="Allston", state="MA")
     assert prop["city"] == "Allston"
     assert geocoder.zip_calls == []


def test_numeric_zipcode_is_zero_padded(make_property):
     assert make_property(zipcode=2134)["zipcode"] == "02134"


def test_zip_lookup_failure_does_not_block_save(make_property, geocoder):
     geocoder.fail = True
     prop = make_property(zipcode="02134")
     assert prop["zipcode"] == "02134"
     assert prop["city"] is None


def test_invalid_zipcode_rejected(client, make_property):
     resp = client.post("/api/properties", json={
          "property_name": "Bad Zip",
          "owner": "Someone",
          "address": "3 Oak St",
          "type": "Condo",
          "status": "Vacant",
          "zipcode": "1234",
     })
     assert resp.status_code == 400
     assert resp.json()["error"] == "Zip code must be exactly 5 digits."

     prop = make_property()
     resp = client.patch(f"/api/properties/{prop['property_id']}", json={"zipcode": "12a45"})
     assert resp.status_code == 400


def test_list_and_get(client, make_property):
     first = make_property()
     second = make_property(address="99 Birch Rd")

     resp = client.get("/api/properties")
     assert resp.status_code == 200
     assert [p["property_id"] for p in resp.json()] == [first["property_id"], second["property_id"]]

     resp = client.get(f"/api/properties/{second['property_id']}")
     assert resp.json()["address"] == "99 Birch Rd"

     resp = client.get("/api/properties/9999")
     assert resp.status_code == 404
     assert resp.json() == {"error": "Property with ID 9999 not found"}


def test_duplicate_address_conflicts(client, make_property):
     make_property(zipcode="10001")
     resp = client.post("/api/properties", json={
          "property_name": "Copy",
          "owner": "Someone Else",
          "address": "12 Maple St",
          "type": "Duplex",
          "status": "Vacant",
          "zipcode": "10001",
     })
     assert resp.status_code == 409


def test_patch_status_rederives_income_producing(client, make_property):
     prop = make_property(status="Vacant")
     url = f"/api/properties/{prop['property_id']}"

     resp = client.patch(url, json={"status": "Subleased"})
     assert resp.status_code == 200
     assert resp.json()["income_producing"] == "YES"

     resp = client.patch(url, json={"status": "Pending"})
     assert resp.json()["income_producing"] == "NO"

     resp = client.patch(url, json={"status": "Leased", "income_producing": "NO"})
     assert resp.json()["income_producing"] == "NO"


def test_patch_zipcode_refreshes_city_state(client, make_property, geocoder):
     prop = make_property(zipcode="02134")
     resp = client.patch(f"/api/properties/{prop['property_id']}", json={"zipcode": "10001"})
     assert resp.status_code == 200
     assert (resp.json()["city"], resp.json()["state"]) == ("New York", "NY")

     resp = client.patch(f"/api/properties/{prop['property_id']}", json={"county": "Kings"})
     assert resp.json()["city"] == "New York"
     assert geocoder.zip_calls == ["02134", "10001"]


def test_patch_coerces_numeric_strings(client, make_property):
     prop = make_property()
     resp = client.patch(f"/api/properties/{prop['property_id']}", json={
          "year": "1998",
          "market_value": "425000.50",
     })
     assert resp.status_code == 200
     assert resp.json()["year"] == 1998
     assert float(resp.json()["market_value"]) == 425000.50

     resp = client.patch(f"/api/properties/{prop['property_id']}", json={"market_value": ""})
     assert resp.json()["market_value"] is None


def test_patch_rejects_blank_required_field(client, make_property):
     prop = make_property()
     resp = client.patch(f"/api/properties/{prop['property_id']}", json={"property_name": "  "})
     assert resp.status_code == 400
     assert resp.json()["error"] == "property_name cannot be empty."


def test_patch_rejects_unknown_and_empty_bodies(client, make_property):
     prop = make_property()
     url = f"/api/properties/{prop['property_id']}"
     assert client.patch(url, json={"nickname": "x"}).status_code == 400
     assert client.patch(url, json={}).json() == {"error": "No fields to update"}
     assert client.patch("/api/properties/9999", json={"owner": "x"}).status_code == 404


def test_put_replaces_property(client, make_property):
     prop = make_property(status="Vacant", county="Suffolk")
     resp = client.put(f"/api/properties/{prop['property_id']}", json={
          "property_name": "Maple Duplex",
          "owner": "New Owner",
          "address": "12 Maple St",
          "type": "Duplex",
          "status": "Leased",
     })
     assert resp.status_code == 200
     body = resp.json()
     assert body["owner"] == "New Owner"
     assert body["county"] is None
     assert body["income_producing"] == "YES"


def test_toggle_income_producing(client, make_property):
     prop = make_property(status="Vacant")
     url = f"/api/properties/{prop['property_id']}/income_producing/toggle"
     assert client.post(url).json()["income_producing"] == "YES"
     assert client.post(url).json()["income_producing"] == "NO"


def test_delete_removes_dependents(client, make_property):
     prop = make_property()
     client.post("/api/rentlog", json={
          "property_id": prop["property_id"], "month": "Jan", "year": 2025, "rent_amount": 1000,
     })
     client.post("/api/transactions", json={
          "property_id": prop["property_id"], "amount": 50, "date": "2025-01-05",
     })

     resp = client.delete(f"/api/properties/{prop['property_id']}")
     assert resp.status_code == 204
     assert client.get(f"/api/properties/{prop['property_id']}").status_code == 404
     assert client.delete(f"/api/properties/{prop['property_id']}").status_code == 404

     with SessionLocal() as db:
          assert db.query(RentLog).count() == 0


def test_unknown_route(client):
     resp = client.get("/api/nothing-here")
     assert resp.status_code == 404
     assert resp.json() == {"error": "Route not found"}


def test_zip_change_fills_only_unsent_city_or_state(client, make_property, geocoder):
     prop = make_property(zipcode="02134")
     url = f"/api/properties/{prop['property_id']}"

     resp = client.patch(url, json={"zipcode": "10001", "state": "NJ"})
     assert resp.status_code == 200
     assert (resp.json()["city"], resp.json()["state"]) == ("New York", "NJ")

     resp = client.patch(url, json={"zipcode": "02134", "city": "Allston"})
     assert (resp.json()["city"], resp.json()["state"]) == ("Allston", "MA")
     assert geocoder.zip_calls == ["02134", "10001", "02134"]


def test_unhandled_error_returns_500_body(client, make_property, monkeypatch):
     import routers.properties

     def broken(prop):
          raise RuntimeError("boom")

     prop = make_property()
     monkeypatch.setattr(routers.properties, "toggle_income_producing", broken)

     resp = client.post(f"/api/properties/{prop['property_id']}/income_producing/toggle")
     assert resp.status_code == 500
     assert resp.json() == {"error": "Internal server error"}
