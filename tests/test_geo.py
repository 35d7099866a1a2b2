def test_zip_lookup(client):
     resp = client.get("/api/zipcodes/02134")
     assert resp.status_code == 200
     assert resp.json() == {"zipcode": "02134", "city": "Boston", "state": "MA"}


def test_zip_lookup_errors(client, geocoder):
     assert client.get("/api/zipcodes/abcde").status_code == 400
     assert client.get("/api/zipcodes/123456").status_code == 400

     resp = client.get("/api/zipcodes/99999")
     assert resp.status_code == 404

     geocoder.fail = True
     resp = client.get("/api/zipcodes/02134")
     assert resp.status_code == 502
     assert resp.json() == {"error": "ZIP lookup service unavailable"}


def test_property_markers(client, make_property):
     prop = make_property(zipcode="02134")
     client.patch(f"/api/properties/{prop['property_id']}", json={"lat": 42.35, "lng": -71.13})
     make_property(address="5 Pine Ct")

     markers = client.get("/api/property_markers").json()
     assert markers[0] == {
          "id": prop["property_id"],
          "name": "Maple Duplex",
          "address": "12 Maple St",
          "city": "Boston",
          "state": "MA",
          "zipcode": "02134",
          "lat": 42.35,
          "lng": -71.13,
     }
     assert markers[1]["city"] == ""
     assert markers[1]["lat"] is None


def test_geocode_missing(client, make_property, geocoder):
     maple = make_property(zipcode="02134")
     pine = make_property(address="5 Pine Ct")
     geocoder.coordinates["Maple"] = {"lat": 42.35, "lng": -71.13}

     resp = client.post("/api/admin/geocode-missing")
     assert resp.status_code == 200
     assert resp.json() == {"updated_count": 1, "ids": [maple["property_id"]]}
     assert geocoder.address_calls == ["12 Maple St, Boston, MA, 02134", "5 Pine Ct"]

     updated = client.get(f"/api/properties/{maple['property_id']}").json()
     assert updated["lat"] == 42.35
     assert updated["geocoded_at"] is not None
     assert client.get(f"/api/properties/{pine['property_id']}").json()["lat"] is None

     # already placed properties are not looked up again
     geocoder.address_calls.clear()
     client.post("/api/admin/geocode-missing")
     assert geocoder.address_calls == ["5 Pine Ct"]


def test_geocode_missing_skips_failures(client, make_property, geocoder):
     make_property()
     geocoder.fail = True
     resp = client.post("/api/admin/geocode-missing")
     assert resp.json() == {"updated_count": 0, "ids": []}
