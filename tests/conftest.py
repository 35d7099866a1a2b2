import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["GEOCODE_DELAY_SECONDS"] = "0"

import pytest
from fastapi.testclient import TestClient

import routers.geo
import services.property_service
from database import engine, init_db
from main import app
from models import Base
from utils.geocoding import GeocodingError


class FakeGeocoder:
     """Stands in for zippopotam.us and Nominatim."""

     def __init__(self):
          self.places = {
               "02134": {"city": "Boston", "state": "MA"},
               "10001": {"city": "New York", "state": "NY"},
          }
          self.coordinates = {}
          self.zip_calls = []
          self.address_calls = []
          self.fail = False

     def lookup_zipcode(self, zipcode):
          self.zip_calls.append(zipcode)
          if self.fail:
               raise GeocodingError("service down")
          return self.places.get(zipcode)

     def geocode_address(self, query):
          self.address_calls.append(query)
          if self.fail:
               raise GeocodingError("service down")
          for needle, hit in self.coordinates.items():
               if needle in query:
                    return hit
          return None


@pytest.fixture(autouse=True)
def database():
     init_db()
     yield
     Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def geocoder(monkeypatch):
     fake = FakeGeocoder()
     monkeypatch.setattr(services.property_service, "lookup_zipcode", fake.lookup_zipcode)
     monkeypatch.setattr(services.property_service, "geocode_address", fake.geocode_address)
     monkeypatch.setattr(routers.geo, "lookup_zipcode", fake.lookup_zipcode)
     return fake


@pytest.fixture
def client():
     with TestClient(app) as c:
          yield c


@pytest.fixture
def make_property(client):
     def _make(**overrides):
          body = {
               "property_name": "Maple Duplex",
               "owner": "Maple Holdings LLC",
               "address": "12 Maple St",
               "type": "Duplex",
               "status": "Vacant",
          }
          body.update(overrides)
          resp = client.post("/api/properties", json=body)
          assert resp.status_code == 201, resp.text
          return resp.json()
     return _make


@pytest.fixture
def purchase(client, make_property):
     prop = make_property()
     resp = client.post("/api/purchase_details", json={
          "property_id": prop["property_id"],
          "purchase_price": 350000,
     })
     assert resp.status_code == 201, resp.text
     return resp.json()


@pytest.fixture
def loan(client, purchase):
     resp = client.post("/api/loan_details", json={
          "loan_id": "WF-88213",
          "property_id": purchase["property_id"],
          "purchase_id": purchase["purchase_id"],
          "loan_amount": 280000,
          "loan_start": "2024-06-01",
          "monthly_payment": 1724.01,
     })
     assert resp.status_code == 201, resp.text
     return resp.json()
