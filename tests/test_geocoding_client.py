import pytest
import requests

from utils import geocoding
from utils.geocoding import GeocodingError, geocode_address, lookup_zipcode


class FakeResponse:
     def __init__(self, status_code=200, payload=None):
          self.status_code = status_code
          self._payload = payload
          self.text = str(payload)

     def json(self):
          return self._payload


@pytest.fixture
def http(monkeypatch):
     calls = []
     responses = []

     def fake_get(url, **kwargs):
          calls.append((url, kwargs))
          result = responses.pop(0)
          if isinstance(result, Exception):
               raise result
          return result

     monkeypatch.setattr(geocoding.requests, "get", fake_get)
     return calls, responses


def test_lookup_zipcode_reads_first_place(http):
     calls, responses = http
     responses.append(FakeResponse(payload={
          "post code": "02134",
          "places": [{"place name": "Allston", "state abbreviation": "MA"}],
     }))

     assert lookup_zipcode("02134") == {"city": "Allston", "state": "MA"}
     assert calls[0][0].endswith("/02134")
     assert "timeout" in calls[0][1]


def test_lookup_zipcode_unknown_and_errors(http):
     _, responses = http
     responses.append(FakeResponse(status_code=404, payload={}))
     assert lookup_zipcode("00000") is None

     responses.append(FakeResponse(status_code=503, payload="busy"))
     with pytest.raises(GeocodingError):
          lookup_zipcode("02134")

     responses.append(requests.ConnectionError("no route"))
     with pytest.raises(GeocodingError):
          lookup_zipcode("02134")


def test_geocode_address_sends_user_agent(http):
     calls, responses = http
     responses.append(FakeResponse(payload=[{"lat": "42.35", "lon": "-71.13"}]))

     assert geocode_address("12 Maple St, Boston, MA") == {"lat": 42.35, "lng": -71.13}
     kwargs = calls[0][1]
     assert kwargs["params"]["q"] == "12 Maple St, Boston, MA"
     assert kwargs["headers"]["User-Agent"] == geocoding.GEOCODE_USER_AGENT


def test_geocode_address_no_match(http):
     _, responses = http
     responses.append(FakeResponse(payload=[]))
     assert geocode_address("nowhere") is None
