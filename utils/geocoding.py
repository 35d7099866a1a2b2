# utils/geocoding.py
"""
Outbound lookups against public geocoding services.

- zippopotam.us: US ZIP code -> city / state abbreviation
- Nominatim (OpenStreetMap): free-form address -> latitude / longitude

Nominatim's usage policy asks for an identifying User-Agent and at most
one request per second.
"""
import logging
import os
from typing import Optional

import requests
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

ZIP_LOOKUP_URL = os.getenv("ZIP_LOOKUP_URL", "https://api.zippopotam.us/us")
NOMINATIM_URL = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org/search")
GEOCODE_USER_AGENT = os.getenv("GEOCODE_USER_AGENT", "PropertyManager/1.0 (admin@yourdomain.com)")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))


class GeocodingError(Exception):
     """The upstream service could not be reached or answered with an error."""


def lookup_zipcode(zipcode: str) -> Optional[dict]:
     """
     Resolve a 5-digit US ZIP code.

     Returns:
          {"city": str, "state": str} for the first place listed, or None when
          the service does not know the code.

     Raises:
          GeocodingError: on network failure or an unexpected status code.
     """
     try:
          response = requests.get(f"{ZIP_LOOKUP_URL}/{zipcode}", timeout=HTTP_TIMEOUT_SECONDS)
     except requests.RequestException as e:
          raise GeocodingError(f"ZIP lookup failed: {e}") from e

     if response.status_code == 404:
          return None
     if response.status_code != 200:
          raise GeocodingError(f"ZIP lookup error {response.status_code}: {response.text}")

     places = response.json().get("places") or []
     if not places:
          return None
     place = places[0]
     return {
          "city": place.get("place name"),
          "state": place.get("state abbreviation"),
     }


def geocode_address(query: str) -> Optional[dict]:
     """
     Forward-geocode an address with Nominatim.

     Returns:
          {"lat": float, "lng": float} for the best match, or None.

     Raises:
          GeocodingError: on network failure or an unexpected status code.
     """
     try:
          response = requests.get(
               NOMINATIM_URL,
               params={"format": "json", "limit": 1, "q": query},
               headers={
                    "User-Agent": GEOCODE_USER_AGENT,
                    "Accept-Language": "en-US,en;q=0.8",
               },
               timeout=HTTP_TIMEOUT_SECONDS,
          )
     except requests.RequestException as e:
          raise GeocodingError(f"Geocoding failed: {e}") from e

     if response.status_code != 200:
          raise GeocodingError(f"Nominatim error {response.status_code}: {response.text}")

     data = response.json()
     if not data:
          return None
     return {"lat": float(data[0]["lat"]), "lng": float(data[0]["lon"])}
