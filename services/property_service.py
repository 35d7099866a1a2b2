"""
Property Service - derived-field rules for properties.

Saving a property can change more than the fields that were sent:
1. A status implies the income-producing flag
   (Vacant / Pending -> NO, Leased / Subleased / Financed -> YES).
2. A new ZIP code fills in city and state from the ZIP lookup service,
   unless the same request sets them. The lookup is best-effort; a failure
   is logged and the save goes through.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from models import Property, IncomeProducing
from utils.geocoding import GeocodingError, geocode_address, lookup_zipcode

logger = logging.getLogger(__name__)

INCOME_BY_STATUS = {
     "vacant": IncomeProducing.NO,
     "pending": IncomeProducing.NO,
     "leased": IncomeProducing.YES,
     "subleased": IncomeProducing.YES,
     "financed": IncomeProducing.YES,
}


def infer_income_producing(status: Optional[str]) -> Optional[IncomeProducing]:
     """Income flag implied by a status, or None when the status implies nothing."""
     return INCOME_BY_STATUS.get((status or "").strip().lower())


def autofill_city_state(prop: Property, fill_city: bool = True, fill_state: bool = True) -> bool:
     """
     Fill city/state from the property's ZIP code.

     Args:
          prop: Property whose zipcode was just set
          fill_city, fill_state: which of the two columns to overwrite

     Returns:
          True when the lookup succeeded and the requested columns were updated.
     """
     if not prop.zipcode:
          return False
     try:
          place = lookup_zipcode(prop.zipcode)
     except GeocodingError as e:
          logger.warning("ZIP lookup for property %s failed: %s", prop.property_id, e)
          return False
     if not place or not place.get("city") or not place.get("state"):
          logger.info("ZIP %s not found by lookup service", prop.zipcode)
          return False
     if fill_city:
          prop.city = place["city"]
     if fill_state:
          prop.state = place["state"]
     return True


def apply_property_changes(prop: Property, changes: Dict[str, Any]) -> Property:
     """
     Apply field changes to a property and run the derived-field cascade.

     Args:
          prop: Property being created or edited
          changes: Column values taken from the request body. Keys present
               with explicit values win over anything the cascade would set.

     Returns:
          The same Property, mutated.
     """
     for field, value in changes.items():
          if field == "income_producing" and value is None:
               continue
          if field == "income_producing":
               value = IncomeProducing(getattr(value, "value", value)).value
          setattr(prop, field, value)

     if "status" in changes and changes.get("income_producing") is None:
          inferred = infer_income_producing(changes["status"])
          if inferred is not None:
               prop.income_producing = inferred.value

     if prop.income_producing is None:
          prop.income_producing = IncomeProducing.NO.value

     if changes.get("zipcode"):
          fill_city = not changes.get("city")
          fill_state = not changes.get("state")
          if fill_city or fill_state:
               autofill_city_state(prop, fill_city=fill_city, fill_state=fill_state)

     return prop


def toggle_income_producing(prop: Property) -> Property:
     """Manual override: flip YES <-> NO regardless of status."""
     if prop.income_producing == IncomeProducing.YES.value:
          prop.income_producing = IncomeProducing.NO.value
     else:
          prop.income_producing = IncomeProducing.YES.value
     return prop


def geocode_missing(db: Session, delay_seconds: float = 1.1) -> List[int]:
     """
     Look up coordinates for every property without lat/lng.

     Calls are spaced by delay_seconds to respect Nominatim's rate limit.
     Properties the service cannot place are skipped.

     Returns:
          IDs of the properties that received coordinates.
     """
     pending = (
          db.query(Property)
          .filter(or_(Property.lat.is_(None), Property.lng.is_(None)))
          .order_by(Property.property_id)
          .all()
     )

     updated = []
     for index, prop in enumerate(pending):
          try:
               hit = geocode_address(prop.full_address)
          except GeocodingError as e:
               logger.warning("Geocoding property %s failed: %s", prop.property_id, e)
               hit = None

          if hit:
               prop.lat = hit["lat"]
               prop.lng = hit["lng"]
               prop.geocoded_at = datetime.now(timezone.utc).replace(tzinfo=None)
               db.flush()
               updated.append(prop.property_id)

          if index < len(pending) - 1 and delay_seconds > 0:
               time.sleep(delay_seconds)

     logger.info("Geocoded %d of %d properties", len(updated), len(pending))
     return updated
