# routers/geo.py
"""
ZIP lookup, map markers and bulk geocoding.
"""
import os
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from models import Property
from schemas.property import (
     GeocodeMissingResponse,
     PropertyMarker,
     ZipLookupResponse,
     normalize_zipcode,
)
from services.property_service import geocode_missing
from utils.geocoding import GeocodingError, lookup_zipcode

GEOCODE_DELAY_SECONDS = float(os.getenv("GEOCODE_DELAY_SECONDS", "1.1"))

router = APIRouter(tags=["geo"])


@router.get(
     "/api/zipcodes/{zipcode}",
     response_model=ZipLookupResponse,
     summary="Look up city and state for a ZIP code"
)
def get_zipcode(zipcode: str):
     try:
          code = normalize_zipcode(zipcode)
     except ValueError as e:
          raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
     if code is None:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="Zip code must be exactly 5 digits."
          )

     try:
          place = lookup_zipcode(code)
     except GeocodingError:
          raise HTTPException(
               status_code=status.HTTP_502_BAD_GATEWAY,
               detail="ZIP lookup service unavailable"
          )
     if not place:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Zip code {code} not found"
          )

     return ZipLookupResponse(zipcode=code, city=place["city"], state=place["state"])


@router.get(
     "/api/property_markers",
     response_model=List[PropertyMarker],
     summary="Map pins for every property"
)
def list_property_markers(db: Session = Depends(get_session)):
     properties = db.query(Property).order_by(Property.property_id).all()
     return [
          PropertyMarker(
               id=p.property_id,
               name=p.property_name,
               address=p.address,
               city=p.city or "",
               state=p.state or "",
               zipcode=p.zipcode or "",
               lat=p.lat,
               lng=p.lng,
          )
          for p in properties
     ]


@router.post(
     "/api/admin/geocode-missing",
     response_model=GeocodeMissingResponse,
     summary="Geocode properties that have no coordinates"
)
def geocode_missing_properties(db: Session = Depends(get_session)):
     """
     Resolve lat/lng through Nominatim for every property missing them.

     Requests are spaced by GEOCODE_DELAY_SECONDS; properties the service
     cannot place are left for the next run.
     """
     ids = geocode_missing(db, delay_seconds=GEOCODE_DELAY_SECONDS)
     db.commit()
     return GeocodeMissingResponse(updated_count=len(ids), ids=ids)
