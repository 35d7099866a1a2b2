# routers/rent_log.py
"""
Rent log API routes.

Mounted at /api/rentlog and at the older /api/rentroll path.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import Property, RentLog
from schemas.ledger import RentLogUpsert, RentLogResponse
from services.ledger_service import calendar_order, upsert_rent_log

router = APIRouter(tags=["rent log"])


@router.get(
     "",
     response_model=List[RentLogResponse],
     summary="List rent collected for a property"
)
def list_rent_log(
     property_id: int = Query(..., description="Property ID"),
     year: Optional[int] = Query(None, description="Limit to one year"),
     db: Session = Depends(get_session)
):
     """Rows ordered by year, then calendar month."""
     query = db.query(RentLog).filter(RentLog.property_id == property_id)
     if year is not None:
          query = query.filter(RentLog.year == year)
     return sorted(query.all(), key=calendar_order)


@router.post(
     "",
     response_model=RentLogResponse,
     summary="Save rent for a property-month"
)
def save_rent_log(rent_data: RentLogUpsert, db: Session = Depends(get_session)):
     """
     Create or update the row for (property_id, month, year).

     - Omitted or null fields keep their stored value
     - **date_deposited** is stamped with the current time when rent or a
       check number is entered without a date
     """
     prop = db.query(Property).filter(Property.property_id == rent_data.property_id).first()
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Property with ID {rent_data.property_id} not found"
          )

     row = upsert_rent_log(db, rent_data)
     db.commit()
     db.refresh(row)
     return row
