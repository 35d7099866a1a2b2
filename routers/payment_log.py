# routers/payment_log.py
"""
Payment log API routes - outgoing monthly payments per property.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import PaymentLog, Property
from schemas.ledger import PaymentLogUpsert, PaymentLogResponse
from services.ledger_service import calendar_order, upsert_payment_log

router = APIRouter(prefix="/api/paymentlog", tags=["payment log"])


@router.get(
     "",
     response_model=List[PaymentLogResponse],
     summary="List payments for a property and year"
)
def list_payment_log(
     property_id: int = Query(..., description="Property ID"),
     year: int = Query(..., description="Year"),
     db: Session = Depends(get_session)
):
     rows = (
          db.query(PaymentLog)
          .filter(PaymentLog.property_id == property_id, PaymentLog.year == year)
          .all()
     )
     return sorted(rows, key=calendar_order)


@router.post(
     "",
     response_model=PaymentLogResponse,
     summary="Save the payment for a property-month"
)
def save_payment_log(payment_data: PaymentLogUpsert, db: Session = Depends(get_session)):
     prop = db.query(Property).filter(Property.property_id == payment_data.property_id).first()
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Property with ID {payment_data.property_id} not found"
          )

     row = upsert_payment_log(db, payment_data)
     db.commit()
     db.refresh(row)
     return row
