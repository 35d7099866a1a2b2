# routers/purchase_details.py
"""
Purchase details API routes. A property has at most one purchase record.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_session
from models import Property, PurchaseDetails
from schemas.purchase_details import (
     PurchaseDetailsCreate,
     PurchaseDetailsUpdate,
     PurchaseDetailsResponse,
)

router = APIRouter(prefix="/api/purchase_details", tags=["purchase details"])


@router.get(
     "",
     response_model=PurchaseDetailsResponse,
     summary="Get purchase details for a property"
)
def get_purchase_details(
     property_id: int = Query(..., description="Property the purchase belongs to"),
     db: Session = Depends(get_session)
):
     purchase = (
          db.query(PurchaseDetails)
          .filter(PurchaseDetails.property_id == property_id)
          .first()
     )
     if not purchase:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not_found")
     return purchase


@router.post(
     "",
     response_model=PurchaseDetailsResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record purchase details"
)
def create_purchase_details(
     purchase_data: PurchaseDetailsCreate,
     db: Session = Depends(get_session)
):
     """
     Create the purchase record for a property.

     Omitted amounts default to 0, omitted text to "" and closing_date to now.
     """
     prop = db.query(Property).filter(Property.property_id == purchase_data.property_id).first()
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Property with ID {purchase_data.property_id} not found"
          )

     purchase = PurchaseDetails(**purchase_data.model_dump(exclude_none=True))
     db.add(purchase)
     try:
          db.commit()
     except IntegrityError:
          db.rollback()
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail="Purchase details already exist for this property"
          )
     db.refresh(purchase)
     return purchase


@router.patch(
     "/{purchase_id}",
     response_model=PurchaseDetailsResponse,
     summary="Update purchase details"
)
def update_purchase_details(
     purchase_id: int,
     purchase_data: PurchaseDetailsUpdate,
     db: Session = Depends(get_session)
):
     purchase = db.query(PurchaseDetails).filter(PurchaseDetails.purchase_id == purchase_id).first()
     if not purchase:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Purchase with ID {purchase_id} not found"
          )

     for field, value in purchase_data.model_dump(exclude_unset=True).items():
          setattr(purchase, field, value)

     db.commit()
     db.refresh(purchase)
     return purchase
