# routers/loan_details.py
"""
Loan details API routes.

A loan belongs to one property and one purchase of that property; loan_id is
the lender's reference and is supplied by the client.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_session
from models import LoanDetails, PurchaseDetails
from schemas.loan import (
     LoanDetailsCreate,
     LoanDetailsUpdate,
     LoanDetailsByPropertyPurchaseUpdate,
     LoanDetailsResponse,
)

router = APIRouter(prefix="/api/loan_details", tags=["loan details"])


@router.get(
     "",
     response_model=LoanDetailsResponse,
     summary="Get the first loan of a property"
)
def get_loan_details(
     property_id: int = Query(..., description="Property the loan finances"),
     db: Session = Depends(get_session)
):
     loan = (
          db.query(LoanDetails)
          .filter(LoanDetails.property_id == property_id)
          .order_by(LoanDetails.loan_start.asc())
          .first()
     )
     if not loan:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not_found")
     return loan


@router.post(
     "",
     response_model=LoanDetailsResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a loan"
)
def create_loan_details(loan_data: LoanDetailsCreate, db: Session = Depends(get_session)):
     """
     Create a loan for a property's purchase.

     - **loan_id**: lender reference, unique
     - **property_id** / **purchase_id**: the purchase must belong to the property
     """
     purchase = (
          db.query(PurchaseDetails)
          .filter(PurchaseDetails.purchase_id == loan_data.purchase_id)
          .first()
     )
     if not purchase:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Purchase with ID {loan_data.purchase_id} not found"
          )
     if purchase.property_id != loan_data.property_id:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="Purchase does not belong to the specified property"
          )

     if db.query(LoanDetails).filter(LoanDetails.loan_id == loan_data.loan_id).first():
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail=f"Loan {loan_data.loan_id} already exists"
          )

     loan = LoanDetails(**loan_data.model_dump())
     db.add(loan)
     try:
          db.commit()
     except IntegrityError:
          db.rollback()
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail="A loan already exists for this property and purchase"
          )
     db.refresh(loan)
     return loan


@router.patch(
     "/by_property_purchase",
     response_model=LoanDetailsResponse,
     summary="Update the loan of a property purchase"
)
def update_loan_by_property_purchase(
     loan_data: LoanDetailsByPropertyPurchaseUpdate,
     db: Session = Depends(get_session)
):
     """Partial update addressed by the (property_id, purchase_id) pair."""
     loan = (
          db.query(LoanDetails)
          .filter(
               LoanDetails.property_id == loan_data.property_id,
               LoanDetails.purchase_id == loan_data.purchase_id,
          )
          .first()
     )
     if not loan:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not_found")

     changes = loan_data.model_dump(exclude_unset=True, exclude={"property_id", "purchase_id"})
     for field, value in changes.items():
          setattr(loan, field, value)

     db.commit()
     db.refresh(loan)
     return loan


@router.patch(
     "/{loan_id}",
     response_model=LoanDetailsResponse,
     summary="Update loan terms"
)
def update_loan_details(
     loan_id: str,
     loan_data: LoanDetailsUpdate,
     db: Session = Depends(get_session)
):
     loan = db.query(LoanDetails).filter(LoanDetails.loan_id == loan_id).first()
     if not loan:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Loan {loan_id} not found"
          )

     for field, value in loan_data.model_dump(exclude_unset=True).items():
          setattr(loan, field, value)

     db.commit()
     db.refresh(loan)
     return loan
