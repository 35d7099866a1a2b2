# routers/loan_payments.py
"""
Loan payment ledger API routes.

Query parameters accept both the camelCase names the payment grid sends
(loanId, propertyId) and snake_case.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_session
from models import LoanDetails, LoanPayment
from schemas.loan import LoanPaymentUpsert, LoanPaymentUpdate, LoanPaymentResponse
from services.ledger_service import upsert_loan_payment

router = APIRouter(prefix="/api/loan_payments", tags=["loan payments"])


def _get_payment_or_404(db: Session, loan_payment_id: int) -> LoanPayment:
     payment = db.query(LoanPayment).filter(LoanPayment.loan_payment_id == loan_payment_id).first()
     if not payment:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Loan payment with ID {loan_payment_id} not found"
          )
     return payment


def _commit_payment(db: Session, payment: LoanPayment) -> LoanPayment:
     try:
          db.commit()
     except IntegrityError:
          db.rollback()
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail="Payment code or due date already used for this loan"
          )
     db.refresh(payment)
     return payment


@router.get(
     "",
     response_model=List[LoanPaymentResponse],
     summary="List payments of a loan"
)
def list_loan_payments(
     loanId: Optional[str] = Query(None, description="Loan reference"),
     propertyId: Optional[int] = Query(None, description="Property ID"),
     loan_id: Optional[str] = Query(None, include_in_schema=False),
     property_id: Optional[int] = Query(None, include_in_schema=False),
     db: Session = Depends(get_session)
):
     """Payments ordered by due date."""
     loan_ref = loanId or loan_id
     prop_ref = propertyId or property_id
     if not loan_ref or not prop_ref:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="loanId and propertyId are required"
          )

     return (
          db.query(LoanPayment)
          .filter(LoanPayment.loan_id == loan_ref, LoanPayment.property_id == prop_ref)
          .order_by(LoanPayment.payment_due_date.asc())
          .all()
     )


@router.post(
     "",
     response_model=LoanPaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a loan payment"
)
def save_loan_payment(
     payment_data: LoanPaymentUpsert,
     response: Response,
     db: Session = Depends(get_session)
):
     """
     Create or update the payment for one due date.

     Returns 201 when a new row was created, 200 when an existing one changed.
     """
     loan = (
          db.query(LoanDetails)
          .filter(
               LoanDetails.loan_id == payment_data.loan_id,
               LoanDetails.property_id == payment_data.property_id,
          )
          .first()
     )
     if not loan:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Loan {payment_data.loan_id} not found for property {payment_data.property_id}"
          )

     payment, created = upsert_loan_payment(db, loan, payment_data)
     if not created:
          response.status_code = status.HTTP_200_OK
     return _commit_payment(db, payment)


@router.patch(
     "/{loan_payment_id}",
     response_model=LoanPaymentResponse,
     summary="Update a loan payment"
)
def update_loan_payment(
     loan_payment_id: int,
     payment_data: LoanPaymentUpdate,
     db: Session = Depends(get_session)
):
     payment = _get_payment_or_404(db, loan_payment_id)
     for field, value in payment_data.model_dump(exclude_unset=True).items():
          setattr(payment, field, value)
     return _commit_payment(db, payment)


@router.delete(
     "/{loan_payment_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     response_class=Response,
     summary="Delete a loan payment"
)
def delete_loan_payment(loan_payment_id: int, db: Session = Depends(get_session)):
     payment = _get_payment_or_404(db, loan_payment_id)
     db.delete(payment)
     db.commit()
     return Response(status_code=status.HTTP_204_NO_CONTENT)
