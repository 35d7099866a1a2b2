# routers/transactions.py
"""
Transaction API routes - dated expenses and other one-off amounts.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from database import get_session
from models import Property, Transaction
from schemas.transaction import TransactionCreate, TransactionUpdate, TransactionResponse
from services.report_service import year_bounds

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


def _get_transaction_or_404(db: Session, transaction_id: int) -> Transaction:
     transaction = db.query(Transaction).filter(Transaction.transaction_id == transaction_id).first()
     if not transaction:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Transaction with ID {transaction_id} not found"
          )
     return transaction


@router.get(
     "",
     response_model=List[TransactionResponse],
     summary="List transactions for a property"
)
def list_transactions(
     property_id: int = Query(..., description="Property ID"),
     year: Optional[int] = Query(None, description="Limit to one calendar year"),
     db: Session = Depends(get_session)
):
     """Newest first."""
     query = db.query(Transaction).filter(Transaction.property_id == property_id)
     if year is not None:
          start, end = year_bounds(year)
          query = query.filter(
               Transaction.transaction_date >= start,
               Transaction.transaction_date < end,
          )
     return query.order_by(
          Transaction.transaction_date.desc(),
          Transaction.transaction_id.desc(),
     ).all()


@router.post(
     "",
     response_model=TransactionResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a transaction"
)
def create_transaction(transaction_data: TransactionCreate, db: Session = Depends(get_session)):
     """
     - **property_id**, **amount**, **date**: required
     - **transaction_type**, **notes**: optional
     """
     prop = db.query(Property).filter(Property.property_id == transaction_data.property_id).first()
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Property with ID {transaction_data.property_id} not found"
          )

     transaction = Transaction(
          property_id=transaction_data.property_id,
          transaction_type=transaction_data.transaction_type,
          notes=transaction_data.notes,
          transaction_amount=transaction_data.amount,
          transaction_date=transaction_data.date,
     )
     db.add(transaction)
     db.commit()
     db.refresh(transaction)
     return transaction


@router.patch(
     "/{transaction_id}",
     response_model=TransactionResponse,
     summary="Update a transaction"
)
def update_transaction(
     transaction_id: int,
     transaction_data: TransactionUpdate,
     db: Session = Depends(get_session)
):
     changes = transaction_data.model_dump(exclude_unset=True)
     if not changes:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="No fields to update"
          )

     transaction = _get_transaction_or_404(db, transaction_id)
     for field, value in changes.items():
          setattr(transaction, field, value)

     db.commit()
     db.refresh(transaction)
     return transaction


@router.delete(
     "/{transaction_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     response_class=Response,
     summary="Delete a transaction"
)
def delete_transaction(transaction_id: int, db: Session = Depends(get_session)):
     transaction = _get_transaction_or_404(db, transaction_id)
     db.delete(transaction)
     db.commit()
     return Response(status_code=status.HTTP_204_NO_CONTENT)
