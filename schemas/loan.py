"""
Pydantic schemas for loan details and the loan payment ledger.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from .common import (
     OptionalDatetime,
     OptionalInt,
     OptionalMoney,
     OptionalText,
     midnight_if_date_only,
     reject_nulls,
     to_naive_utc,
)


class LoanFields(BaseModel):
     """Editable loan terms shared by create and update."""
     loan_amount: OptionalMoney = None
     lender: OptionalText = None
     interest_rate: OptionalMoney = None
     loan_term: OptionalInt = None
     loan_start: OptionalDatetime = None
     loan_end: OptionalDatetime = None
     amortization_period: OptionalInt = None
     monthly_payment: OptionalMoney = None
     loan_type: OptionalText = None
     balloon_payment: Optional[bool] = None
     prepayment_penalty: Optional[bool] = None
     refinanced: Optional[bool] = None
     loan_status: OptionalText = None
     notes: OptionalText = None


class LoanDetailsCreate(LoanFields):
     """Schema for creating a loan. loan_id is the lender's reference."""
     loan_id: str = Field(..., min_length=1, max_length=100)
     property_id: int = Field(..., gt=0)
     purchase_id: int = Field(..., gt=0)

     model_config = ConfigDict(
          coerce_numbers_to_str=True,
          json_schema_extra={
               "example": {
                    "loan_id": "WF-88213",
                    "property_id": 1,
                    "purchase_id": 1,
                    "loan_amount": 280000,
                    "interest_rate": 6.25,
                    "loan_term": 360,
                    "loan_start": "2024-06-01",
                    "monthly_payment": 1724.01,
               }
          }
     )


class LoanDetailsUpdate(LoanFields):
     """Partial update addressed by loan_id in the path."""
     model_config = ConfigDict(extra="forbid")


class LoanDetailsByPropertyPurchaseUpdate(LoanFields):
     """Partial update addressed by the (property_id, purchase_id) pair in the body."""
     property_id: int = Field(..., gt=0)
     purchase_id: int = Field(..., gt=0)

     model_config = ConfigDict(extra="forbid")


class LoanDetailsResponse(BaseModel):
     """Schema for loan details response."""
     loan_id: str
     property_id: int
     purchase_id: int
     loan_amount: Optional[Decimal] = None
     lender: Optional[str] = None
     interest_rate: Optional[Decimal] = None
     loan_term: Optional[int] = None
     loan_start: Optional[datetime] = None
     loan_end: Optional[datetime] = None
     amortization_period: Optional[int] = None
     monthly_payment: Optional[Decimal] = None
     loan_type: Optional[str] = None
     balloon_payment: Optional[bool] = None
     prepayment_penalty: Optional[bool] = None
     refinanced: Optional[bool] = None
     loan_status: Optional[str] = None
     notes: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class LoanPaymentFields(BaseModel):
     """Editable payment columns."""
     date_paid: OptionalDatetime = None
     payment_amount: OptionalMoney = None
     principal_paid: OptionalMoney = None
     interest_paid: OptionalMoney = None
     late_fee: OptionalMoney = None
     principal_balance: OptionalMoney = None
     stored_monthly_payment: OptionalMoney = None
     payment_code: OptionalText = None
     notes: OptionalText = None


class LoanPaymentUpsert(LoanPaymentFields):
     """
     Record a payment for one due date of a loan.

     (loan_id, property_id, payment_due_date) identifies the row; posting the
     same key again updates it.
     """
     loan_id: str = Field(..., min_length=1, max_length=100)
     property_id: int = Field(..., gt=0)
     payment_due_date: Annotated[datetime, BeforeValidator(midnight_if_date_only), AfterValidator(to_naive_utc)]

     model_config = ConfigDict(
          coerce_numbers_to_str=True,
          json_schema_extra={
               "example": {
                    "loan_id": "WF-88213",
                    "property_id": 1,
                    "payment_due_date": "2024-07-01",
                    "payment_amount": 1724.01,
                    "date_paid": "2024-06-28",
               }
          }
     )


class LoanPaymentUpdate(LoanPaymentFields):
     """Partial update of a payment row by id."""
     payment_due_date: OptionalDatetime = None

     model_config = ConfigDict(extra="ignore")

     @model_validator(mode="after")
     def _not_null_columns(self):
          reject_nulls(self, (
               "payment_due_date", "payment_amount", "principal_paid",
               "interest_paid", "principal_balance",
          ))
          return self


class LoanPaymentResponse(BaseModel):
     """Schema for a loan payment row."""
     loan_payment_id: int
     loan_id: str
     property_id: int
     payment_code: Optional[str] = None
     payment_due_date: datetime
     date_paid: Optional[datetime] = None
     payment_amount: Decimal
     principal_paid: Decimal
     interest_paid: Decimal
     late_fee: Optional[Decimal] = None
     principal_balance: Decimal
     stored_monthly_payment: Optional[Decimal] = None
     notes: Optional[str] = None
     created_at: datetime
     updated_at: datetime

     model_config = ConfigDict(from_attributes=True)

