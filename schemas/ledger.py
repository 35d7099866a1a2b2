"""
Pydantic schemas for the monthly ledgers: rent log and payment log.

Both are upserted by (property_id, month, year).
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import OptionalDatetime, OptionalInt, OptionalMoney, OptionalText


class MonthlyKey(BaseModel):
     """Composite key of a monthly ledger row."""
     property_id: int = Field(..., gt=0)
     month: str = Field(..., min_length=1, max_length=20)
     year: int = Field(..., gt=0)

     model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)


class RentLogUpsert(MonthlyKey):
     """
     Save one month of rent.

     Omitted or null fields leave an existing row unchanged.
     """
     rent_amount: OptionalMoney = None
     date_deposited: OptionalDatetime = None
     check_number: OptionalInt = None
     notes: OptionalText = None

     model_config = ConfigDict(
          str_strip_whitespace=True,
          coerce_numbers_to_str=True,
          json_schema_extra={
               "example": {
                    "property_id": 1,
                    "month": "Jan",
                    "year": 2025,
                    "rent_amount": 1850,
                    "check_number": 1042,
               }
          }
     )


class RentLogResponse(BaseModel):
     """Schema for a rent log row."""
     rent_id: int
     property_id: int
     month: str
     year: int
     rent_amount: Decimal
     date_deposited: datetime
     check_number: Optional[int] = None
     notes: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class PaymentLogUpsert(MonthlyKey):
     """Save one month of outgoing payment."""
     payment_amount: OptionalMoney = None
     check_number: OptionalInt = None
     notes: OptionalText = None
     date_paid: OptionalDatetime = None


class PaymentLogResponse(BaseModel):
     """Schema for a payment log row."""
     id: int
     property_id: int
     year: int
     month: str
     payment_amount: Optional[Decimal] = None
     check_number: Optional[int] = None
     notes: Optional[str] = None
     date_paid: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
