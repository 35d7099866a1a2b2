"""
Pydantic schemas for property transactions.
"""
from datetime import date
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from .common import OptionalDate, OptionalMoney, OptionalText, date_prefix, reject_nulls


class TransactionCreate(BaseModel):
     """Schema for recording a transaction. Mirrors the log form's field names."""
     property_id: int = Field(..., gt=0)
     amount: Decimal
     date: Annotated[date, BeforeValidator(date_prefix)]
     transaction_type: OptionalText = Field(None, max_length=100)
     notes: OptionalText = Field(None, max_length=255)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 1,
                    "amount": 425.50,
                    "date": "2025-03-14",
                    "transaction_type": "Repair",
                    "notes": "Water heater",
               }
          }
     )


class TransactionUpdate(BaseModel):
     """Inline edit of a transaction row."""
     transaction_amount: OptionalMoney = None
     transaction_date: OptionalDate = None
     transaction_type: OptionalText = Field(None, max_length=100)
     notes: OptionalText = Field(None, max_length=255)

     model_config = ConfigDict(extra="ignore")

     @model_validator(mode="after")
     def _not_null_columns(self):
          reject_nulls(self, ("transaction_amount", "transaction_date"))
          return self


class TransactionResponse(BaseModel):
     """Schema for a transaction row."""
     transaction_id: int
     property_id: int
     transaction_type: Optional[str] = None
     notes: Optional[str] = None
     transaction_amount: Decimal
     transaction_date: date

     model_config = ConfigDict(from_attributes=True)
