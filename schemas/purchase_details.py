"""
Pydantic schemas for purchase details.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .common import OptionalDatetime, OptionalMoney, OptionalText, reject_nulls


class PurchaseDetailsCreate(BaseModel):
     """Schema for recording a property's acquisition terms."""
     property_id: int = Field(..., gt=0)
     purchase_price: OptionalMoney = None
     down_payment: OptionalMoney = None
     financing_type: Optional[str] = None
     acquisition_type: Optional[str] = None
     buyer: Optional[str] = None
     seller: Optional[str] = None
     closing_date: OptionalDatetime = None
     closing_costs: OptionalMoney = None
     earnest_money: OptionalMoney = None
     notes: OptionalText = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 1,
                    "purchase_price": 350000,
                    "down_payment": 70000,
                    "financing_type": "Conventional",
                    "closing_date": "2024-05-30",
               }
          }
     )


class PurchaseDetailsUpdate(BaseModel):
     """Partial update; NOT NULL columns cannot be cleared."""
     purchase_price: OptionalMoney = None
     down_payment: OptionalMoney = None
     financing_type: Optional[str] = None
     acquisition_type: Optional[str] = None
     buyer: Optional[str] = None
     seller: Optional[str] = None
     closing_date: OptionalDatetime = None
     closing_costs: OptionalMoney = None
     earnest_money: OptionalMoney = None
     notes: OptionalText = None

     model_config = ConfigDict(extra="forbid")

     @model_validator(mode="after")
     def _not_null_columns(self):
          reject_nulls(self, (
               "purchase_price", "financing_type", "acquisition_type",
               "buyer", "seller", "closing_date", "closing_costs",
          ))
          return self


class PurchaseDetailsResponse(BaseModel):
     """Schema for purchase details response."""
     purchase_id: int
     property_id: int
     purchase_price: Decimal
     down_payment: Optional[Decimal] = None
     financing_type: str
     acquisition_type: str
     buyer: str
     seller: str
     closing_date: datetime
     closing_costs: Decimal
     earnest_money: Optional[Decimal] = None
     notes: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
