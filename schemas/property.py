"""
Pydantic schemas for Property API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from .common import OptionalInt, OptionalMoney, OptionalText, blank_to_none


REQUIRED_FIELDS = ("property_name", "address", "owner", "type", "status")


class IncomeProducingEnum(str, Enum):
     """Income-producing flag values."""
     YES = "YES"
     NO = "NO"


def normalize_zipcode(value: Any) -> Optional[str]:
     """Accept 12345 or "12345"; anything but exactly five digits is rejected."""
     value = blank_to_none(value)
     if value is None:
          return None
     if isinstance(value, bool):
          raise ValueError("Zip code must be exactly 5 digits.")
     text = f"{value:05d}" if isinstance(value, int) else str(value).strip()
     if len(text) != 5 or not text.isdigit():
          raise ValueError("Zip code must be exactly 5 digits.")
     return text


ZipCode = Annotated[Optional[str], BeforeValidator(normalize_zipcode)]


class PropertyCreate(BaseModel):
     """Schema for creating (or fully replacing) a property."""
     property_name: str = Field(..., min_length=1, max_length=255)
     owner: str = Field(..., min_length=1, max_length=255)
     address: str = Field(..., min_length=1, max_length=255)
     type: str = Field(..., min_length=1, max_length=100)
     status: str = Field(..., min_length=1, max_length=50)
     city: OptionalText = None
     state: OptionalText = None
     zipcode: ZipCode = None
     county: OptionalText = None
     year: OptionalInt = None
     market_value: OptionalMoney = None
     income_producing: Optional[IncomeProducingEnum] = None

     model_config = ConfigDict(
          str_strip_whitespace=True,
          extra="ignore",
          json_schema_extra={
               "example": {
                    "property_name": "Maple Duplex",
                    "owner": "Maple Holdings LLC",
                    "address": "12 Maple St",
                    "type": "Duplex",
                    "status": "Leased",
                    "zipcode": "02134",
               }
          }
     )


class PropertyUpdate(BaseModel):
     """
     Schema for PATCH inline edits. Only sent fields are applied.

     Required columns may not be blanked.
     """
     property_name: Optional[str] = Field(None, max_length=255)
     owner: Optional[str] = Field(None, max_length=255)
     address: Optional[str] = Field(None, max_length=255)
     type: Optional[str] = Field(None, max_length=100)
     status: Optional[str] = Field(None, max_length=50)
     city: OptionalText = None
     state: OptionalText = None
     zipcode: ZipCode = None
     county: OptionalText = None
     year: OptionalInt = None
     market_value: OptionalMoney = None
     income_producing: Optional[IncomeProducingEnum] = None
     lat: Optional[float] = None
     lng: Optional[float] = None

     model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

     @model_validator(mode="after")
     def _required_not_blank(self):
          for name in REQUIRED_FIELDS:
               if name in self.model_fields_set and not getattr(self, name):
                    raise ValueError(f"{name} cannot be empty.")
          return self


class PropertyResponse(BaseModel):
     """Schema for property response."""
     property_id: int
     property_name: str
     owner: str
     address: str
     type: str
     status: str
     income_producing: IncomeProducingEnum
     city: Optional[str] = None
     state: Optional[str] = None
     zipcode: Optional[str] = None
     county: Optional[str] = None
     year: Optional[int] = None
     market_value: Optional[Decimal] = None
     lat: Optional[float] = None
     lng: Optional[float] = None
     geocoded_at: Optional[datetime] = None
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)


class PropertyMarker(BaseModel):
     """Map pin for a property."""
     id: int
     name: str
     address: str
     city: str = ""
     state: str = ""
     zipcode: str = ""
     lat: Optional[float] = None
     lng: Optional[float] = None


class ZipLookupResponse(BaseModel):
     """City/state resolved for a US ZIP code."""
     zipcode: str
     city: str
     state: str


class GeocodeMissingResponse(BaseModel):
     """Result of the bulk geocoding run."""
     updated_count: int
     ids: List[int] = Field(default_factory=list)
