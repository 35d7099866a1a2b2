"""
Pydantic schemas for the contact list.

The API speaks the UI's vocabulary (name, phone, notes); the table columns are
prefixed with contact_.
"""
import re
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, model_validator


def normalize_phone(value: Any) -> str:
     """Keep digits only, clamped to ten; anything shorter is rejected."""
     digits = re.sub(r"\D", "", str(value or ""))[:10]
     if len(digits) != 10:
          raise ValueError("phone must have 10 digits")
     return digits


def require_name(value: Any) -> str:
     name = str(value or "").strip()
     if not name:
          raise ValueError("name is required")
     return name


def digits_only(value: str) -> str:
     return re.sub(r"\D", "", value or "")


ContactName = Annotated[str, BeforeValidator(require_name)]
ContactPhone = Annotated[str, BeforeValidator(normalize_phone)]


def _none_if_empty(value: Optional[str]) -> Optional[str]:
     return value or None


class ContactCreate(BaseModel):
     """Schema for creating a contact."""
     name: ContactName = ""
     phone: ContactPhone = ""
     email: Annotated[Optional[str], AfterValidator(_none_if_empty)] = Field(None, max_length=255)
     contact_type: Annotated[Optional[str], AfterValidator(_none_if_empty)] = Field(None, max_length=100)
     notes: Annotated[Optional[str], AfterValidator(_none_if_empty)] = None

     model_config = ConfigDict(
          validate_default=True,
          json_schema_extra={
               "example": {
                    "name": "Dana Lee",
                    "phone": "(555) 867-5309",
                    "email": "dana@example.com",
                    "contact_type": "Lender",
               }
          }
     )


class ContactUpdate(BaseModel):
     """Partial update; name and phone are validated only when sent."""
     name: Optional[ContactName] = None
     phone: Optional[ContactPhone] = None
     email: Annotated[Optional[str], AfterValidator(_none_if_empty)] = Field(None, max_length=255)
     contact_type: Annotated[Optional[str], AfterValidator(_none_if_empty)] = Field(None, max_length=100)
     notes: Annotated[Optional[str], AfterValidator(_none_if_empty)] = None

     model_config = ConfigDict(extra="ignore")

     @model_validator(mode="after")
     def _required_not_null(self):
          if "name" in self.model_fields_set and self.name is None:
               raise ValueError("name is required")
          if "phone" in self.model_fields_set and self.phone is None:
               raise ValueError("phone must have 10 digits")
          return self


class ContactResponse(BaseModel):
     """Contact as the contact list expects it; timestamps are epoch milliseconds."""
     contact_id: int
     name: str
     phone: str
     email: str = ""
     contact_type: str = ""
     notes: str = ""
     created_at: int
     updated_at: int
