"""
Pydantic schemas for tenants.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import OptionalDatetime, OptionalMoney, OptionalText


class TenantCreate(BaseModel):
     """
     Schema for saving a tenant.

     (property_id, tenant_name, lease_start) identifies a tenancy; posting the
     same triple again updates it.
     """
     property_id: int = Field(..., gt=0)
     tenant_name: OptionalText = Field(None, max_length=255)
     tenant_status: Optional[str] = Field(None, max_length=50)
     lease_start: OptionalDatetime = None
     lease_end: OptionalDatetime = None
     rent_amount: OptionalMoney = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 1,
                    "tenant_name": "Jordan Smith",
                    "tenant_status": "Active",
                    "lease_start": "2025-01-01",
                    "lease_end": "2025-12-31",
                    "rent_amount": 1850,
               }
          }
     )


class TenantUpdate(BaseModel):
     """Partial update; null values leave the column unchanged."""
     tenant_name: OptionalText = Field(None, max_length=255)
     tenant_status: OptionalText = Field(None, max_length=50)
     lease_start: OptionalDatetime = None
     lease_end: OptionalDatetime = None
     rent_amount: OptionalMoney = None

     model_config = ConfigDict(extra="ignore")


class TenantResponse(BaseModel):
     """Schema for a tenant row."""
     tenant_id: int
     property_id: int
     tenant_name: Optional[str] = None
     tenant_status: Optional[str] = None
     lease_start: Optional[datetime] = None
     lease_end: Optional[datetime] = None
     rent_amount: Optional[Decimal] = None
     created_at: datetime
     updated_at: datetime

     model_config = ConfigDict(from_attributes=True)
