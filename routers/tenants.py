# routers/tenants.py
"""
Tenant API routes.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from database import get_session
from models import Property, Tenant
from schemas.tenant import TenantCreate, TenantUpdate, TenantResponse
from services.ledger_service import upsert_tenant

router = APIRouter(prefix="/api/tenant", tags=["tenants"])


def _get_tenant_or_404(db: Session, tenant_id: int) -> Tenant:
     tenant = db.query(Tenant).filter(Tenant.tenant_id == tenant_id).first()
     if not tenant:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Tenant with ID {tenant_id} not found"
          )
     return tenant


@router.get(
     "",
     response_model=List[TenantResponse],
     summary="List tenants of a property"
)
def list_tenants(
     property_id: int = Query(..., description="Property ID"),
     db: Session = Depends(get_session)
):
     return (
          db.query(Tenant)
          .filter(Tenant.property_id == property_id)
          .order_by(Tenant.tenant_id)
          .all()
     )


@router.post(
     "",
     response_model=TenantResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Save a tenant"
)
def save_tenant(tenant_data: TenantCreate, db: Session = Depends(get_session)):
     """
     Create or update the tenancy identified by
     (property_id, tenant_name, lease_start). Status defaults to Inactive.
     """
     prop = db.query(Property).filter(Property.property_id == tenant_data.property_id).first()
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Property with ID {tenant_data.property_id} not found"
          )

     tenant = upsert_tenant(db, tenant_data)
     db.commit()
     db.refresh(tenant)
     return tenant


@router.patch(
     "/{tenant_id}",
     response_model=TenantResponse,
     summary="Update a tenant"
)
def update_tenant(
     tenant_id: int,
     tenant_data: TenantUpdate,
     db: Session = Depends(get_session)
):
     tenant = _get_tenant_or_404(db, tenant_id)

     # Update fields if provided
     for field, value in tenant_data.model_dump(exclude_none=True).items():
          setattr(tenant, field, value)

     db.commit()
     db.refresh(tenant)
     return tenant


@router.delete(
     "/{tenant_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     response_class=Response,
     summary="Delete a tenant"
)
def delete_tenant(tenant_id: int, db: Session = Depends(get_session)):
     tenant = _get_tenant_or_404(db, tenant_id)
     db.delete(tenant)
     db.commit()
     return Response(status_code=status.HTTP_204_NO_CONTENT)
