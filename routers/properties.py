# routers/properties.py
"""
Property API routes.

Create, replace and inline-edit go through the derived-field cascade in
services.property_service (status -> income_producing, ZIP -> city/state).
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_session
from models import Property
from schemas.property import PropertyCreate, PropertyUpdate, PropertyResponse
from services.property_service import apply_property_changes, toggle_income_producing

router = APIRouter(prefix="/api/properties", tags=["properties"])


def _get_property_or_404(db: Session, property_id: int) -> Property:
     prop = db.query(Property).filter(Property.property_id == property_id).first()
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Property with ID {property_id} not found"
          )
     return prop


def _commit_property(db: Session, prop: Property) -> Property:
     try:
          db.commit()
     except IntegrityError:
          db.rollback()
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail="A property with this address already exists"
          )
     db.refresh(prop)
     return prop


@router.get(
     "",
     response_model=List[PropertyResponse],
     summary="List all properties"
)
def list_properties(db: Session = Depends(get_session)):
     return db.query(Property).order_by(Property.property_id).all()


@router.get(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Get property by ID"
)
def get_property(property_id: int, db: Session = Depends(get_session)):
     return _get_property_or_404(db, property_id)


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new property"
)
def create_property(property_data: PropertyCreate, db: Session = Depends(get_session)):
     """
     Create a property.

     - **property_name**, **owner**, **address**, **type**, **status**: required
     - **income_producing**: inferred from status when omitted
     - **zipcode**: five digits; city/state are looked up when not sent
     """
     prop = Property()
     apply_property_changes(prop, property_data.model_dump())
     db.add(prop)
     return _commit_property(db, prop)


@router.put(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Replace a property"
)
def replace_property(
     property_id: int,
     property_data: PropertyCreate,
     db: Session = Depends(get_session)
):
     prop = _get_property_or_404(db, property_id)
     apply_property_changes(prop, property_data.model_dump())
     return _commit_property(db, prop)


@router.patch(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Update property fields"
)
def update_property(
     property_id: int,
     property_data: PropertyUpdate,
     db: Session = Depends(get_session)
):
     """
     Inline edit of one or more fields. Only provided fields are updated.

     Changing **status** without **income_producing** re-derives the flag;
     changing **zipcode** without **city**/**state** refreshes them.
     """
     changes = property_data.model_dump(exclude_unset=True)
     if not changes:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="No fields to update"
          )

     prop = _get_property_or_404(db, property_id)
     apply_property_changes(prop, changes)
     return _commit_property(db, prop)


@router.post(
     "/{property_id}/income_producing/toggle",
     response_model=PropertyResponse,
     summary="Flip the income-producing flag"
)
def toggle_property_income(property_id: int, db: Session = Depends(get_session)):
     """Manual override; the flag is re-derived the next time status changes."""
     prop = _get_property_or_404(db, property_id)
     toggle_income_producing(prop)
     return _commit_property(db, prop)


@router.delete(
     "/{property_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     response_class=Response,
     summary="Delete a property and everything recorded for it"
)
def delete_property(property_id: int, db: Session = Depends(get_session)):
     prop = _get_property_or_404(db, property_id)
     db.delete(prop)
     db.commit()
     return Response(status_code=status.HTTP_204_NO_CONTENT)
