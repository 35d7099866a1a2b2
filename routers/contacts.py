# routers/contacts.py
"""
Contact list API routes.

Responses use the contact list's field names (name, phone, notes) and
epoch-millisecond timestamps; see services.contact_service.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from database import get_session
from models import Contact
from schemas.contact import ContactCreate, ContactUpdate, ContactResponse
from services.contact_service import search_contacts, to_response

router = APIRouter(prefix="/api/contacts", tags=["contacts"])

# request field -> column
CONTACT_COLUMNS = {
     "name": "contact_name",
     "phone": "contact_phone",
     "email": "contact_email",
     "contact_type": "contact_type",
     "notes": "contact_notes",
}


def _get_contact_or_404(db: Session, contact_id: int) -> Contact:
     contact = db.query(Contact).filter(Contact.contact_id == contact_id).first()
     if not contact:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Contact with ID {contact_id} not found"
          )
     return contact


@router.get(
     "",
     response_model=List[ContactResponse],
     summary="List or search contacts"
)
def list_contacts(
     q: Optional[str] = Query(None, description="Search name, email, type, notes or phone digits"),
     db: Session = Depends(get_session)
):
     """Most recently updated first."""
     return [to_response(c) for c in search_contacts(db, q).all()]


@router.get(
     "/{contact_id}",
     response_model=ContactResponse,
     summary="Get contact by ID"
)
def get_contact(contact_id: int, db: Session = Depends(get_session)):
     return to_response(_get_contact_or_404(db, contact_id))


@router.post(
     "",
     response_model=ContactResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a contact"
)
def create_contact(contact_data: ContactCreate, db: Session = Depends(get_session)):
     """
     - **name**: required
     - **phone**: any formatting; must contain 10 digits
     """
     contact = Contact(**{
          CONTACT_COLUMNS[field]: value
          for field, value in contact_data.model_dump().items()
     })
     db.add(contact)
     db.commit()
     db.refresh(contact)
     return to_response(contact)


@router.patch(
     "/{contact_id}",
     response_model=ContactResponse,
     summary="Update a contact"
)
def update_contact(
     contact_id: int,
     contact_data: ContactUpdate,
     db: Session = Depends(get_session)
):
     contact = _get_contact_or_404(db, contact_id)
     for field, value in contact_data.model_dump(exclude_unset=True).items():
          setattr(contact, CONTACT_COLUMNS[field], value)

     db.commit()
     db.refresh(contact)
     return to_response(contact)


@router.delete(
     "/{contact_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     response_class=Response,
     summary="Delete a contact"
)
def delete_contact(contact_id: int, db: Session = Depends(get_session)):
     contact = _get_contact_or_404(db, contact_id)
     db.delete(contact)
     db.commit()
     return Response(status_code=status.HTTP_204_NO_CONTENT)
