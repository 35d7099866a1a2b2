"""
Contact Service - search and UI mapping for the contact list.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from models import Contact
from schemas.contact import ContactResponse, digits_only


def _epoch_millis(value: Optional[datetime]) -> int:
     if value is None:
          return 0
     if value.tzinfo is None:
          value = value.replace(tzinfo=timezone.utc)
     return int(value.timestamp() * 1000)


def to_response(contact: Contact) -> ContactResponse:
     """Map contact_* columns to the field names the contact list uses."""
     return ContactResponse(
          contact_id=contact.contact_id,
          name=contact.contact_name,
          phone=contact.contact_phone,
          email=contact.contact_email or "",
          contact_type=contact.contact_type or "",
          notes=contact.contact_notes or "",
          created_at=_epoch_millis(contact.created_at),
          updated_at=_epoch_millis(contact.updated_at),
     )


def search_contacts(db: Session, q: Optional[str] = None) -> Query:
     """
     Case-insensitive match on name, email, type and notes; digits in the
     search term also match the stored phone digits.
     """
     query = db.query(Contact)
     search = (q or "").strip()
     search_digits = digits_only(q or "")

     if search or search_digits:
          conditions = [
               Contact.contact_name.ilike(f"%{search}%"),
               Contact.contact_email.ilike(f"%{search}%"),
               Contact.contact_type.ilike(f"%{search}%"),
               Contact.contact_notes.ilike(f"%{search}%"),
          ]
          if search_digits:
               conditions.append(Contact.contact_phone.contains(search_digits))
          query = query.filter(or_(*conditions))

     return query.order_by(Contact.updated_at.desc(), Contact.contact_id.desc())
