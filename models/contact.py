# models/contact.py
from sqlalchemy import Column, Integer, String, Text
from .base import Base, TimestampMixin


class Contact(TimestampMixin, Base):
     """
     Address-book entry (agent, lender, contractor, tenant...).
     Phone numbers are stored as 10 bare digits.
     """
     __tablename__ = "contacts"

     contact_id = Column(Integer, primary_key=True, autoincrement=True)
     contact_name = Column(String(255), nullable=False)
     contact_phone = Column(String(20), nullable=False)
     contact_email = Column(String(255), nullable=True)
     contact_type = Column(String(100), nullable=True)
     contact_notes = Column(Text, nullable=True)

     def __repr__(self):
          return f"<Contact(contact_id={self.contact_id}, name='{self.contact_name}')>"
