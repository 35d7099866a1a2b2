# models/purchase_details.py
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base


class PurchaseDetails(Base):
     """
     Acquisition terms for a property. One row per property.
     """
     __tablename__ = "purchase_details"

     purchase_id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.property_id", ondelete="CASCADE"),
          nullable=False,
          unique=True,
     )

     purchase_price = Column(Numeric(12, 2), nullable=False, default=0)
     down_payment = Column(Numeric(12, 2), nullable=True)
     financing_type = Column(String(100), nullable=False, default="")
     acquisition_type = Column(String(100), nullable=False, default="")
     buyer = Column(String(255), nullable=False, default="")
     seller = Column(String(255), nullable=False, default="")
     closing_date = Column(DateTime, nullable=False, server_default=func.now())
     closing_costs = Column(Numeric(12, 2), nullable=False, default=0)
     earnest_money = Column(Numeric(12, 2), nullable=True)
     notes = Column(Text, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="purchase_details")
     loans = relationship("LoanDetails", back_populates="purchase", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<PurchaseDetails(purchase_id={self.purchase_id}, property_id={self.property_id})>"
