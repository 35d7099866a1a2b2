# models/loan_details.py
from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class LoanDetails(Base):
     """
     Financing terms for a property/purchase pair.

     loan_id is supplied by the client (lender reference), not generated.
     """
     __tablename__ = "loan_details"
     __table_args__ = (
          UniqueConstraint("property_id", "purchase_id", name="loan_details_property_id_purchase_id_key"),
          UniqueConstraint("loan_id", "property_id", name="loan_details_loan_id_property_id_key"),
     )

     loan_id = Column(String(100), primary_key=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.property_id", ondelete="CASCADE"),
          nullable=False,
          index=True,
     )
     purchase_id = Column(
          Integer,
          ForeignKey("purchase_details.purchase_id", ondelete="NO ACTION"),
          nullable=False,
     )

     loan_amount = Column(Numeric(12, 2), nullable=True)
     lender = Column(String(255), nullable=True)
     interest_rate = Column(Numeric(6, 3), nullable=True)
     loan_term = Column(Integer, nullable=True)  # months
     loan_start = Column(DateTime, nullable=True)
     loan_end = Column(DateTime, nullable=True)
     amortization_period = Column(Integer, nullable=True)
     monthly_payment = Column(Numeric(12, 2), nullable=True)
     loan_type = Column(String(100), nullable=True)
     balloon_payment = Column(Boolean, nullable=True)
     prepayment_penalty = Column(Boolean, nullable=True)
     refinanced = Column(Boolean, nullable=True)
     loan_status = Column(String(50), nullable=True)
     notes = Column(Text, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="loans")
     purchase = relationship("PurchaseDetails", back_populates="loans")
     payments = relationship("LoanPayment", back_populates="loan", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<LoanDetails(loan_id='{self.loan_id}', property_id={self.property_id})>"
