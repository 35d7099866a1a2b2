# models/loan_payment.py
from sqlalchemy import (
     Column, Integer, String, Text, Numeric, DateTime,
     ForeignKeyConstraint, UniqueConstraint, Index, text,
)
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class LoanPayment(TimestampMixin, Base):
     """
     One row of a loan's payment ledger, keyed by its due date.
     """
     __tablename__ = "loan_payments"
     __table_args__ = (
          ForeignKeyConstraint(
               ["loan_id", "property_id"],
               ["loan_details.loan_id", "loan_details.property_id"],
               ondelete="CASCADE",
          ),
          UniqueConstraint("loan_id", "property_id", "payment_due_date", name="loan_payments_due_key"),
          Index("loan_payments_loan_id_property_id_idx", "loan_id", "property_id"),
          Index(
               "loan_payments_payment_code_key",
               "payment_code",
               unique=True,
               mssql_where=text("payment_code IS NOT NULL"),
               postgresql_where=text("payment_code IS NOT NULL"),
          ),
     )

     loan_payment_id = Column(Integer, primary_key=True, autoincrement=True)
     loan_id = Column(String(100), nullable=False)
     property_id = Column(Integer, nullable=False)

     payment_code = Column(String(100), nullable=True)  # unique when set
     payment_due_date = Column(DateTime, nullable=False)
     date_paid = Column(DateTime, nullable=True)
     payment_amount = Column(Numeric(12, 2), nullable=False, default=0)
     principal_paid = Column(Numeric(12, 2), nullable=False, default=0)
     interest_paid = Column(Numeric(12, 2), nullable=False, default=0)
     late_fee = Column(Numeric(12, 2), nullable=True)
     principal_balance = Column(Numeric(12, 2), nullable=False, default=0)
     stored_monthly_payment = Column(Numeric(12, 2), nullable=True)  # loan's monthly payment when recorded
     notes = Column(Text, nullable=True)

     # Relationships
     loan = relationship("LoanDetails", back_populates="payments")

     def __repr__(self):
          return f"<LoanPayment(id={self.loan_payment_id}, loan_id='{self.loan_id}', due={self.payment_due_date})>"
