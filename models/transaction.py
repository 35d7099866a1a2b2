# models/transaction.py
from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Transaction(Base):
     """
     Ad-hoc dated financial event (expense, repair, tax bill...) for a property.
     """
     __tablename__ = "transactions"

     transaction_id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.property_id", ondelete="CASCADE"),
          nullable=False,
          index=True,
     )
     transaction_type = Column(String(100), nullable=True)
     notes = Column(String(255), nullable=True)
     transaction_amount = Column(Numeric(12, 2), nullable=False)
     transaction_date = Column(Date, nullable=False, index=True)

     # Relationships
     property = relationship("Property", back_populates="transactions")

     def __repr__(self):
          return f"<Transaction(id={self.transaction_id}, amount={self.transaction_amount}, date={self.transaction_date})>"
