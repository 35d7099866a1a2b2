# models/payment_log.py
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class PaymentLog(Base):
     """
     Monthly outgoing payment for a property (mirrors RentLog).
     """
     __tablename__ = "payment_log"
     __table_args__ = (
          UniqueConstraint("property_id", "month", "year", name="payment_log_property_id_month_year_key"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.property_id", ondelete="CASCADE"),
          nullable=False,
     )
     year = Column(Integer, nullable=False)
     month = Column(String(20), nullable=False)
     payment_amount = Column(Numeric(12, 2), nullable=True)
     check_number = Column(Integer, nullable=True)
     notes = Column(Text, nullable=True)
     date_paid = Column(DateTime, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="payment_logs")

     def __repr__(self):
          return f"<PaymentLog(property_id={self.property_id}, {self.month} {self.year}, amount={self.payment_amount})>"
