# models/rent_log.py
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class RentLog(Base):
     """
     Rent roll - rent collected for a property in a given month.
     One row per (property_id, month, year).
     """
     __tablename__ = "rent_log"
     __table_args__ = (
          UniqueConstraint("property_id", "month", "year", name="rent_log_property_id_month_year_key"),
     )

     rent_id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.property_id", ondelete="CASCADE"),
          nullable=False,
     )
     month = Column(String(20), nullable=False)  # "Jan" .. "Dec"
     year = Column(Integer, nullable=False)
     rent_amount = Column(Numeric(12, 2), nullable=False, default=0)
     date_deposited = Column(DateTime, nullable=False)
     check_number = Column(Integer, nullable=True)
     notes = Column(Text, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="rent_logs")

     def __repr__(self):
          return f"<RentLog(property_id={self.property_id}, {self.month} {self.year}, amount={self.rent_amount})>"
