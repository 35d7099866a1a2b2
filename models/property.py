# models/property.py
import enum
from sqlalchemy import Column, Integer, String, Float, Numeric, DateTime, Index, UniqueConstraint, func
from sqlalchemy.orm import relationship
from .base import Base


class IncomeProducing(str, enum.Enum):
     """Whether a property currently produces income."""
     YES = "YES"
     NO = "NO"


class Property(Base):
     """
     Property model - a single real-estate asset in the portfolio.

     Every ledger table (rent log, payment log, transactions, tenants) and the
     purchase/loan records hang off this row and are removed with it.
     """
     __tablename__ = "properties"
     __table_args__ = (
          UniqueConstraint("address", "city", "state", "zipcode", name="uniq_prop_address"),
          Index("properties_city_state_idx", "city", "state"),
          Index("idx_property_lat_lng", "lat", "lng"),
     )

     property_id = Column(Integer, primary_key=True, autoincrement=True)
     property_name = Column(String(255), nullable=False)
     owner = Column(String(255), nullable=False)
     type = Column(String(100), nullable=False)
     status = Column(String(50), nullable=False)  # Vacant, Pending, Leased, Subleased, Financed
     income_producing = Column(String(3), default=IncomeProducing.NO.value, nullable=False)

     # Address
     address = Column(String(255), nullable=False)
     city = Column(String(100), nullable=True)
     state = Column(String(50), nullable=True)
     zipcode = Column(String(5), nullable=True)
     county = Column(String(100), nullable=True)

     year = Column(Integer, nullable=True)
     market_value = Column(Numeric(12, 2), nullable=True)

     # Map coordinates
     lat = Column(Float, nullable=True)
     lng = Column(Float, nullable=True)
     geocoded_at = Column(DateTime, nullable=True)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     purchase_details = relationship(
          "PurchaseDetails",
          back_populates="property",
          uselist=False,
          cascade="all, delete-orphan",
     )
     loans = relationship("LoanDetails", back_populates="property", cascade="all, delete-orphan")
     rent_logs = relationship("RentLog", back_populates="property", cascade="all, delete-orphan")
     payment_logs = relationship("PaymentLog", back_populates="property", cascade="all, delete-orphan")
     transactions = relationship("Transaction", back_populates="property", cascade="all, delete-orphan")
     tenants = relationship("Tenant", back_populates="property", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Property(property_id={self.property_id}, name='{self.property_name}')>"

     @property
     def full_address(self) -> str:
          """Street, city, state and ZIP joined for geocoding; blanks skipped."""
          parts = [self.address, self.city, self.state, self.zipcode]
          return ", ".join(str(p) for p in parts if p)
