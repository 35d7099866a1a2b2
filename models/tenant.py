# models/tenant.py
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Tenant(TimestampMixin, Base):
     """
     Tenant model - occupant of a property for a lease period.
     """
     __tablename__ = "tenants"
     __table_args__ = (
          UniqueConstraint("property_id", "tenant_name", "lease_start", name="tenant_property_id_tenant_name_lease_start_key"),
     )

     tenant_id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.property_id", ondelete="CASCADE"),
          nullable=False,
     )
     tenant_name = Column(String(255), nullable=True)
     tenant_status = Column(String(50), default="Inactive", nullable=True, index=True)
     lease_start = Column(DateTime, nullable=True)
     lease_end = Column(DateTime, nullable=True)
     rent_amount = Column(Numeric(12, 2), nullable=True)

     # Relationships
     property = relationship("Property", back_populates="tenants")

     def __repr__(self):
          return f"<Tenant(tenant_id={self.tenant_id}, name='{self.tenant_name}')>"
