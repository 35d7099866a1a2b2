# routers/__init__.py
from . import (
     contacts,
     geo,
     loan_details,
     loan_payments,
     payment_log,
     properties,
     purchase_details,
     rent_log,
     reports,
     tenants,
     transactions,
)

__all__ = [
     "contacts",
     "geo",
     "loan_details",
     "loan_payments",
     "payment_log",
     "properties",
     "purchase_details",
     "rent_log",
     "reports",
     "tenants",
     "transactions",
]
