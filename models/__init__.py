# models/__init__.py
from .base import Base
from .property import Property, IncomeProducing
from .purchase_details import PurchaseDetails
from .loan_details import LoanDetails
from .loan_payment import LoanPayment
from .rent_log import RentLog
from .payment_log import PaymentLog
from .transaction import Transaction
from .contact import Contact
from .tenant import Tenant

__all__ = [
     "Base",
     "Property",
     "IncomeProducing",
     "PurchaseDetails",
     "LoanDetails",
     "LoanPayment",
     "RentLog",
     "PaymentLog",
     "Transaction",
     "Contact",
     "Tenant",
]
