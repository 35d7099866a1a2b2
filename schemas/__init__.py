# schemas/__init__.py
from .property import (
     PropertyCreate,
     PropertyUpdate,
     PropertyResponse,
     PropertyMarker,
     ZipLookupResponse,
     GeocodeMissingResponse,
)
from .purchase_details import PurchaseDetailsCreate, PurchaseDetailsUpdate, PurchaseDetailsResponse
from .loan import (
     LoanDetailsCreate,
     LoanDetailsUpdate,
     LoanDetailsByPropertyPurchaseUpdate,
     LoanDetailsResponse,
     LoanPaymentUpsert,
     LoanPaymentUpdate,
     LoanPaymentResponse,
)
from .ledger import RentLogUpsert, RentLogResponse, PaymentLogUpsert, PaymentLogResponse
from .transaction import TransactionCreate, TransactionUpdate, TransactionResponse
from .contact import ContactCreate, ContactUpdate, ContactResponse
from .tenant import TenantCreate, TenantUpdate, TenantResponse
from .report import IncomeReport, ExpenseReport

__all__ = [
     "PropertyCreate",
     "PropertyUpdate",
     "PropertyResponse",
     "PropertyMarker",
     "ZipLookupResponse",
     "GeocodeMissingResponse",
     "PurchaseDetailsCreate",
     "PurchaseDetailsUpdate",
     "PurchaseDetailsResponse",
     "LoanDetailsCreate",
     "LoanDetailsUpdate",
     "LoanDetailsByPropertyPurchaseUpdate",
     "LoanDetailsResponse",
     "LoanPaymentUpsert",
     "LoanPaymentUpdate",
     "LoanPaymentResponse",
     "RentLogUpsert",
     "RentLogResponse",
     "PaymentLogUpsert",
     "PaymentLogResponse",
     "TransactionCreate",
     "TransactionUpdate",
     "TransactionResponse",
     "ContactCreate",
     "ContactUpdate",
     "ContactResponse",
     "TenantCreate",
     "TenantUpdate",
     "TenantResponse",
     "IncomeReport",
     "ExpenseReport",
]
