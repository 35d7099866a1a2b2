# services/__init__.py
from .property_service import (
     apply_property_changes,
     autofill_city_state,
     geocode_missing,
     infer_income_producing,
     toggle_income_producing,
)
from .ledger_service import (
     calendar_order,
     month_index,
     upsert_rent_log,
     upsert_payment_log,
     upsert_loan_payment,
     upsert_tenant,
)
from .contact_service import search_contacts, to_response
from .report_service import income_report, expense_report

__all__ = [
     "apply_property_changes",
     "autofill_city_state",
     "geocode_missing",
     "infer_income_producing",
     "toggle_income_producing",
     "calendar_order",
     "month_index",
     "upsert_rent_log",
     "upsert_payment_log",
     "upsert_loan_payment",
     "upsert_tenant",
     "search_contacts",
     "to_response",
     "income_report",
     "expense_report",
]
