"""
Ledger Service - upsert-by-composite-key for monthly ledger rows.

Rent log and payment log rows are identified by (property_id, month, year),
loan payments by (loan_id, property_id, payment_due_date) and tenants by
(property_id, tenant_name, lease_start). Posting an existing key updates
that row instead of inserting a duplicate.
"""
from datetime import datetime, timezone
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from models import RentLog, PaymentLog, LoanDetails, LoanPayment, Tenant
from schemas.ledger import RentLogUpsert, PaymentLogUpsert
from schemas.loan import LoanPaymentUpsert, LoanPaymentUpdate
from schemas.tenant import TenantCreate


MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")


def month_index(month: Optional[str]) -> Optional[int]:
     """1-based calendar month for "Jan", "january", "3"...; None if unrecognised."""
     text = (month or "").strip().lower()
     if text.isdigit():
          number = int(text)
          return number if 1 <= number <= 12 else None
     try:
          return MONTHS.index(text[:3]) + 1
     except ValueError:
          return None


def calendar_order(row) -> Tuple[int, int, str]:
     """Sort key: year, then calendar month; unknown month labels last."""
     index = month_index(row.month)
     return (row.year, index if index is not None else 13, row.month)


def _now() -> datetime:
     return datetime.now(timezone.utc).replace(tzinfo=None)


def upsert_rent_log(db: Session, data: RentLogUpsert) -> RentLog:
     """
     Create or update the rent row for one property-month.

     Update rules:
     - rent_amount / check_number / notes change only when a value is sent
     - date_deposited takes the sent date; otherwise it is stamped with the
       current time when rent_amount or check_number was part of the request
     """
     row = (
          db.query(RentLog)
          .filter(
               RentLog.property_id == data.property_id,
               RentLog.month == data.month,
               RentLog.year == data.year,
          )
          .first()
     )

     if row is None:
          row = RentLog(
               property_id=data.property_id,
               month=data.month,
               year=data.year,
               rent_amount=data.rent_amount if data.rent_amount is not None else 0,
               date_deposited=data.date_deposited or _now(),
               check_number=data.check_number,
               notes=data.notes,
          )
          db.add(row)
          db.flush()
          return row

     for field in ("rent_amount", "check_number", "notes"):
          value = getattr(data, field)
          if value is not None:
               setattr(row, field, value)

     if data.date_deposited:
          row.date_deposited = data.date_deposited
     elif {"rent_amount", "check_number"} & data.model_fields_set:
          row.date_deposited = _now()

     db.flush()
     return row


def upsert_payment_log(db: Session, data: PaymentLogUpsert) -> PaymentLog:
     """Create or update the payment row for one property-month."""
     row = (
          db.query(PaymentLog)
          .filter(
               PaymentLog.property_id == data.property_id,
               PaymentLog.month == data.month,
               PaymentLog.year == data.year,
          )
          .first()
     )

     if row is None:
          row = PaymentLog(
               property_id=data.property_id,
               month=data.month,
               year=data.year,
               payment_amount=data.payment_amount if data.payment_amount is not None else 0,
               check_number=data.check_number,
               notes=data.notes,
               date_paid=data.date_paid,
          )
          db.add(row)
          db.flush()
          return row

     for field in ("payment_amount", "check_number", "notes", "date_paid"):
          value = getattr(data, field)
          if value is not None:
               setattr(row, field, value)

     db.flush()
     return row


def upsert_loan_payment(db: Session, loan: LoanDetails, data: LoanPaymentUpsert) -> Tuple[LoanPayment, bool]:
     """
     Create or update the payment for one due date of a loan.

     On create, stored_monthly_payment snapshots the loan's monthly payment
     unless the request supplies one, so later changes to the loan terms do
     not rewrite history.

     Returns:
          (payment, created)
     """
     row = (
          db.query(LoanPayment)
          .filter(
               LoanPayment.loan_id == loan.loan_id,
               LoanPayment.property_id == loan.property_id,
               LoanPayment.payment_due_date == data.payment_due_date,
          )
          .first()
     )

     values = {
          field: getattr(data, field)
          for field in LoanPaymentUpdate.model_fields
          if field in data.model_fields_set and getattr(data, field) is not None
     }

     if row is not None:
          for field, value in values.items():
               setattr(row, field, value)
          db.flush()
          return row, False

     row = LoanPayment(
          loan_id=loan.loan_id,
          property_id=loan.property_id,
          payment_due_date=data.payment_due_date,
          payment_amount=0,
          principal_paid=0,
          interest_paid=0,
          principal_balance=0,
          stored_monthly_payment=loan.monthly_payment,
     )
     for field, value in values.items():
          setattr(row, field, value)
     db.add(row)
     db.flush()
     return row, True


def upsert_tenant(db: Session, data: TenantCreate) -> Tenant:
     """
     Create or update a tenancy keyed by (property_id, tenant_name, lease_start).

     The remaining columns are overwritten with the request's values.
     """
     row = (
          db.query(Tenant)
          .filter(
               Tenant.property_id == data.property_id,
               Tenant.tenant_name == data.tenant_name,
               Tenant.lease_start == data.lease_start,
          )
          .first()
     )

     if row is None:
          row = Tenant(
               property_id=data.property_id,
               tenant_name=data.tenant_name,
               lease_start=data.lease_start,
          )
          db.add(row)

     row.tenant_status = data.tenant_status if data.tenant_status is not None else "Inactive"
     row.lease_end = data.lease_end
     row.rent_amount = data.rent_amount
     db.flush()
     return row
