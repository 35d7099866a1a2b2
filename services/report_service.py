"""
Report Service - yearly income and expense summaries per property.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from models import Property, RentLog, Transaction
from schemas.report import (
     ExpenseReport,
     ExpenseRow,
     IncomeReport,
     MonthAmount,
     PropertyExpenses,
     PropertyIncome,
)
from services.ledger_service import month_index


def _selected_properties(db: Session, property_ids: Optional[List[int]]) -> List[Property]:
     query = db.query(Property)
     if property_ids:
          query = query.filter(Property.property_id.in_(property_ids))
     return query.order_by(Property.property_id).all()


def year_bounds(year: int):
     """[Jan 1, next Jan 1) for filtering date columns by year."""
     return date(year, 1, 1), date(year + 1, 1, 1)


def income_report(db: Session, year: int, property_ids: Optional[List[int]] = None) -> IncomeReport:
     """
     Rent collected per month for each property.

     Months without a rent row report amount None.
     """
     results = []
     for prop in _selected_properties(db, property_ids):
          rows = (
               db.query(RentLog)
               .filter(RentLog.property_id == prop.property_id, RentLog.year == year)
               .all()
          )
          by_month = {}
          for row in rows:
               index = month_index(row.month)
               if index is None or row.rent_amount is None:
                    continue
               by_month[index] = by_month.get(index, Decimal("0")) + Decimal(row.rent_amount)

          months = [MonthAmount(month=m, amount=by_month.get(m)) for m in range(1, 13)]
          results.append(PropertyIncome(
               property_id=prop.property_id,
               property_name=prop.property_name,
               rows=months,
               total=sum(by_month.values(), Decimal("0")),
          ))

     return IncomeReport(
          year=year,
          properties=results,
          grand_total=sum((p.total for p in results), Decimal("0")),
     )


def expense_report(db: Session, year: int, property_ids: Optional[List[int]] = None) -> ExpenseReport:
     """Transactions dated within the year for each property, oldest first."""
     start, end = year_bounds(year)
     results = []
     for prop in _selected_properties(db, property_ids):
          transactions = (
               db.query(Transaction)
               .filter(
                    Transaction.property_id == prop.property_id,
                    Transaction.transaction_date >= start,
                    Transaction.transaction_date < end,
               )
               .order_by(Transaction.transaction_date, Transaction.transaction_id)
               .all()
          )
          rows = [
               ExpenseRow(
                    type=(t.transaction_type or "").strip(),
                    amount=t.transaction_amount,
                    date=t.transaction_date,
               )
               for t in transactions
          ]
          results.append(PropertyExpenses(
               property_id=prop.property_id,
               property_name=prop.property_name,
               rows=rows,
               total=sum((Decimal(r.amount) for r in rows if r.amount is not None), Decimal("0")),
          ))

     return ExpenseReport(
          year=year,
          properties=results,
          grand_total=sum((p.total for p in results), Decimal("0")),
     )
