"""
Pydantic schemas for the income and expense reports.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel


class MonthAmount(BaseModel):
     month: int  # 1..12
     amount: Optional[Decimal] = None


class PropertyIncome(BaseModel):
     property_id: int
     property_name: str
     rows: List[MonthAmount]
     total: Decimal


class IncomeReport(BaseModel):
     """Rent collected per property and month for one year."""
     year: int
     properties: List[PropertyIncome]
     grand_total: Decimal


class ExpenseRow(BaseModel):
     type: str
     amount: Optional[Decimal] = None
     date: date


class PropertyExpenses(BaseModel):
     property_id: int
     property_name: str
     rows: List[ExpenseRow]
     total: Decimal


class ExpenseReport(BaseModel):
     """Transactions per property for one year."""
     year: int
     properties: List[PropertyExpenses]
     grand_total: Decimal
