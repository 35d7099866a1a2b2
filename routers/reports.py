# routers/reports.py
"""
Yearly income and expense reports.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_session
from schemas.report import IncomeReport, ExpenseReport
from services.report_service import expense_report, income_report

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get(
     "/income",
     response_model=IncomeReport,
     summary="Rent collected per property and month"
)
def get_income_report(
     year: int = Query(..., description="Report year"),
     property_id: Optional[List[int]] = Query(None, description="Properties to include; all when omitted"),
     db: Session = Depends(get_session)
):
     return income_report(db, year, property_id)


@router.get(
     "/expenses",
     response_model=ExpenseReport,
     summary="Transactions per property"
)
def get_expense_report(
     year: int = Query(..., description="Report year"),
     property_id: Optional[List[int]] = Query(None, description="Properties to include; all when omitted"),
     db: Session = Depends(get_session)
):
     return expense_report(db, year, property_id)
