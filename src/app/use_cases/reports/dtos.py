"""Data Transfer Objects for Report Use Cases"""

from datetime import date
from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field


class MonthlyTotalsDTO(BaseModel):
    month: str = Field(..., description="Short month name (Jan..Dec)")
    sales: Decimal = Decimal("0")
    purchases: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")


class CategoryTotalDTO(BaseModel):
    name: str
    value: Decimal


class DashboardSummaryDTO(BaseModel):
    """
    Response DTO for the dashboard

    Returned by GetDashboardSummary use case.
    """

    start_date: date
    end_date: date
    sales_total: Decimal = Field(..., description="Sum of sales grand totals")
    purchases_total: Decimal = Field(..., description="Sum of purchase grand totals")
    expenses_total: Decimal = Field(..., description="Sum of expense amounts")
    profit: Decimal = Field(..., description="sales - (purchases + expenses)")
    receivables: Decimal = Field(..., description="Unpaid remainder of sales")
    payables: Decimal = Field(..., description="Unpaid remainder of purchases")
    sales_count: int = 0
    purchases_count: int = 0
    expenses_count: int = 0
    monthly: List[MonthlyTotalsDTO] = Field(default_factory=list)
    expense_categories: List[CategoryTotalDTO] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "start_date": "2024-01-01",
                "end_date": "2024-12-31",
                "sales_total": "250000.00",
                "purchases_total": "150000.00",
                "expenses_total": "40000.00",
                "profit": "60000.00",
                "receivables": "12000.00",
                "payables": "8000.00",
                "sales_count": 42,
                "purchases_count": 17,
                "expenses_count": 63,
                "monthly": [{"month": "Jan", "sales": "20000.00", "purchases": "9000.00", "expenses": "3000.00"}],
                "expense_categories": [{"name": "Rent", "value": "18000.00"}]
            }
        }
