"""Request schemas for Expense API"""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class CreateExpenseRequestSchema(BaseModel):
    description: str = Field(..., description="What the money was spent on")
    amount: Decimal = Field(..., description="Expense amount (must be > 0)")
    expense_date: Optional[date] = Field(default=None, description="Date (defaults to today)")
    category: Optional[str] = Field(default=None, description="Expense category")
    notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "description": "Shop rent March",
                "amount": "15000.00",
                "expense_date": "2024-03-01",
                "category": "Rent"
            }
        }


class UpdateExpenseRequestSchema(BaseModel):
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    expense_date: Optional[date] = None
    category: Optional[str] = None
    notes: Optional[str] = None
