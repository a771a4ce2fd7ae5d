"""Data Transfer Objects for Expense Use Cases"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class CreateExpenseCommandDTO(BaseModel):
    """
    Command DTO for recording an expense

    Used as input to CreateExpense use case.
    """

    user_id: str = Field(..., description="Owning user")
    description: str = Field(..., description="What the money was spent on")
    amount: Decimal = Field(..., description="Expense amount (must be > 0)")
    expense_date: Optional[date] = Field(default=None, description="Date (defaults to today)")
    category: Optional[str] = Field(default=None, description="Expense category")
    notes: Optional[str] = Field(default=None, description="Free-form notes")

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "user_abc123",
                "description": "Shop rent March",
                "amount": "15000.00",
                "expense_date": "2024-03-01",
                "category": "Rent",
                "notes": None
            }
        }


class UpdateExpenseCommandDTO(BaseModel):
    """Fields left as None are not changed"""

    user_id: str
    expense_id: int
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    expense_date: Optional[date] = None
    category: Optional[str] = None
    notes: Optional[str] = None


class ExpenseResponseDTO(BaseModel):
    expense_id: int
    description: str
    amount: Decimal
    expense_date: date
    category: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ExpenseListResponseDTO(BaseModel):
    expenses: List[ExpenseResponseDTO]
    total: int
    limit: int
    offset: int
