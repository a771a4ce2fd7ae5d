"""Expense Domain Entity

Tracks a single business expense. Expenses carry no numbering and no
payment state.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Text, DateTime
from src.domain.base import BaseModel, ID_TYPE, utc_now

EXPENSE_CATEGORIES = [
    "Travel",
    "Meals",
    "Salary",
    "Office Supplies",
    "Equipment",
    "Training",
    "Marketing",
    "Utilities",
    "Broadband",
    "Rent",
    "Insurance",
    "Maintenance",
]

UNCATEGORIZED = "Other"


class Expense(BaseModel, table=True):
    """
    Expense - Money spent outside of purchase orders

    Domain Rules:
    - amount > 0
    - category is free text; blank categories report as "Other"
    """

    __tablename__ = "expenses"
    __table_args__ = (
        Index('ix_expenses_user_date', 'user_id', 'expense_date'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(ID_TYPE, primary_key=True, autoincrement=True),
        description="Unique expense identifier (auto-increment)"
    )

    user_id: str = Field(
        sa_column=Column(String(128), nullable=False),
        description="Owning user"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="What the money was spent on"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Expense amount (> 0)"
    )

    expense_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date of the expense"
    )

    category: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
        description="Expense category (e.g., Travel, Rent)"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Free-form notes"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Expense creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )
