"""Expense use cases"""
from .create_expense import CreateExpense
from .update_expense import UpdateExpense
from .delete_expense import DeleteExpense
from .get_expense import GetExpense
from .list_expenses import ListExpenses
from .dtos import (
    CreateExpenseCommandDTO,
    UpdateExpenseCommandDTO,
    ExpenseResponseDTO,
    ExpenseListResponseDTO,
)

__all__ = [
    "CreateExpense",
    "UpdateExpense",
    "DeleteExpense",
    "GetExpense",
    "ListExpenses",
    "CreateExpenseCommandDTO",
    "UpdateExpenseCommandDTO",
    "ExpenseResponseDTO",
    "ExpenseListResponseDTO",
]
