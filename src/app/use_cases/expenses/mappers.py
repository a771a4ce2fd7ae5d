from src.domain.expense import Expense
from .dtos import ExpenseResponseDTO


def to_expense_response(expense: Expense) -> ExpenseResponseDTO:
    return ExpenseResponseDTO(
        expense_id=expense.id,
        description=expense.description,
        amount=expense.amount,
        expense_date=expense.expense_date,
        category=expense.category,
        notes=expense.notes,
        created_at=expense.created_at,
        updated_at=expense.updated_at,
    )
