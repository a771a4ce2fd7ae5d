from libs.result import Result, Return, Error
from src.app.repositories.expense_repository import ExpenseRepository
from .dtos import ExpenseResponseDTO
from .mappers import to_expense_response


class GetExpense:
    def __init__(self, expense_repo: ExpenseRepository):
        self.expense_repo = expense_repo

    async def execute(self, user_id: str, expense_id: int) -> Result[ExpenseResponseDTO]:
        expense = await self.expense_repo.get_by_id(user_id, expense_id)
        if not expense:
            return Return.err(
                Error(
                    code="EXPENSE_NOT_FOUND",
                    message=f"Expense with ID {expense_id} not found",
                )
            )
        return Return.ok(to_expense_response(expense))
