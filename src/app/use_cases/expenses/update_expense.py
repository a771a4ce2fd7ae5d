"""UpdateExpense Use Case"""

from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.expense_repository import ExpenseRepository
from src.app.use_cases.errors import domain_error
from src.domain.errors import StoreUnavailable
from .dtos import UpdateExpenseCommandDTO, ExpenseResponseDTO
from .mappers import to_expense_response
from .validation import check_amount, check_description


class UpdateExpense:
    def __init__(self, uow: UnitOfWork, expense_repo: ExpenseRepository):
        self.uow = uow
        self.expense_repo = expense_repo

    async def execute(self, command: UpdateExpenseCommandDTO) -> Result[ExpenseResponseDTO]:
        """
        Apply changed fields to an expense

        Args:
            command: UpdateExpenseCommandDTO; None fields are left unchanged

        Returns:
            Result[ExpenseResponseDTO]: Updated expense or error
        """
        try:
            expense = await self.expense_repo.get_by_id(command.user_id, command.expense_id)
            if not expense:
                return Return.err(
                    Error(
                        code="EXPENSE_NOT_FOUND",
                        message=f"Expense with ID {command.expense_id} not found",
                    )
                )

            if command.description is not None:
                description, error = check_description(command.description)
                if error:
                    return Return.err(error)
                expense.description = description
            if command.amount is not None:
                amount, error = check_amount(command.amount)
                if error:
                    return Return.err(error)
                expense.amount = amount
            if command.expense_date is not None:
                expense.expense_date = command.expense_date
            if command.category is not None:
                expense.category = command.category.strip() or None
            if command.notes is not None:
                expense.notes = command.notes

            expense.updated_at = utc_now()
            updated = await self.expense_repo.update(expense)
            await self.uow.commit()
            return Return.ok(to_expense_response(updated))

        except StoreUnavailable as e:
            await self.uow.rollback()
            return Return.err(domain_error(e))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_EXPENSE_FAILED",
                    message="Failed to update expense",
                    reason=str(e),
                )
            )
