"""DeleteExpense Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.expense_repository import ExpenseRepository
from src.app.use_cases.errors import domain_error
from src.domain.errors import StoreUnavailable

logger = logging.getLogger(__name__)


class DeleteExpense:
    def __init__(self, uow: UnitOfWork, expense_repo: ExpenseRepository):
        self.uow = uow
        self.expense_repo = expense_repo

    async def execute(self, user_id: str, expense_id: int) -> Result[int]:
        try:
            expense = await self.expense_repo.get_by_id(user_id, expense_id)
            if not expense:
                return Return.err(
                    Error(
                        code="EXPENSE_NOT_FOUND",
                        message=f"Expense with ID {expense_id} not found",
                    )
                )

            await self.expense_repo.delete(expense)
            await self.uow.commit()
            logger.info(f"Deleted expense {expense_id} for user {user_id}")
            return Return.ok(expense_id)

        except StoreUnavailable as e:
            await self.uow.rollback()
            return Return.err(domain_error(e))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_EXPENSE_FAILED",
                    message="Failed to delete expense",
                    reason=str(e),
                )
            )
