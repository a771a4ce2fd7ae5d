"""CreateExpense Use Case

Records a business expense for a user.
"""

import logging
from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.expense_repository import ExpenseRepository
from src.app.use_cases.errors import domain_error
from src.domain.errors import StoreUnavailable
from src.domain.expense import Expense
from .dtos import CreateExpenseCommandDTO, ExpenseResponseDTO
from .mappers import to_expense_response
from .validation import check_amount, check_description

logger = logging.getLogger(__name__)


class CreateExpense:
    """
    Use Case: Record an expense

    Business Rules:
    1. Description is required
    2. Amount must be > 0
    3. Date defaults to today; blank category is stored as None
    """

    def __init__(self, uow: UnitOfWork, expense_repo: ExpenseRepository):
        self.uow = uow
        self.expense_repo = expense_repo

    async def execute(self, command: CreateExpenseCommandDTO) -> Result[ExpenseResponseDTO]:
        description, error = check_description(command.description)
        if error:
            return Return.err(error)
        amount, error = check_amount(command.amount)
        if error:
            return Return.err(error)

        try:
            expense = Expense(
                user_id=command.user_id,
                description=description,
                amount=amount,
                expense_date=command.expense_date or utc_now().date(),
                category=(command.category or "").strip() or None,
                notes=command.notes,
            )
            created = await self.expense_repo.create(expense)
            await self.uow.commit()

            logger.info(
                f"Recorded expense {created.id} for user {command.user_id}: "
                f"{created.amount} ({created.category or 'uncategorized'})"
            )
            return Return.ok(to_expense_response(created))

        except StoreUnavailable as e:
            await self.uow.rollback()
            return Return.err(domain_error(e))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_EXPENSE_FAILED",
                    message="Failed to create expense",
                    reason=str(e),
                )
            )
