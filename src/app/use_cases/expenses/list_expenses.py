"""
List Expenses Use Case

Retrieves a user's expenses with search, date range and sort order.
"""
from datetime import date
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.expense_repository import ExpenseRepository, ExpenseSort
from src.app.use_cases.errors import validation_error
from .dtos import ExpenseListResponseDTO
from .mappers import to_expense_response


class ListExpenses:
    def __init__(self, expense_repo: ExpenseRepository):
        self.expense_repo = expense_repo

    async def execute(
        self,
        user_id: str,
        search: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        sort: ExpenseSort = ExpenseSort.DATE_DESC,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[ExpenseListResponseDTO]:
        """
        List expenses with filters and pagination.

        Args:
            user_id: Owning user
            search: Case-insensitive match on description or category
            start_date: Inclusive lower bound on expense date
            end_date: Inclusive upper bound on expense date
            sort: date_desc (default), date_asc, amount_desc, amount_asc
            limit: Maximum number of expenses to return
            offset: Number of expenses to skip

        Returns:
            Result[ExpenseListResponseDTO]: Paginated expense list
        """
        if start_date and end_date and start_date > end_date:
            return Return.err(
                validation_error("start_date must not be after end_date", field="start_date")
            )

        expenses, total = await self.expense_repo.list(
            user_id=user_id,
            search=(search or "").strip() or None,
            start_date=start_date,
            end_date=end_date,
            sort=sort,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            ExpenseListResponseDTO(
                expenses=[to_expense_response(expense) for expense in expenses],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
