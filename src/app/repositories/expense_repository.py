"""Expense Repository Interface

Defines the contract for expense persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple
from src.domain.expense import Expense


class ExpenseSort(str, Enum):
    """Expense list orderings"""
    DATE_DESC = "date_desc"
    DATE_ASC = "date_asc"
    AMOUNT_DESC = "amount_desc"
    AMOUNT_ASC = "amount_asc"


class ExpenseRepository(ABC):
    """
    Repository interface for Expense persistence
    """

    @abstractmethod
    async def create(self, expense: Expense) -> Expense:
        """
        Create a new expense

        Args:
            expense: Expense entity to persist

        Returns:
            Created Expense with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str, expense_id: int) -> Optional[Expense]:
        """
        Retrieve an expense by ID

        Args:
            user_id: Owning user
            expense_id: Expense ID

        Returns:
            Expense if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(
        self,
        user_id: str,
        search: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        sort: ExpenseSort = ExpenseSort.DATE_DESC,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[Expense], int]:
        """
        List expenses

        Args:
            user_id: Owning user
            search: Case-insensitive match on description or category
            start_date: Optional inclusive lower bound on expense_date
            end_date: Optional inclusive upper bound on expense_date
            sort: Ordering
            limit: Maximum number of expenses to return
            offset: Offset for pagination

        Returns:
            Tuple of (expenses, total matching count)
        """
        pass

    @abstractmethod
    async def get_in_period(self, user_id: str, start_date: date, end_date: date) -> List[Expense]:
        """
        Retrieve every expense within an inclusive date range

        Args:
            user_id: Owning user
            start_date: First date included
            end_date: Last date included

        Returns:
            List of expenses
        """
        pass

    @abstractmethod
    async def update(self, expense: Expense) -> Expense:
        """
        Update an existing expense

        Args:
            expense: Expense entity with updated values

        Returns:
            Updated Expense
        """
        pass

    @abstractmethod
    async def delete(self, expense: Expense) -> None:
        """
        Permanently delete an expense

        Args:
            expense: Expense to delete
        """
        pass
