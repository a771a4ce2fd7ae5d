"""SQLAlchemy Expense Repository Implementation"""

from typing import List, Optional, Tuple
from datetime import date
from sqlalchemy import or_
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.expense_repository import ExpenseRepository, ExpenseSort
from src.domain.expense import Expense
from .store_errors import translate_store_errors

SORT_ORDER = {
    ExpenseSort.DATE_DESC: (Expense.expense_date.desc(), Expense.id.desc()),
    ExpenseSort.DATE_ASC: (Expense.expense_date.asc(), Expense.id.asc()),
    ExpenseSort.AMOUNT_DESC: (Expense.amount.desc(), Expense.id.desc()),
    ExpenseSort.AMOUNT_ASC: (Expense.amount.asc(), Expense.id.asc()),
}


class SqlAlchemyExpenseRepository(ExpenseRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def create(self, expense: Expense) -> Expense:
        self.session.add(expense)
        await self.session.flush()
        await self.session.refresh(expense)
        return expense

    @translate_store_errors
    async def get_by_id(self, user_id: str, expense_id: int) -> Optional[Expense]:
        statement = (
            select(Expense)
            .where(Expense.id == expense_id)
            .where(Expense.user_id == user_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    @translate_store_errors
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
        conditions = [Expense.user_id == user_id]

        if search:
            needle = search.lower()
            conditions.append(
                or_(
                    func.lower(Expense.description).contains(needle, autoescape=True),
                    func.lower(Expense.category).contains(needle, autoescape=True),
                )
            )
        if start_date:
            conditions.append(Expense.expense_date >= start_date)
        if end_date:
            conditions.append(Expense.expense_date <= end_date)

        count_statement = select(func.count()).select_from(Expense).where(*conditions)
        total = (await self.session.execute(count_statement)).scalar_one()

        statement = (
            select(Expense)
            .where(*conditions)
            .order_by(*SORT_ORDER[sort])
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    @translate_store_errors
    async def get_in_period(self, user_id: str, start_date: date, end_date: date) -> List[Expense]:
        statement = (
            select(Expense)
            .where(Expense.user_id == user_id)
            .where(Expense.expense_date >= start_date)
            .where(Expense.expense_date <= end_date)
            .order_by(Expense.expense_date)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    @translate_store_errors
    async def update(self, expense: Expense) -> Expense:
        self.session.add(expense)
        await self.session.flush()
        await self.session.refresh(expense)
        return expense

    @translate_store_errors
    async def delete(self, expense: Expense) -> None:
        await self.session.delete(expense)
        await self.session.flush()
