"""Expense API Routes"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.auth import CurrentUser, get_current_user
from src.api.error import raise_for_error
from src.api.schemas.expense_request import CreateExpenseRequestSchema, UpdateExpenseRequestSchema
from src.app.repositories.expense_repository import ExpenseSort
from src.app.use_cases.expenses import (
    CreateExpense,
    UpdateExpense,
    DeleteExpense,
    GetExpense,
    ListExpenses,
    CreateExpenseCommandDTO,
    UpdateExpenseCommandDTO,
    ExpenseResponseDTO,
    ExpenseListResponseDTO,
)
from src.adapter.repositories import SqlAlchemyExpenseRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/expenses", tags=["Expenses"])

NOT_FOUND_RESPONSE = {
    "description": "Expense not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "EXPENSE_NOT_FOUND",
                    "message": "Expense with ID 123 not found"
                }
            }
        }
    }
}


@router.post(
    "",
    response_model=ExpenseResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_expense(
    request: CreateExpenseRequestSchema,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Record an expense.

    **Returns:**
    - 201: Expense recorded
    - 400: Missing description or non-positive amount
    """
    command = CreateExpenseCommandDTO(user_id=user.user_id, **request.model_dump())

    use_case = CreateExpense(SqlAlchemyUnitOfWork(session), SqlAlchemyExpenseRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "",
    response_model=ExpenseListResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_expenses(
    search: Optional[str] = Query(default=None, description="Description or category"),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    sort: ExpenseSort = Query(default=ExpenseSort.DATE_DESC),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    use_case = ListExpenses(SqlAlchemyExpenseRepository(session))
    result = await use_case.execute(
        user.user_id,
        search=search,
        start_date=start_date,
        end_date=end_date,
        sort=sort,
        limit=limit,
        offset=offset,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{expense_id}",
    response_model=ExpenseResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE},
)
async def get_expense(
    expense_id: int,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetExpense(SqlAlchemyExpenseRepository(session))
    result = await use_case.execute(user.user_id, expense_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{expense_id}",
    response_model=ExpenseResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE},
)
async def update_expense(
    expense_id: int,
    request: UpdateExpenseRequestSchema,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    command = UpdateExpenseCommandDTO(
        user_id=user.user_id,
        expense_id=expense_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = UpdateExpense(SqlAlchemyUnitOfWork(session), SqlAlchemyExpenseRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: NOT_FOUND_RESPONSE},
)
async def delete_expense(
    expense_id: int,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteExpense(SqlAlchemyUnitOfWork(session), SqlAlchemyExpenseRepository(session))
    result = await use_case.execute(user.user_id, expense_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
