"""Report API Routes"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.auth import CurrentUser, get_current_user
from src.api.error import raise_for_error
from src.app.use_cases.errors import validation_error
from src.domain.base import utc_now
from src.app.use_cases.reports import (
    GetDashboardSummary,
    DashboardSummaryDTO,
    DateRangePreset,
    resolve_date_range,
)
from src.adapter.repositories import (
    SqlAlchemyTransactionDocumentRepository,
    SqlAlchemyExpenseRepository,
)
from src.depends import get_session

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get(
    "/summary",
    response_model=DashboardSummaryDTO,
    status_code=status.HTTP_200_OK,
)
async def get_summary(
    preset: Optional[DateRangePreset] = Query(default=None, alias="range"),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Dashboard summary for a period.

    Pass either a `range` preset (this_month, last_month, this_year,
    last_year) or both `start_date` and `end_date`. With neither, the
    current month is used.
    """
    if start_date or end_date:
        if not (start_date and end_date):
            raise_for_error(
                validation_error("start_date and end_date must be given together", field="start_date")
            )
    else:
        start_date, end_date = resolve_date_range(
            preset or DateRangePreset.THIS_MONTH, utc_now().date()
        )

    use_case = GetDashboardSummary(
        SqlAlchemyTransactionDocumentRepository(session),
        SqlAlchemyExpenseRepository(session),
    )
    result = await use_case.execute(user.user_id, start_date, end_date)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
