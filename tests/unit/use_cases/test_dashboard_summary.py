"""Unit tests for GetDashboardSummary use case and date range presets"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.reports import DateRangePreset, GetDashboardSummary, resolve_date_range
from src.domain.expense import Expense
from src.domain.transaction_document import DocumentCollection


def expense(amount, expense_date, category):
    return Expense(
        id=1,
        user_id="user_1",
        description="Expense",
        amount=Decimal(amount),
        expense_date=expense_date,
        category=category,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def sales(document_factory):
    first = document_factory(document_id=1, subtotal="1000", tax_total="0", paid_amount="1000")
    second = document_factory(document_id=2, subtotal="500", tax_total="0", paid_amount="200")
    second.issue_date = date(2024, 2, 10)
    return [first, second]


@pytest.fixture
def purchases(document_factory):
    purchase = document_factory(
        document_id=3,
        collection=DocumentCollection.PURCHASES,
        document_number="PO-001-2024",
        subtotal="300",
        tax_total="0",
    )
    return [purchase]


@pytest.fixture
def mock_document_repo(sales, purchases):
    repo = MagicMock()

    async def get_in_period(user_id, collection, start_date, end_date):
        return sales if collection == DocumentCollection.SALES else purchases

    repo.get_in_period = AsyncMock(side_effect=get_in_period)
    return repo


@pytest.fixture
def mock_expense_repo():
    repo = MagicMock()
    repo.get_in_period = AsyncMock(
        return_value=[
            expense("100", date(2024, 3, 5), "Rent"),
            expense("50", date(2024, 3, 6), None),
            expense("150", date(2024, 2, 1), "Rent"),
        ]
    )
    return repo


@pytest.mark.asyncio
class TestGetDashboardSummary:
    async def test_totals_profit_and_outstanding(self, mock_document_repo, mock_expense_repo):
        use_case = GetDashboardSummary(mock_document_repo, mock_expense_repo)

        result = await use_case.execute("user_1", date(2024, 1, 1), date(2024, 12, 31))

        assert result.is_ok()
        summary = result.value
        assert summary.sales_total == Decimal("1500")
        assert summary.purchases_total == Decimal("300")
        assert summary.expenses_total == Decimal("300")
        assert summary.profit == Decimal("900")
        assert summary.receivables == Decimal("300")
        assert summary.payables == Decimal("300")
        assert summary.sales_count == 2
        assert summary.expenses_count == 3

    async def test_monthly_buckets(self, mock_document_repo, mock_expense_repo):
        use_case = GetDashboardSummary(mock_document_repo, mock_expense_repo)

        result = await use_case.execute("user_1", date(2024, 1, 1), date(2024, 12, 31))

        monthly = {bucket.month: bucket for bucket in result.value.monthly}
        assert len(result.value.monthly) == 12
        assert monthly["Mar"].sales == Decimal("1000")
        assert monthly["Mar"].purchases == Decimal("300")
        assert monthly["Mar"].expenses == Decimal("150")
        assert monthly["Feb"].sales == Decimal("500")
        assert monthly["Feb"].expenses == Decimal("150")
        assert monthly["Jan"].sales == Decimal("0")

    async def test_expense_categories_sorted_by_value(self, mock_document_repo, mock_expense_repo):
        use_case = GetDashboardSummary(mock_document_repo, mock_expense_repo)

        result = await use_case.execute("user_1", date(2024, 1, 1), date(2024, 12, 31))

        categories = [(c.name, c.value) for c in result.value.expense_categories]
        assert categories == [("Rent", Decimal("250")), ("Other", Decimal("50"))]

    async def test_inverted_range_rejected(self, mock_document_repo, mock_expense_repo):
        use_case = GetDashboardSummary(mock_document_repo, mock_expense_repo)

        result = await use_case.execute("user_1", date(2024, 2, 1), date(2024, 1, 1))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_document_repo.get_in_period.assert_not_called()


class TestResolveDateRange:
    @pytest.mark.parametrize(
        "preset, today, expected",
        [
            (DateRangePreset.THIS_MONTH, date(2024, 2, 15), (date(2024, 2, 1), date(2024, 2, 29))),
            (DateRangePreset.LAST_MONTH, date(2024, 1, 15), (date(2023, 12, 1), date(2023, 12, 31))),
            (DateRangePreset.LAST_MONTH, date(2024, 3, 31), (date(2024, 2, 1), date(2024, 2, 29))),
            (DateRangePreset.THIS_YEAR, date(2024, 6, 1), (date(2024, 1, 1), date(2024, 12, 31))),
            (DateRangePreset.LAST_YEAR, date(2024, 6, 1), (date(2023, 1, 1), date(2023, 12, 31))),
        ],
    )
    def test_presets(self, preset, today, expected):
        assert resolve_date_range(preset, today) == expected
