"""Unit tests for expense use cases"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.repositories.expense_repository import ExpenseSort
from src.app.use_cases.expenses import (
    CreateExpense,
    UpdateExpense,
    DeleteExpense,
    GetExpense,
    ListExpenses,
    CreateExpenseCommandDTO,
    UpdateExpenseCommandDTO,
)
from src.domain.errors import StoreUnavailable
from src.domain.expense import Expense


def make_expense(expense_id=1, amount="1500", category="Rent"):
    return Expense(
        id=expense_id,
        user_id="user_1",
        description="Shop rent",
        amount=Decimal(amount),
        expense_date=date(2024, 3, 1),
        category=category,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


def assign_id(expense):
    expense.id = 3
    return expense


@pytest.fixture
def mock_expense_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=assign_id)
    repo.get_by_id = AsyncMock(return_value=make_expense())
    repo.update = AsyncMock(side_effect=lambda expense: expense)
    repo.delete = AsyncMock()
    repo.list = AsyncMock(return_value=([make_expense(2), make_expense(1)], 2))
    return repo


@pytest.mark.asyncio
class TestCreateExpense:
    async def test_records_expense(self, mock_uow, mock_expense_repo):
        use_case = CreateExpense(mock_uow, mock_expense_repo)
        command = CreateExpenseCommandDTO(
            user_id="user_1",
            description="  Electricity bill ",
            amount=Decimal("2300.50"),
            expense_date=date(2024, 3, 10),
            category=" ",
        )

        result = await use_case.execute(command)

        assert result.is_ok()
        assert result.value.expense_id == 3
        assert result.value.description == "Electricity bill"
        assert result.value.amount == Decimal("2300.50")
        assert result.value.category is None
        mock_uow.commit.assert_awaited_once()

    async def test_date_defaults_to_today(self, mock_uow, mock_expense_repo):
        use_case = CreateExpense(mock_uow, mock_expense_repo)

        result = await use_case.execute(
            CreateExpenseCommandDTO(user_id="user_1", description="Tea", amount=Decimal("40"))
        )

        assert result.value.expense_date == datetime.now(timezone.utc).date()

    @pytest.mark.parametrize("amount", ["0", "-10"])
    async def test_non_positive_amount_rejected(self, mock_uow, mock_expense_repo, amount):
        use_case = CreateExpense(mock_uow, mock_expense_repo)

        result = await use_case.execute(
            CreateExpenseCommandDTO(user_id="user_1", description="Tea", amount=Decimal(amount))
        )

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.field == "amount"
        mock_expense_repo.create.assert_not_called()

    async def test_blank_description_rejected(self, mock_uow, mock_expense_repo):
        use_case = CreateExpense(mock_uow, mock_expense_repo)

        result = await use_case.execute(
            CreateExpenseCommandDTO(user_id="user_1", description=" ", amount=Decimal("10"))
        )

        assert result.is_err()
        assert result.error.field == "description"

    async def test_store_unavailable(self, mock_uow, mock_expense_repo):
        mock_expense_repo.create = AsyncMock(side_effect=StoreUnavailable())
        use_case = CreateExpense(mock_uow, mock_expense_repo)

        result = await use_case.execute(
            CreateExpenseCommandDTO(user_id="user_1", description="Tea", amount=Decimal("10"))
        )

        assert result.is_err()
        assert result.error.code == "STORE_UNAVAILABLE"
        mock_uow.rollback.assert_awaited()


@pytest.mark.asyncio
class TestUpdateExpense:
    async def test_updates_changed_fields(self, mock_uow, mock_expense_repo):
        use_case = UpdateExpense(mock_uow, mock_expense_repo)

        result = await use_case.execute(
            UpdateExpenseCommandDTO(user_id="user_1", expense_id=1, amount=Decimal("1800"))
        )

        assert result.is_ok()
        assert result.value.amount == Decimal("1800")
        assert result.value.description == "Shop rent"
        assert result.value.category == "Rent"
        mock_uow.commit.assert_awaited_once()

    async def test_missing_expense(self, mock_uow, mock_expense_repo):
        mock_expense_repo.get_by_id = AsyncMock(return_value=None)
        use_case = UpdateExpense(mock_uow, mock_expense_repo)

        result = await use_case.execute(
            UpdateExpenseCommandDTO(user_id="user_1", expense_id=9, notes="x")
        )

        assert result.is_err()
        assert result.error.code == "EXPENSE_NOT_FOUND"

    async def test_invalid_amount_rejected(self, mock_uow, mock_expense_repo):
        use_case = UpdateExpense(mock_uow, mock_expense_repo)

        result = await use_case.execute(
            UpdateExpenseCommandDTO(user_id="user_1", expense_id=1, amount=Decimal("0"))
        )

        assert result.is_err()
        assert result.error.field == "amount"
        mock_expense_repo.update.assert_not_called()


@pytest.mark.asyncio
class TestDeleteAndReadExpense:
    async def test_delete(self, mock_uow, mock_expense_repo):
        use_case = DeleteExpense(mock_uow, mock_expense_repo)

        result = await use_case.execute("user_1", 1)

        assert result.is_ok()
        assert result.value == 1
        mock_expense_repo.delete.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()

    async def test_delete_missing(self, mock_uow, mock_expense_repo):
        mock_expense_repo.get_by_id = AsyncMock(return_value=None)
        use_case = DeleteExpense(mock_uow, mock_expense_repo)

        result = await use_case.execute("user_1", 1)

        assert result.is_err()
        assert result.error.code == "EXPENSE_NOT_FOUND"

    async def test_get(self, mock_expense_repo):
        result = await GetExpense(mock_expense_repo).execute("user_1", 1)

        assert result.is_ok()
        assert result.value.expense_id == 1

    async def test_list_passes_filters(self, mock_expense_repo):
        use_case = ListExpenses(mock_expense_repo)

        result = await use_case.execute(
            "user_1", search=" rent ", sort=ExpenseSort.AMOUNT_DESC, limit=10
        )

        assert result.is_ok()
        assert result.value.total == 2
        assert [e.expense_id for e in result.value.expenses] == [2, 1]
        kwargs = mock_expense_repo.list.await_args.kwargs
        assert kwargs["search"] == "rent"
        assert kwargs["sort"] == ExpenseSort.AMOUNT_DESC
        assert kwargs["limit"] == 10

    async def test_list_rejects_inverted_range(self, mock_expense_repo):
        result = await ListExpenses(mock_expense_repo).execute(
            "user_1", start_date=date(2024, 2, 1), end_date=date(2024, 1, 1)
        )

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
