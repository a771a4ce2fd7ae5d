"""Unit tests for RecordPayment use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.documents.record_payment import RecordPayment
from src.app.use_cases.documents.dtos import RecordPaymentCommandDTO
from src.domain.errors import StoreUnavailable
from src.domain.transaction_document import DocumentCollection, PaymentStatus


@pytest.fixture
def stored_document(document_factory):
    # grand total 1000
    return document_factory(subtotal="1000", tax_total="0")


@pytest.fixture
def mock_document_repo(stored_document):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=stored_document)
    repo.update = AsyncMock(side_effect=lambda document: document)
    return repo


@pytest.fixture
def mock_line_item_repo(line_item_factory):
    repo = MagicMock()
    repo.get_by_document_id = AsyncMock(
        return_value=[line_item_factory(quantity="1", unit_price="1000", tax="0")]
    )
    return repo


@pytest.fixture
def payment_use_case(mock_uow, mock_document_repo, mock_line_item_repo):
    return RecordPayment(mock_uow, mock_document_repo, mock_line_item_repo)


def payment(amount):
    return RecordPaymentCommandDTO(
        user_id="user_1",
        collection=DocumentCollection.SALES,
        document_id=1,
        amount=Decimal(amount),
    )


@pytest.mark.asyncio
class TestRecordPayment:
    async def test_partial_then_paid(self, payment_use_case, mock_uow):
        """
        Given: A 1000 invoice with nothing paid
        When: 300 and 300 are recorded, then 400
        Then: Status goes partial (600 paid) and then paid (1000 paid)
        """
        first = await payment_use_case.execute(payment("300"))
        second = await payment_use_case.execute(payment("300"))

        assert second.is_ok()
        assert first.value.payment_status == PaymentStatus.PARTIAL
        assert second.value.paid_amount == Decimal("600")
        assert second.value.remaining_amount == Decimal("400")
        assert second.value.payment_status == PaymentStatus.PARTIAL

        third = await payment_use_case.execute(payment("400"))

        assert third.value.paid_amount == Decimal("1000")
        assert third.value.remaining_amount == Decimal("0")
        assert third.value.payment_status == PaymentStatus.PAID
        assert third.value.last_payment_at is not None
        assert mock_uow.commit.await_count == 3

    async def test_locks_document_for_update(self, payment_use_case, mock_document_repo):
        await payment_use_case.execute(payment("10"))

        mock_document_repo.get_by_id.assert_awaited_once_with(
            "user_1", DocumentCollection.SALES, 1, for_update=True
        )

    @pytest.mark.parametrize("amount", ["0", "-50"])
    async def test_non_positive_amount_rejected(
        self, payment_use_case, mock_document_repo, mock_uow, stored_document, amount
    ):
        result = await payment_use_case.execute(payment(amount))

        assert result.is_err()
        assert result.error.code == "INVALID_PAYMENT"
        assert result.error.field == "amount"
        assert stored_document.paid_amount == Decimal("0")
        mock_document_repo.update.assert_not_called()
        mock_uow.rollback.assert_awaited()

    async def test_document_not_found(self, payment_use_case, mock_document_repo):
        mock_document_repo.get_by_id = AsyncMock(return_value=None)

        result = await payment_use_case.execute(payment("100"))

        assert result.is_err()
        assert result.error.code == "DOCUMENT_NOT_FOUND"

    async def test_store_unavailable(self, payment_use_case, mock_uow):
        mock_uow.commit = AsyncMock(side_effect=StoreUnavailable())

        result = await payment_use_case.execute(payment("100"))

        assert result.is_err()
        assert result.error.code == "STORE_UNAVAILABLE"
