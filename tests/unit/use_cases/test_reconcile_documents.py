"""Unit tests for ReconcileDocuments use case

Tests cover:
- Consistent documents report no discrepancies
- Drifted totals and status are reported per field
- Repair mode rewrites drifted documents and commits
- Documents with invalid stored items are reported, never repaired
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.documents.reconcile_documents import ReconcileDocuments
from src.domain.transaction_document import PaymentStatus


@pytest.fixture
def consistent_document(document_factory):
    return document_factory(document_id=1, document_number="INV-001-2024")


@pytest.fixture
def drifted_document(document_factory):
    document = document_factory(document_id=2, document_number="INV-002-2024", paid_amount="100")
    document.grand_total = Decimal("999")
    document.payment_status = PaymentStatus.PENDING
    return document


@pytest.fixture
def mock_line_item_repo(line_item_factory):
    repo = MagicMock()
    repo.get_by_document_id = AsyncMock(
        side_effect=lambda document_id: [
            line_item_factory(document_id=document_id, quantity="2", unit_price="450", tax="18")
        ]
    )
    return repo


def document_repo(documents):
    repo = MagicMock()
    repo.get_all = AsyncMock(return_value=documents)
    repo.update = AsyncMock(side_effect=lambda document: document)
    return repo


@pytest.mark.asyncio
class TestReconcileDocuments:
    async def test_consistent_documents(self, mock_uow, mock_line_item_repo, consistent_document):
        repo = document_repo([consistent_document])
        use_case = ReconcileDocuments(mock_uow, repo, mock_line_item_repo)

        result = await use_case.execute()

        assert result.is_ok()
        assert result.value.total_documents_checked == 1
        assert result.value.discrepancies_found == 0
        mock_uow.commit.assert_not_called()

    async def test_reports_drifted_fields(
        self, mock_uow, mock_line_item_repo, consistent_document, drifted_document
    ):
        """
        Given: A document whose grand total and status were edited in the store
        When: Reconciliation runs without repair
        Then: grand_total and payment_status are reported
        """
        repo = document_repo([consistent_document, drifted_document])
        use_case = ReconcileDocuments(mock_uow, repo, mock_line_item_repo)

        result = await use_case.execute()

        assert result.is_ok()
        fields = {d.field for d in result.value.discrepancies}
        assert fields == {"grand_total", "payment_status"}
        grand_total = next(d for d in result.value.discrepancies if d.field == "grand_total")
        assert grand_total.document_id == 2
        assert grand_total.stored_value == "999.000000"
        assert grand_total.expected_value == "1062.000000"
        assert result.value.documents_repaired == 0
        repo.update.assert_not_called()

    async def test_repair_rewrites_and_commits(
        self, mock_uow, mock_line_item_repo, drifted_document
    ):
        repo = document_repo([drifted_document])
        use_case = ReconcileDocuments(mock_uow, repo, mock_line_item_repo, repair=True)

        result = await use_case.execute()

        assert result.value.documents_repaired == 1
        assert drifted_document.grand_total == Decimal("1062")
        assert drifted_document.remaining_amount == Decimal("962")
        assert drifted_document.payment_status == PaymentStatus.PARTIAL
        repo.update.assert_awaited_once_with(drifted_document)
        mock_uow.commit.assert_awaited_once()

    async def test_invalid_items_reported_not_repaired(
        self, mock_uow, line_item_factory, consistent_document
    ):
        line_item_repo = MagicMock()
        line_item_repo.get_by_document_id = AsyncMock(
            return_value=[line_item_factory(tax="7")]
        )
        repo = document_repo([consistent_document])
        use_case = ReconcileDocuments(mock_uow, repo, line_item_repo, repair=True)

        result = await use_case.execute()

        assert result.value.discrepancies_found == 1
        assert result.value.discrepancies[0].field == "line_items"
        assert result.value.documents_repaired == 0
        repo.update.assert_not_called()

    async def test_store_failure(self, mock_uow, mock_line_item_repo):
        repo = MagicMock()
        repo.get_all = AsyncMock(side_effect=RuntimeError("database is locked"))
        use_case = ReconcileDocuments(mock_uow, repo, mock_line_item_repo)

        result = await use_case.execute()

        assert result.is_err()
        assert result.error.code == "RECONCILIATION_FAILED"
        mock_uow.rollback.assert_awaited()
