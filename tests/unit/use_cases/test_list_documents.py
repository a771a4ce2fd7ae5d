"""Unit tests for ListDocuments and PreviewDocumentNumber use cases"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.documents.list_documents import ListDocuments
from src.app.use_cases.documents.preview_document_number import PreviewDocumentNumber
from src.domain.transaction_document import DocumentCollection, PaymentStatus


@pytest.fixture
def mock_document_repo(document_factory):
    repo = MagicMock()
    repo.list = AsyncMock(
        return_value=(
            [
                document_factory(document_id=2, document_number="INV-002-2024"),
                document_factory(document_id=1, document_number="INV-001-2024"),
            ],
            7,
        )
    )
    repo.list_document_numbers = AsyncMock(return_value=["INV-001-2024", "INV-002-2024"])
    return repo


@pytest.mark.asyncio
class TestListDocuments:
    async def test_returns_page_with_total(self, mock_document_repo):
        use_case = ListDocuments(mock_document_repo)

        result = await use_case.execute(
            "user_1",
            DocumentCollection.SALES,
            search="  acme ",
            status=PaymentStatus.PENDING,
            limit=2,
            offset=0,
        )

        assert result.is_ok()
        assert [doc.document_id for doc in result.value.documents] == [2, 1]
        assert result.value.total == 7
        assert result.value.limit == 2
        mock_document_repo.list.assert_awaited_once_with(
            user_id="user_1",
            collection=DocumentCollection.SALES,
            search="acme",
            status=PaymentStatus.PENDING,
            start_date=None,
            end_date=None,
            limit=2,
            offset=0,
        )

    async def test_blank_search_is_ignored(self, mock_document_repo):
        use_case = ListDocuments(mock_document_repo)

        await use_case.execute("user_1", DocumentCollection.SALES, search="   ")

        assert mock_document_repo.list.await_args.kwargs["search"] is None

    async def test_inverted_date_range_rejected(self, mock_document_repo):
        use_case = ListDocuments(mock_document_repo)

        result = await use_case.execute(
            "user_1",
            DocumentCollection.SALES,
            start_date=date(2024, 4, 1),
            end_date=date(2024, 3, 1),
        )

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_document_repo.list.assert_not_called()


@pytest.mark.asyncio
class TestPreviewDocumentNumber:
    async def test_previews_next_number_without_writing(self, mock_document_repo):
        use_case = PreviewDocumentNumber(mock_document_repo)

        result = await use_case.execute("user_1", DocumentCollection.SALES, "INV", "2024")

        assert result.is_ok()
        assert result.value.document_number == "INV-003-2024"
        assert result.value.number_prefix == "INV"
        mock_document_repo.create.assert_not_called()

    async def test_configured_default_prefix(self, mock_document_repo):
        use_case = PreviewDocumentNumber(
            mock_document_repo,
            pad_width=4,
            default_prefixes={
                DocumentCollection.SALES: "S",
                DocumentCollection.PURCHASES: "P",
            },
        )

        result = await use_case.execute("user_1", DocumentCollection.PURCHASES, suffix="2024")

        assert result.value.document_number == "P-0001-2024"
