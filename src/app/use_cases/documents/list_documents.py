"""
List Documents Use Case

Retrieves a user's sales invoices or purchase orders with the filters of
the list page: free-text search, payment status and issue-date range.
"""
from datetime import date
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.app.use_cases.errors import validation_error
from src.domain.transaction_document import DocumentCollection, PaymentStatus
from .dtos import DocumentListResponseDTO
from .mappers import to_document_summary


class ListDocuments:
    """
    Use case: List documents of a collection

    Documents are ordered by created_at DESC (most recent first).
    """

    def __init__(self, document_repo: TransactionDocumentRepository):
        """
        Initialize with document repository.

        Args:
            document_repo: TransactionDocumentRepository instance
        """
        self.document_repo = document_repo

    async def execute(
        self,
        user_id: str,
        collection: DocumentCollection,
        search: Optional[str] = None,
        status: Optional[PaymentStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[DocumentListResponseDTO]:
        """
        List documents with filters and pagination.

        Args:
            user_id: Owning user
            collection: sales or purchases
            search: Case-insensitive match on counterparty name or document number
            status: Payment status filter
            start_date: Inclusive lower bound on issue date
            end_date: Inclusive upper bound on issue date
            limit: Maximum number of documents to return (default 50)
            offset: Number of documents to skip (default 0)

        Returns:
            Result[DocumentListResponseDTO]: Paginated document list
        """
        if start_date and end_date and start_date > end_date:
            return Return.err(
                validation_error("start_date must not be after end_date", field="start_date")
            )

        search = (search or "").strip() or None

        documents, total = await self.document_repo.list(
            user_id=user_id,
            collection=collection,
            search=search,
            status=status,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            DocumentListResponseDTO(
                documents=[to_document_summary(document) for document in documents],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
