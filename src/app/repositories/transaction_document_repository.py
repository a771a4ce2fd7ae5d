"""Transaction Document Repository Interface

Defines the contract for the document store holding sales invoices and
purchase orders.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Tuple
from src.domain.transaction_document import (
    TransactionDocument,
    DocumentCollection,
    PaymentStatus,
)


class TransactionDocumentRepository(ABC):
    """
    Repository interface for TransactionDocument persistence

    Every read is scoped to a user and a collection.
    """

    @abstractmethod
    async def create(self, document: TransactionDocument) -> TransactionDocument:
        """
        Create a new document

        Args:
            document: TransactionDocument entity to persist

        Returns:
            Created TransactionDocument with generated ID

        Raises:
            DuplicateDocumentNumber: document_number already exists for the user's collection
            StoreUnavailable: Store failure
        """
        pass

    @abstractmethod
    async def get_by_id(
        self,
        user_id: str,
        collection: DocumentCollection,
        document_id: int,
        for_update: bool = False,
    ) -> Optional[TransactionDocument]:
        """
        Retrieve a document by ID

        Args:
            user_id: Owning user
            collection: Collection the document belongs to
            document_id: Document ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            TransactionDocument if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(
        self,
        user_id: str,
        collection: DocumentCollection,
        search: Optional[str] = None,
        status: Optional[PaymentStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[TransactionDocument], int]:
        """
        List documents, most recent first

        Args:
            user_id: Owning user
            collection: Collection to list
            search: Case-insensitive match on counterparty name or document number
            status: Optional payment status filter
            start_date: Optional inclusive lower bound on issue_date
            end_date: Optional inclusive upper bound on issue_date
            limit: Maximum number of documents to return
            offset: Offset for pagination

        Returns:
            Tuple of (documents, total matching count)
        """
        pass

    @abstractmethod
    async def get_in_period(
        self,
        user_id: str,
        collection: DocumentCollection,
        start_date: date,
        end_date: date,
    ) -> List[TransactionDocument]:
        """
        Retrieve every document issued within an inclusive date range

        Args:
            user_id: Owning user
            collection: Collection to read
            start_date: First issue date included
            end_date: Last issue date included

        Returns:
            List of documents
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[TransactionDocument]:
        """
        Retrieve every document of every user

        Used by the reconciliation worker.

        Returns:
            List of documents
        """
        pass

    @abstractmethod
    async def list_document_numbers(
        self, user_id: str, collection: DocumentCollection
    ) -> List[str]:
        """
        Retrieve every document number in a user's collection

        Args:
            user_id: Owning user
            collection: Collection to read

        Returns:
            List of document numbers
        """
        pass

    @abstractmethod
    async def update(self, document: TransactionDocument) -> TransactionDocument:
        """
        Update an existing document

        Args:
            document: TransactionDocument entity with updated values

        Returns:
            Updated TransactionDocument
        """
        pass

    @abstractmethod
    async def delete(self, document: TransactionDocument) -> None:
        """
        Permanently delete a document

        Args:
            document: TransactionDocument to delete
        """
        pass
