"""Line Item Repository Interface

Defines the contract for line item persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.line_item import LineItem


class LineItemRepository(ABC):
    """
    Repository interface for LineItem persistence

    Line items are always read and replaced as a whole per document.
    """

    @abstractmethod
    async def get_by_document_id(self, document_id: int) -> List[LineItem]:
        """
        Retrieve all line items for a document, ordered by position

        Args:
            document_id: Document ID

        Returns:
            List of LineItem
        """
        pass

    @abstractmethod
    async def create_many(self, document_id: int, items: List[LineItem]) -> List[LineItem]:
        """
        Persist line items for a document

        Args:
            document_id: Document ID the items belong to
            items: LineItem entities in display order

        Returns:
            Created LineItem list with generated IDs
        """
        pass

    @abstractmethod
    async def delete_by_document_id(self, document_id: int) -> None:
        """
        Delete every line item of a document

        Args:
            document_id: Document ID
        """
        pass
