"""DeleteDocument Use Case

Permanently deletes a document and its line items. Sibling documents keep
their numbers; gaps in a sequence are expected.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.domain.errors import StoreUnavailable
from src.domain.transaction_document import DocumentCollection
from src.app.use_cases.errors import domain_error

logger = logging.getLogger(__name__)


class DeleteDocument:
    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: TransactionDocumentRepository,
        line_item_repo: LineItemRepository,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.line_item_repo = line_item_repo

    async def execute(
        self, user_id: str, collection: DocumentCollection, document_id: int
    ) -> Result[int]:
        """
        Delete a document

        Args:
            user_id: Owning user
            collection: Collection the document belongs to
            document_id: Document ID

        Returns:
            Result[int]: ID of the deleted document or error
        """
        try:
            document = await self.document_repo.get_by_id(user_id, collection, document_id)
            if not document:
                return Return.err(
                    Error(
                        code="DOCUMENT_NOT_FOUND",
                        message=f"Document with ID {document_id} not found",
                        reason=f"collection={collection.value}",
                    )
                )

            await self.line_item_repo.delete_by_document_id(document.id)
            await self.document_repo.delete(document)
            await self.uow.commit()

            logger.info(
                f"Deleted {collection.value} document {document.document_number} for user {user_id}"
            )
            return Return.ok(document_id)

        except StoreUnavailable as e:
            await self.uow.rollback()
            return Return.err(domain_error(e))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_DOCUMENT_FAILED",
                    message="Failed to delete document",
                    reason=str(e),
                )
            )
