"""
Get Document Use Case

Retrieves a single document with its ordered line items.
"""
from libs.result import Result, Return, Error
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.domain.transaction_document import DocumentCollection
from .dtos import DocumentResponseDTO
from .mappers import to_document_response


class GetDocument:
    def __init__(
        self,
        document_repo: TransactionDocumentRepository,
        line_item_repo: LineItemRepository,
    ):
        self.document_repo = document_repo
        self.line_item_repo = line_item_repo

    async def execute(
        self, user_id: str, collection: DocumentCollection, document_id: int
    ) -> Result[DocumentResponseDTO]:
        document = await self.document_repo.get_by_id(user_id, collection, document_id)
        if not document:
            return Return.err(
                Error(
                    code="DOCUMENT_NOT_FOUND",
                    message=f"Document with ID {document_id} not found",
                    reason=f"collection={collection.value}",
                )
            )

        line_items = await self.line_item_repo.get_by_document_id(document.id)
        return Return.ok(to_document_response(document, line_items))
