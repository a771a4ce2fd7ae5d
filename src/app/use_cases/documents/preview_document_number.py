"""
Preview Document Number Use Case

Shows the number the next created document would receive, as displayed on
the creation form before saving. Nothing is reserved.
"""
from typing import Dict, Optional
from libs.result import Result, Return
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.domain.numbering import DEFAULT_PAD_WIDTH, next_document_number
from src.domain.transaction_document import DocumentCollection
from .create_document import resolve_number_parts
from .dtos import NextNumberResponseDTO


class PreviewDocumentNumber:
    def __init__(
        self,
        document_repo: TransactionDocumentRepository,
        pad_width: int = DEFAULT_PAD_WIDTH,
        default_prefixes: Optional[Dict[DocumentCollection, str]] = None,
    ):
        self.document_repo = document_repo
        self.pad_width = pad_width
        self.default_prefixes = default_prefixes

    async def execute(
        self,
        user_id: str,
        collection: DocumentCollection,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
    ) -> Result[NextNumberResponseDTO]:
        prefix, suffix = resolve_number_parts(collection, prefix, suffix, self.default_prefixes)
        existing_numbers = await self.document_repo.list_document_numbers(user_id, collection)

        return Return.ok(
            NextNumberResponseDTO(
                collection=collection,
                number_prefix=prefix,
                number_suffix=suffix,
                document_number=next_document_number(
                    existing_numbers, prefix, suffix, self.pad_width
                ),
            )
        )
