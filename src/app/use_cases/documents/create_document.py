"""CreateDocument Use Case

Creates a sales invoice or purchase order with an engine-assigned
document number and recomputed totals and payment status.
"""

import logging
from datetime import date
from typing import Dict, Optional
from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.app.use_cases.errors import domain_error, validation_error
from src.domain.errors import BookkeepingError, DuplicateDocumentNumber
from src.domain.numbering import DEFAULT_PAD_WIDTH, next_document_number
from src.domain.totals import DEFAULT_TAX_RATES
from src.domain.transaction_document import DocumentCollection, TransactionDocument
from .dtos import CreateDocumentCommandDTO, DocumentResponseDTO
from .mappers import to_document_response
from .pricing import build_line_items, price_document

logger = logging.getLogger(__name__)

DEFAULT_PREFIXES: Dict[DocumentCollection, str] = {
    DocumentCollection.SALES: "INV",
    DocumentCollection.PURCHASES: "PO",
}


def resolve_number_parts(
    collection: DocumentCollection,
    prefix: Optional[str],
    suffix: Optional[str],
    default_prefixes: Optional[Dict[DocumentCollection, str]] = None,
    today: Optional[date] = None,
) -> tuple:
    """Blank prefix falls back to the collection default, blank suffix to the current year"""
    prefixes = default_prefixes or DEFAULT_PREFIXES
    prefix = (prefix or "").strip() or prefixes[collection]
    suffix = (suffix or "").strip() or str((today or utc_now().date()).year)
    return prefix, suffix


class CreateDocument:
    """
    Use Case: Create a numbered transaction document

    Business Rules:
    1. Counterparty name is required
    2. Line items are validated and totals recomputed before any write
    3. Document number is one past the highest in the (prefix, suffix)
       sequence of the user's collection, never an existing number
    4. Payment status is derived from paid_amount and is_marked_fully_paid
    5. A concurrent writer taking the same number is retried with a fresh
       read, up to max_attempts

    Flow:
    1. Validate draft and build line items
    2. Aggregate totals and reconcile payment
    3. Read existing document numbers and assign the next one
    4. Create document and line items
    5. Commit transaction
    6. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: TransactionDocumentRepository,
        line_item_repo: LineItemRepository,
        allowed_tax_rates=DEFAULT_TAX_RATES,
        pad_width: int = DEFAULT_PAD_WIDTH,
        max_attempts: int = 3,
        default_prefixes: Optional[Dict[DocumentCollection, str]] = None,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.line_item_repo = line_item_repo
        self.allowed_tax_rates = allowed_tax_rates
        self.pad_width = pad_width
        self.max_attempts = max(1, max_attempts)
        self.default_prefixes = default_prefixes or DEFAULT_PREFIXES

    async def execute(self, command: CreateDocumentCommandDTO) -> Result[DocumentResponseDTO]:
        """
        Execute document creation

        Args:
            command: CreateDocumentCommandDTO with user, collection and draft fields

        Returns:
            Result[DocumentResponseDTO]: Success with the stored document or error
        """
        counterparty_name = (command.counterparty_name or "").strip()
        if not counterparty_name:
            return Return.err(
                validation_error("Counterparty name is required", field="counterparty_name")
            )

        try:
            # Step 1: Validate draft line items
            line_items = build_line_items(command.line_items)

            prefix, suffix = resolve_number_parts(
                command.collection,
                command.number_prefix,
                command.number_suffix,
                self.default_prefixes,
            )

            # Step 2: Recompute derived amounts on a template document
            template = TransactionDocument(
                user_id=command.user_id,
                collection=command.collection,
                number_prefix=prefix,
                number_suffix=suffix,
                document_number="",
                counterparty_name=counterparty_name,
                counterparty_email=command.counterparty_email,
                issue_date=command.issue_date or utc_now().date(),
                due_date=command.due_date,
                payment_mode=command.payment_mode,
                paid_amount=command.paid_amount,
                is_marked_fully_paid=command.is_marked_fully_paid,
            )
            price_document(template, line_items, self.allowed_tax_rates)

            for attempt in range(1, self.max_attempts + 1):
                # Step 3: Assign the next number from a fresh read
                existing_numbers = await self.document_repo.list_document_numbers(
                    command.user_id, command.collection
                )
                document_number = next_document_number(
                    existing_numbers, prefix, suffix, self.pad_width
                )
                document = self._copy_with_number(template, document_number)

                # Step 4: Create document and its line items
                try:
                    created_document = await self.document_repo.create(document)
                except DuplicateDocumentNumber:
                    await self.uow.rollback()
                    if attempt == self.max_attempts:
                        raise
                    logger.warning(
                        f"Document number {document_number} taken concurrently for user "
                        f"{command.user_id} ({command.collection.value}), retrying "
                        f"(attempt {attempt}/{self.max_attempts})"
                    )
                    continue

                created_items = await self.line_item_repo.create_many(
                    created_document.id, line_items
                )

                # Step 5: Commit transaction
                await self.uow.commit()

                logger.info(
                    f"Created {command.collection.value} document {created_document.document_number} "
                    f"for user {command.user_id}: total={created_document.grand_total}, "
                    f"status={created_document.payment_status.value}"
                )

                # Step 6: Build response
                return Return.ok(to_document_response(created_document, created_items))

        except BookkeepingError as e:
            await self.uow.rollback()
            return Return.err(domain_error(e))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_DOCUMENT_FAILED",
                    message="Failed to create document",
                    reason=str(e),
                )
            )

    @staticmethod
    def _copy_with_number(template: TransactionDocument, document_number: str) -> TransactionDocument:
        return TransactionDocument(
            user_id=template.user_id,
            collection=template.collection,
            number_prefix=template.number_prefix,
            number_suffix=template.number_suffix,
            document_number=document_number,
            counterparty_name=template.counterparty_name,
            counterparty_email=template.counterparty_email,
            issue_date=template.issue_date,
            due_date=template.due_date,
            subtotal=template.subtotal,
            tax_total=template.tax_total,
            grand_total=template.grand_total,
            payment_mode=template.payment_mode,
            paid_amount=template.paid_amount,
            is_marked_fully_paid=template.is_marked_fully_paid,
            payment_status=template.payment_status,
            remaining_amount=template.remaining_amount,
        )
