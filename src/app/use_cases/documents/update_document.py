"""UpdateDocument Use Case

Applies edit-form changes to a document and recomputes every derived
field before writing.
"""

import logging
from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.app.use_cases.errors import domain_error, validation_error
from src.domain.errors import BookkeepingError, InvalidPayment
from src.domain.payment import record_payment
from src.domain.totals import DEFAULT_TAX_RATES, to_decimal
from .dtos import UpdateDocumentCommandDTO, DocumentResponseDTO
from .mappers import to_document_response
from .pricing import build_line_items, price_document

logger = logging.getLogger(__name__)


class UpdateDocument:
    """
    Use Case: Edit a transaction document

    Business Rules:
    1. document_number never changes, even when prefix or suffix change
    2. Line items, when given, replace the existing ones wholesale
    3. Totals, remaining amount and status are recomputed on every save
    4. paid_amount may be raised but never lowered; a raise is recorded as a payment
    5. Explicit null clears due_date and counterparty_email

    Flow:
    1. Load document (locked for update)
    2. Apply changed fields
    3. Recompute totals and payment status
    4. Write document and, if changed, line items
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: TransactionDocumentRepository,
        line_item_repo: LineItemRepository,
        allowed_tax_rates=DEFAULT_TAX_RATES,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.line_item_repo = line_item_repo
        self.allowed_tax_rates = allowed_tax_rates

    async def execute(self, command: UpdateDocumentCommandDTO) -> Result[DocumentResponseDTO]:
        """
        Execute document update

        Args:
            command: UpdateDocumentCommandDTO; unset fields are left unchanged

        Returns:
            Result[DocumentResponseDTO]: Success with the updated document or error
        """
        if command.counterparty_name is not None and not command.counterparty_name.strip():
            return Return.err(
                validation_error("Counterparty name cannot be blank", field="counterparty_name")
            )

        try:
            # Step 1: Load document
            document = await self.document_repo.get_by_id(
                command.user_id, command.collection, command.document_id, for_update=True
            )
            if not document:
                return Return.err(
                    Error(
                        code="DOCUMENT_NOT_FOUND",
                        message=f"Document with ID {command.document_id} not found",
                        reason=f"collection={command.collection.value}",
                    )
                )

            # Step 2: Build replacement line items before touching the document
            if command.line_items is not None:
                line_items = build_line_items(command.line_items)
            else:
                line_items = await self.line_item_repo.get_by_document_id(document.id)

            new_paid = None
            if command.paid_amount is not None:
                new_paid = to_decimal(command.paid_amount)
                if new_paid is None or new_paid < document.paid_amount:
                    raise InvalidPayment(
                        f"Paid amount cannot be lowered from {document.paid_amount} "
                        f"to {command.paid_amount}",
                        field="paid_amount",
                    )

            # Prefix and suffix only affect numbers of future documents
            if command.number_prefix is not None and command.number_prefix.strip():
                document.number_prefix = command.number_prefix.strip()
            if command.number_suffix is not None and command.number_suffix.strip():
                document.number_suffix = command.number_suffix.strip()
            if command.counterparty_name is not None:
                document.counterparty_name = command.counterparty_name.strip()
            if "counterparty_email" in command.model_fields_set:
                document.counterparty_email = (command.counterparty_email or "").strip() or None
            if command.issue_date is not None:
                document.issue_date = command.issue_date
            if "due_date" in command.model_fields_set:
                document.due_date = command.due_date
            if command.payment_mode is not None:
                document.payment_mode = command.payment_mode
            if command.is_marked_fully_paid is not None:
                document.is_marked_fully_paid = command.is_marked_fully_paid

            # Step 3: Recompute derived fields
            price_document(document, line_items, self.allowed_tax_rates)
            if new_paid is not None and new_paid > document.paid_amount:
                record_payment(document, new_paid - document.paid_amount)
            document.updated_at = utc_now()

            # Step 4: Write
            updated_document = await self.document_repo.update(document)
            if command.line_items is not None:
                await self.line_item_repo.delete_by_document_id(updated_document.id)
                line_items = await self.line_item_repo.create_many(updated_document.id, line_items)

            # Step 5: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Updated {command.collection.value} document {updated_document.document_number} "
                f"for user {command.user_id}: total={updated_document.grand_total}, "
                f"status={updated_document.payment_status.value}"
            )

            return Return.ok(to_document_response(updated_document, line_items))

        except BookkeepingError as e:
            await self.uow.rollback()
            return Return.err(domain_error(e))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_DOCUMENT_FAILED",
                    message="Failed to update document",
                    reason=str(e),
                )
            )
