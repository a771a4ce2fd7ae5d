"""RecordPayment Use Case

Records a payment received against a sales invoice or made against a
purchase order.
"""

import logging
from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.app.use_cases.errors import domain_error
from src.domain.errors import BookkeepingError
from src.domain.payment import record_payment
from .dtos import RecordPaymentCommandDTO, DocumentResponseDTO
from .mappers import to_document_response

logger = logging.getLogger(__name__)


class RecordPayment:
    """
    Use Case: Record a payment increment

    Business Rules:
    1. Amount must be > 0; payments never decrease paid_amount
    2. Remaining amount and status are re-derived after the increment
    3. Document row is locked (SELECT FOR UPDATE) so concurrent payments compound

    Flow:
    1. Get document with lock
    2. Apply payment increment
    3. Update document
    4. Commit transaction
    5. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: TransactionDocumentRepository,
        line_item_repo: LineItemRepository,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.line_item_repo = line_item_repo

    async def execute(self, command: RecordPaymentCommandDTO) -> Result[DocumentResponseDTO]:
        """
        Execute payment recording

        Args:
            command: RecordPaymentCommandDTO with document reference and amount

        Returns:
            Result[DocumentResponseDTO]: Success with the updated document or error
        """
        try:
            # Step 1: Get document with pessimistic lock
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

            paid_before = document.paid_amount

            # Step 2: Apply increment and re-derive status
            now = utc_now()
            record_payment(document, command.amount, paid_at=now)
            document.updated_at = now

            # Step 3: Update document
            updated_document = await self.document_repo.update(document)

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Recorded payment of {command.amount} on {updated_document.document_number} "
                f"for user {command.user_id}: paid {paid_before} -> {updated_document.paid_amount}, "
                f"status={updated_document.payment_status.value}"
            )

            # Step 5: Build response
            line_items = await self.line_item_repo.get_by_document_id(updated_document.id)
            return Return.ok(to_document_response(updated_document, line_items))

        except BookkeepingError as e:
            await self.uow.rollback()
            return Return.err(domain_error(e))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="RECORD_PAYMENT_FAILED",
                    message="Failed to record payment",
                    reason=str(e),
                )
            )
