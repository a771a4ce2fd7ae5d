"""ReconcileDocuments Use Case

Recomputes derived fields of stored documents from their line items and
reports (optionally repairs) any drift.
"""

import logging
import time
from typing import List
from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.domain.errors import InvalidLineItem, InvalidTaxRate, InvalidPayment
from src.domain.payment import reconcile
from src.domain.totals import DEFAULT_TAX_RATES, aggregate
from src.domain.transaction_document import TransactionDocument
from .dtos import DocumentDiscrepancyDTO, DocumentReconciliationResultDTO
from .pricing import at_store_precision, price_document

logger = logging.getLogger(__name__)

AMOUNT_FIELDS = ("subtotal", "tax_total", "grand_total", "paid_amount", "remaining_amount")


class ReconcileDocuments:
    """
    Use Case: Reconcile stored derived fields against line items

    Business Rules:
    1. Retrieves every stored document
    2. Recomputes totals from line items and re-runs payment reconciliation
    3. Compares amounts at store precision and the payment status
    4. Records and logs every mismatching field
    5. Writes corrected values only when repair is enabled
    6. Documents whose line items no longer validate are reported, never repaired

    Flow:
    1. Get all documents
    2. For each document:
       a. Get line items and recompute
       b. Compare with stored values
       c. If mismatch, record discrepancy (and repair)
    3. Commit repairs
    4. Return reconciliation result
    """

    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: TransactionDocumentRepository,
        line_item_repo: LineItemRepository,
        allowed_tax_rates=DEFAULT_TAX_RATES,
        repair: bool = False,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.line_item_repo = line_item_repo
        self.allowed_tax_rates = allowed_tax_rates
        self.repair = repair

    async def execute(self) -> Result[DocumentReconciliationResultDTO]:
        """
        Execute document reconciliation

        Returns:
            Result[DocumentReconciliationResultDTO]: Reconciliation result with any discrepancies
        """
        start_time = time.time()
        reconciliation_time = utc_now()

        try:
            logger.info("Starting document reconciliation")

            # Step 1: Get all documents
            documents = await self.document_repo.get_all()
            total_documents = len(documents)

            logger.info(f"Found {total_documents} documents to reconcile")

            # Step 2: Check each document
            discrepancies: List[DocumentDiscrepancyDTO] = []
            repaired = 0

            for document in documents:
                line_items = await self.line_item_repo.get_by_document_id(document.id)
                found = self._check(document, line_items)
                if not found:
                    continue

                discrepancies.extend(found)
                for d in found:
                    logger.warning(
                        f"Discrepancy in {d.collection.value} document {d.document_number} "
                        f"(id={d.document_id}, user={d.user_id}): "
                        f"{d.field} stored={d.stored_value}, expected={d.expected_value}"
                    )

                if self.repair and all(d.field != "line_items" for d in found):
                    price_document(document, line_items, self.allowed_tax_rates)
                    document.updated_at = utc_now()
                    await self.document_repo.update(document)
                    repaired += 1

            # Step 3: Commit repairs
            if repaired:
                await self.uow.commit()

            # Step 4: Build response
            execution_time_ms = int((time.time() - start_time) * 1000)

            response = DocumentReconciliationResultDTO(
                total_documents_checked=total_documents,
                discrepancies_found=len(discrepancies),
                documents_repaired=repaired,
                discrepancies=discrepancies,
                reconciliation_time=reconciliation_time,
                execution_time_ms=execution_time_ms,
            )

            if discrepancies:
                logger.warning(
                    f"Reconciliation complete. Found {len(discrepancies)} discrepancies "
                    f"out of {total_documents} documents, repaired {repaired}, "
                    f"in {execution_time_ms}ms"
                )
            else:
                logger.info(
                    f"Reconciliation complete. All {total_documents} documents consistent "
                    f"in {execution_time_ms}ms"
                )

            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Document reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile documents",
                    reason=str(e),
                )
            )

    def _expected(self, document: TransactionDocument, line_items) -> dict:
        totals = aggregate(line_items, self.allowed_tax_rates)
        summary = reconcile(totals.grand_total, document.paid_amount, document.is_marked_fully_paid)
        return {
            "subtotal": totals.subtotal,
            "tax_total": totals.tax_total,
            "grand_total": totals.grand_total,
            "paid_amount": summary.paid_amount,
            "remaining_amount": summary.remaining_amount,
            "payment_status": summary.payment_status,
        }

    def _check(self, document: TransactionDocument, line_items) -> List[DocumentDiscrepancyDTO]:
        def discrepancy(field: str, stored, expected) -> DocumentDiscrepancyDTO:
            return DocumentDiscrepancyDTO(
                document_id=document.id,
                user_id=document.user_id,
                collection=document.collection,
                document_number=document.document_number,
                field=field,
                stored_value=str(stored),
                expected_value=str(expected),
            )

        try:
            expected = self._expected(document, line_items)
        except (InvalidLineItem, InvalidTaxRate, InvalidPayment) as e:
            return [discrepancy("line_items", "invalid", e.message)]

        found = []
        for field in AMOUNT_FIELDS:
            stored = at_store_precision(getattr(document, field))
            wanted = at_store_precision(expected[field])
            if stored != wanted:
                found.append(discrepancy(field, stored, wanted))

        if document.payment_status != expected["payment_status"]:
            found.append(
                discrepancy(
                    "payment_status",
                    document.payment_status.value,
                    expected["payment_status"].value,
                )
            )
        return found
