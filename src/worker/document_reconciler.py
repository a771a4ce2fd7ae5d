"""Document Reconciliation Background Worker

Periodically recomputes document totals and payment status from line items
and reports stored values that drifted. Can be run as a standalone script
or integrated with a scheduler.
"""

import asyncio
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories import (
    SqlAlchemyTransactionDocumentRepository,
    SqlAlchemyLineItemRepository,
)
from src.adapter.services.notification_service import create_notification_service
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notification_service import NotificationService
from src.app.use_cases.documents import ReconcileDocuments, DocumentReconciliationResultDTO
from src.domain.base import utc_now

logger = logging.getLogger(__name__)


class DocumentReconcilerWorker:
    """
    Background worker for document reconciliation

    Features:
    - Recomputes subtotal, tax, grand total, paid/remaining and status
    - Alerts on every discrepancy through the notification service
    - Optionally rewrites drifted documents (repair mode)
    - Can run once or continuously

    Usage:
        worker = DocumentReconcilerWorker()
        result = await worker.run_once()

        worker = DocumentReconcilerWorker(repair=True)
        await worker.run_forever(interval_seconds=86400)
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        repair: Optional[bool] = None,
        notification_service: Optional[NotificationService] = None,
    ):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            repair: Rewrite drifted documents (defaults to ApplicationConfig.RECONCILIATION_REPAIR)
            notification_service: Alert channel (defaults to log, plus webhook when configured)
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.repair = ApplicationConfig.RECONCILIATION_REPAIR if repair is None else repair
        self.notification_service = notification_service or create_notification_service(
            ApplicationConfig.RECONCILIATION_NOTIFICATION_WEBHOOK
        )

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info(f"DocumentReconcilerWorker initialized (repair={self.repair})")

    async def run_once(self) -> DocumentReconciliationResultDTO:
        """
        Run reconciliation once

        Returns:
            DocumentReconciliationResultDTO with reconciliation results

        Raises:
            RuntimeError: the reconciliation use case failed
        """
        if not ApplicationConfig.RECONCILIATION_ENABLED:
            logger.info("Document reconciliation is disabled, skipping")
            return DocumentReconciliationResultDTO(
                total_documents_checked=0,
                discrepancies_found=0,
                reconciliation_time=utc_now(),
                execution_time_ms=0,
            )

        async with self.async_session_factory() as session:
            use_case = ReconcileDocuments(
                uow=SqlAlchemyUnitOfWork(session),
                document_repo=SqlAlchemyTransactionDocumentRepository(session),
                line_item_repo=SqlAlchemyLineItemRepository(session),
                allowed_tax_rates=ApplicationConfig.ALLOWED_TAX_RATES,
                repair=self.repair,
            )

            result = await use_case.execute()

            if result.is_err():
                logger.error(f"Reconciliation failed: {result.error.message}")
                raise RuntimeError(f"Reconciliation failed: {result.error.message}")

            response = result.value

        if response.discrepancies_found > 0:
            logger.error(
                f"ALERT: {response.discrepancies_found} document discrepancies found, "
                f"{response.documents_repaired} repaired"
            )
            for discrepancy in response.discrepancies:
                sent = await self.notification_service.send_discrepancy_alert(discrepancy)
                if not sent:
                    logger.warning(
                        f"Alert for document {discrepancy.document_id} was not delivered"
                    )

        return response

    async def run_forever(self, interval_seconds: int = 86400):
        """
        Run reconciliation continuously at specified interval

        Args:
            interval_seconds: Seconds between reconciliation runs (default: 24 hours)
        """
        logger.info(
            f"Starting continuous document reconciliation with {interval_seconds}s interval"
        )

        while True:
            try:
                result = await self.run_once()
                logger.info(
                    f"Reconciliation cycle complete. "
                    f"Checked {result.total_documents_checked} documents, "
                    f"found {result.discrepancies_found} discrepancies "
                    f"in {result.execution_time_ms}ms"
                )
            except Exception as e:
                logger.error(f"Reconciliation cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        await self.engine.dispose()
        logger.info("DocumentReconcilerWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        python -m src.worker.document_reconciler --once
        python -m src.worker.document_reconciler --once --repair
        python -m src.worker.document_reconciler --interval 3600
    """
    import argparse

    logging.basicConfig(
        level=getattr(logging, str(ApplicationConfig.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Document Reconciliation Worker")
    parser.add_argument("--once", action="store_true", help="Run once and exit")
    parser.add_argument(
        "--interval", type=int, default=ApplicationConfig.RECONCILIATION_INTERVAL_SECONDS,
        help="Interval between runs in seconds (default: RECONCILIATION_INTERVAL_SECONDS)"
    )
    parser.add_argument(
        "--repair", action="store_true", default=None,
        help="Rewrite drifted derived fields (default: RECONCILIATION_REPAIR)"
    )
    args = parser.parse_args()

    worker = DocumentReconcilerWorker(repair=args.repair)

    try:
        if args.once:
            result = await worker.run_once()
            print("Reconciliation complete:")
            print(f"  Total documents checked: {result.total_documents_checked}")
            print(f"  Discrepancies found: {result.discrepancies_found}")
            print(f"  Documents repaired: {result.documents_repaired}")
            print(f"  Execution time: {result.execution_time_ms}ms")
            if result.discrepancies:
                print("\nDiscrepancies:")
                for d in result.discrepancies:
                    print(
                        f"  - {d.collection.value} {d.document_number} (user {d.user_id}): "
                        f"{d.field} stored={d.stored_value}, expected={d.expected_value}"
                    )
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
