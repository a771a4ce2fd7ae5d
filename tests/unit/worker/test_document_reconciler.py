"""Unit tests for DocumentReconcilerWorker

Tests cover:
- Worker initialization with configuration
- run_once execution and repair flag forwarding
- Reconciliation disabled scenario
- Discrepancy alerts through the notification service
- Error handling and shutdown
"""

import asyncio
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

from src.worker.document_reconciler import DocumentReconcilerWorker
from src.app.use_cases.documents.dtos import (
    DocumentDiscrepancyDTO,
    DocumentReconciliationResultDTO,
)
from src.domain.transaction_document import DocumentCollection
from libs.result import Return, Error

MODULE = "src.worker.document_reconciler"


@pytest.fixture
def mock_notification_service():
    service = MagicMock()
    service.send_discrepancy_alert = AsyncMock(return_value=True)
    return service


@pytest.fixture
def clean_result():
    return DocumentReconciliationResultDTO(
        total_documents_checked=4,
        discrepancies_found=0,
        reconciliation_time=datetime.now(timezone.utc),
        execution_time_ms=12,
    )


@pytest.fixture
def drift_result():
    return DocumentReconciliationResultDTO(
        total_documents_checked=4,
        discrepancies_found=2,
        documents_repaired=1,
        discrepancies=[
            DocumentDiscrepancyDTO(
                document_id=7,
                user_id="user_1",
                collection=DocumentCollection.SALES,
                document_number="INV-007-2024",
                field="grand_total",
                stored_value="999.000000",
                expected_value="1062.000000",
            ),
            DocumentDiscrepancyDTO(
                document_id=7,
                user_id="user_1",
                collection=DocumentCollection.SALES,
                document_number="INV-007-2024",
                field="payment_status",
                stored_value="pending",
                expected_value="partial",
            ),
        ],
        reconciliation_time=datetime.now(timezone.utc),
        execution_time_ms=30,
    )


def configure(mock_app_config, enabled=True, repair=False):
    mock_app_config.DB_URI = "sqlite+aiosqlite:///:memory:"
    mock_app_config.RECONCILIATION_ENABLED = enabled
    mock_app_config.RECONCILIATION_REPAIR = repair
    mock_app_config.ALLOWED_TAX_RATES = [0, 5, 12, 18, 28]


def session_factory(mock_sessionmaker):
    mock_session = MagicMock()
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=False)
    mock_sessionmaker.return_value = MagicMock(return_value=mock_session)
    return mock_session


class TestDocumentReconcilerWorkerInit:
    @patch(f"{MODULE}.ApplicationConfig")
    @patch(f"{MODULE}.create_async_engine")
    def test_initializes_with_default_config(
        self, mock_create_engine, mock_app_config, mock_notification_service
    ):
        """
        Given: No custom configuration provided
        When: Worker is initialized
        Then: DB URI and repair flag come from ApplicationConfig
        """
        configure(mock_app_config, repair=True)

        worker = DocumentReconcilerWorker(notification_service=mock_notification_service)

        assert worker.db_uri == "sqlite+aiosqlite:///:memory:"
        assert worker.repair is True
        mock_create_engine.assert_called_once()

    @patch(f"{MODULE}.ApplicationConfig")
    @patch(f"{MODULE}.create_async_engine")
    def test_explicit_arguments_win(
        self, mock_create_engine, mock_app_config, mock_notification_service
    ):
        configure(mock_app_config, repair=True)

        worker = DocumentReconcilerWorker(
            db_uri="sqlite+aiosqlite:///./other.db",
            repair=False,
            notification_service=mock_notification_service,
        )

        assert worker.db_uri == "sqlite+aiosqlite:///./other.db"
        assert worker.repair is False


@pytest.mark.asyncio
class TestDocumentReconcilerWorkerRunOnce:
    @patch(f"{MODULE}.ApplicationConfig")
    @patch(f"{MODULE}.ReconcileDocuments")
    @patch(f"{MODULE}.create_async_engine")
    @patch(f"{MODULE}.sessionmaker")
    async def test_run_once_executes_reconciliation(
        self,
        mock_sessionmaker,
        mock_create_engine,
        mock_use_case_class,
        mock_app_config,
        mock_notification_service,
        clean_result,
    ):
        """
        Given: Reconciliation is enabled and documents are consistent
        When: run_once is called
        Then: The use case runs with the worker's repair flag and no alert is sent
        """
        configure(mock_app_config)
        session_factory(mock_sessionmaker)
        mock_use_case = MagicMock()
        mock_use_case.execute = AsyncMock(return_value=Return.ok(clean_result))
        mock_use_case_class.return_value = mock_use_case

        worker = DocumentReconcilerWorker(
            repair=True, notification_service=mock_notification_service
        )
        result = await worker.run_once()

        assert result.total_documents_checked == 4
        assert mock_use_case_class.call_args.kwargs["repair"] is True
        mock_use_case.execute.assert_awaited_once()
        mock_notification_service.send_discrepancy_alert.assert_not_called()

    @patch(f"{MODULE}.ApplicationConfig")
    @patch(f"{MODULE}.create_async_engine")
    async def test_run_once_skips_when_disabled(
        self, mock_create_engine, mock_app_config, mock_notification_service
    ):
        configure(mock_app_config, enabled=False)

        worker = DocumentReconcilerWorker(notification_service=mock_notification_service)
        result = await worker.run_once()

        assert result.total_documents_checked == 0
        assert result.discrepancies_found == 0
        assert result.execution_time_ms == 0

    @patch(f"{MODULE}.ApplicationConfig")
    @patch(f"{MODULE}.ReconcileDocuments")
    @patch(f"{MODULE}.create_async_engine")
    @patch(f"{MODULE}.sessionmaker")
    async def test_run_once_alerts_each_discrepancy(
        self,
        mock_sessionmaker,
        mock_create_engine,
        mock_use_case_class,
        mock_app_config,
        mock_notification_service,
        drift_result,
    ):
        configure(mock_app_config)
        session_factory(mock_sessionmaker)
        mock_use_case = MagicMock()
        mock_use_case.execute = AsyncMock(return_value=Return.ok(drift_result))
        mock_use_case_class.return_value = mock_use_case

        worker = DocumentReconcilerWorker(notification_service=mock_notification_service)
        result = await worker.run_once()

        assert result.discrepancies_found == 2
        assert mock_notification_service.send_discrepancy_alert.await_count == 2
        first_alert = mock_notification_service.send_discrepancy_alert.await_args_list[0].args[0]
        assert first_alert.field == "grand_total"

    @patch(f"{MODULE}.ApplicationConfig")
    @patch(f"{MODULE}.ReconcileDocuments")
    @patch(f"{MODULE}.create_async_engine")
    @patch(f"{MODULE}.sessionmaker")
    async def test_run_once_raises_on_use_case_error(
        self,
        mock_sessionmaker,
        mock_create_engine,
        mock_use_case_class,
        mock_app_config,
        mock_notification_service,
    ):
        configure(mock_app_config)
        session_factory(mock_sessionmaker)
        mock_use_case = MagicMock()
        mock_use_case.execute = AsyncMock(
            return_value=Return.err(
                Error(code="RECONCILIATION_FAILED", message="Failed to reconcile documents")
            )
        )
        mock_use_case_class.return_value = mock_use_case

        worker = DocumentReconcilerWorker(notification_service=mock_notification_service)

        with pytest.raises(RuntimeError, match="Failed to reconcile documents"):
            await worker.run_once()


@pytest.mark.asyncio
class TestDocumentReconcilerWorkerLifecycle:
    @patch(f"{MODULE}.ApplicationConfig")
    @patch(f"{MODULE}.create_async_engine")
    async def test_run_forever_survives_failed_cycle(
        self, mock_create_engine, mock_app_config, mock_notification_service
    ):
        """
        Given: The first cycle fails
        When: run_forever is running
        Then: The loop sleeps and keeps going until cancelled
        """
        configure(mock_app_config)
        worker = DocumentReconcilerWorker(notification_service=mock_notification_service)
        worker.run_once = AsyncMock(side_effect=[RuntimeError("db down"), MagicMock()])

        with patch(f"{MODULE}.asyncio.sleep", new=AsyncMock(side_effect=[None, asyncio.CancelledError()])):
            with pytest.raises(asyncio.CancelledError):
                await worker.run_forever(interval_seconds=5)

        assert worker.run_once.await_count == 2

    @patch(f"{MODULE}.ApplicationConfig")
    @patch(f"{MODULE}.create_async_engine")
    async def test_shutdown_disposes_engine(
        self, mock_create_engine, mock_app_config, mock_notification_service
    ):
        configure(mock_app_config)
        mock_engine = MagicMock()
        mock_engine.dispose = AsyncMock()
        mock_create_engine.return_value = mock_engine

        worker = DocumentReconcilerWorker(notification_service=mock_notification_service)
        await worker.shutdown()

        mock_engine.dispose.assert_awaited_once()
