"""Notification Service Implementations

Delivers reconciliation discrepancy alerts to the log and, optionally,
to an HTTP webhook.
"""

import logging
from typing import Optional
import httpx
from src.app.services.notification_service import NotificationService
from src.app.use_cases.documents.dtos import DocumentDiscrepancyDTO

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    """Notification service that logs alerts"""

    async def send_discrepancy_alert(self, discrepancy: DocumentDiscrepancyDTO) -> bool:
        logger.warning(
            f"[DISCREPANCY ALERT] User: {discrepancy.user_id}, "
            f"Document: {discrepancy.collection.value}/{discrepancy.document_number} "
            f"(id={discrepancy.document_id}), "
            f"Field: {discrepancy.field}, "
            f"Stored: {discrepancy.stored_value}, "
            f"Expected: {discrepancy.expected_value}"
        )
        return True


class WebhookNotificationService(NotificationService):
    """
    Notification service that POSTs alerts as JSON to a webhook URL
    """

    def __init__(self, webhook_url: str, timeout: float = 10.0):
        """
        Args:
            webhook_url: URL to POST alerts to
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def send_discrepancy_alert(self, discrepancy: DocumentDiscrepancyDTO) -> bool:
        """
        Send discrepancy alert via webhook

        Returns:
            True if webhook call succeeded, False otherwise
        """
        payload = {"type": "document_discrepancy", **discrepancy.model_dump(mode="json")}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.webhook_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                f"Failed to send webhook notification for document {discrepancy.document_id}: {e}"
            )
            return False

        logger.info(
            f"Webhook notification sent for document {discrepancy.document_id} to {self.webhook_url}"
        )
        return True


class CompositeNotificationService(NotificationService):
    """Notification service that delegates to several channels"""

    def __init__(self, services: list[NotificationService]):
        self.services = services

    async def send_discrepancy_alert(self, discrepancy: DocumentDiscrepancyDTO) -> bool:
        """
        Returns:
            True if at least one channel succeeded
        """
        success = False
        for service in self.services:
            if await service.send_discrepancy_alert(discrepancy):
                success = True
        return success


def create_notification_service(webhook_url: Optional[str] = None) -> NotificationService:
    """
    Build the alert channel: logging only, or logging plus webhook when a URL is configured
    """
    services: list[NotificationService] = [LoggingNotificationService()]

    if webhook_url:
        services.append(WebhookNotificationService(webhook_url))

    if len(services) == 1:
        return services[0]

    return CompositeNotificationService(services)
