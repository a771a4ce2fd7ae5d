"""Notification Service Interface

Defines the contract for alerting about derived-field drift found by
document reconciliation.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.app.use_cases.documents.dtos import DocumentDiscrepancyDTO


class NotificationService(ABC):
    """
    Abstract notification service for sending alerts

    Implementations can send notifications via:
    - Log
    - Webhook (HTTP POST)
    """

    @abstractmethod
    async def send_discrepancy_alert(self, discrepancy: "DocumentDiscrepancyDTO") -> bool:
        """
        Send alert for a document whose stored totals or status drifted

        Args:
            discrepancy: DocumentDiscrepancyDTO to alert about

        Returns:
            True if notification sent successfully, False otherwise
        """
        pass
