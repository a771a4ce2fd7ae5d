"""Payment Reconciliation

Derives paid amount, remaining amount and payment status from a document
total, and records increment-only payments.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from src.domain.base import utc_now
from src.domain.errors import InvalidPayment
from src.domain.totals import ZERO, to_decimal
from src.domain.transaction_document import PaymentStatus, TransactionDocument


@dataclass(frozen=True)
class PaymentSummary:
    paid_amount: Decimal
    remaining_amount: Decimal
    payment_status: PaymentStatus


def reconcile(grand_total: Any, paid_amount: Any, is_marked_fully_paid: bool) -> PaymentSummary:
    """
    Derive payment fields from a total and the amount paid

    A flagged document is fully paid regardless of paid_amount. Otherwise
    nothing paid is pending, at least the total is paid, anything in
    between is partial. A zero-total document with nothing paid stays
    pending.
    """
    total = to_decimal(grand_total)
    if total is None or total < 0:
        raise ValueError(f"grand_total must be a non-negative number, got {grand_total!r}")

    if is_marked_fully_paid:
        return PaymentSummary(
            paid_amount=total,
            remaining_amount=ZERO,
            payment_status=PaymentStatus.PAID,
        )

    paid = to_decimal(paid_amount)
    if paid is None or paid < 0:
        raise InvalidPayment(
            f"Paid amount must be a non-negative number, got {paid_amount!r}",
            field="paid_amount",
        )

    remaining = max(ZERO, total - paid)

    if paid == 0:
        status = PaymentStatus.PENDING
    elif paid >= total:
        status = PaymentStatus.PAID
    else:
        status = PaymentStatus.PARTIAL

    return PaymentSummary(
        paid_amount=paid,
        remaining_amount=remaining,
        payment_status=status,
    )


def apply_payment_summary(document: TransactionDocument, summary: PaymentSummary) -> TransactionDocument:
    document.paid_amount = summary.paid_amount
    document.remaining_amount = summary.remaining_amount
    document.payment_status = summary.payment_status
    return document


def record_payment(
    document: TransactionDocument,
    increment_amount: Any,
    paid_at: Optional[datetime] = None,
) -> TransactionDocument:
    """
    Add a payment to a document and re-run reconciliation

    Args:
        document: Document to update (modified in place)
        increment_amount: Amount received, must be > 0
        paid_at: Payment timestamp (defaults to now)

    Returns:
        The same document with paid_amount, remaining_amount,
        payment_status and last_payment_at updated

    Raises:
        InvalidPayment: increment_amount is not a positive number
    """
    increment = to_decimal(increment_amount)
    if increment is None or increment <= 0:
        raise InvalidPayment(f"Payment amount must be greater than 0, got {increment_amount!r}")

    current = to_decimal(document.paid_amount) or ZERO
    summary = reconcile(
        document.grand_total,
        current + increment,
        document.is_marked_fully_paid,
    )
    apply_payment_summary(document, summary)
    document.last_payment_at = paid_at or utc_now()
    return document
