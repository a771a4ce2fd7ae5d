"""Recompute-then-write helpers shared by document use cases

Derived amounts are always recomputed from line items and payment input,
never taken from the client.
"""

from decimal import Decimal
from typing import Iterable, List

from src.domain.errors import InvalidLineItem
from src.domain.line_item import LineItem
from src.domain.payment import apply_payment_summary, reconcile
from src.domain.totals import DEFAULT_TAX_RATES, DocumentTotals, aggregate, to_decimal
from src.domain.transaction_document import TransactionDocument

# Numeric(18, 6) columns
STORE_PRECISION = Decimal("0.000001")


def build_line_items(items: Iterable) -> List[LineItem]:
    """
    Turn draft line items into LineItem entities in display order

    Raises:
        InvalidLineItem: blank product name or quantity not > 0
    """
    line_items = []
    for index, item in enumerate(items):
        product_name = (item.product_name or "").strip()
        if not product_name:
            raise InvalidLineItem(index, "product_name", item.product_name)

        quantity = to_decimal(item.quantity)
        if quantity is None or quantity <= 0:
            raise InvalidLineItem(index, "quantity", item.quantity)

        line_items.append(
            LineItem(
                position=index,
                product_name=product_name,
                quantity=quantity,
                unit_price=item.unit_price,
                tax_rate_percent=item.tax_rate_percent,
            )
        )
    return line_items


def price_document(
    document: TransactionDocument,
    line_items: Iterable[LineItem],
    allowed_tax_rates=DEFAULT_TAX_RATES,
) -> DocumentTotals:
    """
    Recompute totals and payment fields of a document in place

    Uses the document's current paid_amount and is_marked_fully_paid.

    Raises:
        InvalidLineItem, InvalidTaxRate: from aggregation
        InvalidPayment: paid_amount is negative
    """
    totals = aggregate(line_items, allowed_tax_rates)
    summary = reconcile(totals.grand_total, document.paid_amount, document.is_marked_fully_paid)

    document.subtotal = totals.subtotal
    document.tax_total = totals.tax_total
    document.grand_total = totals.grand_total
    apply_payment_summary(document, summary)
    return totals


def at_store_precision(value) -> Decimal:
    return Decimal(str(value)).quantize(STORE_PRECISION)
