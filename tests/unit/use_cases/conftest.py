"""Entity builders shared by use case tests"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from src.domain.line_item import LineItem
from src.domain.payment import reconcile
from src.domain.transaction_document import DocumentCollection, TransactionDocument


def make_line_item(position=0, product_name="Neem oil 1L", quantity="2", unit_price="450", tax="18", document_id=1):
    return LineItem(
        id=position + 1,
        document_id=document_id,
        position=position,
        product_name=product_name,
        quantity=Decimal(quantity),
        unit_price=Decimal(unit_price),
        tax_rate_percent=Decimal(tax),
        created_at=datetime.now(timezone.utc),
    )


def make_document(
    document_id=1,
    user_id="user_1",
    collection=DocumentCollection.SALES,
    document_number="INV-001-2024",
    subtotal="900",
    tax_total="162",
    paid_amount="0",
    is_marked_fully_paid=False,
):
    grand_total = Decimal(subtotal) + Decimal(tax_total)
    summary = reconcile(grand_total, Decimal(paid_amount), is_marked_fully_paid)
    return TransactionDocument(
        id=document_id,
        user_id=user_id,
        collection=collection,
        number_prefix=document_number.split("-")[0],
        number_suffix=document_number.split("-")[-1],
        document_number=document_number,
        counterparty_name="Acme Traders",
        issue_date=date(2024, 3, 1),
        subtotal=Decimal(subtotal),
        tax_total=Decimal(tax_total),
        grand_total=grand_total,
        paid_amount=summary.paid_amount,
        remaining_amount=summary.remaining_amount,
        payment_status=summary.payment_status,
        is_marked_fully_paid=is_marked_fully_paid,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def document_factory():
    return make_document


@pytest.fixture
def line_item_factory():
    return make_line_item
