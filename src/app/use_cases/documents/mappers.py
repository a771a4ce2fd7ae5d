"""Entity to response DTO conversion for documents"""

from typing import Iterable

from src.domain.line_item import LineItem
from src.domain.transaction_document import TransactionDocument
from .dtos import DocumentResponseDTO, DocumentSummaryDTO, LineItemResponseDTO


def to_line_item_response(item: LineItem) -> LineItemResponseDTO:
    return LineItemResponseDTO(
        id=item.id,
        position=item.position,
        product_name=item.product_name,
        quantity=item.quantity,
        unit_price=item.unit_price,
        tax_rate_percent=item.tax_rate_percent,
        amount=item.quantity * item.unit_price,
    )


def _summary_fields(document: TransactionDocument) -> dict:
    return dict(
        document_id=document.id,
        collection=document.collection,
        number_prefix=document.number_prefix,
        number_suffix=document.number_suffix,
        document_number=document.document_number,
        counterparty_name=document.counterparty_name,
        counterparty_email=document.counterparty_email,
        issue_date=document.issue_date,
        due_date=document.due_date,
        subtotal=document.subtotal,
        tax_total=document.tax_total,
        grand_total=document.grand_total,
        payment_mode=document.payment_mode,
        paid_amount=document.paid_amount,
        is_marked_fully_paid=document.is_marked_fully_paid,
        payment_status=document.payment_status,
        remaining_amount=document.remaining_amount,
        last_payment_at=document.last_payment_at,
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


def to_document_summary(document: TransactionDocument) -> DocumentSummaryDTO:
    return DocumentSummaryDTO(**_summary_fields(document))


def to_document_response(
    document: TransactionDocument, line_items: Iterable[LineItem]
) -> DocumentResponseDTO:
    items = sorted(line_items, key=lambda item: item.position)
    return DocumentResponseDTO(
        **_summary_fields(document),
        line_items=[to_line_item_response(item) for item in items],
    )
