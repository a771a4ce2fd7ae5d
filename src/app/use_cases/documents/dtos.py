"""Data Transfer Objects for Document Use Cases

Pydantic models for command inputs and response outputs of sales invoice
and purchase order operations.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.transaction_document import (
    DocumentCollection,
    PaymentMode,
    PaymentStatus,
)


class LineItemDTO(BaseModel):
    """
    Line item as entered on a draft

    Numeric validation is left to the aggregator so that errors carry the
    offending item index and field.
    """

    product_name: str = Field(
        ...,
        description="Product or service name"
    )

    quantity: Decimal = Field(
        ...,
        description="Quantity (must be > 0)"
    )

    unit_price: Decimal = Field(
        ...,
        description="Price per unit (must be >= 0)"
    )

    tax_rate_percent: Decimal = Field(
        default=Decimal("18"),
        description="Tax rate percent (one of the allowed rates)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "product_name": "Neem oil 1L",
                "quantity": "2",
                "unit_price": "450.00",
                "tax_rate_percent": "18"
            }
        }


class CreateDocumentCommandDTO(BaseModel):
    """
    Command DTO for creating a sales invoice or purchase order

    Used as input to CreateDocument use case. The document number and all
    derived amounts are assigned by the use case.
    """

    user_id: str = Field(..., description="Owning user")

    collection: DocumentCollection = Field(..., description="sales or purchases")

    number_prefix: Optional[str] = Field(
        default=None,
        description="Number prefix (defaults per collection, e.g., INV / PO)"
    )

    number_suffix: Optional[str] = Field(
        default=None,
        description="Number suffix (defaults to the current year)"
    )

    counterparty_name: str = Field(..., description="Customer or vendor name")

    counterparty_email: Optional[str] = Field(default=None, description="Customer or vendor email")

    issue_date: Optional[date] = Field(default=None, description="Issue date (defaults to today)")

    due_date: Optional[date] = Field(default=None, description="Payment due date")

    line_items: List[LineItemDTO] = Field(default_factory=list, description="Ordered line items")

    payment_mode: PaymentMode = Field(default=PaymentMode.CASH, description="Payment mode")

    paid_amount: Decimal = Field(default=Decimal("0"), description="Amount already paid")

    is_marked_fully_paid: bool = Field(default=False, description="Mark as fully paid")


class UpdateDocumentCommandDTO(BaseModel):
    """
    Command DTO for editing a document

    Unset fields are not changed; an explicit None clears due_date and
    counterparty_email. The document number never changes.
    """

    user_id: str = Field(..., description="Owning user")
    collection: DocumentCollection = Field(..., description="sales or purchases")
    document_id: int = Field(..., description="Document ID")

    number_prefix: Optional[str] = None
    number_suffix: Optional[str] = None
    counterparty_name: Optional[str] = None
    counterparty_email: Optional[str] = None
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    line_items: Optional[List[LineItemDTO]] = None
    payment_mode: Optional[PaymentMode] = None
    paid_amount: Optional[Decimal] = None
    is_marked_fully_paid: Optional[bool] = None


class RecordPaymentCommandDTO(BaseModel):
    """
    Command DTO for recording a payment against a document

    Used as input to RecordPayment use case.
    """

    user_id: str = Field(..., description="Owning user")
    collection: DocumentCollection = Field(..., description="sales or purchases")
    document_id: int = Field(..., description="Document ID")
    amount: Decimal = Field(..., description="Amount received (must be > 0)")


class LineItemResponseDTO(BaseModel):
    id: Optional[int] = None
    position: int
    product_name: str
    quantity: Decimal
    unit_price: Decimal
    tax_rate_percent: Decimal
    amount: Decimal = Field(..., description="quantity * unit_price")


class DocumentSummaryDTO(BaseModel):
    """
    Response DTO for a document without its line items

    Returned by ListDocuments.
    """

    document_id: int
    collection: DocumentCollection
    number_prefix: str
    number_suffix: str
    document_number: str
    counterparty_name: str
    counterparty_email: Optional[str] = None
    issue_date: date
    due_date: Optional[date] = None
    subtotal: Decimal
    tax_total: Decimal
    grand_total: Decimal
    payment_mode: PaymentMode
    paid_amount: Decimal
    is_marked_fully_paid: bool
    payment_status: PaymentStatus
    remaining_amount: Decimal
    last_payment_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class DocumentResponseDTO(DocumentSummaryDTO):
    """
    Response DTO for a single document with line items

    Returned by CreateDocument, UpdateDocument, RecordPayment, GetDocument.
    """

    line_items: List[LineItemResponseDTO] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "document_id": 1,
                "collection": "sales",
                "number_prefix": "INV",
                "number_suffix": "2024",
                "document_number": "INV-001-2024",
                "counterparty_name": "Acme Traders",
                "issue_date": "2024-03-01",
                "subtotal": "900.00",
                "tax_total": "162.00",
                "grand_total": "1062.00",
                "payment_mode": "cash",
                "paid_amount": "0",
                "is_marked_fully_paid": False,
                "payment_status": "pending",
                "remaining_amount": "1062.00",
                "line_items": [
                    {
                        "position": 0,
                        "product_name": "Neem oil 1L",
                        "quantity": "2",
                        "unit_price": "450.00",
                        "tax_rate_percent": "18",
                        "amount": "900.00"
                    }
                ]
            }
        }


class DocumentListResponseDTO(BaseModel):
    """Paginated document list"""

    documents: List[DocumentSummaryDTO]
    total: int
    limit: int
    offset: int


class NextNumberResponseDTO(BaseModel):
    """Number the next created document would receive"""

    collection: DocumentCollection
    number_prefix: str
    number_suffix: str
    document_number: str


class DocumentDiscrepancyDTO(BaseModel):
    """A stored derived field that disagrees with its recomputed value"""

    document_id: int
    user_id: str
    collection: DocumentCollection
    document_number: str
    field: str
    stored_value: str
    expected_value: str


class DocumentReconciliationResultDTO(BaseModel):
    """Outcome of a reconciliation run"""

    total_documents_checked: int
    discrepancies_found: int
    documents_repaired: int = 0
    discrepancies: List[DocumentDiscrepancyDTO] = Field(default_factory=list)
    reconciliation_time: datetime
    execution_time_ms: int
