"""Transaction Document Domain Entity

Shared shape of sales invoices and purchase orders. Totals, remaining
amount and payment status are derived and recomputed on every save.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Boolean, DateTime
from src.domain.base import BaseModel, ID_TYPE, utc_now


class DocumentCollection(str, Enum):
    """Per-user collections holding numbered documents"""
    SALES = "sales"          # Sales invoices (counterparty = customer)
    PURCHASES = "purchases"  # Purchase orders (counterparty = vendor)


class PaymentMode(str, Enum):
    """How the counterparty pays"""
    CASH = "cash"
    CARD = "card"
    UPI = "upi"
    BANK = "bank"


class PaymentStatus(str, Enum):
    """Derived payment status"""
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"


class TransactionDocument(BaseModel, table=True):
    """
    Transaction Document - Sales invoice or purchase order

    Domain Rules:
    - document_number is unique per (user_id, collection) and immutable
    - subtotal/tax_total/grand_total are the aggregate of the line items
    - paid_amount only ever increases through recorded payments
    - is_marked_fully_paid forces paid_amount = grand_total and remaining_amount = 0
    - Deleting a document never renumbers its siblings
    """

    __tablename__ = "transaction_documents"
    __table_args__ = (
        Index('ix_transaction_documents_user_collection', 'user_id', 'collection'),
        Index(
            'ux_transaction_documents_number',
            'user_id', 'collection', 'document_number',
            unique=True,
        ),
        Index('ix_transaction_documents_created_at', 'created_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(ID_TYPE, primary_key=True, autoincrement=True),
        description="Store-assigned document identifier (auto-increment)"
    )

    user_id: str = Field(
        sa_column=Column(String(128), nullable=False),
        description="Owning user"
    )

    collection: DocumentCollection = Field(
        description="Collection the document belongs to (sales, purchases)"
    )

    number_prefix: str = Field(
        sa_column=Column(String(32), nullable=False),
        description="Number prefix (e.g., INV, PO)"
    )

    number_suffix: str = Field(
        sa_column=Column(String(32), nullable=False),
        description="Number suffix, typically a year"
    )

    document_number: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Human-facing number (e.g., INV-001-2024)"
    )

    counterparty_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer (sales) or vendor (purchases) name"
    )

    counterparty_email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Customer or vendor email"
    )

    issue_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Invoice or purchase date"
    )

    due_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Payment due date"
    )

    subtotal: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Sum of quantity * unit_price"
    )

    tax_total: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Sum of quantity * unit_price * tax_rate_percent / 100"
    )

    grand_total: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="subtotal + tax_total"
    )

    payment_mode: PaymentMode = Field(
        default=PaymentMode.CASH,
        description="Payment mode (cash, card, upi, bank)"
    )

    paid_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Amount paid so far"
    )

    is_marked_fully_paid: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
        description="User marked the document as fully paid"
    )

    payment_status: PaymentStatus = Field(
        default=PaymentStatus.PENDING,
        description="Derived payment status (pending, partial, paid)"
    )

    remaining_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="max(0, grand_total - paid_amount)"
    )

    last_payment_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
        description="Timestamp of the latest recorded payment"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Document creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "user_id": "user_abc123",
                "collection": "sales",
                "number_prefix": "INV",
                "number_suffix": "2024",
                "document_number": "INV-001-2024",
                "counterparty_name": "Acme Traders",
                "counterparty_email": "accounts@acme.example",
                "issue_date": "2024-03-01",
                "due_date": "2024-03-31",
                "subtotal": "1000.000000",
                "tax_total": "180.000000",
                "grand_total": "1180.000000",
                "payment_mode": "bank",
                "paid_amount": "500.000000",
                "is_marked_fully_paid": False,
                "payment_status": "partial",
                "remaining_amount": "680.000000",
                "created_at": "2024-03-01T10:00:00Z",
                "updated_at": "2024-03-05T10:00:00Z"
            }
        }
