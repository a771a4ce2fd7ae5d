"""Line Item Domain Entity

Individual product line within a transaction document.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, Integer, Numeric, String, DateTime
from src.domain.base import BaseModel, ID_TYPE, utc_now


class LineItem(BaseModel, table=True):
    """
    Line Item - Product line within a sales invoice or purchase order

    Domain Rules:
    - Each line item belongs to exactly one document
    - position preserves the order entered by the user
    - quantity > 0, unit_price >= 0
    - tax_rate_percent is one of the allowed rates
    - Line items are replaced wholesale when a document is edited
    """

    __tablename__ = "line_items"
    __table_args__ = (
        Index('ix_line_items_document_id', 'document_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(ID_TYPE, primary_key=True, autoincrement=True),
        description="Unique line item identifier (auto-increment)"
    )

    document_id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            BigInteger,
            ForeignKey("transaction_documents.id", ondelete="CASCADE"),
            nullable=False,
        ),
        description="Foreign key to TransactionDocument"
    )

    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Zero-based order within the document"
    )

    product_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Product or service name"
    )

    quantity: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Quantity (> 0)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Price per unit (>= 0)"
    )

    tax_rate_percent: Decimal = Field(
        sa_column=Column(Numeric(5, 2), nullable=False),
        description="Tax rate percent (one of the allowed set)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Line item creation timestamp"
    )
