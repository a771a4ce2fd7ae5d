"""Request schemas for Document API

Pydantic models for validating incoming HTTP requests. Amount and line
item rules are enforced by the use cases so that errors name the
offending field.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.transaction_document import PaymentMode


class LineItemSchema(BaseModel):
    product_name: str = Field(..., description="Product or service name")
    quantity: Decimal = Field(..., description="Quantity (must be > 0)")
    unit_price: Decimal = Field(..., description="Price per unit (must be >= 0)")
    tax_rate_percent: Decimal = Field(
        default=Decimal("18"),
        description="Tax rate percent (one of the allowed rates)"
    )


class CreateDocumentRequestSchema(BaseModel):
    """
    Request schema for creating a document

    Used for POST /documents/{collection}. The document number is assigned
    by the service; prefix and suffix only choose the sequence.
    """

    number_prefix: Optional[str] = Field(
        default=None,
        description="Number prefix (defaults to INV for sales, PO for purchases)"
    )

    number_suffix: Optional[str] = Field(
        default=None,
        description="Number suffix (defaults to the current year)"
    )

    counterparty_name: str = Field(..., description="Customer or vendor name")

    counterparty_email: Optional[str] = Field(default=None, description="Customer or vendor email")

    issue_date: Optional[date] = Field(default=None, description="Issue date (defaults to today)")

    due_date: Optional[date] = Field(default=None, description="Payment due date")

    line_items: List[LineItemSchema] = Field(default_factory=list)

    payment_mode: PaymentMode = Field(default=PaymentMode.CASH)

    paid_amount: Decimal = Field(default=Decimal("0"), description="Amount already paid")

    is_marked_fully_paid: bool = Field(default=False)

    class Config:
        json_schema_extra = {
            "example": {
                "counterparty_name": "Acme Traders",
                "counterparty_email": "accounts@acme.example",
                "issue_date": "2024-03-01",
                "line_items": [
                    {
                        "product_name": "Neem oil 1L",
                        "quantity": "2",
                        "unit_price": "450.00",
                        "tax_rate_percent": "18"
                    }
                ],
                "payment_mode": "upi",
                "paid_amount": "500.00",
                "is_marked_fully_paid": False
            }
        }


class UpdateDocumentRequestSchema(BaseModel):
    """Used for PUT /documents/{collection}/{id}; omitted fields are unchanged, null clears due_date and counterparty_email"""

    number_prefix: Optional[str] = None
    number_suffix: Optional[str] = None
    counterparty_name: Optional[str] = None
    counterparty_email: Optional[str] = None
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    line_items: Optional[List[LineItemSchema]] = None
    payment_mode: Optional[PaymentMode] = None
    paid_amount: Optional[Decimal] = None
    is_marked_fully_paid: Optional[bool] = None


class RecordPaymentRequestSchema(BaseModel):
    amount: Decimal = Field(..., description="Amount received (must be > 0)")

    class Config:
        json_schema_extra = {"example": {"amount": "300.00"}}
