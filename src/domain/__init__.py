from .base import BaseModel, ID_TYPE, utc_now
from .transaction_document import (
    TransactionDocument,
    DocumentCollection,
    PaymentMode,
    PaymentStatus,
)
from .line_item import LineItem
from .expense import Expense, EXPENSE_CATEGORIES, UNCATEGORIZED
from .errors import (
    BookkeepingError,
    InvalidLineItem,
    InvalidTaxRate,
    InvalidPayment,
    DuplicateDocumentNumber,
    StoreUnavailable,
)
from .numbering import next_document_number, format_document_number, parse_sequence
from .totals import aggregate, DocumentTotals, DEFAULT_TAX_RATES
from .payment import reconcile, record_payment, PaymentSummary

__all__ = [
    "BaseModel",
    "ID_TYPE",
    "utc_now",
    "TransactionDocument",
    "DocumentCollection",
    "PaymentMode",
    "PaymentStatus",
    "LineItem",
    "Expense",
    "EXPENSE_CATEGORIES",
    "UNCATEGORIZED",
    "BookkeepingError",
    "InvalidLineItem",
    "InvalidTaxRate",
    "InvalidPayment",
    "DuplicateDocumentNumber",
    "StoreUnavailable",
    "next_document_number",
    "format_document_number",
    "parse_sequence",
    "aggregate",
    "DocumentTotals",
    "DEFAULT_TAX_RATES",
    "reconcile",
    "record_payment",
    "PaymentSummary",
]
