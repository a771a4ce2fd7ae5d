from .transaction_document_repository import TransactionDocumentRepository
from .line_item_repository import LineItemRepository
from .expense_repository import ExpenseRepository, ExpenseSort

__all__ = [
    "TransactionDocumentRepository",
    "LineItemRepository",
    "ExpenseRepository",
    "ExpenseSort",
]
