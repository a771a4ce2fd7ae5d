from .transaction_document_repository import SqlAlchemyTransactionDocumentRepository
from .line_item_repository import SqlAlchemyLineItemRepository
from .expense_repository import SqlAlchemyExpenseRepository

__all__ = [
    "SqlAlchemyTransactionDocumentRepository",
    "SqlAlchemyLineItemRepository",
    "SqlAlchemyExpenseRepository",
]
