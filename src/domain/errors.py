"""Domain Errors

Raised by the numbering, aggregation and payment logic and by store
adapters. Use cases translate them into Result errors by their code.
"""

from typing import Any, Optional


class BookkeepingError(Exception):
    """Base class for bookkeeping domain errors"""

    code = "BOOKKEEPING_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidLineItem(BookkeepingError):
    """Line item quantity or unit price is negative, non-numeric or non-finite"""

    code = "INVALID_LINE_ITEM"

    def __init__(self, index: int, field: str, value: Any):
        super().__init__(
            f"Line item {index}: invalid {field} {value!r}",
            field=f"line_items[{index}].{field}",
        )
        self.index = index
        self.value = value


class InvalidTaxRate(BookkeepingError):
    """Line item tax rate is outside the allowed set"""

    code = "INVALID_TAX_RATE"

    def __init__(self, index: int, value: Any, allowed):
        allowed_text = ", ".join(str(rate) for rate in sorted(allowed))
        super().__init__(
            f"Line item {index}: tax rate {value!r} is not one of {allowed_text}",
            field=f"line_items[{index}].tax_rate_percent",
        )
        self.index = index
        self.value = value


class InvalidPayment(BookkeepingError):
    """Payment amount is non-positive, negative or would decrease paid_amount"""

    code = "INVALID_PAYMENT"

    def __init__(self, message: str, field: str = "amount"):
        super().__init__(message, field=field)


class DuplicateDocumentNumber(BookkeepingError):
    """Document number already exists in the user's collection"""

    code = "DUPLICATE_DOCUMENT_NUMBER"

    def __init__(self, document_number: str):
        super().__init__(
            f"Document number {document_number} already exists",
            field="document_number",
        )
        self.document_number = document_number


class StoreUnavailable(BookkeepingError):
    """Document store failed (network, auth, database)"""

    code = "STORE_UNAVAILABLE"

    def __init__(self, message: str = "Document store is unavailable"):
        super().__init__(message)
