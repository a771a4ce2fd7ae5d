"""Field checks shared by expense use cases"""

from decimal import Decimal
from typing import Any, Optional, Tuple
from libs.result import Error
from src.app.use_cases.errors import validation_error
from src.domain.totals import to_decimal


def check_description(description: Optional[str]) -> Tuple[Optional[str], Optional[Error]]:
    cleaned = (description or "").strip()
    if not cleaned:
        return None, validation_error("Description is required", field="description")
    return cleaned, None


def check_amount(amount: Any) -> Tuple[Optional[Decimal], Optional[Error]]:
    value = to_decimal(amount)
    if value is None or value <= 0:
        return None, validation_error(
            f"Amount must be a number greater than 0, got {amount!r}", field="amount"
        )
    return value, None
