"""Line Item Aggregation

Computes subtotal, tax total and grand total of a document from its line
items using exact Decimal arithmetic.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Optional

from src.domain.errors import InvalidLineItem, InvalidTaxRate

DEFAULT_TAX_RATES = frozenset({0, 5, 12, 18, 28})

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class DocumentTotals:
    subtotal: Decimal = ZERO
    tax_total: Decimal = ZERO
    grand_total: Decimal = ZERO


def to_decimal(value: Any) -> Optional[Decimal]:
    """Coerce int, float, str or Decimal to a finite Decimal; None otherwise"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float, str)):
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not number.is_finite():
        return None
    return number


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _validated_line(index: int, item: Any, allowed_tax_rates) -> tuple:
    quantity = to_decimal(_field(item, "quantity"))
    if quantity is None or quantity < 0:
        raise InvalidLineItem(index, "quantity", _field(item, "quantity"))

    unit_price = to_decimal(_field(item, "unit_price"))
    if unit_price is None or unit_price < 0:
        raise InvalidLineItem(index, "unit_price", _field(item, "unit_price"))

    tax_rate = to_decimal(_field(item, "tax_rate_percent"))
    if tax_rate is None or tax_rate not in allowed_tax_rates:
        raise InvalidTaxRate(index, _field(item, "tax_rate_percent"), allowed_tax_rates)

    return quantity, unit_price, tax_rate


def aggregate(items: Iterable[Any], allowed_tax_rates=DEFAULT_TAX_RATES) -> DocumentTotals:
    """
    Aggregate line items into document totals

    Args:
        items: Ordered line items (entities, DTOs or mappings) exposing
            quantity, unit_price and tax_rate_percent
        allowed_tax_rates: Permitted tax rate percents

    Returns:
        DocumentTotals with subtotal, tax_total and grand_total

    Raises:
        InvalidLineItem: quantity or unit_price negative, non-numeric or non-finite
        InvalidTaxRate: tax_rate_percent outside allowed_tax_rates
    """
    allowed = {Decimal(str(rate)) for rate in allowed_tax_rates}

    # Validate everything first so a bad item never yields a partial total
    lines = [_validated_line(index, item, allowed) for index, item in enumerate(items)]

    subtotal = ZERO
    tax_total = ZERO
    for quantity, unit_price, tax_rate in lines:
        amount = quantity * unit_price
        subtotal += amount
        tax_total += amount * tax_rate / HUNDRED

    return DocumentTotals(
        subtotal=subtotal,
        tax_total=tax_total,
        grand_total=subtotal + tax_total,
    )
