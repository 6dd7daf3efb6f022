"""Order totals — items total, delivery fee and grand total of an order.

Orders are plain documents written by the store application, so every
numeric field is optional and may arrive as a number, a numeric string or
garbage. All helpers coerce with numeric-or-zero semantics.

Precedence for every figure: caller override > value stored on the order >
value derived from the order lines.

Grand total rule: ``order.total`` is trusted as already including delivery
only when ``order.deliveryFee`` is stored alongside it. Otherwise the grand
total is ``itemsTotal + deliveryFee``. The same rule applies everywhere.
"""

import math
from dataclasses import dataclass

DEFAULT_DELIVERY_FEE = 20.0

# First non-null field wins
QUANTITY_FIELDS = ("qty", "weightKg", "kg", "quantity")


def to_number(value) -> float:
    """Coerce ``value`` to a finite float, or 0 when that is not possible."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def line_quantity(line: dict) -> float:
    for field_name in QUANTITY_FIELDS:
        if line.get(field_name) is not None:
            return to_number(line[field_name])
    return 1.0


def compute_items_total(order: dict | None) -> float:
    """Purchase value without delivery."""
    order = order or {}
    if order.get("itemsTotal") is not None:
        return to_number(order["itemsTotal"])

    lines = order.get("lines")
    if not isinstance(lines, list):
        return 0.0

    total = 0.0
    for line in lines:
        if not isinstance(line, dict):
            continue
        total += to_number(line.get("price")) * line_quantity(line)
    return total


def compute_delivery_fee(order: dict | None, default: float = DEFAULT_DELIVERY_FEE) -> float:
    order = order or {}
    if order.get("deliveryFee") is not None:
        return to_number(order["deliveryFee"])
    return default


def compute_grand_total(order: dict | None, default_delivery_fee: float = DEFAULT_DELIVERY_FEE) -> float:
    """Total the customer pays, delivery included."""
    order = order or {}
    if order.get("total") is not None and order.get("deliveryFee") is not None:
        return to_number(order["total"])
    return compute_items_total(order) + compute_delivery_fee(order, default_delivery_fee)


@dataclass(frozen=True)
class TotalsOverride:
    """Figures supplied by the caller (the store app) for a notification."""

    items_total: float | None = None
    delivery_fee: float | None = None
    grand_total: float | None = None


@dataclass(frozen=True)
class OrderTotals:
    items_total: float
    delivery_fee: float
    grand_total: float


def compute_order_totals(
    order: dict | None,
    override: TotalsOverride | None = None,
    default_delivery_fee: float = DEFAULT_DELIVERY_FEE,
) -> OrderTotals:
    """Combine caller overrides with figures derived from the order document."""
    override = override or TotalsOverride()

    if override.items_total is not None:
        items_total = to_number(override.items_total)
    else:
        items_total = compute_items_total(order)

    if override.delivery_fee is not None:
        delivery_fee = to_number(override.delivery_fee)
    else:
        delivery_fee = compute_delivery_fee(order, default_delivery_fee)

    if override.grand_total is not None:
        grand_total = to_number(override.grand_total)
    elif override.items_total is not None or override.delivery_fee is not None:
        grand_total = items_total + delivery_fee
    else:
        grand_total = compute_grand_total(order, default_delivery_fee)

    return OrderTotals(items_total=items_total, delivery_fee=delivery_fee, grand_total=grand_total)
