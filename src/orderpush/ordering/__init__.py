"""Read-only view of store orders: monetary summaries."""

from orderpush.ordering.totals import (
    DEFAULT_DELIVERY_FEE,
    OrderTotals,
    TotalsOverride,
    compute_delivery_fee,
    compute_grand_total,
    compute_items_total,
    compute_order_totals,
    line_quantity,
    to_number,
)

__all__ = [
    "DEFAULT_DELIVERY_FEE",
    "OrderTotals",
    "TotalsOverride",
    "compute_delivery_fee",
    "compute_grand_total",
    "compute_items_total",
    "compute_order_totals",
    "line_quantity",
    "to_number",
]
