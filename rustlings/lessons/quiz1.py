"""Pricing an order of apples."""

from __future__ import annotations

_RETAIL_COST = 2
_BULK_COST = 1
_BULK_THRESHOLD = 40


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought at once."""
    if quantity > _BULK_THRESHOLD:
        return quantity * _BULK_COST
    return quantity * _RETAIL_COST