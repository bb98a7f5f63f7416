"""
Core math modules для VAT Register

Валидация сумм счетов и медиана истории.
"""

from src.core.math.median import (
    EMPTY_MEDIAN,
    UINT32_MAX,
    InvoiceHistory,
    upper_median,
    validate_amount,
)

__all__ = [
    "EMPTY_MEDIAN",
    "UINT32_MAX",
    "InvoiceHistory",
    "upper_median",
    "validate_amount",
]
