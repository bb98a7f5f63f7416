"""
Domain models and value objects.

Contains fundamental domain entities like Company and CalendarDate.
"""

from src.core.domain.calendar_date import (
    YEAR_MAX,
    YEAR_MIN,
    CalendarDate,
    InvalidDateError,
    days_in_month,
    is_leap_year,
)
from src.core.domain.company import (
    Company,
    NameKey,
    ascii_lower,
    name_key,
    tax_id_key,
)

__all__ = [
    # Company model
    "Company",
    "NameKey",
    "ascii_lower",
    "name_key",
    "tax_id_key",
    # Calendar date
    "CalendarDate",
    "InvalidDateError",
    "YEAR_MIN",
    "YEAR_MAX",
    "is_leap_year",
    "days_in_month",
]
