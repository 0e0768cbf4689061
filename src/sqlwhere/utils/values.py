"""Normalization applied to bind values when they are exported"""

from datetime import datetime
from typing import Any


def normalize_value(value: Any) -> Any:
    """Convert a plain datetime to a date, pass everything else through

    Only the exact ``datetime`` type is converted. Subclasses such as
    ``pandas.Timestamp`` keep their full precision.

    Example:
        >>> normalize_value(datetime(2024, 3, 1, 14, 30))
        datetime.date(2024, 3, 1)
        >>> normalize_value("A")
        'A'
    """
    if type(value) is datetime:
        return value.date()
    return value
