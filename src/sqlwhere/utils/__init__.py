"""Helper utilities"""

from .values import normalize_value

__all__ = [
    "normalize_value",
]
