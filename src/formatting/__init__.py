"""Display formatting module."""

from src.formatting.formatter import (
    INVALID_DATE,
    INVALID_TIME,
    MISSING,
    Formatter,
    get_formatter,
)

__all__ = [
    "INVALID_DATE",
    "INVALID_TIME",
    "MISSING",
    "Formatter",
    "get_formatter",
]
