"""Utility functions shared across the OutVoice package."""

from outvoice.utils.invoice_helpers import (
    CURRENCY_FORMATS,
    address_lines,
    format_currency,
    format_date,
    format_quantity,
    matches_query,
    parse_date,
    to_number,
)

__all__ = [
    "CURRENCY_FORMATS",
    "address_lines",
    "format_currency",
    "format_date",
    "format_quantity",
    "matches_query",
    "parse_date",
    "to_number",
]
