"""
Utility functions for invoice data manipulation and formatting.

Provides helpers for:
- Date parsing (ISO dates, ISO datetimes and m/d/y)
- Numeric coercion of user input
- Currency and date formatting for display
- Search query matching against invoice fields
"""

from datetime import date, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from outvoice.models.invoice import Invoice

# Display symbol and number of fraction digits per supported currency.
CURRENCY_FORMATS: dict[str, tuple[str, int]] = {
    "USD": ("$", 2),
    "EUR": ("€", 2),
    "GBP": ("£", 2),
    "JPY": ("¥", 0),
    "CAD": ("CA$", 2),
    "AUD": ("A$", 2),
    "INR": ("₹", 2),
}


def parse_date(value: Any) -> date | None:
    """
    Parse a stored or user-entered value into a date.

    Accepts date and datetime objects, ISO dates ("2024-12-25"), ISO
    datetimes as written by browsers ("2024-12-25T10:00:00.000Z") and
    m/d/y strings ("12/25/2024", "12/25/24").

    Args:
        value: Value to parse.

    Returns:
        date object if parsing succeeds, None otherwise
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    date_str = value.strip()
    if not date_str:
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(date_str.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in ("%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue

    return None


def to_number(value: Any) -> float:
    """
    Coerce user input to a float, treating anything non-numeric as 0.

    Args:
        value: Raw input (string from a form field, number, or None).

    Returns:
        The parsed float, or 0.0 when the input is not a finite number.
    """
    if isinstance(value, bool):
        return 0.0
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            number = float(str(value).strip().replace(",", ""))
    except (TypeError, ValueError, OverflowError):
        # OverflowError: int too large for a float
        return 0.0
    # NaN and infinities are not usable amounts
    if number != number or number in (float("inf"), float("-inf")):
        return 0.0
    return number


def format_currency(value: float, currency: str) -> str:
    """
    Format a currency amount for display.

    Uses the currency symbol with thousands separators and the currency's
    usual number of decimals. Unknown codes fall back to a code prefix.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'USD', 'EUR').

    Returns:
        Formatted string like '$1,234.56' or '-¥1,500'.
    """
    symbol, digits = CURRENCY_FORMATS.get(currency, (f"{currency} ", 2))
    sign = "-" if value < 0 and round(abs(value), digits) != 0 else ""
    return f"{sign}{symbol}{abs(value):,.{digits}f}"


def format_date(value: date | None) -> str:
    """Format a date as 'Jan 05, 2025', or N/A when missing."""
    if not value:
        return "N/A"
    return value.strftime("%b %d, %Y")


def format_quantity(value: float) -> str:
    """Render a quantity without a trailing '.0' for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def address_lines(address: str) -> list[str]:
    """Split a free-text address into its non-blank lines."""
    return [line.strip() for line in (address or "").splitlines() if line.strip()]


def matches_query(invoice: "Invoice", query: str) -> bool:
    """
    Check if an invoice matches the search query.

    Performs case-insensitive substring matching against the invoice's
    searchable terms (client name, invoice number).

    Args:
        invoice: Invoice to check.
        query: Search query string.

    Returns:
        True if query matches any searchable term, or if query is empty.
    """
    normalized = (query or "").strip().lower()
    if not normalized:
        return True
    return any(normalized in value for value in invoice.searchable_terms())
