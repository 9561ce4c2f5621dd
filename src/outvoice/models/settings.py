"""
Default invoice settings.

Settings are a single record applied when a new invoice is created. They
are stored under the ``settings`` key using the same camelCase field names
as invoice records.
"""

from dataclasses import dataclass
from typing import Any

from outvoice.models.invoice import DEFAULT_CURRENCY, currency_or_default
from outvoice.utils import to_number

DEFAULT_ISSUER_NAME = "Your Company"
DEFAULT_ISSUER_ADDRESS = "123 Your Street, Your City, 12345"
DEFAULT_TAX_RATE_PERCENT = 5.0


@dataclass
class Settings:
    """
    Default values applied to new invoices.

    Attributes:
        default_issuer_name: Name printed in the "From" block.
        default_issuer_address: Address printed in the "From" block.
        default_tax_rate_percent: Tax rate applied to the subtotal.
        default_currency_code: Currency used for amounts.
    """

    default_issuer_name: str = DEFAULT_ISSUER_NAME
    default_issuer_address: str = DEFAULT_ISSUER_ADDRESS
    default_tax_rate_percent: float = DEFAULT_TAX_RATE_PERCENT
    default_currency_code: str = DEFAULT_CURRENCY

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return {
            "fromName": self.default_issuer_name,
            "fromAddress": self.default_issuer_address,
            "gstRate": self.default_tax_rate_percent,
            "currency": self.default_currency_code,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Settings":
        """Deserialize from dictionary, filling gaps with the defaults."""
        if not data:
            return cls()
        return cls(
            default_issuer_name=_text(data.get("fromName"), DEFAULT_ISSUER_NAME),
            default_issuer_address=_text(
                data.get("fromAddress"), DEFAULT_ISSUER_ADDRESS
            ),
            default_tax_rate_percent=to_number(
                data.get("gstRate", DEFAULT_TAX_RATE_PERCENT)
            ),
            default_currency_code=currency_or_default(data.get("currency")),
        )


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


# Field names accepted by SessionController.update_settings.
SETTINGS_TEXT_FIELDS = frozenset(
    {"default_issuer_name", "default_issuer_address"}
)
SETTINGS_NUMBER_FIELDS = frozenset({"default_tax_rate_percent"})
SETTINGS_CURRENCY_FIELDS = frozenset({"default_currency_code"})
