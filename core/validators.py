# =============================================================================
# core/validators.py  —  Period & Currency Validators
# =============================================================================
#
# Pure, syntactic predicates.  No trimming, no case-folding, no calendar
# arithmetic: "2024-13-99" is a valid daily period here and it is up to the
# BOT API to reject it.
#
# The grammar strings below are also the JSON-schema "pattern" of the MCP
# tool parameters (tools/mcp_server.py), so both layers agree by construction.
# The server also runs validate_period / validate_currency on every argument,
# and their reasons are what a rejected caller sees.
# Digits are spelled [0-9] because \d also matches non-ASCII digits.
# =============================================================================

import re
from dataclasses import dataclass
from typing import Optional

from core.models import Granularity

PERIOD_PATTERNS: dict[Granularity, str] = {
    Granularity.DAILY: r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$",
    Granularity.MONTHLY: r"^[0-9]{4}-[0-9]{2}$",
    Granularity.QUARTERLY: r"^[0-9]{4}-Q[1-4]$",
    Granularity.ANNUAL: r"^[0-9]{4}$",
}

PERIOD_ERRORS: dict[Granularity, str] = {
    Granularity.DAILY: "Must be YYYY-MM-DD format",
    Granularity.MONTHLY: "Must be YYYY-MM format",
    Granularity.QUARTERLY: "Must be YYYY-QN format (e.g., 2024-Q1)",
    Granularity.ANNUAL: "Must be YYYY format",
}

# Order matters: the currencies resource lists them in this order.
SUPPORTED_CURRENCIES: tuple[str, ...] = (
    "USD", "GBP", "EUR", "JPY", "CNY", "HKD", "SGD", "MYR", "TWD", "KRW",
    "IDR", "INR", "AUD", "NZD", "CHF", "DKK", "NOK", "SEK", "AED", "PKR",
)

# Compiled without the anchors; fullmatch() anchors both ends and, unlike
# "$", does not accept a trailing newline.
_COMPILED: dict[Granularity, re.Pattern[str]] = {
    g: re.compile(p.lstrip("^").rstrip("$")) for g, p in PERIOD_PATTERNS.items()
}


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


def validate_period(granularity: Granularity, value: str) -> ValidationResult:
    if isinstance(value, str) and _COMPILED[granularity].fullmatch(value):
        return ValidationResult(True)
    return ValidationResult(False, PERIOD_ERRORS[granularity])


def validate_currency(value: Optional[str]) -> ValidationResult:
    """None means "all currencies" and is always valid."""
    if value is None or value in SUPPORTED_CURRENCIES:
        return ValidationResult(True)
    return ValidationResult(
        False, f"Must be one of: {', '.join(SUPPORTED_CURRENCIES)}"
    )
