# =============================================================================
# core/resources.py  —  Static MCP Resources
# =============================================================================
#
# Two read-only documents, rebuilt from constants on every read:
#   bot://currencies  JSON list of {code, description} in declared order
#   bot://api-info    plain-text overview of the two BOT APIs
# =============================================================================

import json
from typing import Callable

from core.models import ResourceDocument
from core.validators import SUPPORTED_CURRENCIES

CURRENCIES_URI = "bot://currencies"
API_INFO_URI = "bot://api-info"

CURRENCY_DESCRIPTIONS: dict[str, str] = {
    "USD": "United States Dollar",
    "GBP": "British Pound Sterling",
    "EUR": "Euro",
    "JPY": "Japanese Yen",
    "CNY": "Chinese Yuan Renminbi",
    "HKD": "Hong Kong Dollar",
    "SGD": "Singapore Dollar",
    "MYR": "Malaysian Ringgit",
    "TWD": "Taiwan Dollar",
    "KRW": "South Korean Won",
    "IDR": "Indonesian Rupiah",
    "INR": "Indian Rupee",
    "AUD": "Australian Dollar",
    "NZD": "New Zealand Dollar",
    "CHF": "Swiss Franc",
    "DKK": "Danish Krone",
    "NOK": "Norwegian Krone",
    "SEK": "Swedish Krona",
    "AED": "UAE Dirham",
    "PKR": "Pakistani Rupee",
}

API_INFO_TEXT = """Bank of Thailand Exchange Rate APIs

1. Weighted-average Interbank Exchange Rate (THB/USD)
   - Data from interbank transactions >= 1 million USD
   - Updated daily at 6:00 PM (BKK time)
   - Available frequencies: Daily, Monthly, Quarterly, Annual

2. Average Exchange Rate (THB/Foreign Currency)
   - Spot market rates for THB vs 19+ foreign currencies
   - Data from commercial bank transaction reports
   - Updated daily at 6:00 PM (BKK time)
   - Available frequencies: Daily, Monthly, Quarterly, Annual

Data Source: Bank of Thailand (Commercial Banks, Foreign Bank Branches, Special-purpose Financial Institutions)

Period Formats:
- Daily: YYYY-MM-DD (e.g., 2024-01-15)
- Monthly: YYYY-MM (e.g., 2024-01)
- Quarterly: YYYY-QN (e.g., 2024-Q1)
- Annual: YYYY (e.g., 2024)"""


def currency_description(code: str) -> str:
    return CURRENCY_DESCRIPTIONS.get(code, code)


def currencies_document() -> ResourceDocument:
    catalog = [
        {"code": code, "description": currency_description(code)}
        for code in SUPPORTED_CURRENCIES
    ]
    return ResourceDocument(
        uri=CURRENCIES_URI,
        name="supported-currencies",
        description="List of supported foreign currencies for exchange rate queries",
        mime_type="application/json",
        text=json.dumps(catalog, indent=2),
    )


def api_info_document() -> ResourceDocument:
    return ResourceDocument(
        uri=API_INFO_URI,
        name="api-info",
        description="Information about Bank of Thailand Exchange Rate APIs",
        mime_type="text/plain",
        text=API_INFO_TEXT,
    )


RESOURCES: dict[str, Callable[[], ResourceDocument]] = {
    CURRENCIES_URI: currencies_document,
    API_INFO_URI: api_info_document,
}


def read_resource(uri: str) -> ResourceDocument:
    """Build the document for uri.  Raises KeyError for unknown URIs."""
    return RESOURCES[uri]()
