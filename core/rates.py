# =============================================================================
# core/rates.py  —  Tool Table & Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares the eight BOT rate tools as an explicit table and turns one
#   validated invocation into exactly one gateway call plus a response
#   envelope.
#
#   ┌──────────────┬─────────────────────────────┬───────────────────────────┐
#   │ family       │ base URL                    │ endpoint by granularity   │
#   ├──────────────┼─────────────────────────────┼───────────────────────────┤
#   │ interbank    │ Stat-ReferenceRate/v2       │ /<G>_REF_RATE/            │
#   │ exchange     │ Stat-ExchangeRate/v2        │ /<G>_AVG_EXG_RATE/        │
#   └──────────────┴─────────────────────────────┴───────────────────────────┘
#
# ENVELOPES:
#   success → the upstream JSON, pretty-printed, otherwise untouched
#   failure → "Error: <message>" with is_error=True
#
#   invoke() never raises.  Argument validation has already happened in the
#   MCP layer by the time it runs.
# =============================================================================

import json
import logging
from typing import Any, Optional

from core.config import Settings
from core.gateway import RateGateway
from core.models import (
    Granularity,
    RateFamily,
    RateTool,
    ResponseEnvelope,
    UpstreamCallSpec,
)

logger = logging.getLogger(__name__)

_INTERBANK_PREFIX = "weighted-average interbank exchange rate THB/USD."
_EXCHANGE_PREFIX = "average exchange rate THB vs foreign currencies."

RATE_TOOLS: tuple[RateTool, ...] = (
    RateTool(
        name="get_daily_interbank_rate",
        description=f"Get daily {_INTERBANK_PREFIX} Data from interbank purchases/sales of USD >= 1 million.",
        family=RateFamily.INTERBANK,
        granularity=Granularity.DAILY,
    ),
    RateTool(
        name="get_monthly_interbank_rate",
        description=f"Get monthly {_INTERBANK_PREFIX} Averaged from daily rates.",
        family=RateFamily.INTERBANK,
        granularity=Granularity.MONTHLY,
    ),
    RateTool(
        name="get_quarterly_interbank_rate",
        description=f"Get quarterly {_INTERBANK_PREFIX} Averaged from monthly rates.",
        family=RateFamily.INTERBANK,
        granularity=Granularity.QUARTERLY,
    ),
    RateTool(
        name="get_annual_interbank_rate",
        description=f"Get annual {_INTERBANK_PREFIX} Averaged from quarterly rates.",
        family=RateFamily.INTERBANK,
        granularity=Granularity.ANNUAL,
    ),
    RateTool(
        name="get_daily_exchange_rate",
        description=f"Get daily {_EXCHANGE_PREFIX} Includes buying/selling rates for 19+ currencies.",
        family=RateFamily.EXCHANGE,
        granularity=Granularity.DAILY,
    ),
    RateTool(
        name="get_monthly_exchange_rate",
        description=f"Get monthly {_EXCHANGE_PREFIX} Includes buying/selling rates.",
        family=RateFamily.EXCHANGE,
        granularity=Granularity.MONTHLY,
    ),
    RateTool(
        name="get_quarterly_exchange_rate",
        description=f"Get quarterly {_EXCHANGE_PREFIX} Includes buying/selling rates.",
        family=RateFamily.EXCHANGE,
        granularity=Granularity.QUARTERLY,
    ),
    RateTool(
        name="get_annual_exchange_rate",
        description=f"Get annual {_EXCHANGE_PREFIX} Includes buying/selling rates.",
        family=RateFamily.EXCHANGE,
        granularity=Granularity.ANNUAL,
    ),
)

_TOOLS_BY_NAME: dict[str, RateTool] = {t.name: t for t in RATE_TOOLS}


def get_tool(name: str) -> RateTool:
    """Look up a tool by name.  Raises KeyError for unknown names."""
    return _TOOLS_BY_NAME[name]


def base_url_for(family: RateFamily, settings: Optional[Settings] = None) -> str:
    settings = settings or Settings()
    if family is RateFamily.INTERBANK:
        return settings.reference_rate_base_url
    return settings.exchange_rate_base_url


def build_call_spec(
    tool: RateTool,
    start_period: str,
    end_period: str,
    currency: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> UpstreamCallSpec:
    params: dict[str, Optional[str]] = {
        "start_period": start_period,
        "end_period": end_period,
    }
    if tool.accepts_currency:
        params["currency"] = currency or ""
    return UpstreamCallSpec(base_url_for(tool.family, settings), tool.endpoint, params)


def format_payload(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def success_envelope(data: Any) -> ResponseEnvelope:
    return ResponseEnvelope(text=format_payload(data))


def error_envelope(message: str) -> ResponseEnvelope:
    return ResponseEnvelope(text=f"Error: {message}", is_error=True)


async def invoke(
    tool: RateTool,
    gateway: RateGateway,
    start_period: str,
    end_period: str,
    currency: Optional[str] = None,
) -> ResponseEnvelope:
    """Run one tool invocation against the gateway and wrap the outcome."""
    try:
        spec = build_call_spec(tool, start_period, end_period, currency, gateway.settings)
        result = await gateway.fetch(spec.base_url, spec.endpoint, spec.params)
        if not result.ok:
            return error_envelope(result.failure.message)
        return success_envelope(result.data)
    except Exception as e:
        logger.exception("Unexpected failure in %s", tool.name)
        return error_envelope(str(e) or type(e).__name__)
