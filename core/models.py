# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses and enums define the shape of everything that flows
# between the MCP layer, the tool table and the upstream gateway.  They carry
# almost no behavior; the few properties here are pure derivations.
#
# Everything is request-scoped.  Nothing here is persisted.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


# -----------------------------------------------------------------------------
# Granularity — the four period grammars BOT publishes rates for
# -----------------------------------------------------------------------------
class Granularity(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"

    @property
    def endpoint_prefix(self) -> str:
        """Upper-case prefix used in BOT endpoint paths (e.g. DAILY)."""
        return self.name


# -----------------------------------------------------------------------------
# RateFamily — which BOT API a tool talks to
# -----------------------------------------------------------------------------
#   interbank → Stat-ReferenceRate   (weighted-average THB/USD)
#   exchange  → Stat-ExchangeRate    (average THB vs foreign currencies)
# -----------------------------------------------------------------------------
class RateFamily(str, Enum):
    INTERBANK = "interbank"
    EXCHANGE = "exchange"

    @property
    def endpoint_suffix(self) -> str:
        return "REF_RATE" if self is RateFamily.INTERBANK else "AVG_EXG_RATE"


class ErrorKind(str, Enum):
    """Failure classes returned by the gateway.

    Schema violations never get this far: FastMCP rejects them first.
    """

    CONFIGURATION = "configuration"        # BOT_API_KEY missing
    TIMEOUT = "timeout"                    # deadline exceeded
    UPSTREAM = "upstream"                  # non-2xx status
    NETWORK = "network"                    # transport fault or bad JSON


# -----------------------------------------------------------------------------
# RateTool — one row of the tool table
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RateTool:
    """A named BOT rate query: family × granularity."""

    name: str                          # e.g. "get_daily_interbank_rate"
    description: str                   # read by the LLM to choose the tool
    family: RateFamily
    granularity: Granularity

    @property
    def endpoint(self) -> str:
        return f"/{self.granularity.endpoint_prefix}_{self.family.endpoint_suffix}/"

    @property
    def accepts_currency(self) -> bool:
        return self.family is RateFamily.EXCHANGE


# -----------------------------------------------------------------------------
# UpstreamCallSpec — everything needed to issue one GET
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class UpstreamCallSpec:
    base_url: str
    endpoint: str
    params: dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.endpoint}"

    @property
    def query(self) -> dict[str, str]:
        """Params with a non-empty string value.  Empty ones are never sent."""
        return {k: v for k, v in self.params.items() if isinstance(v, str) and v}


@dataclass(frozen=True)
class GatewayFailure:
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None  # only for ErrorKind.UPSTREAM


@dataclass(frozen=True)
class FetchResult:
    """Tagged outcome of one upstream call: exactly one of data / failure."""

    data: Any = None
    failure: Optional[GatewayFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, data: Any) -> "FetchResult":
        return cls(data=data)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, status_code: Optional[int] = None) -> "FetchResult":
        return cls(failure=GatewayFailure(kind, message, status_code))


# -----------------------------------------------------------------------------
# ResponseEnvelope — what every tool invocation returns
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ResponseEnvelope:
    text: str
    is_error: bool = False

    @property
    def content(self) -> list[dict[str, str]]:
        return [{"type": "text", "text": self.text}]


@dataclass(frozen=True)
class ResourceDocument:
    uri: str
    name: str
    description: str
    mime_type: str
    text: str
