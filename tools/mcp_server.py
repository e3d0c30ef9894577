# =============================================================================
# tools/mcp_server.py  —  FastMCP Server (all BOT tools and resources)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Binds the tool table in core/rates.py and the documents in
#   core/resources.py to a FastMCP server.  Each tool is a thin wrapper: it
#   logs the call, hands the validated arguments to core.rates.invoke, and
#   turns the ResponseEnvelope into an MCP tool result.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g. "get_daily_exchange_rate")
#   2. FastMCP validates the arguments against the handler's signature.
#      The period parameters carry the regex from core/validators.py and
#      "currency" is a Literal of the 20 supported codes, so malformed input
#      is rejected here and the handler never runs.
#   3. The handler calls core.rates.invoke → one upstream GET
#   4. Success: the pretty-printed upstream JSON goes back as text content.
#      Failure: a ToolError carrying "Error: <message>", which FastMCP
#      reports as a result with isError=true and exactly that text.
#
# RUNNING THIS SERVER:
#   a) python main.py                 (loads .env, then serves on stdio)
#   b) python -m tools.mcp_server
#   c) fastmcp run tools/mcp_server.py
# =============================================================================

import logging
import sys
from typing import Annotated, Literal, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import BeforeValidator, Field

from core.config import Settings
from core.gateway import RateGateway
from core.models import Granularity, RateTool, ResponseEnvelope
from core.rates import RATE_TOOLS, get_tool, invoke
from core.resources import RESOURCES, read_resource
from core.validators import (
    PERIOD_PATTERNS,
    SUPPORTED_CURRENCIES,
    validate_currency,
    validate_period,
)

SERVER_NAME = "bot-api-mcp"
SERVER_VERSION = "1.0.0"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR.  STDOUT carries the MCP JSON stream and anything else
# written there corrupts it.
#
# Colours: CYAN for incoming calls, YELLOW for status, GREEN for responses.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

_MAX_LOGGED_CHARS = 300


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, envelope: ResponseEnvelope) -> ResponseEnvelope:
    """Log the (truncated, single-line) envelope text in GREEN, then return it."""
    text = " ".join(envelope.text.split())
    if len(text) > _MAX_LOGGED_CHARS:
        text = text[:_MAX_LOGGED_CHARS] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response: {text}{_RESET}")
    return envelope


# =============================================================================
# Parameter types
# =============================================================================
# (unit, format, start example, end example) per granularity.  These end up
# in the JSON schema descriptions the LLM reads.
#
# The regex stays on Field(pattern=...) so it shows up in the JSON schema.
# The BeforeValidator runs first and rejects with the readable reason from
# core/validators.py ("Must be YYYY-MM-DD format", ...).
# =============================================================================
_PERIOD_HINTS: dict[Granularity, tuple[str, str, str, str]] = {
    Granularity.DAILY: ("date", "YYYY-MM-DD", "2024-01-01", "2024-01-31"),
    Granularity.MONTHLY: ("month", "YYYY-MM", "2024-01", "2024-12"),
    Granularity.QUARTERLY: ("quarter", "YYYY-QN", "2024-Q1", "2024-Q4"),
    Granularity.ANNUAL: ("year", "YYYY", "2020", "2024"),
}


def _check_currency(value):
    result = validate_currency(value)
    if not result:
        raise ValueError(result.reason)
    return value


def _period_checker(granularity: Granularity):
    def check(value):
        result = validate_period(granularity, value)
        if not result:
            raise ValueError(result.reason)
        return value

    return check


CurrencyParam = Annotated[
    Optional[Literal[SUPPORTED_CURRENCIES]],
    Field(
        description=(
            f"Optional currency code: {', '.join(SUPPORTED_CURRENCIES)}. "
            "If omitted, returns all currencies."
        )
    ),
    BeforeValidator(_check_currency),
]


def period_param(granularity: Granularity, bound: str):
    """Annotated str type for start/end period of the given granularity."""
    unit, fmt, start_example, end_example = _PERIOD_HINTS[granularity]
    example = start_example if bound == "start" else end_example
    return Annotated[
        str,
        Field(
            pattern=PERIOD_PATTERNS[granularity],
            description=f"{bound.capitalize()} {unit} in {fmt} format (e.g., {example})",
        ),
        BeforeValidator(_period_checker(granularity)),
    ]


# =============================================================================
# Handlers
# =============================================================================
# One handler per row of RATE_TOOLS.  Interbank tools take two periods;
# exchange tools take an optional currency as well.  A handler only carries
# its tool's name; the row itself is looked up in the table on each call.
# =============================================================================
async def _run_tool(name: str, gateway: RateGateway, **args) -> ToolResult:
    tool = get_tool(name)
    _log_request(tool.name, **args)
    _log_status(f"GET {tool.endpoint}")
    envelope = _log_response(tool.name, await invoke(tool, gateway, **args))
    if envelope.is_error:
        raise ToolError(envelope.text)
    return ToolResult(content=[TextContent(**item) for item in envelope.content])


def make_handler(tool: RateTool, gateway: RateGateway):
    Start = period_param(tool.granularity, "start")
    End = period_param(tool.granularity, "end")
    name = tool.name

    if tool.accepts_currency:
        async def handler(start_period: Start, end_period: End, currency: CurrencyParam = None):
            return await _run_tool(
                name, gateway,
                start_period=start_period, end_period=end_period, currency=currency,
            )
    else:
        async def handler(start_period: Start, end_period: End):
            return await _run_tool(
                name, gateway, start_period=start_period, end_period=end_period,
            )

    handler.__name__ = name
    handler.__doc__ = tool.description
    return handler


def _resource_reader(uri: str):
    def reader() -> str:
        return read_resource(uri).text

    reader.__name__ = uri.split("://", 1)[-1].replace("-", "_")
    return reader


# =============================================================================
# Server factory
# =============================================================================
def create_server(
    settings: Optional[Settings] = None, gateway: Optional[RateGateway] = None
) -> FastMCP:
    """Build a FastMCP server with every BOT tool and resource registered."""
    settings = settings or Settings()
    gateway = gateway or RateGateway(settings)

    server = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    for tool in RATE_TOOLS:
        server.tool(name=tool.name, description=tool.description)(make_handler(tool, gateway))

    for uri in RESOURCES:
        doc = read_resource(uri)
        server.resource(
            uri, name=doc.name, description=doc.description, mime_type=doc.mime_type
        )(_resource_reader(uri))

    return server


def _stdio_server() -> FastMCP:
    """Load .env, configure stderr logging and build the stdio server."""
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    server = create_server(settings)
    logging.info("Bank of Thailand MCP Server running on stdio")
    return server


_mcp: Optional[FastMCP] = None


def __getattr__(name: str):
    # `fastmcp run tools/mcp_server.py` looks up the module attribute "mcp".
    # It is built on first access so a plain import builds no server.
    global _mcp
    if name == "mcp":
        if _mcp is None:
            _mcp = _stdio_server()
        return _mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def run() -> None:
    """Serve on stdio until the client disconnects."""
    _stdio_server().run()


if __name__ == "__main__":
    run()
