# =============================================================================
# main.py  —  Entry Point for the Bank of Thailand MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads environment variables from .env (BOT_API_KEY, BOT_MCP_LOG_LEVEL)
#   2. Builds the FastMCP server (tools/mcp_server.py)
#   3. Logs a startup line to stderr and serves MCP over stdin/stdout
#
# A missing BOT_API_KEY does NOT stop startup.  It is reported per tool call.
# Anything that does escape startup is logged and the process exits with 1.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Must happen before the server reads any configuration.
load_dotenv()

from tools.mcp_server import run


def main() -> int:
    try:
        run()
    except Exception as e:
        logging.critical("Fatal error: %s", e, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
