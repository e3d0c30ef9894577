# =============================================================================
# core/config.py  —  Runtime Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the handful of values the server needs: the two BOT base URLs, the
#   request deadline, the name of the credential variable, and the log level.
#
# THE CREDENTIAL IS NOT CACHED:
#   Settings stores the *name* of the environment variable, not its value.
#   api_key() reads the environment every time it is called, so a key that
#   appears after startup is picked up by the next tool call.
#
# ENVIRONMENT VARIABLES:
#   BOT_API_KEY         Bank of Thailand API key (required per call)
#   BOT_MCP_LOG_LEVEL   Logging level for the server (default: INFO)
#
#   main.py loads a .env file (python-dotenv) before anything reads these.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Optional

REFERENCE_RATE_BASE_URL = "https://gateway.api.bot.or.th/Stat-ReferenceRate/v2"
EXCHANGE_RATE_BASE_URL = "https://gateway.api.bot.or.th/Stat-ExchangeRate/v2"

REQUEST_TIMEOUT_SECONDS = 30.0

API_KEY_ENV = "BOT_API_KEY"
LOG_LEVEL_ENV = "BOT_MCP_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    reference_rate_base_url: str = REFERENCE_RATE_BASE_URL
    exchange_rate_base_url: str = EXCHANGE_RATE_BASE_URL
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS
    api_key_env: str = API_KEY_ENV
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(log_level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper())

    def api_key(self) -> Optional[str]:
        """Current credential, or None when unset or empty."""
        return os.environ.get(self.api_key_env) or None

    @property
    def missing_key_message(self) -> str:
        return (
            f"{self.api_key_env} environment variable is not set. "
            "Please set it with your Bank of Thailand API key."
        )
