# =============================================================================
# core/__init__.py
# =============================================================================
# Everything the server does that is not MCP wiring: models, configuration,
# validators, the upstream gateway, the tool table and the static resources.
#
# Nothing in this package imports FastMCP.  The only third-party import is
# httpx, in core/gateway.py.
# =============================================================================
