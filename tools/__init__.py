# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP bindings for the BOT rate tools and resources.
#
# tools/ is the translation layer between MCP and core/:
#   - builds parameter schemas from core/validators.py
#   - registers one handler per row of core.rates.RATE_TOOLS
#   - converts ResponseEnvelope into MCP tool results
#
# Business logic stays in core/.
# =============================================================================
