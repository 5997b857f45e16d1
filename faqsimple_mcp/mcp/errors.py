"""
Translation of client errors into MCP errors with user guidance
"""

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, ErrorData

from faqsimple_mcp.api.errors import AUTH_GUIDANCE, PLACEHOLDER_GUIDANCE, ApiError, ConfigError, InvalidArgumentError, NetworkError, connection_guidance


def mcp_error(code: int, message: str) -> McpError:
    return McpError(ErrorData(code=code, message=message))


def user_guidance(error: Exception, base_url: str) -> str | None:
    """Human readable advice for connection and credential problems, None otherwise"""
    if isinstance(error, NetworkError):
        return connection_guidance(base_url)
    if isinstance(error, ApiError) and error.is_auth_error:
        return AUTH_GUIDANCE
    if isinstance(error, ConfigError) and str(error) == PLACEHOLDER_GUIDANCE:
        return PLACEHOLDER_GUIDANCE
    return None


def to_mcp_error(error: Exception, base_url: str) -> McpError:
    if isinstance(error, McpError):
        return error

    if isinstance(error, (InvalidArgumentError, ConfigError)):
        return mcp_error(INVALID_PARAMS, user_guidance(error, base_url) or str(error))

    guidance: str | None = user_guidance(error, base_url)
    if guidance:
        return mcp_error(INTERNAL_ERROR, guidance)

    return mcp_error(INTERNAL_ERROR, f"Tool execution failed: {error}")
