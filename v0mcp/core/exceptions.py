"""Custom exception hierarchy for the v0 MCP server."""


class AgentError(Exception):
    """Base exception for server-level issues."""


class ConfigurationError(AgentError):
    """Raised when configuration is invalid or missing."""


class UnknownToolError(AgentError):
    """Raised when the dispatcher is asked for a tool that is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolInvocationError(AgentError):
    """Base for failures scoped to a single tool invocation."""


class ToolValidationError(ToolInvocationError):
    """Raised when tool arguments are malformed, missing or unexpected."""

    def __init__(self, message: str, *, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class ToolCancelledError(ToolInvocationError):
    """Raised when an invocation was cancelled before it started."""


class ProviderError(ToolInvocationError):
    """Raised when the text-generation provider responds with an error."""


class RateLimitExceeded(ProviderError):
    """Raised when the upstream API reports rate limiting or quota exhaustion."""


class InternalError(ToolInvocationError):
    """Raised for unexpected failures inside a tool handler."""
