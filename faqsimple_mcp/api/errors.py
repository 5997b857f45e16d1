"""
Error taxonomy for the FAQsimple client
"""

from datetime import datetime

AUTH_GUIDANCE = "Your API Key seems invalid, please contact FAQsimple support (support@faqsimple.com) for assistance if needed."
PLACEHOLDER_GUIDANCE = "Please replace the placeholder API key with your actual FAQsimple API key"


def connection_guidance(base_url: str) -> str:
    return f"Unable to connect to {base_url}. Please ensure you have a valid connection."


class FAQsimpleError(Exception):
    """Base class for all client errors"""


class ConfigError(FAQsimpleError):
    """Invalid client configuration (e.g. malformed API key)"""


class InvalidArgumentError(FAQsimpleError, ValueError):
    """A required argument was missing or empty"""


class NetworkError(FAQsimpleError):
    """The FAQsimple API could not be reached"""

    def __init__(self, message: str = "Network error: Unable to connect to FAQsimple API") -> None:
        super().__init__(message)


class ApiError(FAQsimpleError):
    """Non-2xx response from the FAQsimple API"""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"API Error {status_code}: {message}")
        self.status_code: int = status_code
        self.message: str = message

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)


class RateLimitError(FAQsimpleError):
    """HTTP 429 from the FAQsimple API"""

    def __init__(self, reset_at: datetime) -> None:
        super().__init__(f"Rate limit exceeded. Reset at: {reset_at.isoformat()}")
        self.reset_at: datetime = reset_at
