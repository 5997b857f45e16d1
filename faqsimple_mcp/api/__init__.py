from .cache import ResponseCache
from .client import FAQsimpleClient, validate_api_key
from .errors import ApiError, ConfigError, FAQsimpleError, InvalidArgumentError, NetworkError, RateLimitError
from .proxy import FAQsimpleProxy
from .rate_limit import RateLimitTracker
from .search import calculate_relevance, search_faqs

__all__ = [
    "FAQsimpleClient",
    "FAQsimpleProxy",
    "ResponseCache",
    "RateLimitTracker",
    "validate_api_key",
    "calculate_relevance",
    "search_faqs",
    "FAQsimpleError",
    "ConfigError",
    "InvalidArgumentError",
    "NetworkError",
    "ApiError",
    "RateLimitError",
]
