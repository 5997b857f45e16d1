"""
FAQsimple API client

Composes the HTTP proxy, the response cache and the rate limit tracker into the
read operations the MCP layer uses.
"""

from typing import Any, Awaitable, Callable, Self, TypeVar

from loguru import logger

from faqsimple_mcp.models import ClientSettings, FAQContent, FAQListResponse, HealthStatus, RateLimitStatus, SearchResult

from . import search
from .cache import ResponseCache
from .errors import AUTH_GUIDANCE, PLACEHOLDER_GUIDANCE, ApiError, ConfigError, InvalidArgumentError, NetworkError, connection_guidance
from .proxy import FAQsimpleProxy
from .rate_limit import RateLimitTracker

API_KEY_PREFIX = "fs."
PLACEHOLDER_API_KEY = "fs.your.api.key.here"

M = TypeVar("M")


def validate_api_key(api_key: str) -> None:
    if not api_key or not api_key.startswith(API_KEY_PREFIX):
        raise ConfigError(f'Invalid API key format. API key must start with "{API_KEY_PREFIX}"')
    if api_key == PLACEHOLDER_API_KEY:
        raise ConfigError(PLACEHOLDER_GUIDANCE)


class FAQsimpleClient:
    """
    Cached, rate-limit aware access to the FAQsimple API.

    State (cache, rate limits, HTTP client) belongs to the instance; separate
    clients never share it.

    Usage:
        async with FAQsimpleClient(ClientSettings(api_key="fs.xxx")) as client:
            faqs = await client.list_faqs()
            hits = await client.search_faqs("reset password")
    """

    def __init__(self, settings: ClientSettings) -> None:
        validate_api_key(settings.api_key)

        self.settings: ClientSettings = settings
        self.rate_limits: RateLimitTracker = RateLimitTracker()
        self.cache: ResponseCache[Any] = ResponseCache(lifetime_ms=settings.cache_timeout)
        self.proxy: FAQsimpleProxy = FAQsimpleProxy(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            rate_limits=self.rate_limits,
        )

    @property
    def base_url(self) -> str:
        return self.proxy.base_url

    async def __aenter__(self) -> Self:
        await self.proxy.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.proxy.aclose()

    async def _cached(self, key: str, fetch: Callable[[], Awaitable[M]]) -> M:
        value: M | None = self.cache.get(key)
        if value is not None:
            return value
        value = await fetch()
        self.cache.put(key, value)
        return value

    async def _fetch(self, model: type[M], endpoint: str, params: dict[str, Any] | None = None) -> M:
        data: Any = await self.proxy.get_json(endpoint, params)
        return model.model_validate(data)

    async def list_faqs(self) -> FAQListResponse:
        """List all published FAQs"""
        return await self._cached("listfaqs", lambda: self._fetch(FAQListResponse, "listfaqs"))

    async def list_faqs_and_questions(self) -> FAQListResponse:
        """List FAQs with question text"""
        return await self._cached("listfaqsandquestions", lambda: self._fetch(FAQListResponse, "listfaqsandquestions"))

    async def get_faq_content(self, faq_number: str) -> FAQContent:
        """Get a complete FAQ with questions and answers"""
        if not faq_number:
            raise InvalidArgumentError("FAQ number is required")

        return await self._cached(
            f"faq_{faq_number}",
            lambda: self._fetch(FAQContent, "getfaqplusqa", {"faq_number": faq_number}),
        )

    async def search_faqs(self, query: str) -> list[SearchResult]:
        """Search questions and answers of every FAQ; at most 10 results, best first"""
        return await search.search_faqs(self, query)

    def get_rate_limit_status(self) -> RateLimitStatus:
        return self.rate_limits.status()

    def clear_cache(self) -> None:
        self.cache.clear()

    async def health_check(self) -> HealthStatus:
        """Probe connectivity and credentials with a list call; never raises"""
        try:
            await self.list_faqs()
        except NetworkError:
            return HealthStatus(status="connection_error", message=connection_guidance(self.base_url))
        except ApiError as e:
            if e.is_auth_error:
                return HealthStatus(status="auth_error", message=AUTH_GUIDANCE)
            return HealthStatus(status="error", message=str(e))
        except Exception as e:  # pylint: disable=broad-exception-caught
            return HealthStatus(status="error", message=str(e))

        logger.debug(f"Health check against {self.base_url} succeeded")
        return HealthStatus(status="ok", message="Connection and authentication successful")
