from datetime import datetime, timezone
from typing import Any, Self

import httpx
from loguru import logger

from faqsimple_mcp.models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

from .errors import ApiError, NetworkError, RateLimitError
from .rate_limit import RateLimitTracker

USER_AGENT = "mcp-server-faqsimple/1.0.0"


class FAQsimpleProxy:
    """
    Minimal async proxy around the FAQsimple API using httpx.

    Every response that reaches the proxy updates `rate_limits`, error or not.
    Caching is left to the caller.

    Usage:
        async with FAQsimpleProxy(api_key="fs.xxx") as proxy:
            faqs = await proxy.get_json("listfaqs")
            faq = await proxy.get_json("getfaqplusqa", {"faq_number": "FAQ001"})
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
        rate_limits: RateLimitTracker | None = None,
    ) -> None:
        self.api_key: str = api_key
        self.base_url: str = base_url.rstrip("/")
        self.timeout: float = timeout
        self.user_agent: str = user_agent
        self.rate_limits: RateLimitTracker = rate_limits or RateLimitTracker()
        self._client: httpx.AsyncClient | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }

    async def __aenter__(self) -> Self:
        self._client = httpx.AsyncClient(timeout=self.timeout, headers=self.headers)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_json(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET {base_url}/{endpoint} and return the decoded JSON body.
        Parameters with a None value are left out of the query string.
        """
        url: str = f"{self.base_url}/{endpoint.lstrip('/')}"
        query: list[tuple[str, Any]] = [(k, v) for k, v in (params or {}).items() if v is not None]

        if self._client is None:
            # Fallback: create a one-shot client if used without context manager
            async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers) as client:
                resp: httpx.Response = await self._send(client, url, query)
                return self._ensure_ok(resp)

        resp = await self._send(self._client, url, query)
        return self._ensure_ok(resp)

    async def _send(self, client: httpx.AsyncClient, url: str, query: list[tuple[str, Any]]) -> httpx.Response:
        try:
            resp: httpx.Response = await client.get(url, params=query, headers=self.headers)
        except httpx.TransportError as e:
            logger.debug(f"GET {url} failed: {e!r}")
            raise NetworkError() from e

        self.rate_limits.update(resp.headers)
        return resp

    def _ensure_ok(self, resp: httpx.Response) -> Any:
        if resp.status_code == 429:
            raise RateLimitError(self.rate_limits.reset_at or datetime.now(timezone.utc))

        if not resp.is_success:
            raise ApiError(resp.status_code, self._error_message(resp))

        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(resp.status_code, "Invalid JSON in response body") from e

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        """FAQsimple encodes errors as {"message": "..."}; fall back to the reason phrase"""
        try:
            data: Any = resp.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return resp.reason_phrase
