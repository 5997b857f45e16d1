from datetime import datetime, timezone
from typing import Any, Mapping

from faqsimple_mcp.models import RateLimitStatus

REMAINING_HEADER = "x-ratelimit-remaining"
RESET_HEADER = "x-ratelimit-reset"


def _header_int(value: Any) -> int:
    """Missing or non-numeric header values count as 0."""
    try:
        return max(0, int(str(value).strip()))
    except (TypeError, ValueError):
        return 0


class RateLimitTracker:
    """Holds the rate limit state reported by the last response"""

    def __init__(self, remaining: int = 100) -> None:
        self.remaining: int = remaining
        self.reset: int = 0

    def update(self, headers: Mapping[str, str]) -> None:
        self.remaining = _header_int(headers.get(REMAINING_HEADER))
        self.reset = _header_int(headers.get(RESET_HEADER))

    @property
    def reset_at(self) -> datetime | None:
        """Reset time (header is epoch seconds), None when unknown or out of range"""
        if not self.reset:
            return None
        try:
            return datetime.fromtimestamp(self.reset, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None

    def status(self) -> RateLimitStatus:
        return RateLimitStatus(remaining=self.remaining, reset_time=self.reset_at)
