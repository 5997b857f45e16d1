"""
FAQsimple data models

Response payloads from the FAQsimple API, search results produced by the
client, and the settings the client is constructed from.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://api.faqsimple.io/v1"
DEFAULT_CACHE_TIMEOUT = 300_000
DEFAULT_RATE_LIMIT_DELAY = 1_000
DEFAULT_TIMEOUT = 30.0


class FAQModel(BaseModel):
    """Base for payloads returned by the FAQsimple API"""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class FAQListItem(FAQModel):
    """Summary of a single published FAQ"""

    faq_number: str = Field(description="FAQ identifier (e.g. 'FAQ001')")
    name: str = Field(description="Display name")
    overview: Optional[str] = Field(None, description="Short overview text")
    faq_url: Optional[str] = Field(None, description="Public URL of the FAQ")


class FAQListResponse(FAQModel):
    """Response from listfaqs and listfaqsandquestions"""

    total_count: int = 0
    faqs: list[FAQListItem] = Field(default_factory=list)


class FAQAnswer(FAQModel):
    answer_text: str
    answer_keywords: Optional[str] = None


class FAQQuestion(FAQModel):
    question_text: str
    question_keywords: Optional[str] = None
    important: Optional[bool] = None
    answers: list[FAQAnswer] = Field(default_factory=list)


class FAQContent(FAQModel):
    """Complete FAQ with questions and answers (getfaqplusqa)"""

    faq_number: str
    name: str
    overview: Optional[str] = None
    faq_url: Optional[str] = None
    last_edited_timestamp: Optional[str] = None
    question_count: int = 0
    questions: list[FAQQuestion] = Field(default_factory=list)


class SearchResult(BaseModel):
    """A single ranked question/answer hit"""

    faq_number: str
    faq_name: str
    question: str
    answer: str
    relevance: float = Field(description="Relevance score [0,1]")


class RateLimitStatus(BaseModel):
    """Most recently observed rate limit state"""

    remaining: int = Field(ge=0, description="Requests remaining in the current window")
    reset_time: Optional[datetime] = Field(None, description="When the window resets, if known")


class HealthStatus(BaseModel):
    """Outcome of a startup connectivity probe"""

    status: Literal["ok", "connection_error", "auth_error", "error"]
    message: str


class ClientSettings(BaseModel):
    """Endpoint configuration for the FAQsimple client"""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(description="FAQsimple API key, starts with 'fs.'")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base address")
    cache_timeout: int = Field(default=DEFAULT_CACHE_TIMEOUT, description="Cache lifetime in milliseconds", ge=0)
    rate_limit_delay: int = Field(default=DEFAULT_RATE_LIMIT_DELAY, description="Inter-request delay floor in milliseconds", ge=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="HTTP timeout in seconds", gt=0)
