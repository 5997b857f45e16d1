from typing import Any, Callable, Generator
from unittest.mock import AsyncMock

import pytest
from loguru import logger

from faqsimple_mcp.api import FAQsimpleClient
from faqsimple_mcp.configuration import Config, ConfigStore, MockConfigProvider, reset_config_provider
from faqsimple_mcp.models import ClientSettings

# pylint: disable=redefined-outer-name

API_KEY = "fs.test.key.12345"
BASE_URL = "https://api.test.faqsimple.com/v1"


@pytest.fixture(autouse=True)
def setup_reset_config() -> Generator[None, Any, None]:
    """Reset Config Store and provider before each test"""
    ConfigStore.reset_instance()
    reset_config_provider()
    yield
    ConfigStore.reset_instance()
    reset_config_provider()


class FakeClock:
    """Controllable clock for cache expiry tests (seconds)"""

    def __init__(self, now: float = 1000.0) -> None:
        self.now: float = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(api_key=API_KEY, base_url=BASE_URL, cache_timeout=1000)


@pytest.fixture
def client(settings: ClientSettings) -> FAQsimpleClient:
    return FAQsimpleClient(settings)


@pytest.fixture
def log_messages() -> Generator[list[str], Any, None]:
    """Capture loguru output"""
    messages: list[str] = []
    handler_id: int = logger.add(lambda message: messages.append(str(message)), level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)


def make_question(question_text: str, *answers: str, **kwargs: Any) -> dict[str, Any]:
    return {"question_text": question_text, "answers": [{"answer_text": a} for a in answers], **kwargs}


def make_faq(faq_number: str, name: str, *questions: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
    return {"faq_number": faq_number, "name": name, "question_count": len(questions), "questions": list(questions), **kwargs}


def make_listing(*faqs: dict[str, Any]) -> dict[str, Any]:
    return {
        "total_count": len(faqs),
        "faqs": [{"faq_number": f["faq_number"], "name": f["name"]} for f in faqs],
    }


def fake_api(faqs: list[dict[str, Any]], failures: dict[str, Exception] | None = None) -> Callable[..., Any]:
    """An async stand-in for FAQsimpleProxy.get_json serving the given FAQs"""
    failures = failures or {}
    by_number: dict[str, dict[str, Any]] = {f["faq_number"]: f for f in faqs}

    async def get_json(endpoint: str, params: dict[str, Any] | None = None) -> Any:
        if endpoint in ("listfaqs", "listfaqsandquestions"):
            return make_listing(*faqs)
        if endpoint == "getfaqplusqa":
            faq_number: str = (params or {})["faq_number"]
            if faq_number in failures:
                raise failures[faq_number]
            return by_number[faq_number]
        raise AssertionError(f"unexpected endpoint {endpoint}")

    return get_json


def install_fake_api(client: FAQsimpleClient, faqs: list[dict[str, Any]], failures: dict[str, Exception] | None = None) -> AsyncMock:
    mock = AsyncMock(side_effect=fake_api(faqs, failures))
    client.proxy.get_json = mock
    return mock


@pytest.fixture
def test_config() -> Config:
    """Provide test configuration"""
    return Config(
        data={
            "faqsimple": {
                "api_key": API_KEY,
                "api_base": BASE_URL,
                "cache_timeout": "600000",
                "rate_limit_delay": "2000",
                "timeout": 10,
            },
            "logging": {"level": "DEBUG"},
        }
    )


@pytest.fixture
def test_provider(test_config: Config) -> MockConfigProvider:
    """Provide MockConfigProvider with test configuration"""
    return MockConfigProvider(test_config)
