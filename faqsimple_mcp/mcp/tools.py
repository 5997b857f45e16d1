"""
MCP Tools - search, fetch and list FAQs

Each tool validates its arguments with a pydantic model, calls the client and
renders the result as markdown text.
"""

from typing import Any, Awaitable, Callable

import mcp.types as types
from loguru import logger
from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND
from pydantic import BaseModel, Field, ValidationError

from faqsimple_mcp.api.client import FAQsimpleClient
from faqsimple_mcp.models import FAQContent, FAQListResponse, SearchResult

from .errors import mcp_error, to_mcp_error
from .render import render_faq_content, render_faq_list, render_search_results

MAX_LIMIT = 50


class SearchFAQsParams(BaseModel):
    """Parameters for the search_faqs tool"""

    query: str = Field(description="Search query for FAQ content", min_length=1)
    limit: int = Field(10, description="Maximum number of results to return (default: 10)", ge=1, le=MAX_LIMIT)


class GetFAQContentParams(BaseModel):
    """Parameters for the get_faq_content tool"""

    faq_number: str = Field(description="FAQ number (e.g., FAQ001)", min_length=1, json_schema_extra={"pattern": r"^FAQ\d+$"})


class ListFAQsParams(BaseModel):
    """The list_faqs tool takes no parameters"""


class FAQTools:
    """Implements the MCP tool operations over a FAQsimple client"""

    def __init__(self, client: FAQsimpleClient) -> None:
        self.client: FAQsimpleClient = client
        self.specs: dict[str, tuple[str, type[BaseModel], Callable[[Any], Awaitable[str]]]] = {
            "search_faqs": (
                "Search for FAQ content by question or keyword across all accessible FAQs",
                SearchFAQsParams,
                self.search_faqs,
            ),
            "get_faq_content": (
                "Get complete FAQ content including all questions and answers by FAQ number",
                GetFAQContentParams,
                self.get_faq_content,
            ),
            "list_faqs": (
                "List all accessible FAQs with basic information",
                ListFAQsParams,
                self.list_faqs,
            ),
        }

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(name=name, description=description, inputSchema=params_model.model_json_schema())
            for name, (description, params_model, _) in self.specs.items()
        ]

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """Dispatch a tool call; every failure surfaces as an McpError"""
        if name not in self.specs:
            raise mcp_error(METHOD_NOT_FOUND, f"Unknown tool: {name}")

        _, params_model, handler = self.specs[name]

        try:
            params: BaseModel = params_model.model_validate(arguments or {})
        except ValidationError as e:
            field: str = ".".join(str(p) for p in e.errors()[0]["loc"]) or name
            raise mcp_error(INVALID_PARAMS, f"Invalid {field} parameter: {e.errors()[0]['msg']}") from e

        try:
            return await handler(params)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error(f"Error in tool {name}: {e}")
            raise to_mcp_error(e, self.client.base_url) from e

    async def search_faqs(self, params: SearchFAQsParams) -> str:
        results: list[SearchResult] = await self.client.search_faqs(params.query)
        return render_search_results(params.query, results[: min(params.limit, MAX_LIMIT)])

    async def get_faq_content(self, params: GetFAQContentParams) -> str:
        faq: FAQContent = await self.client.get_faq_content(params.faq_number)
        return render_faq_content(faq)

    async def list_faqs(self, params: ListFAQsParams) -> str:  # pylint: disable=unused-argument
        listing: FAQListResponse = await self.client.list_faqs()
        return render_faq_list(listing, self.client.get_rate_limit_status())
