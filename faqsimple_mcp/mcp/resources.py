"""
MCP Resources - one markdown document per FAQ, addressed as faq://<faq_number>
"""

import mcp.types as types
from loguru import logger
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS

from faqsimple_mcp.api.client import FAQsimpleClient
from faqsimple_mcp.models import FAQContent, FAQListResponse

from .errors import mcp_error, user_guidance
from .render import render_faq_resource

FAQ_URI_SCHEME = "faq://"
MIME_TYPE = "text/markdown"


def faq_uri(faq_number: str) -> str:
    return f"{FAQ_URI_SCHEME}{faq_number}"


def parse_faq_uri(uri: str) -> str:
    if not uri.startswith(FAQ_URI_SCHEME):
        raise mcp_error(INVALID_PARAMS, f"Unsupported URI scheme: {uri}")
    return uri[len(FAQ_URI_SCHEME) :].strip("/")


class FAQResources:
    """Handles MCP resource listing and reading"""

    def __init__(self, client: FAQsimpleClient) -> None:
        self.client: FAQsimpleClient = client

    async def list_resources(self) -> list[types.Resource]:
        """List every FAQ as a resource; an empty list if the API cannot be reached"""
        try:
            listing: FAQListResponse = await self.client.list_faqs()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error(f"Error listing resources: {e}")
            guidance: str | None = user_guidance(e, self.client.base_url)
            if guidance:
                logger.error(f"❌ {guidance}")
            return []

        return [
            types.Resource(
                uri=faq_uri(faq.faq_number),
                name=faq.name,
                description=faq.overview or f"FAQ content for {faq.name}",
                mimeType=MIME_TYPE,
            )
            for faq in listing.faqs
        ]

    async def read_resource(self, uri: str) -> str:
        faq_number: str = parse_faq_uri(uri)
        try:
            faq: FAQContent = await self.client.get_faq_content(faq_number)
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise mcp_error(INTERNAL_ERROR, f"Failed to read resource: {e}") from e
        return render_faq_resource(faq)
