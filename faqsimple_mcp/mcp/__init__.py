"""
FAQsimple MCP layer

Maps the client onto Model Context Protocol tools and resources:
- search_faqs / get_faq_content / list_faqs tools
- faq://<faq_number> markdown resources
"""

from .resources import FAQResources
from .server import FAQsimpleMCPServer
from .tools import FAQTools, GetFAQContentParams, ListFAQsParams, SearchFAQsParams

__all__ = [
    "FAQsimpleMCPServer",
    "FAQTools",
    "FAQResources",
    "SearchFAQsParams",
    "GetFAQContentParams",
    "ListFAQsParams",
]
