"""
Markdown rendering of FAQsimple payloads for MCP clients
"""

from faqsimple_mcp.models import FAQContent, FAQListResponse, RateLimitStatus, SearchResult


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def render_search_results(query: str, results: list[SearchResult]) -> str:
    if not results:
        return f'No results found for query: "{query}"'

    content: str = f'Found {_plural(len(results), "result")} for "{query}":\n\n'

    for index, result in enumerate(results, start=1):
        content += f"**{index}. {result.faq_name}**\n"
        content += f"**Question:** {result.question}\n\n"
        content += f"{result.answer}\n\n"
        content += f"*Relevance: {result.relevance * 100:.1f}% | FAQ: {result.faq_number}*\n\n"
        content += "---\n\n"

    return content


def _render_header(faq: FAQContent) -> str:
    content: str = f"# {faq.name}\n\n"
    if faq.overview:
        content += f"{faq.overview}\n\n"
    if faq.faq_url:
        content += f"**Public URL:** {faq.faq_url}\n\n"
    return content


def render_faq_content(faq: FAQContent) -> str:
    """Full FAQ as returned by the get_faq_content tool: numbered questions"""
    content: str = _render_header(faq)

    if faq.last_edited_timestamp:
        content += f"**Last Updated:** {faq.last_edited_timestamp}\n\n"

    content += f"**Questions:** {faq.question_count}\n\n"
    content += "---\n\n"

    for index, question in enumerate(faq.questions, start=1):
        content += f"## {index}. {question.question_text}\n\n"

        if question.important:
            content += "> ⚠️ **Important Question**\n\n"

        for answer in question.answers:
            content += f"{answer.answer_text}\n\n"

        if question.question_keywords:
            content += f"*Keywords: {question.question_keywords}*\n\n"

        content += "---\n\n"

    return content


def render_faq_resource(faq: FAQContent) -> str:
    """FAQ document as served for a faq:// resource"""
    content: str = _render_header(faq)
    content += f"**Last Updated:** {faq.last_edited_timestamp or 'Unknown'}\n\n"
    content += "---\n\n"

    for question in faq.questions:
        content += f"## {question.question_text}\n\n"

        for answer in question.answers:
            content += f"{answer.answer_text}\n\n"

        if question.question_keywords:
            content += f"*Keywords: {question.question_keywords}*\n\n"

        content += "---\n\n"

    return content


def render_faq_list(listing: FAQListResponse, rate_limit: RateLimitStatus) -> str:
    content: str = f"Found {_plural(listing.total_count, 'FAQ')}:\n\n"

    for faq in listing.faqs:
        content += f"**{faq.name}** ({faq.faq_number})\n"
        if faq.overview:
            content += f"{faq.overview}\n"
        if faq.faq_url:
            content += f"URL: {faq.faq_url}\n"
        content += "\n"

    content += f"\n*API Rate Limit: {rate_limit.remaining} requests remaining*"
    return content
