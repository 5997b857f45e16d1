"""
Search across every FAQ document

The query is fanned out over all FAQs one at a time. Each question/answer pair
that contains the query is scored with a simple word-overlap measure, and the
best results are returned.
"""

from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from faqsimple_mcp.models import FAQContent, FAQListItem, FAQListResponse, FAQQuestion, SearchResult

MAX_RESULTS = 10
QUESTION_WEIGHT = 0.7
ANSWER_WEIGHT = 0.3


class FAQSource(Protocol):
    async def list_faqs_and_questions(self) -> FAQListResponse: ...

    async def get_faq_content(self, faq_number: str) -> FAQContent: ...


@dataclass(frozen=True)
class FetchOutcome:
    """Result of fetching one FAQ during a search; exactly one of content/error is set"""

    faq: FAQListItem
    content: FAQContent | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.content is not None


def calculate_relevance(query: str, question_text: str, answer_text: str) -> float:
    """
    Fraction of query words found in the question (weighted 0.7) plus the
    fraction found in the answer (weighted 0.3). A query word is found when it
    is a substring of any whitespace-delimited word of the text.
    """
    query_words: list[str] = query.lower().split()
    if not query_words:
        return 0.0

    question_words: list[str] = question_text.lower().split()
    answer_words: list[str] = answer_text.lower().split()

    question_matches: int = sum(1 for qw in query_words if any(qw in word for word in question_words))
    answer_matches: int = sum(1 for qw in query_words if any(qw in word for word in answer_words))

    return (question_matches / len(query_words)) * QUESTION_WEIGHT + (answer_matches / len(query_words)) * ANSWER_WEIGHT


def match_question(query: str, faq: FAQListItem, question: FAQQuestion) -> list[SearchResult]:
    """
    If the query occurs in the question, every answer is a hit.
    Otherwise only the answers that contain the query are.
    """
    query_lower: str = query.lower()
    question_hit: bool = query_lower in question.question_text.lower()

    return [
        SearchResult(
            faq_number=faq.faq_number,
            faq_name=faq.name,
            question=question.question_text,
            answer=answer.answer_text,
            relevance=calculate_relevance(query, question.question_text, answer.answer_text),
        )
        for answer in question.answers
        if question_hit or query_lower in answer.answer_text.lower()
    ]


async def fetch_all(source: FAQSource, faqs: list[FAQListItem]) -> list[FetchOutcome]:
    """Fetch each FAQ in turn; a failing FAQ yields a failed outcome instead of aborting the batch"""
    outcomes: list[FetchOutcome] = []
    for faq in faqs:
        try:
            outcomes.append(FetchOutcome(faq=faq, content=await source.get_faq_content(faq.faq_number)))
        except Exception as e:  # pylint: disable=broad-exception-caught
            outcomes.append(FetchOutcome(faq=faq, error=e))
    return outcomes


async def search_faqs(source: FAQSource, query: str, max_results: int = MAX_RESULTS) -> list[SearchResult]:
    """Return at most `max_results` hits for `query`, best first"""
    if not query.strip():
        return []

    listing: FAQListResponse = await source.list_faqs_and_questions()

    results: list[SearchResult] = []
    for outcome in await fetch_all(source, listing.faqs):
        if not outcome.ok:
            logger.error(f"Error searching FAQ {outcome.faq.faq_number}: {outcome.error}")
            continue
        for question in outcome.content.questions:
            results.extend(match_question(query, outcome.faq, question))

    # sorted() is stable: equal scores keep scan order
    results = sorted(results, key=lambda r: r.relevance, reverse=True)

    logger.debug(f"search '{query}': {len(results)} hits over {len(listing.faqs)} FAQs")

    return results[:max_results]
