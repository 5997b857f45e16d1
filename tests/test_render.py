from datetime import datetime, timezone

from faqsimple_mcp.mcp.render import render_faq_content, render_faq_list, render_faq_resource, render_search_results
from faqsimple_mcp.models import FAQContent, FAQListResponse, RateLimitStatus, SearchResult
from tests.conftest import make_faq, make_listing, make_question


def sample_faq(**kwargs) -> FAQContent:
    return FAQContent.model_validate(
        make_faq(
            "FAQ001",
            "Account Help",
            make_question("How do I reset my password?", "Click forgot password.", important=True, question_keywords="password, reset"),
            make_question("How do I delete my account?", "Contact support.", "Or use settings."),
            **kwargs,
        )
    )


class TestRenderSearchResults:

    def test_no_results(self):
        assert render_search_results("password", []) == 'No results found for query: "password"'

    def test_single_result(self):
        result = SearchResult(faq_number="FAQ001", faq_name="Account Help", question="Reset?", answer="Click here.", relevance=0.85)

        text = render_search_results("reset", [result])

        assert text.startswith('Found 1 result for "reset":\n\n')
        assert "**1. Account Help**\n" in text
        assert "**Question:** Reset?\n\n" in text
        assert "Click here.\n\n" in text
        assert "*Relevance: 85.0% | FAQ: FAQ001*" in text
        assert text.endswith("---\n\n")

    def test_results_are_numbered(self):
        results = [
            SearchResult(faq_number=f"FAQ00{n}", faq_name=f"FAQ {n}", question="Q", answer="A", relevance=1.0 / n) for n in (1, 2, 3)
        ]

        text = render_search_results("q", results)

        assert text.startswith('Found 3 results for "q":')
        assert text.index("**1. FAQ 1**") < text.index("**2. FAQ 2**") < text.index("**3. FAQ 3**")
        assert "*Relevance: 33.3% | FAQ: FAQ003*" in text


class TestRenderFAQContent:

    def test_full_document(self):
        faq = sample_faq(overview="Everything about accounts", faq_url="https://faq.example.com/1", last_edited_timestamp="2024-01-01")

        text = render_faq_content(faq)

        assert text.startswith("# Account Help\n\nEverything about accounts\n\n")
        assert "**Public URL:** https://faq.example.com/1\n\n" in text
        assert "**Last Updated:** 2024-01-01\n\n" in text
        assert "**Questions:** 2\n\n" in text
        assert "## 1. How do I reset my password?\n\n> ⚠️ **Important Question**\n\n" in text
        assert "## 2. How do I delete my account?\n\nContact support.\n\nOr use settings.\n\n" in text
        assert "*Keywords: password, reset*" in text

    def test_optional_sections_are_omitted(self):
        text = render_faq_content(FAQContent(faq_number="FAQ002", name="Empty"))

        assert text == "# Empty\n\n**Questions:** 0\n\n---\n\n"

    def test_only_important_questions_are_flagged(self):
        text = render_faq_content(sample_faq())

        assert text.count("Important Question") == 1


class TestRenderFAQResource:

    def test_unknown_last_update(self):
        text = render_faq_resource(sample_faq())

        assert "**Last Updated:** Unknown\n\n" in text
        assert "## How do I reset my password?\n\n" in text
        assert "## 1." not in text
        assert "Important Question" not in text

    def test_known_last_update(self):
        text = render_faq_resource(sample_faq(last_edited_timestamp="2024-02-02T10:00:00Z"))

        assert "**Last Updated:** 2024-02-02T10:00:00Z" in text


class TestRenderFAQList:

    def test_listing_with_rate_limit(self):
        listing = FAQListResponse.model_validate(
            {
                "total_count": 2,
                "faqs": [
                    {"faq_number": "FAQ001", "name": "Account Help", "overview": "Accounts", "faq_url": "https://faq.example.com/1"},
                    {"faq_number": "FAQ002", "name": "Billing"},
                ],
            }
        )
        status = RateLimitStatus(remaining=42, reset_time=datetime(2022, 1, 1, tzinfo=timezone.utc))

        text = render_faq_list(listing, status)

        assert text.startswith("Found 2 FAQs:\n\n")
        assert "**Account Help** (FAQ001)\nAccounts\nURL: https://faq.example.com/1\n\n" in text
        assert "**Billing** (FAQ002)\n\n" in text
        assert text.endswith("*API Rate Limit: 42 requests remaining*")

    def test_single_faq(self):
        listing = FAQListResponse.model_validate(make_listing(make_faq("FAQ001", "Only")))

        assert render_faq_list(listing, RateLimitStatus(remaining=1)).startswith("Found 1 FAQ:\n\n")
