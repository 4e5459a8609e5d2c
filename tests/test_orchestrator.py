"""Tests for choosing between Gemini output and template content."""
import pytest

from content_library import ASPECT_LABELS
from errors import InvalidInput
from gemini_client import GeminiClient
from orchestrator import (
    FALLBACK_AFTER_GEMINI,
    GEMINI_AI_SUCCESS,
    PresentationOrchestrator,
    validate_request,
)

from conftest import FakeGenaiClient, make_response, make_settings


def ready_orchestrator(*responses):
    """Orchestrator whose Gemini client passed verification and then replays ``responses``."""
    client = GeminiClient(make_settings(), FakeGenaiClient("verified ok", *responses))
    assert client.verify()
    return PresentationOrchestrator(client)


class TestValidateRequest:
    def test_valid_request_is_cleaned(self):
        assert validate_request("  urban beekeeping ", "5") == ("urban beekeeping", 5)

    @pytest.mark.parametrize("topic, count", [("", 5), ("   ", 5), (None, 5), ("topic", None)])
    def test_missing_fields(self, topic, count):
        with pytest.raises(InvalidInput, match="Topic and slide count required"):
            validate_request(topic, count)

    def test_non_numeric_count(self):
        with pytest.raises(InvalidInput, match="must be a number"):
            validate_request("topic", "many")

    @pytest.mark.parametrize("count", [2, 21, 0, -4])
    def test_out_of_range(self, count):
        with pytest.raises(InvalidInput, match="between 3 and 20"):
            validate_request("topic", count)


class TestFallbackGeneration:
    def test_no_client_reports_missing(self):
        result = PresentationOrchestrator().generate("urban beekeeping", 3)
        assert result.generationMethod == "HIGH_QUALITY_FALLBACK_MISSING"
        assert result.apiStatus == "MISSING"
        assert len(result.slides) == 3
        assert [s.title for s in result.slides[1:]] == [
            f"urban beekeeping: {ASPECT_LABELS[0]}",
            f"urban beekeeping: {ASPECT_LABELS[1]}",
        ]

    def test_unverified_client_is_not_called(self):
        fake = FakeGenaiClient(make_response(4))
        orchestrator = PresentationOrchestrator(GeminiClient(make_settings(), fake))
        result = orchestrator.generate("urban beekeeping", 5)
        assert result.generationMethod == "HIGH_QUALITY_FALLBACK_UNVERIFIED"
        assert fake.models.calls == []

    def test_missing_key_after_verification(self):
        client = GeminiClient(make_settings(gemini_api_key=""))
        client.verify()
        result = PresentationOrchestrator(client).generate("urban beekeeping", 4)
        assert result.generationMethod == "HIGH_QUALITY_FALLBACK_MISSING"

    def test_apriori_fallback_deck(self):
        result = PresentationOrchestrator().generate("Apriori algorithm", 5)
        assert result.topicInfo.category == "technology"
        assert len(result.slides) == 5
        assert all(len(s.content) == 4 for s in result.slides[1:])

    @pytest.mark.parametrize("count", range(3, 21))
    def test_exact_count_for_every_allowed_size(self, count):
        slides = PresentationOrchestrator().generate("Apriori algorithm", count).slides
        assert len(slides) == count
        assert slides[0].slideType == "title"
        assert all(s.slideType == "content" for s in slides[1:])

    def test_invalid_request_raises(self):
        with pytest.raises(InvalidInput):
            PresentationOrchestrator().generate("topic", 25)

    def test_topic_summary(self):
        result = PresentationOrchestrator().generate("urban beekeeping", 6)
        assert result.topicSummary.summary.startswith("Comprehensive 6-slide presentation about urban beekeeping")
        assert len(result.topicSummary.keyPoints) == 4


class TestGeminiGeneration:
    def test_successful_generation(self):
        orchestrator = ready_orchestrator(make_response(4))
        result = orchestrator.generate("urban beekeeping", 5)
        assert result.generationMethod == GEMINI_AI_SUCCESS
        assert result.apiStatus == "VALID"
        assert result.slides[0].title == "urban beekeeping"
        assert result.slides[0].slideType == "title"
        assert [s.title for s in result.slides[1:]] == [f"Distinct Slide Heading Number {i}" for i in range(1, 5)]

    def test_prompt_sent_to_model(self):
        orchestrator = ready_orchestrator(make_response(4))
        orchestrator.generate("urban beekeeping", 5)
        calls = orchestrator.gemini_client._client.models.calls
        assert 'EXACTLY 4 completely different slides about "urban beekeeping"' in calls[-1]["contents"]

    def test_partial_response_is_topped_up(self):
        orchestrator = ready_orchestrator(make_response(3, bullets_per_slide=5))
        result = orchestrator.generate("urban beekeeping", 6)
        assert result.generationMethod == GEMINI_AI_SUCCESS
        assert len(result.slides) == 6
        assert result.slides[3].title == "Distinct Slide Heading Number 3"
        assert result.slides[4].title == f"urban beekeeping: {ASPECT_LABELS[3]}"
        assert result.slides[5].title == f"urban beekeeping: {ASPECT_LABELS[4]}"

    def test_extra_slides_truncated(self):
        orchestrator = ready_orchestrator(make_response(8))
        assert len(orchestrator.generate("urban beekeeping", 4).slides) == 4

    def test_too_few_parsed_slides_falls_back(self):
        orchestrator = ready_orchestrator(make_response(1, bullets_per_slide=5))
        result = orchestrator.generate("urban beekeeping", 6)
        assert result.generationMethod == FALLBACK_AFTER_GEMINI
        assert len(result.slides) == 6
        assert result.slides[1].title == f"urban beekeeping: {ASPECT_LABELS[0]}"

    def test_unparseable_response_falls_back(self):
        orchestrator = ready_orchestrator("No structure here. " * 40)
        result = orchestrator.generate("urban beekeeping", 4)
        assert result.generationMethod == FALLBACK_AFTER_GEMINI
        assert len(result.slides) == 4

    def test_short_response_falls_back(self):
        result = ready_orchestrator("too short").generate("urban beekeeping", 4)
        assert result.generationMethod == FALLBACK_AFTER_GEMINI

    def test_upstream_error_falls_back(self):
        result = ready_orchestrator(RuntimeError("connection reset")).generate("urban beekeeping", 4)
        assert result.generationMethod == FALLBACK_AFTER_GEMINI
        assert len(result.slides) == 4

    def test_two_parsed_slides_enough_for_three_slide_deck(self):
        orchestrator = ready_orchestrator(make_response(2))
        result = orchestrator.generate("urban beekeeping", 3)
        assert result.generationMethod == GEMINI_AI_SUCCESS
        assert len(result.slides) == 3
