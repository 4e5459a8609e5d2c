import logging
from typing import List, Optional, Tuple

from content_library import generate_content_slides, generate_fallback_presentation, use_short_titles
from errors import InvalidInput, ParseFailure
from gemini_client import GeminiClient
from models import (
    MAX_SLIDES,
    MIN_SLIDES,
    GenerationResult,
    Slide,
    TopicInfo,
    build_topic_summary,
    make_title_slide,
)
from prompts import build_prompt
from response_parser import parse_response
from topic_classifier import classify_topic

GEMINI_AI_SUCCESS = "GEMINI_AI_SUCCESS"
FALLBACK_AFTER_GEMINI = "HIGH_QUALITY_FALLBACK_AFTER_GEMINI"
FALLBACK_PREFIX = "HIGH_QUALITY_FALLBACK_"


def validate_request(topic: Optional[str], slide_count) -> Tuple[str, int]:
    """Returns the cleaned topic and slide count, or raises InvalidInput."""
    clean_topic = (topic or "").strip()
    if not clean_topic or slide_count is None:
        raise InvalidInput("Topic and slide count required")
    try:
        requested = int(slide_count)
    except (TypeError, ValueError):
        raise InvalidInput("Slide count must be a number") from None
    if requested < MIN_SLIDES or requested > MAX_SLIDES:
        raise InvalidInput(f"Slide count must be between {MIN_SLIDES} and {MAX_SLIDES}")
    return clean_topic, requested


class PresentationOrchestrator:
    """Produces an exactly-sized slide list, preferring Gemini output and falling back to templates."""

    def __init__(self, gemini_client: Optional[GeminiClient] = None):
        self.gemini_client = gemini_client

    @property
    def api_status(self) -> str:
        if self.gemini_client is None:
            return "MISSING"
        return self.gemini_client.status.value

    def _generate_with_gemini(
        self, topic: str, content_slide_count: int, topic_info: TopicInfo, more_info_mode: bool
    ) -> List[Slide]:
        short_titles = use_short_titles(content_slide_count)
        prompt = build_prompt(topic, content_slide_count, topic_info.category, more_info_mode, short_titles)
        generated_text = self.gemini_client.generate(prompt)
        slides = parse_response(generated_text, topic, content_slide_count, short_titles)
        if not slides:
            raise ParseFailure("Failed to parse Gemini response")
        for i, slide in enumerate(slides):
            logging.info(f"  Parsed slide {i + 2}: '{slide.title}'")
        return slides

    def _normalize_length(self, slides: List[Slide], slide_count: int, topic: str, more_info_mode: bool) -> List[Slide]:
        if len(slides) > slide_count:
            return slides[:slide_count]
        if len(slides) < slide_count:
            shortfall = slide_count - len(slides)
            logging.info(f"Topping up {shortfall} slides from fallback content")
            slides = slides + generate_content_slides(
                topic,
                shortfall,
                more_info_mode,
                offset=len(slides) - 1,
                short_titles=use_short_titles(slide_count - 1),
            )
        return slides[:slide_count]

    def generate(self, topic: str, slide_count: int, more_info_mode: bool = False) -> GenerationResult:
        topic, slide_count = validate_request(topic, slide_count)
        logging.info(f"Presentation generation: '{topic}' ({slide_count} slides)")

        topic_info = classify_topic(topic)
        content_slide_count = slide_count - 1

        if self.gemini_client is not None and self.gemini_client.is_ready:
            logging.info("Attempting Gemini generation...")
            try:
                generated = self._generate_with_gemini(topic, content_slide_count, topic_info, more_info_mode)
            except Exception as e:
                logging.warning(f"Gemini generation unavailable: {e}")
                generated = []

            if len(generated) >= min(3, content_slide_count):
                slides = [make_title_slide(topic)] + generated
                generation_method = GEMINI_AI_SUCCESS
                logging.info(f"Generated {len(generated)} slides with Gemini AI")
            else:
                logging.warning("Gemini failed, using high-quality fallback")
                slides = generate_fallback_presentation(topic, slide_count, more_info_mode)
                generation_method = FALLBACK_AFTER_GEMINI
        else:
            logging.info(f"Gemini unavailable ({self.api_status}), using high-quality fallback")
            slides = generate_fallback_presentation(topic, slide_count, more_info_mode)
            generation_method = f"{FALLBACK_PREFIX}{self.api_status}"

        slides = self._normalize_length(slides, slide_count, topic, more_info_mode)

        logging.info(f"Completed {len(slides)} slides via {generation_method}")
        return GenerationResult(
            slides=slides,
            topicSummary=build_topic_summary(topic, slide_count),
            generationMethod=generation_method,
            topicInfo=topic_info,
            apiStatus=self.api_status,
        )
