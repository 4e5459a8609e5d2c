"""Tests for the template fallback content."""
from content_library import (
    APRIORI_SLIDES,
    ASPECT_LABELS,
    AprioriLibrary,
    ContentLibrary,
    find_library,
    generate_content_slides,
    generate_fallback_presentation,
)


class TestFindLibrary:
    def test_apriori_topic(self):
        assert isinstance(find_library("Understanding the APRIORI principle"), AprioriLibrary)

    def test_other_topic_gets_generic_library(self):
        library = find_library("urban beekeeping")
        assert type(library) is ContentLibrary


class TestFallbackPresentation:
    def test_title_slide_first(self):
        slides = generate_fallback_presentation("urban beekeeping", 3)
        title = slides[0]
        assert title.title == "urban beekeeping"
        assert title.content is None
        assert title.slideType == "title"
        assert title.editable is False

    def test_generic_slides_use_aspect_rotation(self):
        slides = generate_fallback_presentation("urban beekeeping", 3)
        assert len(slides) == 3
        assert [s.title for s in slides[1:]] == [
            f"urban beekeeping: {ASPECT_LABELS[0]}",
            f"urban beekeeping: {ASPECT_LABELS[1]}",
        ]
        for slide in slides[1:]:
            assert slide.slideType == "content"
            assert slide.editable is True
            assert len(slide.content) == 4
            assert all("urban beekeeping" in bullet for bullet in slide.content)

    def test_more_info_mode_gives_five_bullets(self):
        slides = generate_fallback_presentation("urban beekeeping", 4, more_info_mode=True)
        assert all(len(s.content) == 5 for s in slides[1:])

    def test_descriptive_titles_for_long_decks(self):
        slides = generate_fallback_presentation("urban beekeeping", 12)
        assert slides[1].title == f"{ASPECT_LABELS[0]} of urban beekeeping"
        # the label pool cycles after ten slides
        assert slides[11].title == f"{ASPECT_LABELS[0]} of urban beekeeping"

    def test_apriori_slides_from_library(self):
        slides = generate_fallback_presentation("Apriori algorithm", 5)
        assert len(slides) == 5
        assert slides[0].title == "Apriori algorithm"
        for slide, entry in zip(slides[1:], APRIORI_SLIDES):
            assert slide.title == entry["short_title"]
            assert slide.content == entry["bullets"][:4]

    def test_apriori_beyond_pool_continues_with_generic_aspects(self):
        slides = generate_fallback_presentation("Apriori algorithm", 8)
        assert len(slides) == 8
        assert slides[5].title == APRIORI_SLIDES[4]["short_title"]
        assert slides[6].title == f"Apriori algorithm: {ASPECT_LABELS[5]}"

    def test_deterministic(self):
        first = generate_fallback_presentation("urban beekeeping", 7, True)
        second = generate_fallback_presentation("urban beekeeping", 7, True)
        assert [s.model_dump() for s in first] == [s.model_dump() for s in second]


class TestContentSlides:
    def test_exact_count(self):
        assert len(generate_content_slides("solar power", 6)) == 6

    def test_zero_count(self):
        assert generate_content_slides("solar power", 0) == []

    def test_offset_continues_rotation(self):
        slides = generate_content_slides("solar power", 2, offset=3, short_titles=True)
        assert [s.title for s in slides] == [
            f"solar power: {ASPECT_LABELS[3]}",
            f"solar power: {ASPECT_LABELS[4]}",
        ]

    def test_no_title_slides(self):
        assert all(s.slideType == "content" for s in generate_content_slides("Apriori algorithm", 7))
