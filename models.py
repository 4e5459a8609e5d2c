# presentation_service/models.py
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

MIN_SLIDES = 3
MAX_SLIDES = 20
MAX_BULLETS_PER_SLIDE = 5
DEFAULT_SUBTITLE = "AI-Generated Presentation"


class Slide(BaseModel):
    title: str
    content: Optional[List[str]] = None
    slideType: Literal["title", "content"] = "content"
    editable: bool = True
    subtitle: Optional[str] = None # only set on the title slide by an edit


def make_title_slide(topic: str) -> Slide:
    return Slide(title=topic, content=None, slideType="title", editable=False)


def make_content_slide(title: str, bullets: List[str]) -> Slide:
    return Slide(
        title=title,
        content=list(bullets[:MAX_BULLETS_PER_SLIDE]),
        slideType="content",
        editable=True,
    )


class TopicInfo(BaseModel):
    category: Literal["health", "technology", "business", "general"]
    isHealthTopic: bool = False
    isTechTopic: bool = False
    isBusinessTopic: bool = False


class TopicSummary(BaseModel):
    summary: str = ""
    keyPoints: List[str] = Field(default_factory=list)


def build_topic_summary(topic: str, slide_count: int) -> TopicSummary:
    return TopicSummary(
        summary=(
            f"Comprehensive {slide_count}-slide presentation about {topic} with detailed analysis, "
            f"real-world applications, and expert insights for professional development and "
            f"strategic implementation."
        ),
        keyPoints=[
            f"In-depth coverage of {topic} concepts and principles",
            "Technical implementation details and best practices",
            "Real-world applications and industry case studies",
            "Performance optimization and strategic recommendations",
        ],
    )


class GenerationResult(BaseModel):
    slides: List[Slide]
    topicSummary: TopicSummary
    generationMethod: str
    topicInfo: TopicInfo
    apiStatus: str
