"""Client-side editing of a generated deck.

An ``EditSession`` owns the slide list between generation and re-render. It is
either ``Viewing`` or ``Editing`` one slide with draft text; drafts only reach
the slide list on ``save_edit``. Nothing here talks to the network: the caller
sends ``to_render_request()`` to the re-render endpoint when the user asks.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from models import DEFAULT_SUBTITLE, Slide, TopicSummary
from themes import DEFAULT_THEME_ID

BULLET_DELIMITER = "\n\n"
UNTITLED_SLIDE = "Untitled Slide"


@dataclass(frozen=True)
class Viewing:
    pass


@dataclass(frozen=True)
class Editing:
    index: int
    draft_title: str
    draft_content: str


EditState = Union[Viewing, Editing]


class EditSession:
    def __init__(self, slides: List[Slide], topic: str, topic_summary: Optional[TopicSummary] = None):
        self.slides = [slide.model_copy(deep=True) for slide in slides]
        self.topic = topic
        self.topic_summary = topic_summary
        self.current_index = 0
        self.state: EditState = Viewing()

    @property
    def current_slide(self) -> Optional[Slide]:
        if not self.slides:
            return None
        return self.slides[self.current_index]

    @property
    def is_editing(self) -> bool:
        return isinstance(self.state, Editing)

    # --- navigation ---

    def go_to(self, index: int) -> int:
        if not self.slides:
            return self.current_index
        target = max(0, min(index, len(self.slides) - 1))
        if target != self.current_index:
            self.current_index = target
            self.cancel_edit()
        return self.current_index

    def next_slide(self) -> int:
        return self.go_to(self.current_index + 1)

    def previous_slide(self) -> int:
        return self.go_to(self.current_index - 1)

    # --- editing ---

    def begin_edit(self) -> Editing:
        slide = self.current_slide
        if slide is None:
            raise IndexError("No slides to edit")

        if slide.slideType == "title":
            draft_title = slide.title or self.topic
            draft_content = slide.subtitle or DEFAULT_SUBTITLE
        else:
            draft_title = slide.title or ""
            draft_content = BULLET_DELIMITER.join(slide.content or [])

        self.state = Editing(self.current_index, draft_title, draft_content)
        return self.state

    def update_draft(self, title: Optional[str] = None, content: Optional[str] = None) -> Editing:
        if not isinstance(self.state, Editing):
            raise RuntimeError("Not editing a slide")
        self.state = Editing(
            self.state.index,
            self.state.draft_title if title is None else title,
            self.state.draft_content if content is None else content,
        )
        return self.state

    def save_edit(self) -> Optional[Slide]:
        """Writes the drafts back into the slide list and returns to viewing."""
        if not isinstance(self.state, Editing):
            return None

        state = self.state
        slide = self.slides[state.index]
        draft_title = state.draft_title.strip()

        if slide.slideType == "title":
            new_title = draft_title or self.topic
            updated = slide.model_copy(update={
                "title": new_title,
                "subtitle": state.draft_content.strip() or DEFAULT_SUBTITLE,
            })
            if draft_title and draft_title != self.topic:
                self.topic = draft_title
        else:
            bullets = [part.strip() for part in state.draft_content.split(BULLET_DELIMITER) if part.strip()]
            updated = slide.model_copy(update={
                "title": draft_title or slide.title or UNTITLED_SLIDE,
                "content": bullets or list(slide.content or []),
            })

        self.slides[state.index] = updated
        self.state = Viewing()
        return updated

    def cancel_edit(self) -> None:
        self.state = Viewing()

    def to_render_request(self, theme: str = DEFAULT_THEME_ID) -> Dict[str, Any]:
        """Body for the re-render endpoint; the slide list is the only source of truth."""
        return {
            "slides": [slide.model_dump() for slide in self.slides],
            "theme": theme,
            "topic": self.topic,
            "topicSummary": self.topic_summary.model_dump() if self.topic_summary else None,
        }
