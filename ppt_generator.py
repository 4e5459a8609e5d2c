import logging
import re
from typing import List, Optional

from pptx import Presentation
from pptx.enum.shapes import MSO_SHAPE
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.util import Inches, Pt

from models import DEFAULT_SUBTITLE, MAX_BULLETS_PER_SLIDE, Slide, TopicSummary
from themes import ThemeDefinition, get_theme


# --- 1. Design Constants ---
# Slide Dimensions (16:9)
SLIDE_WIDTH = Inches(13.333)
SLIDE_HEIGHT = Inches(7.5)
# Margins
MARGIN_LEFT = Inches(0.5)
MARGIN_RIGHT = Inches(0.5)
CONTENT_WIDTH = SLIDE_WIDTH - MARGIN_LEFT - MARGIN_RIGHT
# Font Sizes
TITLE_FONT_SIZE = Pt(40)
SUBTITLE_FONT_SIZE = Pt(22)
SUMMARY_FONT_SIZE = Pt(16)
SLIDE_TITLE_FONT_SIZE = Pt(26)
BODY_FONT_SIZE = Pt(14)
COUNTER_FONT_SIZE = Pt(10)
# Content slide layout: one fixed slot per bullet
BULLET_SLOT_TOP = Inches(1.45)
BULLET_SLOT_HEIGHT = Inches(1.1)
# Bullet text cap applied only when drawing
MAX_BULLET_LENGTH = 350
ELLIPSIS = "..."

BLANK_LAYOUT_INDEX = 6


# --- 2. Helper Functions ---

def optimize_bullet_length(text: str, max_length: int = MAX_BULLET_LENGTH) -> str:
    """
    Shortens a bullet to the whole sentences that fit in max_length, or
    hard-truncates it with an ellipsis when even the first sentence is too long.
    """
    if len(text) <= max_length:
        return text

    optimized = ""
    for sentence in text.split("."):
        candidate = optimized + sentence + "."
        if len(candidate) > max_length:
            break
        optimized = candidate

    return optimized or text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def apply_formatted_text_to_paragraph(p, text, font_name, color, accent_color):
    """
    Parses text with **bold** and [[highlight]] syntax and adds it as runs
    to a paragraph object.
    """
    if not text:
        return
    # Split text by markers, keeping the markers
    parts = re.split(r'(\*\*.*?\*\*|\[\[.*?\]\])', text)

    for part in parts:
        if not part:
            continue
        run = p.add_run()
        run.font.name = font_name
        run.font.color.rgb = color
        if part.startswith('**') and part.endswith('**') and len(part) > 4:
            run.text = part[2:-2]
            run.font.bold = True
        elif part.startswith('[[') and part.endswith(']]'):
            run.text = part[2:-2]
            run.font.bold = True
            run.font.color.rgb = accent_color
        else:
            run.text = part


def add_text_box(slide, text, left, top, width, height, *, size, font_name, color,
                 bold=False, align=PP_ALIGN.LEFT, accent_color=None):
    """Adds a word-wrapped, top-anchored text box holding a single paragraph."""
    shape = slide.shapes.add_textbox(left, top, width, height)
    tf = shape.text_frame
    tf.word_wrap = True
    tf.vertical_anchor = MSO_ANCHOR.TOP
    p = tf.paragraphs[0]
    p.alignment = align
    p.font.size = size
    p.font.bold = bold
    apply_formatted_text_to_paragraph(p, text, font_name, color, accent_color or color)
    for run in p.runs:
        run.font.size = size
        if bold:
            run.font.bold = True
    return shape


def fill_background(slide, theme: ThemeDefinition):
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = theme.rgb("bg")


# --- 3. Slide Drawing Functions ---

def draw_title_slide(slide, data: Slide, theme: ThemeDefinition, content_slide_count: int, summary: str):
    """Draws the title slide: topic, content-slide count and summary."""
    add_text_box(
        slide, data.title, MARGIN_LEFT, Inches(2.0), CONTENT_WIDTH, Inches(1.6),
        size=TITLE_FONT_SIZE, font_name=theme.title_font, color=theme.rgb("title"),
        bold=True, align=PP_ALIGN.CENTER,
    )
    add_text_box(
        slide, f"{content_slide_count} Professional Content Slides",
        MARGIN_LEFT, Inches(3.7), CONTENT_WIDTH, Inches(0.7),
        size=SUBTITLE_FONT_SIZE, font_name=theme.title_font, color=theme.rgb("accent"),
        bold=True, align=PP_ALIGN.CENTER,
    )
    add_text_box(
        slide, data.subtitle or summary, Inches(1.5), Inches(4.7), SLIDE_WIDTH - Inches(3.0), Inches(1.8),
        size=SUMMARY_FONT_SIZE, font_name=theme.body_font, color=theme.rgb("text"),
        align=PP_ALIGN.CENTER,
    )
    logging.debug(f"  - Drawing Title Slide: {data.title}")


def draw_content_slide(slide, data: Slide, theme: ThemeDefinition, index: int, content_slide_count: int):
    """Draws a title bar, up to five bullets in fixed slots and an 'n / total' counter."""
    add_text_box(
        slide, data.title, MARGIN_LEFT, Inches(0.3), CONTENT_WIDTH, Inches(0.8),
        size=SLIDE_TITLE_FONT_SIZE, font_name=theme.title_font, color=theme.rgb("title"),
        bold=True,
    )
    rule = slide.shapes.add_shape(MSO_SHAPE.RECTANGLE, MARGIN_LEFT, Inches(1.15), CONTENT_WIDTH, Inches(0.06))
    rule.fill.solid()
    rule.fill.fore_color.rgb = theme.rgb("accent")
    rule.line.fill.background() # No border

    bullets = data.content or []
    if not bullets:
        logging.debug(f"  - Drawing Content Slide without bullets: {data.title}")
        return

    for slot, bullet in enumerate(bullets[:MAX_BULLETS_PER_SLIDE]):
        add_text_box(
            slide, f"• {optimize_bullet_length(bullet)}",
            MARGIN_LEFT, BULLET_SLOT_TOP + BULLET_SLOT_HEIGHT * slot, CONTENT_WIDTH, BULLET_SLOT_HEIGHT,
            size=BODY_FONT_SIZE, font_name=theme.body_font, color=theme.rgb("text"),
            accent_color=theme.rgb("accent"),
        )

    add_text_box(
        slide, f"{index} / {content_slide_count}",
        SLIDE_WIDTH - Inches(1.5), SLIDE_HEIGHT - Inches(0.5), Inches(1.0), Inches(0.3),
        size=COUNTER_FONT_SIZE, font_name=theme.body_font, color=theme.rgb("accent"),
        align=PP_ALIGN.CENTER,
    )
    logging.debug(f"  - Drawing Content Slide: {data.title}")


# --- 4. Main Execution Logic ---

def create_presentation(slides: List[Slide], theme_id: str, topic: str,
                        topic_summary: Optional[TopicSummary] = None):
    """Creates a new presentation from slide data."""
    theme = get_theme(theme_id)
    summary = topic_summary.summary if topic_summary and topic_summary.summary else DEFAULT_SUBTITLE
    content_slide_count = len(slides) - 1

    prs = Presentation()
    prs.slide_width = SLIDE_WIDTH
    prs.slide_height = SLIDE_HEIGHT

    logging.info(f"Creating {len(slides)}-slide presentation for '{topic}' with theme '{theme.id}'")
    for i, slide_data in enumerate(slides):
        slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT_INDEX])
        fill_background(slide, theme)

        if slide_data.slideType == "title" or i == 0:
            draw_title_slide(slide, slide_data, theme, content_slide_count, summary)
        else:
            draw_content_slide(slide, slide_data, theme, i, content_slide_count)

    return prs
