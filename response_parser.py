"""Turns free-text model output into content slides.

The text is split into slide blocks by the first strategy in
``PARSE_STRATEGIES`` that finds anything; each block is then reduced to a
title and a list of bullets. Blocks with weak titles or too few bullets are
repaired from the topic's content library rather than dropped.
"""

import logging
import re
from typing import Callable, List, Optional

from content_library import find_library
from models import Slide, make_content_slide

MIN_TITLE_LENGTH = 8
MIN_BULLET_LENGTH = 40
MIN_BULLETS = 3
SUPPLEMENTED_BULLETS = 4

SLIDE_BLOCK_PATTERN = re.compile(
    r"SLIDE\s+\d+:\s*CONTENT[*#]*[ \t]*\n.*?(?=\n\W*SLIDE\s+\d+:|\Z)",
    re.IGNORECASE | re.DOTALL,
)
TITLE_BULLETS_PATTERN = re.compile(
    r"Title:[ \t]*([^\n]*)\n((?:[ \t]*(?:•|[\-*][ \t])[^\n]*(?:\n|\Z)){3,})",
    re.IGNORECASE,
)
SLIDE_HEADER_PATTERN = re.compile(r"^\W*SLIDE\s+\d+:", re.IGNORECASE)
TITLE_LINE_PATTERN = re.compile(r"^\W*Title:[ \t*]*([^\n]*)", re.IGNORECASE)
# "-" and "*" need a following space so "**Bold:** text" is not a bullet
BULLET_LINE_PATTERN = re.compile(r"^(?:•\s*|[\-*]\s+)(.*)$")
TITLE_WRAPPER_PATTERN = re.compile(r'^[\["]|[\]"]$')
BULLET_WRAPPER_PATTERN = re.compile(r"^\[|\]$")

ParseStrategy = Callable[[str], Optional[List[str]]]


def split_on_slide_markers(text: str) -> Optional[List[str]]:
    """Splits on ``SLIDE n: CONTENT`` marker lines."""
    blocks = [match.group(0) for match in SLIDE_BLOCK_PATTERN.finditer(text)]
    return blocks or None


def split_on_title_bullet_groups(text: str) -> Optional[List[str]]:
    """Finds ``Title:`` lines followed by at least three bullet lines."""
    blocks = [
        f"Title: {match.group(1).strip()}\n{match.group(2)}"
        for match in TITLE_BULLETS_PATTERN.finditer(text)
    ]
    return blocks or None


PARSE_STRATEGIES: List[ParseStrategy] = [split_on_slide_markers, split_on_title_bullet_groups]


def split_into_blocks(text: str, strategies: Optional[List[ParseStrategy]] = None) -> List[str]:
    for strategy in strategies or PARSE_STRATEGIES:
        blocks = strategy(text)
        if blocks:
            logging.debug(f"{strategy.__name__} found {len(blocks)} slide blocks")
            return blocks
    return []


def extract_title(block: str) -> str:
    """Returns the first non-bullet ``Title:`` line's text, or an empty string."""
    for line in block.splitlines():
        stripped = line.strip()
        if BULLET_LINE_PATTERN.match(stripped):
            continue
        match = TITLE_LINE_PATTERN.match(stripped)
        if match:
            title = match.group(1).strip().strip("*").strip()
            return TITLE_WRAPPER_PATTERN.sub("", title).strip()
    return ""


def _clean_bullet(text: str) -> str:
    return BULLET_WRAPPER_PATTERN.sub("", text.strip()).strip()


def extract_bullets(block: str) -> List[str]:
    """Collects bullet lines (plus their wrapped continuation lines), dropping stubs."""
    bullets: List[str] = []
    current: Optional[str] = None

    for line in block.splitlines():
        stripped = line.strip()
        bullet_match = BULLET_LINE_PATTERN.match(stripped)
        is_header = not bullet_match and (
            SLIDE_HEADER_PATTERN.match(stripped) or TITLE_LINE_PATTERN.match(stripped)
        )

        if not stripped or is_header or bullet_match:
            if current is not None:
                bullets.append(current)
            current = bullet_match.group(1) if bullet_match else None
        elif current is not None:
            current = f"{current} {stripped}"

    if current is not None:
        bullets.append(current)

    cleaned = [_clean_bullet(bullet) for bullet in bullets]
    return [bullet for bullet in cleaned if len(bullet) >= MIN_BULLET_LENGTH]


def parse_response(response_text: str, topic: str, expected_count: int, short_titles: bool = True) -> List[Slide]:
    """Parses generated text into at most ``expected_count`` content slides.

    Returns an empty list when no slide blocks can be found at all.
    """
    if not response_text:
        return []

    logging.info(f"Parsing {len(response_text)} char response for {expected_count} slides")
    blocks = split_into_blocks(response_text)
    if not blocks:
        logging.warning("No parseable slide patterns found in response")
        return []

    library = find_library(topic)
    slides: List[Slide] = []

    for index, block in enumerate(blocks[:expected_count]):
        title = extract_title(block)
        if len(title) < MIN_TITLE_LENGTH:
            title = library.fallback_title(topic, index, short_titles)

        bullets = extract_bullets(block)
        if len(bullets) < MIN_BULLETS:
            logging.info(f"Only {len(bullets)} bullets found in block {index + 1}, adding supplements")
            supplements = library.supplemental_bullets(topic)
            while len(bullets) < SUPPLEMENTED_BULLETS:
                bullets.append(supplements[len(bullets) % len(supplements)])

        if title and len(bullets) >= MIN_BULLETS:
            slides.append(make_content_slide(title, bullets))
        else:
            logging.warning(f"Dropping slide block {index + 1}: no usable title or bullets")

    return slides[:expected_count]
