from content_library import bullets_per_slide, find_library


def build_generic_prompt(
    topic: str, content_slide_count: int, category: str, more_info_mode: bool, short_titles: bool
) -> str:
    points_per_slide = bullets_per_slide(more_info_mode)
    title_style = "creative and engaging" if short_titles else "professional and structured"

    bullet_lines = [
        "• [specific fact with data/statistics - 50+ words]",
        "• [real-world example with companies/case studies - 50+ words]",
        "• [technical detail with processes/methods - 50+ words]",
        "• [actionable insight with recommendations - 50+ words]",
    ]
    if points_per_slide == 5:
        bullet_lines.append("• [advanced insight with future trends - 50+ words]")
    bullet_format = "\n".join(bullet_lines)

    return f"""You are an expert in {category}. Create EXACTLY {content_slide_count} completely different slides about "{topic}".

Each slide must have:
- A unique title ({title_style})
- {points_per_slide} bullet points with SPECIFIC, FACTUAL information
- NO repetitive content between slides
- Real data, statistics, examples, and case studies

Make each slide focus on a completely different aspect of {topic}.

FORMAT:
SLIDE 2: CONTENT
Title: [unique title]
{bullet_format}

Continue for {content_slide_count} slides with completely different content."""


def build_prompt(
    topic: str, content_slide_count: int, category: str, more_info_mode: bool = False, short_titles: bool = True
) -> str:
    """Builds the generation prompt, letting a matching content library supply its own template."""
    library = find_library(topic)
    prompt = library.build_prompt(topic, content_slide_count, category, more_info_mode, short_titles)
    if prompt:
        return prompt
    return build_generic_prompt(topic, content_slide_count, category, more_info_mode, short_titles)
