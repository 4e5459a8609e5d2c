from dataclasses import dataclass
from typing import Dict, List

from pptx.dml.color import RGBColor

DEFAULT_THEME_ID = "professional"


@dataclass(frozen=True)
class ThemeDefinition:
    id: str
    name: str
    bg: str
    title: str
    text: str
    accent: str
    title_font: str
    body_font: str

    def rgb(self, role: str) -> RGBColor:
        """Returns the python-pptx color for 'bg', 'title', 'text' or 'accent'."""
        return RGBColor.from_string(getattr(self, role).upper())

    def colors(self) -> Dict[str, object]:
        return {
            "bg": self.bg,
            "title": self.title,
            "text": self.text,
            "accent": self.accent,
            "fonts": {"title": self.title_font, "body": self.body_font},
            "name": self.name,
        }


THEMES: Dict[str, ThemeDefinition] = {
    theme.id: theme
    for theme in (
        ThemeDefinition("professional", "Professional Blue", "FFFFFF", "2C3E50", "34495E", "3498DB", "Calibri", "Calibri"),
        ThemeDefinition("creative", "Creative Orange", "FFF8F0", "E74C3C", "2C3E50", "F39C12", "Arial", "Arial"),
        ThemeDefinition("dark", "Dark Modern", "2C3E50", "ECF0F1", "BDC3C7", "3498DB", "Calibri", "Calibri"),
        ThemeDefinition("academic", "Academic Purple", "FFFFFF", "2980B9", "2C3E50", "8E44AD", "Times New Roman", "Times New Roman"),
        ThemeDefinition("elegant", "Elegant Purple", "F8F9FA", "6F42C1", "495057", "FD7E14", "Georgia", "Georgia"),
    )
}


def get_theme(theme_id: str) -> ThemeDefinition:
    return THEMES.get(theme_id or "", THEMES[DEFAULT_THEME_ID])


def resolve_theme_id(theme_id: str) -> str:
    return theme_id if theme_id in THEMES else DEFAULT_THEME_ID


def list_themes() -> List[Dict[str, object]]:
    return [{"id": theme.id, "name": theme.name, "colors": theme.colors()} for theme in THEMES.values()]
