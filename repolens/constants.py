"""Shared constants for rule tables and rendering."""

from __future__ import annotations

DEFAULT_SECTIONS: tuple[str, ...] = (
    "summary",
    "tasks",
    "readme_tips",
    "architecture",
    "learning_path",
    "extensions",
)

SECTION_TITLES: dict[str, str] = {
    "summary": "Project Summary",
    "tasks": "Suggested Tasks",
    "readme_tips": "README Tips",
    "architecture": "Architecture Insight",
    "learning_path": "Learning Path",
    "extensions": "Potential Extensions",
}

# Languages with dedicated statements; any other value is accepted and simply skipped.
KNOWN_LANGUAGES: tuple[str, ...] = ("Python", "JavaScript", "Java", "C", "C++")

OUTPUT_FORMATS: tuple[str, ...] = ("text", "markdown", "json")


__all__ = ["DEFAULT_SECTIONS", "KNOWN_LANGUAGES", "OUTPUT_FORMATS", "SECTION_TITLES"]
