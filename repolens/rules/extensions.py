"""Potential extensions table, one idea list per project type."""

from __future__ import annotations

from typing import List

from .base import RuleContext, RuleTable, first_of, type_is, when
from ..models import ProjectType, SignalSet

EXTENSIONS = RuleTable(
    name="extensions",
    entries=(
        first_of(
            when(
                type_is(ProjectType.TODO),
                "Add priority levels (high, medium, low) with color coding.",
                "Implement due dates and reminders for tasks.",
                "Add categories or tags for organizing tasks.",
                "Create a search/filter feature to find tasks quickly.",
                "Add dark mode toggle for better user experience.",
                "Implement drag-and-drop reordering of tasks.",
            ),
            when(
                type_is(ProjectType.API),
                "Add pagination for list endpoints to handle large datasets.",
                "Implement rate limiting to prevent API abuse.",
                "Add API versioning (v1, v2) for backward compatibility.",
                "Create comprehensive API documentation with Swagger/OpenAPI.",
                "Add caching layer (Redis) for frequently accessed data.",
                "Implement webhooks for real-time event notifications.",
            ),
            when(
                type_is(ProjectType.GAME),
                "Add sound effects and background music.",
                "Create multiple difficulty levels or game modes.",
                "Implement a high score leaderboard with persistence.",
                "Add power-ups or special abilities for the player.",
                "Create additional levels or procedurally generated content.",
                "Add multiplayer support (local or online).",
            ),
            when(
                type_is(ProjectType.DASHBOARD),
                "Add real-time data updates using WebSockets.",
                "Implement customizable dashboard layouts (drag widgets).",
                "Add data export features (CSV, PDF, Excel).",
                "Create user preferences for chart types and colors.",
                "Add date range filters and comparison views.",
                "Implement alerts/notifications for threshold breaches.",
            ),
            when(
                type_is(ProjectType.NOTES),
                "Add rich text formatting (bold, italic, lists).",
                "Implement note categories and nested folders.",
                "Add search functionality across all notes.",
                "Create note sharing with public links.",
                "Add markdown preview mode.",
                "Implement note versioning and history.",
            ),
            when(
                type_is(ProjectType.CLI),
                "Add interactive mode with prompts for user input.",
                "Implement configuration file support (.config.json).",
                "Add progress bars for long-running operations.",
                "Create shell completion scripts (bash, zsh).",
                "Add verbose/debug mode with detailed logging.",
                "Implement plugin system for extensibility.",
            ),
            otherwise=(
                "Add comprehensive error handling and user-friendly messages.",
                "Implement logging for debugging and monitoring.",
                "Add configuration options via environment variables or config files.",
                "Create automated tests for critical functionality.",
                "Add CI/CD pipeline for automated testing and deployment.",
                "Improve documentation with examples and tutorials.",
            ),
        ),
    ),
)


def build_extensions(
    language: str,
    project_type: ProjectType,
    signals: SignalSet,
) -> List[str]:
    context = RuleContext(language=language, project_type=project_type, signals=signals)
    return EXTENSIONS.build(context)


__all__ = ["EXTENSIONS", "build_extensions"]
