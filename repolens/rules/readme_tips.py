"""README tips table."""

from __future__ import annotations

from typing import List

from .base import RuleContext, RuleTable, first_of, flag, language_is, type_is, when
from ..models import FlagName, ProjectType, SignalSet

README_TIPS = RuleTable(
    name="readme_tips",
    entries=(
        'Add a "What is this?" section with a one-sentence description and key features list.',
        'Include a "Tech Stack" section listing language, frameworks, libraries, and tools.',
        when(
            flag(FlagName.HAS_DOCKER),
            "Document Docker setup: how to build images, run containers, and use docker-compose.",
            "Explain environment variables needed in .env file for Docker services.",
        ),
        first_of(
            when(
                language_is("Python"),
                'Specify Python version: "Requires Python 3.8+" with installation link.',
                "Show venv setup, activation, and pip install steps clearly.",
            ),
            when(
                language_is("JavaScript"),
                'State Node.js version: "Node 16+ required" and npm/yarn preference.',
                'List all npm scripts with descriptions: "npm run dev - Start dev server".',
            ),
            when(
                language_is("Java"),
                'Document JDK version and build tool: "JDK 11+, Maven 3.6+".',
            ),
            when(
                language_is("C", "C++"),
                "List dependencies and installation for Linux, macOS, Windows.",
            ),
        ),
        first_of(
            when(
                type_is(ProjectType.API),
                'Add "API Endpoints" table: Method, Path, Description, Example Request/Response.',
                "Document environment variables in a table with descriptions and examples.",
            ),
            when(
                type_is(ProjectType.GAME),
                "Add gameplay screenshots or GIFs to attract contributors.",
                'Document controls: "Arrow keys move, Space jumps, P pauses".',
            ),
            when(
                type_is(ProjectType.TODO, ProjectType.DASHBOARD),
                "Include UI screenshots showing different states and features.",
            ),
            when(
                type_is(ProjectType.CLI),
                "Show example commands with real use cases and output.",
            ),
        ),
        'Add "Architecture Overview" explaining how components interact.',
        'Include "How to Run Tests" with commands and coverage info.',
        'Create "Contributing" section: bug reports, feature requests, PR process.',
        "Add badges for build status, coverage, license, version (shields.io).",
    ),
)


def build_readme_tips(
    language: str,
    project_type: ProjectType,
    signals: SignalSet,
) -> List[str]:
    context = RuleContext(language=language, project_type=project_type, signals=signals)
    return README_TIPS.build(context)


__all__ = ["README_TIPS", "build_readme_tips"]
