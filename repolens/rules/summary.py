"""Summary table: elevator pitch followed by signal and ecosystem notes."""

from __future__ import annotations

from typing import Dict, List

from .base import (
    RuleContext,
    RuleTable,
    any_of,
    first_of,
    flag,
    language_is,
    type_is,
    when,
)
from ..models import FlagName, ProjectType, SignalSet

_TYPE_PHRASES: Dict[ProjectType, str] = {
    ProjectType.TODO: "todo list application for managing tasks and tracking completion",
    ProjectType.NOTES: "note-taking app for organizing thoughts and documents",
    ProjectType.API: "backend API providing RESTful endpoints and data services",
    ProjectType.GAME: "game with interactive gameplay and user controls",
    ProjectType.CLI: "command-line tool for developers",
    ProjectType.DASHBOARD: "dashboard for visualizing data and metrics",
    ProjectType.SOCIAL: "social platform for communication and interaction",
    ProjectType.BOT: "bot for automation and task execution",
    ProjectType.STARTER: "starter template or boilerplate for quick project setup",
}
_DEFAULT_PHRASE = "project"

_ENCOURAGEMENTS: Dict[ProjectType, str] = {
    ProjectType.TODO: "Perfect for learning CRUD operations, state management, and filtering logic!",
    ProjectType.API: "Great for understanding backend architecture, routing, and data handling!",
    ProjectType.GAME: "Excellent for exploring game loops, rendering, and input handling!",
    ProjectType.DASHBOARD: "Ideal for learning data visualization and real-time updates!",
    ProjectType.CLI: "Great way to learn command parsing and building developer tools!",
    ProjectType.STARTER: "Useful template to understand project structure and best practices!",
}
_DEFAULT_ENCOURAGEMENT = "A solid project to expand your coding skills!"


def elevator_pitch(context: RuleContext) -> str:
    """One-line pitch built from the description, or synthesized from the project type."""
    subject = " ".join(part for part in (f'"{context.repo_name}" is a', context.language) if part)
    description = context.description.strip()
    if description:
        pitch = f"{subject} project that {description.lower()}"
    else:
        phrase = _TYPE_PHRASES.get(context.project_type, _DEFAULT_PHRASE)
        pitch = f"{subject} {phrase}"
    encouragement = _ENCOURAGEMENTS.get(context.project_type, _DEFAULT_ENCOURAGEMENT)
    return f"{pitch}. {encouragement}"


SUMMARY = RuleTable(
    name="summary",
    entries=(
        elevator_pitch,
        when(
            flag(FlagName.HAS_DOCKER),
            "This project uses Docker for containerization. You'll find Dockerfile and "
            "possibly docker-compose.yml for orchestrating services.",
        ),
        when(
            flag(FlagName.HAS_AUTH),
            "Authentication is a key feature here. Look for JWT tokens, session management, "
            "or OAuth integration.",
        ),
        when(
            flag(FlagName.HAS_DB),
            "Database integration is central to this project. Check for schema definitions, "
            "migrations, and ORM usage.",
        ),
        first_of(
            when(
                language_is("Python"),
                "Python projects use virtual environments (venv/virtualenv) to isolate "
                "dependencies. Package management via pip, poetry, or conda.",
                first_of(
                    when(
                        type_is(ProjectType.API),
                        "Likely uses Flask (lightweight), FastAPI (modern), or Django "
                        "(full-featured) as the web framework.",
                    ),
                    when(
                        type_is(ProjectType.CLI),
                        "CLI tools often use Click or argparse for command parsing. Check "
                        "setup.py or pyproject.toml for entry points.",
                    ),
                ),
            ),
            when(
                language_is("JavaScript"),
                "JavaScript projects rely on npm or yarn. The package.json file maps out "
                "scripts, dependencies, and project metadata.",
                first_of(
                    when(
                        type_is(ProjectType.API),
                        "Node.js APIs commonly use Express (minimal), Fastify (fast), or "
                        "NestJS (structured with TypeScript).",
                    ),
                    when(
                        any_of(
                            flag(FlagName.HAS_FULLSTACK),
                            type_is(ProjectType.DASHBOARD, ProjectType.TODO),
                        ),
                        "Frontend likely uses React, Vue, or Svelte with a bundler like "
                        "Vite, Webpack, or Parcel.",
                    ),
                ),
            ),
            when(
                language_is("Java"),
                "Java projects use Maven (pom.xml) or Gradle (build.gradle). Source code "
                "lives in src/main/java/.",
                when(
                    type_is(ProjectType.API),
                    "Spring Boot is the standard for Java APIs. Look for @RestController, "
                    "@Service, and application.properties.",
                ),
            ),
            when(
                language_is("C", "C++"),
                "C/C++ requires compilation. Look for Makefile, CMakeLists.txt, or build "
                "scripts defining the build process.",
            ),
        ),
    ),
)


def build_summary(
    language: str,
    project_type: ProjectType,
    signals: SignalSet,
    description: str = "",
) -> List[str]:
    """Return the summary statements, elevator pitch first."""
    context = RuleContext(
        language=language,
        project_type=project_type,
        signals=signals,
        description=description,
    )
    return SUMMARY.build(context)


__all__ = ["SUMMARY", "build_summary", "elevator_pitch"]
