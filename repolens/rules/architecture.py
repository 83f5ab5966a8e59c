"""Architecture insight table."""

from __future__ import annotations

from typing import List

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

ARCHITECTURE = RuleTable(
    name="architecture",
    entries=(
        when(
            flag(FlagName.HAS_DOCKER),
            "Containerized architecture using Docker for consistent dev/prod environments.",
            when(
                flag(FlagName.HAS_DB),
                "Multi-container setup: application container + database container "
                "orchestrated via docker-compose.",
            ),
        ),
        first_of(
            when(
                type_is(ProjectType.API),
                first_of(
                    when(
                        language_is("JavaScript"),
                        "Node.js backend with Express/Fastify handling HTTP requests and routing.",
                    ),
                    when(
                        language_is("Python"),
                        "Python backend using Flask/FastAPI with RESTful endpoint structure.",
                    ),
                    when(
                        language_is("Java"),
                        "Spring Boot application with layered architecture: "
                        "Controller → Service → Repository.",
                    ),
                ),
                when(
                    flag(FlagName.HAS_DB),
                    "Database layer with ORM/ODM for data persistence and query abstraction.",
                ),
                when(
                    flag(FlagName.HAS_AUTH),
                    "Authentication middleware protecting routes with JWT tokens or "
                    "session management.",
                ),
            ),
            when(
                type_is(ProjectType.TODO, ProjectType.DASHBOARD),
                when(
                    language_is("JavaScript"),
                    "Frontend built with React/Vue/Svelte using component-based architecture.",
                    "State management via Redux, Context API, or Vuex for global app state.",
                ),
                "Client-side routing for navigation between views without page reloads.",
                first_of(
                    when(
                        any_of(flag(FlagName.HAS_API), flag(FlagName.HAS_DB)),
                        "Backend API integration for data persistence and synchronization.",
                    ),
                    otherwise=("Local storage or in-memory state for data persistence.",),
                ),
            ),
            when(
                type_is(ProjectType.GAME),
                "Game loop architecture: input → update → render cycle running at 60 FPS.",
                "Entity-component system or object-oriented design for game objects.",
                "Collision detection and physics calculations in the update phase.",
            ),
            when(
                type_is(ProjectType.CLI),
                "Command-line interface with argument parser and command dispatcher.",
                "Modular command structure where each command is a separate function/class.",
            ),
            when(
                flag(FlagName.HAS_FULLSTACK),
                "Full-stack architecture: frontend (React/Vue) + backend (Node/Python) + database.",
                "RESTful API connecting frontend and backend with JSON data exchange.",
            ),
            otherwise=(
                "Modular code structure with separation of concerns (UI, logic, data).",
                "Entry point bootstraps the application and initializes core components.",
            ),
        ),
        when(
            flag(FlagName.HAS_TEST),
            "Test suite with unit tests, integration tests, and possibly E2E tests.",
        ),
    ),
)


def build_architecture(
    language: str,
    project_type: ProjectType,
    signals: SignalSet,
) -> List[str]:
    context = RuleContext(language=language, project_type=project_type, signals=signals)
    return ARCHITECTURE.build(context)


__all__ = ["ARCHITECTURE", "build_architecture"]
