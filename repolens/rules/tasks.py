"""Tasks table: Setup, Explore and Contribute checklists."""

from __future__ import annotations

from typing import List

from .base import (
    RuleContext,
    RuleTable,
    all_of,
    first_of,
    flag,
    language_is,
    not_,
    type_is,
    when,
)
from ..models import FlagName, ProjectType, SignalSet

SETUP = "[Setup]"
EXPLORE = "[Explore]"
CONTRIBUTE = "[Contribute]"
TASK_GROUPS = (SETUP, EXPLORE, CONTRIBUTE)

_SETUP_ENTRIES = (
    f"{SETUP} Clone the repository: git clone <repo-url>",
    first_of(
        when(
            flag(FlagName.HAS_DOCKER),
            f"{SETUP} Install Docker and Docker Compose if not already installed",
            f"{SETUP} Run docker-compose up to start all services (database, backend, etc.)",
            f"{SETUP} Check docker-compose.yml to understand service dependencies",
        ),
        when(
            language_is("Python"),
            f"{SETUP} Create virtual environment: python -m venv venv",
            f"{SETUP} Activate: source venv/bin/activate (Mac/Linux) or "
            "venv\\Scripts\\activate (Windows)",
            f"{SETUP} Install dependencies: pip install -r requirements.txt",
        ),
        when(
            language_is("JavaScript"),
            f"{SETUP} Install dependencies: npm install (or yarn install)",
            f'{SETUP} Check package.json for scripts: "dev", "start", "build", "test"',
        ),
        when(
            language_is("Java"),
            f"{SETUP} Ensure correct JDK version is installed (check README)",
            f"{SETUP} Build: mvn clean install (Maven) or gradle build (Gradle)",
        ),
        when(
            language_is("C", "C++"),
            f"{SETUP} Install required libraries and compilers (see README/INSTALL)",
            f"{SETUP} Compile: make (or cmake . && make)",
        ),
    ),
    when(
        all_of(flag(FlagName.HAS_DB), not_(flag(FlagName.HAS_DOCKER))),
        f"{SETUP} Set up the database (PostgreSQL, MySQL, MongoDB, etc.) locally",
        f"{SETUP} Run migrations to create tables/collections",
    ),
    when(
        flag(FlagName.HAS_AUTH),
        f"{SETUP} Create a .env file with auth secrets (JWT_SECRET, API_KEY, etc.)",
    ),
    f"{SETUP} Start the application and verify it runs without errors",
)

_EXPLORE_ENTRIES = (
    f"{EXPLORE} Find the main entry point (main.py, index.js, Main.java, main.c)",
    first_of(
        when(
            type_is(ProjectType.TODO),
            f"{EXPLORE} Test creating, editing, completing, and deleting tasks",
            f"{EXPLORE} Find where task state is managed (Redux, Context, Vuex, etc.)",
            f"{EXPLORE} Look for filtering logic (all, active, completed tasks)",
        ),
        when(
            type_is(ProjectType.API),
            f"{EXPLORE} Map out all API endpoints (GET, POST, PUT, DELETE routes)",
            f"{EXPLORE} Trace one request from route → controller → service → database",
            f"{EXPLORE} Test endpoints with curl, Postman, or Insomnia",
        ),
        when(
            type_is(ProjectType.GAME),
            f"{EXPLORE} Play the game and note all features and mechanics",
            f"{EXPLORE} Find the game loop (update/render cycle)",
            f"{EXPLORE} Identify input handling (keyboard, mouse, touch)",
        ),
        when(
            type_is(ProjectType.DASHBOARD),
            f"{EXPLORE} See how data is fetched (API calls, WebSockets, static)",
            f"{EXPLORE} Check charting libraries (Chart.js, D3, Recharts)",
        ),
        when(
            type_is(ProjectType.CLI),
            f"{EXPLORE} Run the CLI with --help to see all commands",
            f"{EXPLORE} Trace how arguments are parsed and validated",
        ),
        when(
            type_is(ProjectType.NOTES),
            f"{EXPLORE} Create and edit notes to understand the data flow",
            f"{EXPLORE} Check if markdown rendering or rich text is supported",
        ),
    ),
    when(
        flag(FlagName.HAS_DOCKER),
        f"{EXPLORE} Inspect Dockerfile to see how the image is built",
        f"{EXPLORE} Check environment variables in docker-compose.yml",
    ),
    f"{EXPLORE} Run tests if available: npm test, pytest, mvn test, make test",
)

_CONTRIBUTE_ENTRIES = (
    f"{CONTRIBUTE} Read CONTRIBUTING.md or contribution guidelines",
    f'{CONTRIBUTE} Look for "good first issue" labels on GitHub Issues',
    f"{CONTRIBUTE} Review recent pull requests to see contribution patterns",
    first_of(
        when(
            type_is(ProjectType.TODO),
            f'{CONTRIBUTE} Add a new filter option (e.g., "due today", "priority")',
            f"{CONTRIBUTE} Improve UI/UX with better styling or animations",
        ),
        when(
            type_is(ProjectType.API),
            f"{CONTRIBUTE} Add tests for endpoints lacking coverage",
            f"{CONTRIBUTE} Improve error handling and validation",
        ),
        when(
            type_is(ProjectType.GAME),
            f"{CONTRIBUTE} Add a new level, character, or power-up",
            f"{CONTRIBUTE} Fix bugs or improve game balance",
        ),
        when(
            type_is(ProjectType.CLI),
            f"{CONTRIBUTE} Add a new command or flag",
            f"{CONTRIBUTE} Improve help text and error messages",
        ),
    ),
    f"{CONTRIBUTE} Write or improve documentation for unclear parts",
)

TASKS = RuleTable(
    name="tasks",
    entries=_SETUP_ENTRIES + _EXPLORE_ENTRIES + _CONTRIBUTE_ENTRIES,
)


def build_tasks(
    language: str,
    project_type: ProjectType,
    signals: SignalSet,
) -> List[str]:
    """Return tasks grouped Setup, then Explore, then Contribute."""
    context = RuleContext(language=language, project_type=project_type, signals=signals)
    return TASKS.build(context)


__all__ = ["CONTRIBUTE", "EXPLORE", "SETUP", "TASKS", "TASK_GROUPS", "build_tasks"]
