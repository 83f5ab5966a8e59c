"""Eight-step learning path table."""

from __future__ import annotations

from typing import List

from .base import RuleContext, RuleTable, first_of, flag, type_is, when
from ..models import FlagName, ProjectType, SignalSet

LEARNING_PATH = RuleTable(
    name="learning_path",
    entries=(
        "Step 1: Read the README thoroughly and understand the project goals and features.",
        "Step 2: Set up the development environment following installation instructions.",
        first_of(
            when(
                flag(FlagName.HAS_DOCKER),
                "Step 3: Study docker-compose.yml to understand service dependencies and ports.",
                "Step 4: Run docker-compose up and observe logs to see startup sequence.",
            ),
            otherwise=(
                "Step 3: Install dependencies and run the application locally.",
                "Step 4: Interact with the app to understand user-facing features.",
            ),
        ),
        first_of(
            when(
                type_is(ProjectType.API),
                "Step 5: Map out all API endpoints and test them with curl or Postman.",
                "Step 6: Trace one endpoint from route definition to database query.",
            ),
            when(
                type_is(ProjectType.TODO, ProjectType.DASHBOARD),
                "Step 5: Explore the component tree and understand how data flows.",
                "Step 6: Make a small UI change (color, text) to see the hot-reload in action.",
            ),
            when(
                type_is(ProjectType.GAME),
                "Step 5: Play the game and identify all mechanics and features.",
                "Step 6: Find the game loop and add a console.log to see update frequency.",
            ),
            when(
                type_is(ProjectType.CLI),
                "Step 5: Run the CLI with different commands and flags to see behavior.",
                "Step 6: Trace how a command is parsed and executed in the code.",
            ),
            otherwise=(
                "Step 5: Identify the main entry point and trace code execution.",
                "Step 6: Make a small change and rebuild to understand the workflow.",
            ),
        ),
        "Step 7: Run the test suite and read test cases to understand expected behavior.",
        'Step 8: Pick a "good first issue" and try implementing a fix or feature.',
    ),
)


def build_learning_path(
    language: str,
    project_type: ProjectType,
    signals: SignalSet,
) -> List[str]:
    context = RuleContext(language=language, project_type=project_type, signals=signals)
    return LEARNING_PATH.build(context)


__all__ = ["LEARNING_PATH", "build_learning_path"]
