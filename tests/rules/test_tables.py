"""Tests for the README tips, architecture, learning path and extensions tables."""

from __future__ import annotations

import pytest

from repolens.models import FlagName, ProjectType
from repolens.rules import (
    build_architecture,
    build_extensions,
    build_learning_path,
    build_readme_tips,
)


def test_readme_tips_frame_and_order(make_signals) -> None:
    tips = build_readme_tips("Rust", ProjectType.GENERAL, make_signals())

    assert tips == [
        'Add a "What is this?" section with a one-sentence description and key features list.',
        'Include a "Tech Stack" section listing language, frameworks, libraries, and tools.',
        'Add "Architecture Overview" explaining how components interact.',
        'Include "How to Run Tests" with commands and coverage info.',
        'Create "Contributing" section: bug reports, feature requests, PR process.',
        "Add badges for build status, coverage, license, version (shields.io).",
    ]


def test_readme_tips_docker_language_and_type_blocks_all_fire(make_signals) -> None:
    tips = build_readme_tips("Python", ProjectType.API, make_signals(FlagName.HAS_DOCKER))

    assert tips[2].startswith("Document Docker setup")
    assert tips[3].startswith("Explain environment variables needed in .env")
    assert tips[4].startswith("Specify Python version")
    assert tips[5].startswith("Show venv setup")
    assert tips[6].startswith('Add "API Endpoints" table')
    assert tips[7].startswith("Document environment variables in a table")
    assert len(tips) == 12


@pytest.mark.parametrize("project_type", [ProjectType.TODO, ProjectType.DASHBOARD])
def test_readme_tips_screenshots_for_ui_types(project_type: ProjectType, make_signals) -> None:
    tips = build_readme_tips("Java", project_type, make_signals())

    assert 'Document JDK version and build tool: "JDK 11+, Maven 3.6+".' in tips
    assert "Include UI screenshots showing different states and features." in tips


def test_architecture_api_stack(make_signals) -> None:
    signals = make_signals(FlagName.HAS_DB, FlagName.HAS_AUTH, FlagName.HAS_TEST)
    architecture = build_architecture("Java", ProjectType.API, signals)

    assert architecture == [
        "Spring Boot application with layered architecture: Controller → Service → Repository.",
        "Database layer with ORM/ODM for data persistence and query abstraction.",
        "Authentication middleware protecting routes with JWT tokens or session management.",
        "Test suite with unit tests, integration tests, and possibly E2E tests.",
    ]


def test_architecture_docker_with_database(make_signals) -> None:
    architecture = build_architecture(
        "Python", ProjectType.GENERAL, make_signals(FlagName.HAS_DOCKER, FlagName.HAS_DB)
    )

    assert architecture[0].startswith("Containerized architecture using Docker")
    assert architecture[1].startswith("Multi-container setup")
    assert architecture[2].startswith("Modular code structure")


def test_architecture_frontend_persistence(make_signals) -> None:
    local = build_architecture("JavaScript", ProjectType.TODO, make_signals())
    synced = build_architecture("Python", ProjectType.DASHBOARD, make_signals(FlagName.HAS_API))

    assert local == [
        "Frontend built with React/Vue/Svelte using component-based architecture.",
        "State management via Redux, Context API, or Vuex for global app state.",
        "Client-side routing for navigation between views without page reloads.",
        "Local storage or in-memory state for data persistence.",
    ]
    assert synced == [
        "Client-side routing for navigation between views without page reloads.",
        "Backend API integration for data persistence and synchronization.",
    ]


def test_architecture_fullstack_only_for_untyped_projects(make_signals) -> None:
    general = build_architecture("JavaScript", ProjectType.GENERAL, make_signals(FlagName.HAS_FULLSTACK))
    cli = build_architecture("JavaScript", ProjectType.CLI, make_signals(FlagName.HAS_FULLSTACK))

    assert general[0].startswith("Full-stack architecture")
    assert cli[0].startswith("Command-line interface with argument parser")


def test_architecture_api_with_unknown_language(make_signals) -> None:
    assert build_architecture("Go", ProjectType.API, make_signals()) == []


def test_learning_path_has_eight_numbered_steps(make_signals) -> None:
    for project_type in ProjectType:
        steps = build_learning_path("Python", project_type, make_signals())
        assert [step.split(":", 1)[0] for step in steps] == [f"Step {n}" for n in range(1, 9)]


def test_learning_path_docker_and_game_branches(make_signals) -> None:
    steps = build_learning_path("JavaScript", ProjectType.GAME, make_signals(FlagName.HAS_DOCKER))

    assert steps[2].startswith("Step 3: Study docker-compose.yml")
    assert steps[3].startswith("Step 4: Run docker-compose up")
    assert steps[4] == "Step 5: Play the game and identify all mechanics and features."


def test_learning_path_default_branch(make_signals) -> None:
    steps = build_learning_path("C", ProjectType.BLOG, make_signals())

    assert steps[2] == "Step 3: Install dependencies and run the application locally."
    assert steps[4] == "Step 5: Identify the main entry point and trace code execution."


@pytest.mark.parametrize(
    ("project_type", "first"),
    [
        (ProjectType.TODO, "Add priority levels (high, medium, low) with color coding."),
        (ProjectType.API, "Add pagination for list endpoints to handle large datasets."),
        (ProjectType.GAME, "Add sound effects and background music."),
        (ProjectType.DASHBOARD, "Add real-time data updates using WebSockets."),
        (ProjectType.NOTES, "Add rich text formatting (bold, italic, lists)."),
        (ProjectType.CLI, "Add interactive mode with prompts for user input."),
        (ProjectType.MOBILE, "Add comprehensive error handling and user-friendly messages."),
        (ProjectType.GENERAL, "Add comprehensive error handling and user-friendly messages."),
    ],
)
def test_extensions_per_type(project_type: ProjectType, first: str, make_signals) -> None:
    extensions = build_extensions("Python", project_type, make_signals())

    assert len(extensions) == 6
    assert extensions[0] == first


def test_extensions_ignore_language_and_signals(make_signals) -> None:
    plain = build_extensions("Python", ProjectType.API, make_signals())
    flagged = build_extensions("Java", ProjectType.API, make_signals(*FlagName))

    assert plain == flagged
