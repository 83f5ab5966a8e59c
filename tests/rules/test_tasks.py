"""Tests for the tasks rule table."""

from __future__ import annotations

import pytest

from repolens.models import FlagName, ProjectType
from repolens.rules import build_tasks
from repolens.rules.tasks import CONTRIBUTE, EXPLORE, SETUP, TASK_GROUPS


def _group(tasks: list[str], prefix: str) -> list[str]:
    return [task for task in tasks if task.startswith(prefix)]


@pytest.mark.parametrize("project_type", list(ProjectType))
@pytest.mark.parametrize("language", ["Python", "JavaScript", "Java", "C", "C++", "", "Go"])
def test_every_group_is_present(project_type: ProjectType, language: str, make_signals) -> None:
    tasks = build_tasks(language, project_type, make_signals())

    for prefix in TASK_GROUPS:
        assert _group(tasks, prefix), prefix
    assert all(task.startswith(TASK_GROUPS) for task in tasks)


def test_groups_are_contiguous_and_ordered(make_signals) -> None:
    tasks = build_tasks("Python", ProjectType.API, make_signals(FlagName.HAS_AUTH))
    prefixes = [task.split("]", 1)[0] + "]" for task in tasks]

    first_explore = prefixes.index(EXPLORE)
    first_contribute = prefixes.index(CONTRIBUTE)
    assert set(prefixes[:first_explore]) == {SETUP}
    assert set(prefixes[first_explore:first_contribute]) == {EXPLORE}
    assert set(prefixes[first_contribute:]) == {CONTRIBUTE}


def test_setup_starts_with_clone_and_ends_with_verify(make_signals) -> None:
    setup = _group(build_tasks("Java", ProjectType.GAME, make_signals(FlagName.HAS_DB)), SETUP)

    assert setup[0] == "[Setup] Clone the repository: git clone <repo-url>"
    assert setup[-1] == "[Setup] Start the application and verify it runs without errors"


def test_docker_setup_replaces_language_setup(make_signals) -> None:
    tasks = build_tasks("Python", ProjectType.GENERAL, make_signals(FlagName.HAS_DOCKER))

    assert "[Setup] Install Docker and Docker Compose if not already installed" in tasks
    assert not any("venv" in task for task in tasks)
    assert "[Explore] Inspect Dockerfile to see how the image is built" in tasks


def test_python_setup(make_signals) -> None:
    setup = _group(build_tasks("Python", ProjectType.GENERAL, make_signals()), SETUP)

    assert setup[1] == "[Setup] Create virtual environment: python -m venv venv"
    assert setup[2] == (
        "[Setup] Activate: source venv/bin/activate (Mac/Linux) or venv\\Scripts\\activate (Windows)"
    )
    assert setup[3] == "[Setup] Install dependencies: pip install -r requirements.txt"
    assert len(setup) == 5


def test_database_setup_only_without_docker(make_signals) -> None:
    local = build_tasks("C", ProjectType.GENERAL, make_signals(FlagName.HAS_DB))
    containerised = build_tasks(
        "C", ProjectType.GENERAL, make_signals(FlagName.HAS_DB, FlagName.HAS_DOCKER)
    )

    db_task = "[Setup] Run migrations to create tables/collections"
    assert db_task in local
    assert db_task not in containerised


def test_auth_adds_env_file_task(make_signals) -> None:
    setup = _group(build_tasks("", ProjectType.GENERAL, make_signals(FlagName.HAS_AUTH)), SETUP)

    assert setup == [
        "[Setup] Clone the repository: git clone <repo-url>",
        "[Setup] Create a .env file with auth secrets (JWT_SECRET, API_KEY, etc.)",
        "[Setup] Start the application and verify it runs without errors",
    ]


def test_api_explore_and_contribute(make_signals) -> None:
    tasks = build_tasks("JavaScript", ProjectType.API, make_signals())
    explore = _group(tasks, EXPLORE)
    contribute = _group(tasks, CONTRIBUTE)

    assert explore[1] == "[Explore] Map out all API endpoints (GET, POST, PUT, DELETE routes)"
    assert explore[-1] == "[Explore] Run tests if available: npm test, pytest, mvn test, make test"
    assert contribute[3] == "[Contribute] Add tests for endpoints lacking coverage"
    assert contribute[-1] == "[Contribute] Write or improve documentation for unclear parts"


def test_notes_explore_without_type_specific_contribution(make_signals) -> None:
    tasks = build_tasks("JavaScript", ProjectType.NOTES, make_signals())

    assert "[Explore] Create and edit notes to understand the data flow" in tasks
    assert len(_group(tasks, CONTRIBUTE)) == 4


def test_general_has_minimal_explore_group(make_signals) -> None:
    explore = _group(build_tasks("Python", ProjectType.GENERAL, make_signals()), EXPLORE)

    assert explore == [
        "[Explore] Find the main entry point (main.py, index.js, Main.java, main.c)",
        "[Explore] Run tests if available: npm test, pytest, mvn test, make test",
    ]
