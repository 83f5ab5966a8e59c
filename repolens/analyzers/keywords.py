"""Keyword tables used by the URL signal extractor and the type classifier."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..models import FlagName, ProjectType

# Each category keeps its own list; URL and description vocabularies differ on purpose.
FLAG_KEYWORDS: Dict[FlagName, Tuple[str, ...]] = {
    FlagName.HAS_TODO: ("todo", "task", "checklist"),
    FlagName.HAS_NOTES: ("note", "markdown", "editor"),
    FlagName.HAS_API: ("api", "rest", "graphql", "backend", "server"),
    FlagName.HAS_GAME: ("game", "play", "puzzle"),
    FlagName.HAS_CHAT: ("chat", "message", "social"),
    FlagName.HAS_BLOG: ("blog", "cms", "content"),
    FlagName.HAS_DOCKER: ("docker", "container", "compose", "kubernetes", "k8s"),
    FlagName.HAS_CLI: ("cli", "command", "terminal", "tool"),
    FlagName.HAS_BOT: ("bot", "automation", "scraper"),
    FlagName.HAS_DASHBOARD: ("dashboard", "analytics", "chart", "viz"),
    FlagName.HAS_AUTH: ("auth", "login", "jwt", "oauth"),
    FlagName.HAS_DB: ("database", "db", "sql", "mongo", "postgres", "mysql"),
    FlagName.HAS_TEST: ("test", "testing", "jest", "pytest"),
    FlagName.HAS_STARTER: ("starter", "template", "boilerplate", "example"),
    FlagName.HAS_FULLSTACK: ("fullstack", "full-stack", "mern", "mean"),
}

# Priority order matters: the first rule whose URL flag or description keywords match wins.
TYPE_RULES: Tuple[Tuple[ProjectType, Optional[FlagName], Tuple[str, ...]], ...] = (
    (ProjectType.TODO, FlagName.HAS_TODO, ("todo", "task", "checklist")),
    (ProjectType.NOTES, FlagName.HAS_NOTES, ("note", "markdown", "editor", "writing")),
    (
        ProjectType.API,
        FlagName.HAS_API,
        ("api", "rest", "graphql", "endpoint", "server", "backend"),
    ),
    (ProjectType.GAME, FlagName.HAS_GAME, ("game", "play", "puzzle", "arcade")),
    (ProjectType.SOCIAL, FlagName.HAS_CHAT, ("chat", "message", "social", "forum")),
    (ProjectType.BLOG, FlagName.HAS_BLOG, ("blog", "cms", "content")),
    (
        ProjectType.DASHBOARD,
        FlagName.HAS_DASHBOARD,
        ("dashboard", "analytics", "chart", "graph", "visualization"),
    ),
    (ProjectType.CLI, FlagName.HAS_CLI, ("cli", "command", "terminal", "tool")),
    (ProjectType.BOT, FlagName.HAS_BOT, ("bot", "automation", "script", "scraper")),
    (ProjectType.STARTER, FlagName.HAS_STARTER, ()),
    (ProjectType.LIBRARY, None, ("library", "package", "framework", "sdk")),
    (ProjectType.MOBILE, None, ("mobile", "app", "ios", "android")),
)


def contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    """Return True when any keyword occurs as a substring of ``text``."""
    return any(keyword in text for keyword in keywords)


__all__ = ["FLAG_KEYWORDS", "TYPE_RULES", "contains_any"]
