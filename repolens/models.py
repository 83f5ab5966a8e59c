"""Core data models shared across repolens components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple


class FlagName(str, Enum):
    """Topical hints derived from keywords in a repository URL."""

    HAS_TODO = "has_todo"
    HAS_NOTES = "has_notes"
    HAS_API = "has_api"
    HAS_GAME = "has_game"
    HAS_CHAT = "has_chat"
    HAS_BLOG = "has_blog"
    HAS_DOCKER = "has_docker"
    HAS_CLI = "has_cli"
    HAS_BOT = "has_bot"
    HAS_DASHBOARD = "has_dashboard"
    HAS_AUTH = "has_auth"
    HAS_DB = "has_db"
    HAS_TEST = "has_test"
    HAS_STARTER = "has_starter"
    HAS_FULLSTACK = "has_fullstack"


class ProjectType(str, Enum):
    """Single label summarising a repository's inferred purpose."""

    TODO = "todo"
    NOTES = "notes"
    API = "api"
    GAME = "game"
    SOCIAL = "social"
    BLOG = "blog"
    DASHBOARD = "dashboard"
    CLI = "cli"
    BOT = "bot"
    STARTER = "starter"
    LIBRARY = "library"
    MOBILE = "mobile"
    GENERAL = "general"


@dataclass(frozen=True)
class RepoDescriptor:
    """Raw user-supplied hints about a repository."""

    url: str
    language: str = ""
    description: str = ""

    def normalised(self) -> "RepoDescriptor":
        """Return a copy with surrounding whitespace removed from every field."""
        return RepoDescriptor(
            url=(self.url or "").strip(),
            language=(self.language or "").strip(),
            description=(self.description or "").strip(),
        )


@dataclass(frozen=True)
class SignalSet:
    """Facts extracted from a repository URL.

    ``flags`` is copied into a read-only mapping and left out of the hash;
    it is fully determined by ``normalized_url``.
    """

    repo_name: str
    owner: str
    normalized_url: str
    flags: Mapping[FlagName, bool] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))

    def has(self, flag: FlagName) -> bool:
        return bool(self.flags.get(flag, False))

    def active_flags(self) -> List[FlagName]:
        """Return the flags that are set, in declaration order."""
        return [flag for flag in FlagName if self.has(flag)]


@dataclass(frozen=True)
class AnalysisResult:
    """Six ordered advisory sequences produced for a repository."""

    summary: Tuple[str, ...] = ()
    tasks: Tuple[str, ...] = ()
    readme_tips: Tuple[str, ...] = ()
    architecture: Tuple[str, ...] = ()
    learning_path: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = ()

    def section(self, name: str) -> Tuple[str, ...]:
        """Return the statements for a table name such as ``readme_tips``."""
        return getattr(self, name)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "summary": list(self.summary),
            "tasks": list(self.tasks),
            "readmeTips": list(self.readme_tips),
            "architecture": list(self.architecture),
            "learningPath": list(self.learning_path),
            "extensions": list(self.extensions),
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Analysis result bundled with the signals and label that produced it."""

    descriptor: RepoDescriptor
    signals: SignalSet
    project_type: ProjectType
    result: AnalysisResult


__all__ = [
    "AnalysisReport",
    "AnalysisResult",
    "FlagName",
    "ProjectType",
    "RepoDescriptor",
    "SignalSet",
]
