"""Guarded statement lists and the executor shared by every rule table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple, Union

from ..models import FlagName, ProjectType, SignalSet


@dataclass(frozen=True)
class RuleContext:
    """Inputs visible to guards and statement templates."""

    language: str
    project_type: ProjectType
    signals: SignalSet
    description: str = ""

    @property
    def repo_name(self) -> str:
        return self.signals.repo_name or "this project"


Guard = Callable[[RuleContext], bool]
Template = Callable[[RuleContext], str]


@dataclass(frozen=True)
class When:
    """Emit ``body`` when ``guard`` holds."""

    guard: Guard
    body: Tuple["Entry", ...]


@dataclass(frozen=True)
class FirstOf:
    """Emit the body of the first matching branch, else ``otherwise``."""

    branches: Tuple[When, ...]
    otherwise: Tuple["Entry", ...] = ()


Entry = Union[str, Template, When, FirstOf]


def when(guard: Guard, *body: Entry) -> When:
    return When(guard=guard, body=tuple(body))


def first_of(*branches: When, otherwise: Sequence[Entry] = ()) -> FirstOf:
    return FirstOf(branches=tuple(branches), otherwise=tuple(otherwise))


def evaluate(entries: Sequence[Entry], context: RuleContext) -> List[str]:
    """Expand ``entries`` top-to-bottom into a fresh list of statements."""
    output: List[str] = []
    _emit(entries, context, output)
    return output


def _emit(entries: Sequence[Entry], context: RuleContext, output: List[str]) -> None:
    for entry in entries:
        if isinstance(entry, str):
            output.append(entry)
        elif isinstance(entry, When):
            if entry.guard(context):
                _emit(entry.body, context, output)
        elif isinstance(entry, FirstOf):
            for branch in entry.branches:
                if branch.guard(context):
                    _emit(branch.body, context, output)
                    break
            else:
                _emit(entry.otherwise, context, output)
        elif callable(entry):
            output.append(entry(context))
        else:
            raise TypeError(f"Unsupported rule entry: {entry!r}")


# Guards


def always(_: RuleContext) -> bool:
    return True


def language_is(*languages: str) -> Guard:
    def _guard(context: RuleContext) -> bool:
        return context.language in languages

    return _guard


def type_is(*types: ProjectType) -> Guard:
    def _guard(context: RuleContext) -> bool:
        return context.project_type in types

    return _guard


def flag(name: FlagName) -> Guard:
    def _guard(context: RuleContext) -> bool:
        return context.signals.has(name)

    return _guard


def not_(guard: Guard) -> Guard:
    def _guard(context: RuleContext) -> bool:
        return not guard(context)

    return _guard


def all_of(*guards: Guard) -> Guard:
    def _guard(context: RuleContext) -> bool:
        return all(guard(context) for guard in guards)

    return _guard


def any_of(*guards: Guard) -> Guard:
    def _guard(context: RuleContext) -> bool:
        return any(guard(context) for guard in guards)

    return _guard


@dataclass(frozen=True)
class RuleTable:
    """Named, ordered list of guarded statements for one advisory category."""

    name: str
    entries: Tuple[Entry, ...]

    def build(self, context: RuleContext) -> List[str]:
        return evaluate(self.entries, context)


__all__ = [
    "Entry",
    "FirstOf",
    "Guard",
    "RuleContext",
    "RuleTable",
    "Template",
    "When",
    "all_of",
    "always",
    "any_of",
    "evaluate",
    "first_of",
    "flag",
    "language_is",
    "not_",
    "type_is",
    "when",
]
