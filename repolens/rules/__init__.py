"""Rule tables that expand a classification into advisory statements."""

from __future__ import annotations

from typing import Dict, List, Sequence, Set

from .architecture import ARCHITECTURE, build_architecture
from .base import RuleContext, RuleTable, evaluate
from .extensions import EXTENSIONS, build_extensions
from .learning_path import LEARNING_PATH, build_learning_path
from .readme_tips import README_TIPS, build_readme_tips
from .summary import SUMMARY, build_summary
from .tasks import TASKS, build_tasks

TABLES: Dict[str, RuleTable] = {
    table.name: table
    for table in (SUMMARY, TASKS, README_TIPS, ARCHITECTURE, LEARNING_PATH, EXTENSIONS)
}


def select_tables(enabled: Sequence[str] | None = None) -> List[RuleTable]:
    """Return rule tables in canonical order, honoring optional enabled names."""
    if enabled is None:
        return list(TABLES.values())

    requested: Set[str] = {name.strip().lower().replace("-", "_") for name in enabled}
    unknown = requested - set(TABLES)
    if unknown:
        missing = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown rule tables requested: {missing}")

    return [table for name, table in TABLES.items() if name in requested]


__all__ = [
    "RuleContext",
    "RuleTable",
    "TABLES",
    "build_architecture",
    "build_extensions",
    "build_learning_path",
    "build_readme_tips",
    "build_summary",
    "build_tasks",
    "evaluate",
    "select_tables",
]
