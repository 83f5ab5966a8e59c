"""Render analysis reports as plain text, Markdown or JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence

from jinja2 import Environment, FileSystemLoader

from .constants import SECTION_TITLES
from .models import AnalysisReport
from .rules import select_tables

_RECORD_KEYS: Dict[str, str] = {
    "summary": "summary",
    "tasks": "tasks",
    "readme_tips": "readmeTips",
    "architecture": "architecture",
    "learning_path": "learningPath",
    "extensions": "extensions",
}

# Sections whose statements already carry their own ordering prefix.
_BULLETED = {"tasks", "learning_path"}

_TEMPLATE_NAME = "report.md.j2"


@dataclass
class RenderedSection:
    name: str
    title: str
    items: List[str]
    numbered: bool


def collect_sections(
    report: AnalysisReport, sections: Sequence[str] | None = None
) -> List[RenderedSection]:
    """Return the selected sections in canonical order.

    Names are matched like rule table names, so ``learning-path`` selects
    ``learning_path``; unknown names raise ``ValueError``.
    """
    return [
        RenderedSection(
            name=table.name,
            title=SECTION_TITLES[table.name],
            items=list(report.result.section(table.name)),
            numbered=table.name not in _BULLETED,
        )
        for table in select_tables(sections)
    ]


def render_text(report: AnalysisReport, sections: Sequence[str] | None = None) -> str:
    lines = [f"{_display_name(report)} ({report.project_type.value})"]
    for section in collect_sections(report, sections):
        lines.append("")
        lines.append(section.title)
        lines.append("-" * len(section.title))
        for index, item in enumerate(section.items, start=1):
            lines.append(f"{index}. {item}" if section.numbered else f"- {item}")
    return "\n".join(lines) + "\n"


def render_markdown(
    report: AnalysisReport,
    sections: Sequence[str] | None = None,
    *,
    templates_dir: Path | None = None,
) -> str:
    """Render the report through the Markdown Jinja2 template."""
    env = _create_env(templates_dir)
    template = env.get_template(_TEMPLATE_NAME)
    rendered = template.render(
        repo_name=_display_name(report),
        project_type=report.project_type.value,
        language=report.descriptor.language,
        signals=[flag.value for flag in report.signals.active_flags()],
        sections=collect_sections(report, sections),
    )
    return rendered.strip() + "\n"


def render_json(report: AnalysisReport, sections: Sequence[str] | None = None) -> str:
    payload: Dict[str, object] = {
        "repoName": report.signals.repo_name,
        "owner": report.signals.owner,
        "projectType": report.project_type.value,
        "signals": [flag.value for flag in report.signals.active_flags()],
    }
    for section in collect_sections(report, sections):
        payload[_RECORD_KEYS[section.name]] = section.items
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render(report: AnalysisReport, fmt: str, sections: Sequence[str] | None = None) -> str:
    if fmt == "markdown":
        return render_markdown(report, sections)
    if fmt == "json":
        return render_json(report, sections) + "\n"
    if fmt == "text":
        return render_text(report, sections)
    raise ValueError(f"Unsupported output format: {fmt}")


def _display_name(report: AnalysisReport) -> str:
    return report.signals.repo_name or "Repository"


def _create_env(templates_dir: Path | None) -> Environment:
    directories: List[str] = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(Path(__file__).with_name("templates")))
    loader = FileSystemLoader(directories)
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = [
    "RenderedSection",
    "collect_sections",
    "render",
    "render_json",
    "render_markdown",
    "render_text",
]
