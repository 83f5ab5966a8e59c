"""Analysis pipeline: signals, classification, then the six rule tables."""

from __future__ import annotations

from typing import Callable

from .analyzers import classify, extract_signals
from .constants import KNOWN_LANGUAGES
from .logging import get_logger
from .models import AnalysisReport, AnalysisResult, ProjectType, RepoDescriptor, SignalSet
from .rules import (
    build_architecture,
    build_extensions,
    build_learning_path,
    build_readme_tips,
    build_summary,
    build_tasks,
)

SignalExtractor = Callable[[str], SignalSet]
Classifier = Callable[[str, str], ProjectType]


class Orchestrator:
    """Coordinates signal extraction, classification and rule expansion."""

    def __init__(
        self,
        extractor: SignalExtractor | None = None,
        classifier: Classifier | None = None,
    ) -> None:
        self.extractor = extractor or extract_signals
        self.classifier = classifier or classify
        self.logger = get_logger("orchestrator")

    def run(self, descriptor: RepoDescriptor) -> AnalysisReport:
        """Analyze ``descriptor`` and keep the intermediate signals and label."""
        url = descriptor.url or ""
        language = descriptor.language or ""
        description = descriptor.description or ""
        self.logger.info("Analyzing %s", url or "<empty url>")
        if language and language not in KNOWN_LANGUAGES:
            self.logger.debug("No language-specific rules for %r", language)

        signals = self.extractor(url)
        # The classifier derives its own signals from the URL.
        project_type = self.classifier(url, description)
        self.logger.debug(
            "Project type %s; active flags: %s",
            project_type.value,
            ", ".join(flag.value for flag in signals.active_flags()) or "none",
        )

        result = AnalysisResult(
            summary=tuple(build_summary(language, project_type, signals, description)),
            tasks=tuple(build_tasks(language, project_type, signals)),
            readme_tips=tuple(build_readme_tips(language, project_type, signals)),
            architecture=tuple(build_architecture(language, project_type, signals)),
            learning_path=tuple(build_learning_path(language, project_type, signals)),
            extensions=tuple(build_extensions(language, project_type, signals)),
        )
        return AnalysisReport(
            descriptor=descriptor,
            signals=signals,
            project_type=project_type,
            result=result,
        )

    def analyze(self, descriptor: RepoDescriptor) -> AnalysisResult:
        return self.run(descriptor).result


def analyze(descriptor: RepoDescriptor) -> AnalysisResult:
    """Pure entry point: return the six advisory sequences for ``descriptor``."""
    return Orchestrator().analyze(descriptor)


__all__ = ["Orchestrator", "analyze"]
