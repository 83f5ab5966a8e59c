"""Classify repositories from sparse hints and compose advisory checklists."""

from .models import (
    AnalysisReport,
    AnalysisResult,
    FlagName,
    ProjectType,
    RepoDescriptor,
    SignalSet,
)
from .orchestrator import Orchestrator, analyze

__all__ = [
    "AnalysisReport",
    "AnalysisResult",
    "FlagName",
    "Orchestrator",
    "ProjectType",
    "RepoDescriptor",
    "SignalSet",
    "analyze",
]
