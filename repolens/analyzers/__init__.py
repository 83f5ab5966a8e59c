"""URL signal extraction and project type classification."""

from __future__ import annotations

from .keywords import FLAG_KEYWORDS, TYPE_RULES
from .project_type import classify
from .url import extract_signals

__all__ = [
    "FLAG_KEYWORDS",
    "TYPE_RULES",
    "classify",
    "extract_signals",
]
