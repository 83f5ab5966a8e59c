"""First-match-wins project type classifier."""

from __future__ import annotations

from .keywords import TYPE_RULES, contains_any
from .url import extract_signals
from ..logging import get_logger
from ..models import ProjectType

_logger = get_logger("classifier")


def classify(url: str, description: str) -> ProjectType:
    """Return the highest-priority project type hinted by ``url`` or ``description``.

    Each rule ORs its URL flag with a keyword test over the lowercased
    description. Rules are evaluated in priority order and the first match
    wins. ``ProjectType.GENERAL`` is returned when nothing matches.
    """
    signals = extract_signals(url)
    text = (description or "").lower()

    for label, flag, keywords in TYPE_RULES:
        if flag is not None and signals.has(flag):
            _logger.debug("Classified %r as %s via URL flag %s", url, label.value, flag.value)
            return label
        if keywords and contains_any(text, keywords):
            _logger.debug("Classified %r as %s via description keywords", url, label.value)
            return label

    return ProjectType.GENERAL


__all__ = ["classify"]
