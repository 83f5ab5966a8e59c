"""Signal extraction from repository URLs."""

from __future__ import annotations

from typing import Dict, List
from urllib.parse import urlsplit

from .keywords import FLAG_KEYWORDS, contains_any
from ..models import FlagName, SignalSet


def extract_signals(url: str) -> SignalSet:
    """Derive repo name, owner and topical flags from ``url``.

    Never fails: an empty or malformed URL yields empty names and all flags False.
    """
    url = url or ""
    segments = _path_segments(url)
    repo_name = segments[-1] if segments else ""
    owner = segments[-2] if len(segments) > 1 else ""
    normalized = url.lower()

    flags: Dict[FlagName, bool] = {
        flag: contains_any(normalized, FLAG_KEYWORDS[flag]) for flag in FlagName
    }
    return SignalSet(
        repo_name=repo_name,
        owner=owner,
        normalized_url=normalized,
        flags=flags,
    )


def _path_segments(url: str) -> List[str]:
    # Host and path only; the scheme, query and fragment never name the repo.
    try:
        parts = urlsplit(url)
    except ValueError:
        return [segment for segment in url.split("/") if segment]
    candidates = [parts.netloc, *parts.path.split("/")]
    return [segment for segment in candidates if segment]


__all__ = ["extract_signals"]
