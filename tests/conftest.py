from __future__ import annotations

from typing import Callable, Iterable

import pytest

from repolens.models import FlagName, SignalSet
from repolens.orchestrator import Orchestrator


@pytest.fixture
def orchestrator() -> Orchestrator:
    return Orchestrator()


@pytest.fixture
def make_signals() -> Callable[..., SignalSet]:
    """Build a SignalSet with only the given flags switched on."""

    def _make(*active: FlagName, repo_name: str = "demo", owner: str = "acme") -> SignalSet:
        enabled: Iterable[FlagName] = set(active)
        return SignalSet(
            repo_name=repo_name,
            owner=owner,
            normalized_url=f"https://github.com/{owner}/{repo_name}".lower(),
            flags={flag: flag in enabled for flag in FlagName},
        )

    return _make
