"""Input validation for outer surfaces (CLI and HTTP service).

The analysis core is total and never calls into this module; callers that
want strict inputs validate here first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .models import RepoDescriptor


@dataclass
class ValidationIssue:
    """A single problem with a repository descriptor field."""

    field: str
    message: str


class ValidationError(RuntimeError):
    """Raised when a descriptor fails validation."""

    def __init__(self, message: str, issues: Sequence[ValidationIssue]) -> None:
        super().__init__(message)
        self.issues = list(issues)


def validate_descriptor(
    descriptor: RepoDescriptor, *, require_github: bool = True
) -> List[ValidationIssue]:
    """Return every issue found in ``descriptor``; an empty list means valid."""
    issues: List[ValidationIssue] = []
    url = (descriptor.url or "").strip()
    if not url:
        issues.append(ValidationIssue("url", "Please enter a GitHub repository URL."))
    elif require_github and "github.com" not in url:
        issues.append(ValidationIssue("url", "Please enter a valid GitHub URL."))

    if not (descriptor.language or "").strip():
        issues.append(ValidationIssue("language", "Please select a programming language."))

    return issues


def ensure_valid(descriptor: RepoDescriptor, *, require_github: bool = True) -> None:
    issues = validate_descriptor(descriptor, require_github=require_github)
    if issues:
        detail = "; ".join(f"{issue.field}: {issue.message}" for issue in issues)
        raise ValidationError(f"Invalid repository input ({detail})", issues)


__all__ = ["ValidationError", "ValidationIssue", "ensure_valid", "validate_descriptor"]
