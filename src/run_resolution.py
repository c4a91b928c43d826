"""Orchestration logic for replaying recorded conflicts through the resolver."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from src.editable_conflict_resolver import EditableConflictResolver
from src.errors import AmbiguousResolutionError
from src.load_conflicts import DocumentConflicts

logger = logging.getLogger(__name__)

RESOLVED = "resolved"
IGNORED = "ignored"
UNRESOLVED = "unresolved"


@dataclass
class ResolutionOutcome:
    """Represents what happened to a single failed editable."""

    document_path: str
    element: str
    status: str  # resolved/ignored/unresolved
    detail: str = ""  # chosen new name or failure message


@dataclass
class ResolutionSummary:
    """Collects the outcomes of a replay run."""

    outcomes: list[ResolutionOutcome] = field(default_factory=list)

    def add(self, outcome: ResolutionOutcome) -> None:
        """Add a single outcome to the summary."""
        self.outcomes.append(outcome)

    def counts(self) -> dict[str, int]:
        """Return the number of outcomes per status."""
        counts = {RESOLVED: 0, IGNORED: 0, UNRESOLVED: 0}
        for outcome in self.outcomes:
            counts[outcome.status] += 1
        return counts

    @property
    def has_unresolved(self) -> bool:
        """Return whether any element was left unresolved."""
        return any(o.status == UNRESOLVED for o in self.outcomes)


def run_resolution(
    documents: Iterable[DocumentConflicts], resolver: EditableConflictResolver
) -> ResolutionSummary:
    """Resolve every recorded conflict and summarize the outcomes."""
    summary = ResolutionSummary()

    for entry in documents:
        document = entry.document
        for conflict in entry.conflicts:
            error = conflict.error

            if not conflict.is_ambiguous:
                result = resolver.resolve_build_failed(document, error)
                status = IGNORED if result.ignore_element else UNRESOLVED
                summary.add(
                    ResolutionOutcome(document.path, error.name, status, result.message)
                )
                continue

            try:
                chosen = resolver.resolve_conflict(document, error, conflict.candidates)
            except AmbiguousResolutionError as exc:
                summary.add(
                    ResolutionOutcome(document.path, error.name, UNRESOLVED, str(exc))
                )
                continue

            summary.add(
                ResolutionOutcome(
                    document.path,
                    error.name,
                    RESOLVED,
                    chosen.name_for_strategy(resolver.naming_strategy),
                )
            )

    counts = summary.counts()
    logger.info(
        "Resolution finished: resolved=%d, ignored=%d, unresolved=%d",
        counts[RESOLVED],
        counts[IGNORED],
        counts[UNRESOLVED],
    )
    return summary
