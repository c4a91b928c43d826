"""Tests for replaying conflicts through the resolver."""

import io

from src.document import Document
from src.editable import Editable
from src.editable_conflict_resolver import EditableConflictResolver
from src.errors import BuildEditableError
from src.load_conflicts import DocumentConflicts, RecordedConflict, RecordedNamingStrategy
from src.operator_session import BatchSession, TerminalSession
from src.run_resolution import IGNORED, RESOLVED, UNRESOLVED, run_resolution


def _documents(strategy: RecordedNamingStrategy) -> list[DocumentConflicts]:
    block = Editable("block", "block", "block", 0, 1)
    first = Editable("content", "content", "area", 0, 1)
    nested = Editable("content", "content", "area", 0, 2, parents=[block])
    strategy.record(first, "content")
    strategy.record(nested, "content1")

    return [
        DocumentConflicts(
            Document("/about", 42),
            [
                RecordedConflict(
                    BuildEditableError("Built 2 editables", "content", "area"),
                    [first, nested],
                ),
                RecordedConflict(
                    BuildEditableError('Failed to build editable "teaser"', "teaser", "wysiwyg")
                ),
            ],
        )
    ]


def test_run_resolution_batch_leaves_everything_unresolved() -> None:
    """Verify that unattended runs resolve nothing and ignore nothing."""
    strategy = RecordedNamingStrategy()
    resolver = EditableConflictResolver(BatchSession(io.StringIO()), strategy)

    summary = run_resolution(_documents(strategy), resolver)

    assert [o.status for o in summary.outcomes] == [UNRESOLVED, UNRESOLVED]
    assert "Possible resolutions: content, content1" in summary.outcomes[0].detail
    assert summary.counts() == {RESOLVED: 0, IGNORED: 0, UNRESOLVED: 2}
    assert summary.has_unresolved


def test_run_resolution_interactive_choices() -> None:
    """Verify that operator answers become resolved and ignored outcomes."""
    strategy = RecordedNamingStrategy()
    session = TerminalSession(io.StringIO("1\n1\n"), io.StringIO())
    resolver = EditableConflictResolver(session, strategy)

    summary = run_resolution(_documents(strategy), resolver)

    resolved, ignored = summary.outcomes
    assert (resolved.status, resolved.detail) == (RESOLVED, "content1")
    assert (ignored.element, ignored.status) == ("teaser", IGNORED)
    assert not summary.has_unresolved
