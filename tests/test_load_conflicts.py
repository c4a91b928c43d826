"""Tests for loading recorded conflict files."""

from pathlib import Path

import pytest

from src.errors import ConflictFileError, MigrationError
from src.load_conflicts import RecordedNamingStrategy, load_conflicts

CONFLICTS_YAML = """\
documents:
  - path: /about
    id: 42
    template: Content/default.html.php
    conflicts:
      - name: content
        type: area
        data: "<p>Hello</p>"
        candidates:
          - name: content
            new_name: content
            index: 0
            level: 1
          - name: content
            new_name: content1
            index: 0
            level: 2
            parents: [block]
      - name: teaser
        type: wysiwyg
        errors:
          - Parent block "slider" not found
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "conflicts.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_conflicts_parses_documents(tmp_path: Path) -> None:
    """Verify documents, failures and candidates are built from YAML."""
    strategy = RecordedNamingStrategy()
    documents = load_conflicts(_write(tmp_path, CONFLICTS_YAML), strategy)

    assert len(documents) == 1
    entry = documents[0]
    assert entry.document.path == "/about"
    assert entry.document.id == 42  # noqa: PLR2004
    assert entry.document.template == "Content/default.html.php"

    ambiguous, broken = entry.conflicts
    assert ambiguous.is_ambiguous
    assert ambiguous.error.name == "content"
    assert ambiguous.error.element_data == "<p>Hello</p>"
    assert [c.level for c in ambiguous.candidates] == [1, 2]
    assert ambiguous.candidates[1].parent_names() == ["block"]
    assert ambiguous.candidates[1].type == "area"
    assert [strategy.name_for(c) for c in ambiguous.candidates] == ["content", "content1"]

    assert not broken.is_ambiguous
    assert broken.error.message == 'Failed to build editable "teaser"'
    assert [str(e) for e in broken.error.errors] == ['Parent block "slider" not found']


def test_recorded_strategy_rejects_unknown_editable(tmp_path: Path) -> None:
    """Verify that names are only known for loaded candidates."""
    strategy = RecordedNamingStrategy()
    load_conflicts(_write(tmp_path, CONFLICTS_YAML), strategy)
    other = load_conflicts(_write(tmp_path, CONFLICTS_YAML), RecordedNamingStrategy())

    with pytest.raises(MigrationError, match="No new name recorded"):
        strategy.name_for(other[0].conflicts[0].candidates[0])


@pytest.mark.parametrize(
    ("text", "match"),
    [
        ("documents: {}\n", "'documents' list"),
        ("documents: [\n", "Invalid YAML"),
        ("documents:\n  - id: 1\n", "Missing 'path'"),
        ("documents:\n  - path: /a\n    id: abc\n", "non-numeric id"),
        (
            "documents:\n  - path: /a\n    id: 1\n    conflicts:\n      - name: x\n",
            "Missing 'type'",
        ),
        (
            "documents:\n  - path: /a\n    id: 1\n    conflicts:\n"
            "      - name: x\n        type: area\n        candidates:\n"
            "          - name: x\n",
            "Missing 'new_name'",
        ),
        (
            "documents:\n  - path: /a\n    id: 1\n    conflicts:\n"
            "      - name: x\n        type: area\n        candidates:\n"
            "          - name: x\n            new_name: y\n"
            "            parents: [{name: b, index: abc}]\n",
            "non-numeric index",
        ),
    ],
)
def test_load_conflicts_rejects_malformed_files(
    tmp_path: Path, text: str, match: str
) -> None:
    """Verify that malformed conflict files raise a descriptive error."""
    with pytest.raises(ConflictFileError, match=match):
        load_conflicts(_write(tmp_path, text), RecordedNamingStrategy())
