"""Logic for loading recorded migration conflicts from a YAML file.

A conflict file lists documents and, per document, the editables the
migration could not build::

    documents:
      - path: /about
        id: 42
        template: Content/default.html.php
        conflicts:
          - name: content
            type: area
            data: ...
            errors: ["Parent block not found"]
            candidates:
              - {name: content, new_name: content, index: 0, level: 1}
              - {name: content, new_name: content1, index: 0, level: 2,
                 parents: [block]}

A conflict with fewer than two candidates is replayed as a build failure.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.document import Document
from src.editable import Editable
from src.errors import BuildEditableError, ConflictFileError, MigrationError


@dataclass
class RecordedConflict:
    """A failed editable together with the candidates built for it."""

    error: BuildEditableError
    candidates: list[Editable] = field(default_factory=list)

    @property
    def is_ambiguous(self) -> bool:
        """Return whether several candidates compete for this element."""
        return len(self.candidates) >= 2  # noqa: PLR2004


@dataclass
class DocumentConflicts:
    """All recorded conflicts of a single document."""

    document: Document
    conflicts: list[RecordedConflict]


class RecordedNamingStrategy:
    """Answers with the new names recorded next to each candidate."""

    def __init__(self) -> None:
        """Initialize an empty name registry."""
        # id -> (editable, name); the editable is kept so its id stays unique
        self._names: dict[int, tuple[Editable, str]] = {}

    def record(self, editable: Editable, new_name: str) -> None:
        """Remember the new name for ``editable``."""
        self._names[id(editable)] = (editable, new_name)

    def name_for(self, editable: Editable) -> str:
        """Return the recorded new name for ``editable``."""
        entry = self._names.get(id(editable))
        if entry is None or entry[0] is not editable:
            msg = f"No new name recorded for editable {editable.real_name!r}"
            raise MigrationError(msg)
        return entry[1]


def load_conflicts(
    path: Path, strategy: RecordedNamingStrategy
) -> list[DocumentConflicts]:
    """Load a conflict file, registering candidate names with ``strategy``."""
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in conflict file {path}: {exc}"
        raise ConflictFileError(msg) from exc

    if not isinstance(doc, dict) or not isinstance(doc.get("documents"), list):
        msg = f"Conflict file {path} must contain a 'documents' list"
        raise ConflictFileError(msg)

    return [_parse_document(raw, strategy) for raw in doc["documents"]]


def _require(raw: dict[str, Any], key: str, where: str) -> Any:
    value = raw.get(key)
    if value is None or value == "":
        msg = f"Missing '{key}' in {where}"
        raise ConflictFileError(msg)
    return value


def _parse_document(
    raw: Any, strategy: RecordedNamingStrategy
) -> DocumentConflicts:
    if not isinstance(raw, dict):
        msg = f"Document entries must be mappings, got {type(raw).__name__}"
        raise ConflictFileError(msg)

    path = str(_require(raw, "path", "document"))
    try:
        doc_id = int(_require(raw, "id", f"document {path}"))
    except (TypeError, ValueError) as exc:
        msg = f"Document {path} has a non-numeric id: {raw.get('id')!r}"
        raise ConflictFileError(msg) from exc

    document = Document(path=path, id=doc_id, template=raw.get("template") or None)
    conflicts = [
        _parse_conflict(c, strategy, path) for c in raw.get("conflicts") or []
    ]
    return DocumentConflicts(document=document, conflicts=conflicts)


def _parse_conflict(
    raw: Any, strategy: RecordedNamingStrategy, doc_path: str
) -> RecordedConflict:
    if not isinstance(raw, dict):
        msg = f"Conflicts of document {doc_path} must be mappings"
        raise ConflictFileError(msg)

    where = f"conflict of document {doc_path}"
    name = str(_require(raw, "name", where))
    element_type = str(_require(raw, "type", f"{where} '{name}'"))

    candidates = [
        _parse_candidate(c, strategy, element_type, f"{where} '{name}'")
        for c in raw.get("candidates") or []
    ]

    default_message = (
        f'Built {len(candidates)} editables for element "{name}"'
        if len(candidates) >= 2  # noqa: PLR2004
        else f'Failed to build editable "{name}"'
    )
    error = BuildEditableError(
        str(raw.get("message") or default_message),
        name,
        element_type,
        raw.get("data"),
        [MigrationError(str(e)) for e in raw.get("errors") or []],
    )
    return RecordedConflict(error=error, candidates=candidates)


def _parse_candidate(
    raw: Any, strategy: RecordedNamingStrategy, default_type: str, where: str
) -> Editable:
    if not isinstance(raw, dict):
        msg = f"Candidates of {where} must be mappings"
        raise ConflictFileError(msg)

    name = str(_require(raw, "name", f"candidate of {where}"))
    try:
        parents = [
            _parse_parent(p, level)
            for level, p in enumerate(raw.get("parents") or [])
        ]
        editable = Editable(
            name=name,
            real_name=str(raw.get("real_name") or name),
            type=str(raw.get("type") or default_type),
            index=int(raw.get("index", 0)),
            level=int(raw.get("level", len(parents))),
            data=raw.get("data"),
            parents=parents,
        )
    except (TypeError, ValueError) as exc:
        msg = (
            f"Candidate {name!r} of {where} or one of its parents "
            "has a non-numeric index or level"
        )
        raise ConflictFileError(msg) from exc

    new_name = _require(raw, "new_name", f"candidate {name!r} of {where}")
    strategy.record(editable, str(new_name))
    return editable


def _parse_parent(raw: Any, level: int) -> Editable:
    if isinstance(raw, dict):
        real_name = str(raw.get("real_name") or raw.get("name") or "")
        return Editable(
            name=str(raw.get("name") or real_name),
            real_name=real_name,
            type=str(raw.get("type") or ""),
            index=int(raw.get("index", 0)),
            level=level,
        )
    return Editable(name=str(raw), real_name=str(raw), type="", index=0, level=level)
