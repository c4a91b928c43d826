"""Data model for the document whose editables are being migrated."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """Represents a page or snippet being migrated."""

    path: str  # Full real path, e.g. /en/about
    id: int
    template: str | None = None
