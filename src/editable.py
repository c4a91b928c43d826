"""Data model for a candidate reconstruction of an editable."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.naming_strategy import NamingStrategy


@dataclass
class Editable:
    """One structurally valid reconstruction of an ambiguous element."""

    name: str
    real_name: str
    type: str
    index: int  # Position among siblings, zero-based
    level: int  # Nesting depth
    data: Any = None
    parents: list["Editable"] = field(default_factory=list)  # outermost first

    def name_for_strategy(self, strategy: "NamingStrategy") -> str:
        """Return the name this editable gets under ``strategy``."""
        return strategy.name_for(self)

    def parent_names(self) -> list[str]:
        """Return the real names of all ancestors in order."""
        return [parent.real_name for parent in self.parents]
