"""Interface of the naming strategy editables are migrated to."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.editable import Editable


class NamingStrategy(Protocol):
    """Computes the name an editable gets under the target naming convention."""

    def name_for(self, editable: "Editable") -> str:
        """Return the new name for ``editable``."""
        ...
