"""Exception types raised while resolving editable migration conflicts."""

from collections.abc import Sequence
from typing import Any


class MigrationError(Exception):
    """Base class for all errors raised by the migration resolver."""


class MigrationLogicError(MigrationError):
    """Raised when a caller violates a precondition of the resolver."""


class ConfigurationError(MigrationError):
    """Raised when configuration values are invalid."""


class ConflictFileError(MigrationError):
    """Raised when a recorded conflict file cannot be interpreted."""


class BuildEditableError(MigrationError):
    """Raised when an editable could not be rebuilt under its new name.

    The resolver may flip ``ignore_element`` to tell the caller that the
    operator decided to drop the element.
    """

    def __init__(
        self,
        message: str,
        name: str,
        element_type: str,
        element_data: Any = None,
        errors: Sequence[Exception] = (),
    ) -> None:
        """Initialize the error with the element it failed to build."""
        super().__init__(message)
        self.name = name
        self.type = element_type
        self.element_data = element_data
        self.errors: list[Exception] = list(errors)
        self.ignore_element = False

    @property
    def message(self) -> str:
        """Return the human readable failure message."""
        return str(self)


class AmbiguousResolutionError(BuildEditableError):
    """Raised when more than one candidate editable was left unresolved."""

    def __init__(
        self,
        message: str,
        name: str,
        element_type: str,
        element_data: Any = None,
        errors: Sequence[Exception] = (),
        possible_names: Sequence[str] = (),
        previous: BuildEditableError | None = None,
    ) -> None:
        """Initialize the error with the names each candidate would get."""
        super().__init__(message, name, element_type, element_data, errors)
        self.possible_names: list[str] = list(possible_names)
        self.previous = previous

    @classmethod
    def from_previous(
        cls,
        previous: BuildEditableError,
        message: str,
        possible_names: Sequence[str],
    ) -> "AmbiguousResolutionError":
        """Derive an ambiguity error carrying the element of ``previous``."""
        error = cls(
            message,
            previous.name,
            previous.type,
            previous.element_data,
            previous.errors,
            possible_names=possible_names,
            previous=previous,
        )
        error.__cause__ = previous
        return error
