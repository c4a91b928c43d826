"""Operator-driven resolution of editables that could not be migrated.

The migration driver hands over two kinds of problems:

* a build failure, where an editable could not be rebuilt at all, and
* a conflict, where several structurally valid candidates exist for the same
  element (nested "content" inside "content", or siblings such as "content"
  and "content1").

Each call is a fresh decision. When nobody is attached to the session the
resolver never discards data and never guesses between candidates.
"""

import logging
from collections.abc import Sequence

from src.build_choices import build_choices, choose
from src.document import Document
from src.dump_data import DataDumper, dump_data
from src.editable import Editable
from src.errors import AmbiguousResolutionError, BuildEditableError, MigrationLogicError
from src.naming_strategy import NamingStrategy
from src.operator_session import OperatorSession
from src.render_error_info import SEPARATOR_WIDTH, render_error_info

logger = logging.getLogger(__name__)

LEAVE_UNRESOLVED = "Leave unresolved"
IGNORE_EDITABLE = "Ignore editable (data will be lost!)"

CONFLICT_MESSAGE = """\
The element {name} can't be automatically converted as there is more
than one possible hierarchy combination. This is probably because of nested
elements with the same name ("content" inside "content") or blocks with
similar names and numeric suffixes ("content" and "content1")."""

WRONG_OPTION_WARNING = (
    "[WARNING] Selecting the wrong option here will rename your elements "
    "to a wrong target name!"
)

MIN_CANDIDATES = 2


class EditableConflictResolver:
    """Asks the operator how to proceed with editables the migration could not build."""

    def __init__(
        self,
        session: OperatorSession,
        naming_strategy: NamingStrategy,
        *,
        dump: DataDumper = dump_data,
        separator_width: int = SEPARATOR_WIDTH,
    ) -> None:
        """Initialize the resolver with its operator session and naming strategy."""
        self.session = session
        self.naming_strategy = naming_strategy
        self.dump = dump
        self.separator_width = separator_width

    def resolve_build_failed(
        self, document: Document, error: BuildEditableError
    ) -> BuildEditableError:
        """Let the operator decide whether a broken editable may be dropped.

        Returns ``error`` itself; ``error.ignore_element`` is set when the
        operator chose to ignore the editable. Unattended runs leave the
        error untouched.
        """
        if not self.session.is_interactive():
            return error

        message = "\n".join(
            [
                f"[ERROR] {error.message}",
                "        You can try to open and save the document in the admin "
                "interface to clean up orphaned elements.",
            ]
        )
        self._show_error_info(document, error, message)

        choices = [LEAVE_UNRESOLVED, IGNORE_EDITABLE]
        selected = self.session.choice(
            f'Please select how to proceed with editable "{error.name}"', choices
        )

        if choices[selected] == IGNORE_EDITABLE:
            logger.info(
                "Ignoring editable %s on document %s (ID %s)",
                error.name,
                document.path,
                document.id,
            )
            error.ignore_element = True

        return error

    def resolve_conflict(
        self,
        document: Document,
        error: BuildEditableError,
        editables: Sequence[Editable],
    ) -> Editable:
        """Pick one of several candidate editables built for the same element.

        Raises ``AmbiguousResolutionError`` when the conflict is left
        unresolved, which is what always happens without an operator.
        """
        if len(editables) < MIN_CANDIDATES:
            msg = (
                f"Expected at least {MIN_CANDIDATES} editables, {len(editables)} given"
            )
            raise MigrationLogicError(msg)

        editables = list(editables)

        self._show_error_info(document, error, CONFLICT_MESSAGE.format(name=error.name))

        self.session.new_line()
        self.session.writeln(WRONG_OPTION_WARNING)
        self.session.new_line()

        choices = build_choices(
            self.session, editables, self.naming_strategy, dump=self.dump
        )
        choices.append(LEAVE_UNRESOLVED)
        leave_unresolved = len(choices) - 1

        selected = choose(
            self.session,
            "Please choose the resolution matching your template structure",
            choices,
            default=leave_unresolved,
        )

        if selected == leave_unresolved:
            possible_names = [
                editable.name_for_strategy(self.naming_strategy)
                for editable in editables
            ]
            logger.info(
                "Leaving element %s on document %s unresolved (%d candidates)",
                error.name,
                document.path,
                len(editables),
            )
            message = (
                f"Ambiguous results left unresolved. Built {len(editables)} editables "
                f'for element "{error.name}". Possible resolutions: '
                f"{', '.join(possible_names)}"
            )
            raise AmbiguousResolutionError.from_previous(
                error, message, possible_names
            )

        logger.info(
            "Resolved element %s on document %s to option %d (%s)",
            error.name,
            document.path,
            selected,
            choices[selected],
        )
        return editables[selected]

    def _show_error_info(
        self, document: Document, error: BuildEditableError, message: str
    ) -> None:
        render_error_info(
            self.session,
            document,
            error,
            message,
            dump=self.dump,
            separator_width=self.separator_width,
        )
