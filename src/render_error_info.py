"""Logic for rendering the diagnostic context of a failed editable."""

from src.document import Document
from src.dump_data import DataDumper, dump_data
from src.errors import BuildEditableError
from src.operator_session import OperatorSession

SEPARATOR_WIDTH = 80


def render_error_info(
    session: OperatorSession,
    document: Document,
    error: BuildEditableError,
    message: str | None = None,
    *,
    dump: DataDumper = dump_data,
    separator_width: int = SEPARATOR_WIDTH,
) -> None:
    """Write the document, element and payload of ``error`` to the session."""
    session.new_line(2)
    session.writeln("=" * separator_width)
    session.new_line(2)

    if message:
        session.writeln(message)
        session.new_line()

    if error.errors:
        for sub_error in error.errors:
            session.writeln(f"  * {sub_error}")
        session.new_line()

    rows = [
        ["Document", f"{document.path} (ID: {document.id})"],
        ["Element", f"{error.name} (type {error.type})"],
    ]
    if document.template:
        rows.append(["Template", document.template])
    rows.append(["Data", dump(error.element_data)])

    session.table([], rows)
