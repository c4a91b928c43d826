"""Logic for dumping an element data payload as terminal text."""

from collections.abc import Callable
from pprint import pformat

EMPTY_PLACEHOLDER = "<empty>"

EMPTYABLE_TYPES = (str, bytes, list, tuple, dict, set)

DataDumper = Callable[[object], str]


def dump_data(data: object, width: int = 80) -> str:
    """Render ``data`` for a diagnostic report.

    Strings are shown trimmed; containers and objects are pretty printed so
    every nested field is visible. Blank values render as ``<empty>``.
    """
    if isinstance(data, str):
        data = data.strip()
    if data is None or (isinstance(data, EMPTYABLE_TYPES) and not data):
        return EMPTY_PLACEHOLDER
    if isinstance(data, str):
        return data
    return pformat(data, width=width, sort_dicts=False).strip()
