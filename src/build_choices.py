"""Logic for presenting candidate editables as operator choices."""

import json
import logging
from collections.abc import Sequence

from src.dump_data import DataDumper, dump_data
from src.editable import Editable
from src.naming_strategy import NamingStrategy
from src.operator_session import OperatorSession

logger = logging.getLogger(__name__)


def build_choices(
    session: OperatorSession,
    editables: Sequence[Editable],
    naming_strategy: NamingStrategy,
    *,
    dump: DataDumper = dump_data,
) -> list[str]:
    """Describe every candidate and return one label per candidate.

    Labels are the names the strategy would assign and may repeat; position
    ``i`` of the result always belongs to ``editables[i]``.
    """
    choices = []
    for i, editable in enumerate(editables):
        new_name = editable.name_for_strategy(naming_strategy)

        session.new_line()
        session.title(f"Option {i}: {new_name}")
        session.table(
            [],
            [
                ["name", editable.name],
                ["realName", editable.real_name],
                ["new name", new_name],
                ["type", editable.type],
                ["parents", json.dumps(editable.parent_names())],
                ["index", editable.index],
                ["level", editable.level],
                ["data", dump(editable.data)],
            ],
        )
        choices.append(new_name)

    return choices


def choose(
    session: OperatorSession,
    prompt: str,
    choices: Sequence[str],
    default: int,
) -> int:
    """Return the position the operator picks, or ``default`` when unattended."""
    if not session.is_interactive():
        logger.debug(
            "No operator attached, applying default choice %r", choices[default]
        )
        return default
    return session.choice(prompt, choices)
