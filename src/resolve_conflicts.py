"""Replay recorded editable migration conflicts and resolve them.

Reads a YAML conflict file, asks the operator about every editable the
migration could not build (or applies the unattended defaults) and prints one
line per element.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from src.configure_logging import configure_logging
from src.editable_conflict_resolver import EditableConflictResolver
from src.errors import ConfigurationError, ConflictFileError
from src.load_config import load_config, resolver_settings
from src.load_conflicts import RecordedNamingStrategy, load_conflicts
from src.operator_session import detect_session
from src.run_resolution import run_resolution

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNRESOLVED = 1
EXIT_USAGE = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the conflict replay."""
    ap = argparse.ArgumentParser(
        description="Resolve editables a naming strategy migration could not build.",
    )
    ap.add_argument(
        "conflicts_file",
        type=Path,
        help="YAML file listing documents and their failed editables",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    interaction = ap.add_mutually_exclusive_group()
    interaction.add_argument(
        "-n",
        "--no-interaction",
        dest="interactive",
        action="store_false",
        default=None,
        help="Never prompt; leave every conflict unresolved",
    )
    interaction.add_argument(
        "--interaction",
        dest="interactive",
        action="store_true",
        help="Prompt even if the terminal is not detected as interactive",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the conflict replay and return the process exit code."""
    args = parse_args(argv)

    try:
        settings = resolver_settings(load_config(args.config))
        configure_logging(level=logging.DEBUG if args.verbose else settings.log_level)

        strategy = RecordedNamingStrategy()
        documents = load_conflicts(args.conflicts_file, strategy)
    except (ConfigurationError, ConflictFileError, OSError) as exc:
        logger.error("%s", exc)  # noqa: TRY400
        return EXIT_USAGE

    interactive = settings.interactive
    if args.interactive is not None:
        interactive = args.interactive
    session = detect_session(sys.stdin, sys.stdout, interactive)
    resolver = EditableConflictResolver(
        session, strategy, separator_width=settings.separator_width
    )

    summary = run_resolution(documents, resolver)

    session.new_line()
    for outcome in summary.outcomes:
        session.writeln(
            f"[{outcome.status}] {outcome.document_path} {outcome.element}: "
            f"{outcome.detail}"
        )

    return EXIT_UNRESOLVED if summary.has_unresolved else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
