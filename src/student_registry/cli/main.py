"""Main CLI entry point for student registry."""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from .. import __version__
from ..core.readers import DATE_ENTRY_MODES, ReaderFactory
from ..pipelines.registration import RegistrationResult, run_registration

LOG_LEVEL_ENV = "STUDENT_REGISTRY_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

logger = logging.getLogger(__name__)


def result_to_json(result: RegistrationResult) -> str:
    """Render a registration result as indented JSON."""
    payload = {
        "person": result.person.to_dict(),
        "student": result.student.to_dict(),
        "reference_date": result.reference_date.isoformat(),
        "student_age": result.student_age,
        "letter": result.letter,
        "letter_count": result.letter_count,
        "roles": {
            "person": result.person.get_role_info(),
            "student": result.student.get_role_info(),
        },
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def wait_for_keypress(prompt: str = "Press Enter to exit...") -> None:
    """Block until the user confirms, ignoring a closed stdin."""
    print()
    print(prompt, end="", flush=True)
    sys.stdin.readline()


def report_abort(exc: BaseException) -> None:
    """Tell the user that input stopped before the program was done."""
    logger.info(f"Input ended early: {type(exc).__name__}")
    print()
    print("Input aborted.")


def register_command(args):
    """Run one interactive registration."""
    reader = ReaderFactory.create("console", date_entry=args.date_entry)
    try:
        result = run_registration(reader)
        if result is not None and args.format == "json":
            print()
            print(result_to_json(result))
    except (EOFError, KeyboardInterrupt) as e:
        report_abort(e)

    if not args.no_pause:
        try:
            wait_for_keypress()
        except (EOFError, KeyboardInterrupt) as e:
            report_abort(e)


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="student-registry",
        description="Collect a person's and a student's details and report age and letter counts"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"student-registry {__version__}"
    )
    parser.add_argument(
        "--date-entry",
        choices=DATE_ENTRY_MODES,
        default="text",
        help="Type dates on one line (text) or as separate day, month and year (parts)"
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Also print the collected data as JSON when set to json",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        help=f"Logging level, written to stderr (default from {LOG_LEVEL_ENV})",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Exit without waiting for Enter at the end",
    )
    parser.set_defaults(func=register_command)

    # Parse arguments
    args = parser.parse_args(argv)

    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"{LOG_LEVEL_ENV} must be one of {', '.join(LOG_LEVELS)}, got {args.log_level!r}"
        )

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    # Execute command
    args.func(args)
    return 0


if __name__ == "__main__":
    main()
