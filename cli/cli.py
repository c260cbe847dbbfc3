#!/usr/bin/env python3
"""Command-line demo: which months does a training need to be finished in?"""

import argparse
import sys
import traceback
from pathlib import Path
import logging

# Ensure project root is on the import path when executing from the CLI folder
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from flagset import FlagRegistry, FlagValue, combine, decode, from_flagstring, from_integer
from flagset import to_flagstring, to_integer
from version import __version_display__

log = logging.getLogger(__name__)

DEFAULT_MONTHS = ['March', 'April', 'May']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Combine training months into a bit flag value and list them back.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--months",
        nargs="+",
        metavar="NAME",
        help="Months to combine (default: March April May).")
    source.add_argument(
        "--value",
        type=int,
        help="Integer flag value to decode instead of combining months.")
    source.add_argument(
        "--flagstring",
        help="Letter flagstring to decode instead of combining months.")
    parser.add_argument(
        "--show-flagstring",
        action="store_true",
        help="Also print the letter flagstring for the value.")
    parser.add_argument( '-log',
        '--loglevel',
        default='warning',
        help='Provide logging level. Example --loglevel debug, default=warning' )
    parser.add_argument(
        "--version",
        action="version",
        version=__version_display__)

    return parser


def resolve_value(args: argparse.Namespace) -> FlagValue:
    definition = FlagRegistry.TRAINING_MONTHS

    if args.value is not None:
        return from_integer(definition, args.value)
    if args.flagstring is not None:
        return from_flagstring(definition, args.flagstring)

    names = args.months or DEFAULT_MONTHS
    labels = [definition.find_label(name) for name in names]
    return combine(definition, labels)


def format_report(value: FlagValue, show_flagstring: bool = False) -> list[str]:
    lines = [str(to_integer(value))]
    if show_flagstring:
        lines.append(f"Flagstring: {to_flagstring(value)}")
    for name in decode(value):
        lines.append(f"Training needs to be finished in {name}.")
    return lines


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=args.loglevel.upper())

        value = resolve_value(args)
        log.info(f"Reporting training months: {value.describe()}")
        lines = format_report(value, show_flagstring=args.show_flagstring)
    except ValueError as exc:
        parser.error(str(exc))
    except KeyError as exc:
        parser.error(exc.args[0])
    except Exception as exc:  # pragma: no cover
        print(f"Error: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1
    else:
        for line in lines:
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
