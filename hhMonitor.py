# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""hhMonitor - Vacancy counter for programming languages at spb.hh.ru.

Main entry point: looks up the vacancy count of every language given on the
command line concurrently and prints a timestamped report, or appends it to
a file when -f is used.
Refactored (v. 00010) - Options are only parsed before the first language.
"""

import argparse
import sys
from typing import List, Optional

from src.core.monitor import VacancyMonitor
from src.core.report import form_stat_entry
from src.core.settings import InvalidJSONContentError, UnknownSettingError, load_settings, validate_settings
from src.utils.sink import emit

USAGE_EPILOG = """\
With no FILE, write to standard output.
If FILE is present, the report is appended followed by a blank line.

output format:
    [YY-MM-DD HH:MM]
    lang_1=10
    lang_2=50
    ...
    lang_n=20
"""


def build_parser() -> argparse.ArgumentParser:
    """Creates the command line parser."""
    parser = argparse.ArgumentParser(
        prog="hh-monitor",
        description="Looks up vacancy count for programming languages at spb.hh.ru.",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument("-f", dest="file", metavar="FILE", help="Append the report to FILE instead of stdout.")

    parser.add_argument("--config", help="JSON file overriding the built-in search settings.")

    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds (default: none).")

    parser.add_argument("--verbose", "-v", action="store_true", help="Print progress to stderr.")

    # Everything from the first language on is a language, "-f" included
    parser.add_argument("langs", nargs=argparse.REMAINDER, metavar="LANGS", help="Programming languages to search for.")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main execution function for parsing arguments and running the monitor."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.error("arguments are missing")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
        if args.timeout is not None:
            settings["timeout"] = args.timeout
        validate_settings(settings)
    except (OSError, ValueError, InvalidJSONContentError, UnknownSettingError) as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    stats = VacancyMonitor(settings, verbose=args.verbose).monitor(args.langs)
    entry = form_stat_entry(stats)

    try:
        emit(entry, args.file)
    except OSError as e:
        print(f"❌ Cannot write report to {args.file}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

# End of hhMonitor.py (v. 00010)
