"""Interactive command line for weekly turnstile totals."""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .errors import TurnstatsError
from .export import write_totals_csv
from .mta_client import last_saturday, turnstile_filename
from .selection import AskFn, choose_line, choose_station
from .turnstile_tracker import TurnstileTracker, format_report

logger = logging.getLogger(__name__)


def ask_stdin(prompt: str, options: Sequence[str]) -> str:
    """Print a numbered list and read the chosen number from stdin."""
    # A question heads the list; an input prompt follows it
    heading = prompt.endswith("?")
    if heading:
        print(prompt)
    for i, option in enumerate(options, start=1):
        print(f"({i}) {option}")
    if not heading:
        print(prompt)
    return input()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turnstats",
        description="Net weekly entries and exits per turnstile from MTA turnstile data",
    )
    parser.add_argument("--file", help="local turnstile file to read instead of the latest weekly export")
    parser.add_argument("--data-dir", help="directory downloaded weekly files are kept in")
    parser.add_argument("--base-url", help="URL the weekly files are published under")
    parser.add_argument("--csv", dest="csv_path", help="also write the totals to this CSV file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def run(args: argparse.Namespace, ask: AskFn = ask_stdin) -> List[str]:
    """Load data, ask for a station and line, and return the report lines."""
    tracker = TurnstileTracker(data_dir=args.data_dir, base_url=args.base_url)
    if args.file:
        tracker.load_path(args.file)
    else:
        filename = turnstile_filename(last_saturday())
        downloading = not (tracker.client.data_dir / filename).exists()
        if downloading:
            print(f"Getting {filename}...")
        path = tracker.load(filename)
        if downloading:
            print(f"{path.stat().st_size} bytes downloaded.")
    print(f"Processing {tracker.source}...")

    station = choose_station(tracker.station_names(), ask)
    line = choose_line(station, tracker.lines_for(station), ask)
    report = tracker.get_report(station, line)

    if args.csv_path:
        write_totals_csv(report.totals, args.csv_path)
    return format_report(report)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        for line in run(args):
            print(line)
    except (TurnstatsError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
