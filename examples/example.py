"""Example usage of TurnstileTracker."""

import logging
import sys
from pathlib import Path

# Add src to path so we can import turnstats
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from turnstats.turnstile_tracker import TurnstileTracker, format_report

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def print_station_totals(station: str, line: str = None):
    """
    Fetch last week's file and display totals for one station.

    Args:
        station: Station name as it appears in the file (e.g., "TIMES SQ-42 ST")
        line: Line-group label. Every line-group at the station is shown if omitted.
    """
    try:
        tracker = TurnstileTracker(data_dir="data")
        tracker.load()

        lines = [line] if line else tracker.lines_for(station)
        for selected in lines:
            for text in format_report(tracker.get_report(station, selected)):
                print(text)
            print()

    except ValueError as e:
        print(f"Error: {e}")
        print("Station names are upper case, e.g. 'TIMES SQ-42 ST'")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to build report: {e}", exc_info=True)
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: example.py STATION [LINE]")
        sys.exit(2)
    print_station_totals(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
