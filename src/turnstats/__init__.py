"""turnstats - Net weekly entries and exits per turnstile from MTA turnstile data."""

__version__ = "0.1.0"

from .models import TurnstileKey, TurnstileTotal, WeeklyReport
from .errors import TurnstatsError, RecordShapeError, SelectionError, DownloadError
from .aggregator import aggregate, build_station_index, normalize_counter, sorted_station_names
from .turnstile_loader import TurnstileLoader
from .mta_client import TurnstileFileClient, last_saturday, turnstile_filename
from .selection import choose_line, choose_station, parse_ordinal
from .export import totals_to_frame, write_totals_csv
from .turnstile_tracker import TurnstileTracker, format_report

__all__ = [
    "TurnstileTracker",
    "TurnstileLoader",
    "TurnstileFileClient",
    "TurnstileKey",
    "TurnstileTotal",
    "WeeklyReport",
    "TurnstatsError",
    "RecordShapeError",
    "SelectionError",
    "DownloadError",
    "aggregate",
    "build_station_index",
    "normalize_counter",
    "sorted_station_names",
    "last_saturday",
    "turnstile_filename",
    "format_report",
    "choose_station",
    "choose_line",
    "parse_ordinal",
    "totals_to_frame",
    "write_totals_csv",
]
