"""Main turnstile report class."""

import logging
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .aggregator import aggregate, build_station_index, sorted_station_names
from .models import WeeklyReport
from .mta_client import TurnstileFileClient, last_saturday, turnstile_filename
from .turnstile_loader import Row, TurnstileLoader

logger = logging.getLogger(__name__)


class TurnstileTracker:
    """
    Weekly turnstile totals for MTA subway stations.

    This class provides methods to:
    - Fetch and load a weekly turnstile export
    - List stations and the line-groups recorded for each
    - Get net weekly entries and exits per turnstile for a station and line
    """

    def __init__(
        self,
        data_dir: Union[str, Path, None] = None,
        base_url: Optional[str] = None,
        client: Optional[TurnstileFileClient] = None,
    ):
        """
        Initialize the tracker.

        Args:
            data_dir: Directory weekly files are cached in.
            base_url: URL the weekly files are published under.
            client: Preconfigured file client, overrides data_dir and base_url.
        """
        self.client = client or TurnstileFileClient(base_url=base_url, data_dir=data_dir)
        self.loader = TurnstileLoader()
        self.rows: Optional[List[Row]] = None
        self.station_index: Dict[str, List[str]] = {}
        self.source = ""

    def load(self, filename: Optional[str] = None, today: Optional[date] = None) -> Path:
        """
        Fetch (if needed) and load a weekly turnstile file.

        Args:
            filename: File name to load. Defaults to the most recent Saturday's export.
            today: Reference date for finding the most recent Saturday.

        Returns:
            Path of the loaded file.
        """
        if filename is None:
            filename = turnstile_filename(last_saturday(today))
        path = self.client.ensure_file(filename)
        self.load_path(path)
        return path

    def load_path(self, path: Union[str, Path]) -> None:
        """Load an existing local turnstile file."""
        self.load_rows(self.loader.load_from_file(path), source=str(path))

    def load_rows(self, rows: Sequence[Row], source: str = "") -> None:
        """Use an already loaded row set, header included."""
        self.rows = list(rows)
        self.source = source
        self.station_index = build_station_index(self.rows)
        logger.info(f"Indexed {len(self.station_index)} stations from {source or 'rows'}")

    def _require_rows(self) -> List[Row]:
        if self.rows is None:
            raise RuntimeError("No turnstile data loaded; call load() first")
        return self.rows

    def station_names(self) -> List[str]:
        """Station names in selection order."""
        self._require_rows()
        return sorted_station_names(self.station_index)

    def lines_for(self, station: str) -> List[str]:
        """
        Get the line-groups recorded for a station.

        Raises:
            ValueError: If the station is not in the loaded file.
        """
        self._require_rows()
        if station not in self.station_index:
            raise ValueError(f"Station {station} not found")
        return list(self.station_index[station])

    def get_report(self, station: str, line: str) -> WeeklyReport:
        """
        Get weekly totals for every turnstile of a station and line-group.

        Args:
            station: Station name as listed by station_names().
            line: Line-group label as listed by lines_for().

        Returns:
            WeeklyReport with totals sorted by turnstile.
        """
        rows = self._require_rows()
        return WeeklyReport(
            station=station,
            line=line,
            totals=aggregate(rows, station, line),
            source=self.source,
        )


def format_report(report: WeeklyReport) -> List[str]:
    """Render a report as printable lines."""
    lines = [
        f"Turnstiles for the {report.line} line(s) at the {report.station} station.",
        "====",
    ]
    if not report.totals:
        lines.append("No turnstile readings found.")
        return lines

    for total in report.totals:
        line = (
            f"{total.key.display} {total.entries} entries for this week; "
            f"{total.exits} exits for this week."
        )
        if total.suspect:
            line += " (counter reset?)"
        lines.append(line)
    return lines
