"""Station index and weekly turnstile totals from cumulative counters."""

import logging
from typing import Dict, List, Sequence, Tuple

from .config import (
    FIELD_CONTROL_AREA,
    FIELD_ENTRIES,
    FIELD_EXITS,
    FIELD_LINENAME,
    FIELD_SCP,
    FIELD_STATION,
    FIELD_UNIT,
)
from .errors import RecordShapeError
from .models import TurnstileKey, TurnstileTotal

logger = logging.getLogger(__name__)

Reading = Tuple[int, int]  # (entries counter, exits counter)

# Counters are 64-bit signed on the MTA side
MAX_COUNTER = 2 ** 63 - 1


def _field(row: Sequence[str], index: int, row_number: int) -> str:
    try:
        return row[index]
    except IndexError:
        raise RecordShapeError(
            f"Row {row_number} has {len(row)} fields, missing field {index}"
        ) from None


def build_station_index(rows: Sequence[Sequence[str]]) -> Dict[str, List[str]]:
    """
    Map each station to the line-groups seen for it.

    The first row is treated as the header and skipped. Line-group labels
    are kept in first-seen order with no duplicates.

    Args:
        rows: All rows of the turnstile file, header included.

    Returns:
        Dictionary of station name -> [line-group labels].
    """
    stations: Dict[str, List[str]] = {}
    for row_number, row in enumerate(rows[1:], start=2):
        station = _field(row, FIELD_STATION, row_number)
        line = _field(row, FIELD_LINENAME, row_number)

        lines = stations.setdefault(station, [])
        if line not in lines:
            lines.append(line)

    logger.debug(f"Indexed {len(stations)} stations")
    return stations


def sorted_station_names(index: Dict[str, List[str]]) -> List[str]:
    """Station names in the order they are numbered for selection."""
    return sorted(index)


def parse_counter(value: str) -> Tuple[int, bool]:
    """
    Parse a cumulative counter field such as "0001050" or "  0000042".

    Whitespace anywhere in the field is dropped and leading zeros are
    stripped before conversion.

    Returns:
        (counter, ok). When the field is not a decimal number or does not fit
        in a 64-bit counter, counter is 0 and ok is False.
    """
    cleaned = "".join(value.split())
    digits = cleaned.lstrip("0")
    if not digits:
        # All zeros is a legitimate reading; an empty field is not
        return 0, bool(cleaned)
    if not (digits.isascii() and digits.isdigit()):
        return 0, False
    if len(digits) > len(str(MAX_COUNTER)):
        return 0, False
    counter = int(digits)
    if counter > MAX_COUNTER:
        return 0, False
    return counter, True


def normalize_counter(value: str) -> int:
    """Parse a counter field, defaulting to 0 with a warning when it is unusable."""
    counter, ok = parse_counter(value)
    if not ok:
        logger.warning(f"Unparseable counter value {value!r}, using 0")
    return counter


def group_readings(
    rows: Sequence[Sequence[str]], station: str, line: str
) -> Dict[TurnstileKey, List[Reading]]:
    """
    Collect counter readings per turnstile for one station and line-group.

    Readings are appended in file order, which is chronological within a
    weekly export.
    """
    readings: Dict[TurnstileKey, List[Reading]] = {}
    for row_number, row in enumerate(rows[1:], start=2):
        if (
            _field(row, FIELD_STATION, row_number) != station
            or _field(row, FIELD_LINENAME, row_number) != line
        ):
            continue

        key = TurnstileKey(
            control_area=_field(row, FIELD_CONTROL_AREA, row_number),
            unit=_field(row, FIELD_UNIT, row_number),
            scp=_field(row, FIELD_SCP, row_number),
        )
        entries = normalize_counter(_field(row, FIELD_ENTRIES, row_number))
        exits = normalize_counter(_field(row, FIELD_EXITS, row_number))
        readings.setdefault(key, []).append((entries, exits))

    return readings


def aggregate(
    rows: Sequence[Sequence[str]], station: str, line: str
) -> List[TurnstileTotal]:
    """
    Compute the net weekly entries and exits for every turnstile of a station.

    Each turnstile's total is its last cumulative reading minus its first.
    Counter resets are not corrected; totals that come out negative are
    marked suspect.

    Args:
        rows: All rows of the turnstile file, header included.
        station: Station name exactly as it appears in the file.
        line: Line-group label (e.g. "ACE") for that station.

    Returns:
        TurnstileTotal objects sorted by turnstile "C/A,UNIT,SCP".
    """
    grouped = group_readings(rows, station, line)

    totals: List[TurnstileTotal] = []
    for key, series in grouped.items():
        first_entries, first_exits = series[0]
        last_entries, last_exits = series[-1]
        total = TurnstileTotal(
            key=key,
            entries=last_entries - first_entries,
            exits=last_exits - first_exits,
            readings=len(series),
        )
        if total.entries < 0 or total.exits < 0:
            total.suspect = True
            logger.warning(
                f"Turnstile {key.display} counters went backwards "
                f"({total.entries} entries, {total.exits} exits)"
            )
        totals.append(total)

    totals.sort(key=lambda t: t.key.display)
    logger.info(f"Aggregated {len(totals)} turnstiles for {station} ({line})")
    return totals
