"""Numbered-list selection of a station and line-group."""

import logging
from typing import Callable, Sequence

from .errors import SelectionError

logger = logging.getLogger(__name__)

# ask(prompt, options) -> raw reply, e.g. a line read from stdin
AskFn = Callable[[str, Sequence[str]], str]


def parse_ordinal(text: str, count: int) -> int:
    """
    Validate a 1-based choice from a numbered list of `count` items.

    Only a trailing line terminator is tolerated; anything else besides
    ASCII digits is rejected.

    Raises:
        SelectionError: If the reply is not an integer between 1 and count.
    """
    reply = text.rstrip("\r\n")
    if not (reply.isascii() and reply.isdigit()):
        raise SelectionError(f"Enter a valid number, got {reply!r}")

    digits = reply.lstrip("0")
    # Longer than the largest ordinal cannot be in range
    if len(digits) > len(str(count)):
        raise SelectionError(f"Enter a valid number between 1 and {count}")

    ordinal = int(digits or "0")
    if ordinal < 1 or ordinal > count:
        raise SelectionError(f"Enter a valid number between 1 and {count}, got {ordinal}")
    return ordinal


def _choose(prompt: str, options: Sequence[str], ask: AskFn) -> str:
    if not options:
        raise SelectionError("Nothing to choose from")
    ordinal = parse_ordinal(ask(prompt, options), len(options))
    return options[ordinal - 1]


def choose_station(names: Sequence[str], ask: AskFn) -> str:
    """Ask for a station from the sorted station names."""
    station = _choose("Enter the number of the station: ", names, ask)
    logger.debug(f"Selected station {station}")
    return station


def choose_line(station: str, lines: Sequence[str], ask: AskFn) -> str:
    """
    Ask for a line-group at a station.

    A station served by a single line-group is answered without asking.
    """
    if len(lines) == 1:
        return lines[0]
    line = _choose(f"Which line at the {station} station?", lines, ask)
    logger.debug(f"Selected line {line} at {station}")
    return line
