"""Exceptions raised by turnstats."""


class TurnstatsError(Exception):
    """Base class for all turnstats errors."""


class RecordShapeError(TurnstatsError, ValueError):
    """The turnstile file is unreadable or a row is missing a required field."""


class SelectionError(TurnstatsError, ValueError):
    """An ordinal from the selection prompt is not a valid choice."""


class DownloadError(TurnstatsError):
    """The weekly turnstile file could not be fetched."""
