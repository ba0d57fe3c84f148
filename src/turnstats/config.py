"""Configuration constants for turnstats."""

import os

# MTA weekly turnstile exports live under this directory as turnstile_YYMMDD.txt
MTA_TURNSTILE_URL = os.environ.get(
    "TURNSTATS_BASE_URL",
    "http://web.mta.info/developers/data/nyct/turnstile/",
)
DATA_DIR = os.environ.get("TURNSTATS_DATA_DIR", ".")

FILENAME_FORMAT = "turnstile_{:%y%m%d}.txt"
DOWNLOAD_TIMEOUT = 60  # seconds
DOWNLOAD_CHUNK_SIZE = 1024 * 1024

# Column positions in the turnstile export (0-indexed)
FIELD_CONTROL_AREA = 0
FIELD_UNIT = 1
FIELD_SCP = 2
FIELD_STATION = 3
FIELD_LINENAME = 4
FIELD_ENTRIES = 9
FIELD_EXITS = 10
MIN_FIELDS = FIELD_EXITS + 1
