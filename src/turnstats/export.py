"""Tabular export of weekly turnstile totals."""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from .models import TurnstileTotal

logger = logging.getLogger(__name__)

COLUMNS = ["turnstile", "control_area", "unit", "scp", "entries", "exits", "suspect"]


def totals_to_frame(totals: List[TurnstileTotal]) -> pd.DataFrame:
    """Build a DataFrame with one row per turnstile, in the order given."""
    records = [
        {
            "turnstile": t.key.display,
            "control_area": t.key.control_area,
            "unit": t.key.unit,
            "scp": t.key.scp,
            "entries": t.entries,
            "exits": t.exits,
            "suspect": t.suspect,
        }
        for t in totals
    ]
    return pd.DataFrame(records, columns=COLUMNS)


def write_totals_csv(totals: List[TurnstileTotal], path: Union[str, Path]) -> Path:
    """Write totals to a CSV file and return its path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    totals_to_frame(totals).to_csv(path, index=False)
    logger.info(f"Wrote {len(totals)} turnstile totals to {path}")
    return path
