"""Data models for turnstile aggregation."""

from dataclasses import dataclass, field
from typing import List
from datetime import datetime


@dataclass(frozen=True)
class TurnstileKey:
    """Identifies one physical turnstile."""
    control_area: str  # C/A, the booth
    unit: str
    scp: str  # Subunit channel position

    @property
    def display(self) -> str:
        return f"{self.control_area},{self.unit},{self.scp}"


@dataclass
class TurnstileTotal:
    """Net entries and exits for one turnstile over the week."""
    key: TurnstileKey
    entries: int
    exits: int
    readings: int = 1
    suspect: bool = False  # True when a counter went backwards (reset or rollover)


@dataclass
class WeeklyReport:
    """Aggregated totals for one station and line-group."""
    station: str
    line: str
    totals: List[TurnstileTotal]
    source: str = ""
    generated_at: datetime = field(default_factory=datetime.now)
