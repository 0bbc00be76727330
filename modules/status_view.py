"""
Status and supplies display helpers.

Builds the one-line printer status summary shown on the home page and the
level bars on the supplies page.
"""

from dataclasses import dataclass
from typing import List, Sequence

from models.options import (
    REASON_LABELS,
    STATE_LABELS,
    SUPPLY_BACKGROUNDS,
    PrinterReason,
    PrinterState,
    keyword,
    members_in,
)
from models.printer import Supply


def reason_labels(reasons: int) -> List[str]:
    """Labels of the active reasons, in ascending bit order."""
    return [REASON_LABELS[reason] for reason in members_in(PrinterReason, reasons)]


def status_summary(state: PrinterState, reasons: int, active_jobs: int) -> str:
    """
    One-line printer status.

    Example:
        >>> status_summary(PrinterState.IDLE, PrinterReason.MEDIA_LOW, 1)
        'Idle, 1 job, Media Low'
    """
    parts = [STATE_LABELS[PrinterState(state)],
             f"{active_jobs} {'job' if active_jobs == 1 else 'jobs'}"]
    parts.extend(reason_labels(reasons))
    return ", ".join(parts)


def state_keyword(state: PrinterState) -> str:
    """printer-state keyword, used as the status icon CSS class."""
    return keyword(PrinterState(state))


@dataclass(frozen=True)
class SupplyBar:
    """One row of the supplies meter table."""

    description: str
    background: str
    level: int

    @property
    def filled_padding(self) -> float:
        """Horizontal padding (percent) of the filled part of the bar."""
        return self.level * 0.5

    @property
    def empty_padding(self) -> float:
        return 50.0 - self.level * 0.5


def supply_bars(supplies: Sequence[Supply]) -> List[SupplyBar]:
    return [
        SupplyBar(
            description=supply.description,
            background=SUPPLY_BACKGROUNDS[supply.color],
            level=supply.level,
        )
        for supply in supplies
    ]
