"""
Print job models.

JobSummary is the read-only projection of a queued job that the job queue
hands to page renderers. The queue keeps its own mutable records and
builds a fresh summary for every read.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Optional


class JobState(IntEnum):
    """
    job-state values.

    Lifecycle:
        PENDING/HELD -> PROCESSING <-> STOPPED -> (COMPLETED | CANCELED | ABORTED)
    """

    PENDING = 3
    HELD = 4
    PROCESSING = 5
    STOPPED = 6
    CANCELED = 7
    ABORTED = 8
    COMPLETED = 9


@dataclass(frozen=True)
class JobSummary:
    """Point-in-time view of a job for display."""

    job_id: int
    name: str
    owner: str
    impressions_completed: int
    state: JobState

    is_canceled: bool = False
    """Cancel requested while the job was processing or stopped."""

    created: Optional[datetime] = None
    processing: Optional[datetime] = None
    """When processing started."""

    completed: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        """Job has not reached a terminal state."""
        return self.state < JobState.CANCELED

    @property
    def can_cancel(self) -> bool:
        """Whether a cancel action applies to this job."""
        if self.state in (JobState.PENDING, JobState.HELD):
            return True
        if self.state in (JobState.PROCESSING, JobState.STOPPED):
            return not self.is_canceled
        return False
