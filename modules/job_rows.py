"""
Job Row Renderer

Turns job summaries into the rows of the jobs tables: a "when" label
derived from the job state and timestamps, and whether a cancel action is
offered.

State table:
    pending, held             "Queued at <created>"      cancel shown
    processing / stopped      "Started at <processing>"  cancel shown
    ... already canceled      "Canceling at <processing>" no cancel
    aborted                   "Aborted at <completed>"   no cancel
    canceled                  "Canceled at <completed>"  no cancel
    completed                 "Completed at <completed>" no cancel

Processing and stopped jobs share one rule.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator, Optional

from models.job import JobState, JobSummary

# Same label/action rule for both states
RUNNING_STATES = (JobState.PROCESSING, JobState.STOPPED)


@dataclass(frozen=True)
class JobRow:
    """Display data for one job."""

    job_id: int
    name: str
    owner: str
    impressions_completed: int
    when: str
    show_cancel: bool


def time_string(value: Optional[datetime]) -> str:
    """Local time of day in the locale's representation (strftime %X)."""
    if value is None:
        return ""
    return value.strftime("%X")


def job_when(job: JobSummary) -> str:
    """State-dependent "when" label for a job."""
    if job.state in (JobState.PENDING, JobState.HELD):
        return f"Queued at {time_string(job.created)}"

    if job.state in RUNNING_STATES:
        if job.is_canceled:
            return f"Canceling at {time_string(job.processing)}"
        return f"Started at {time_string(job.processing)}"

    if job.state == JobState.ABORTED:
        return f"Aborted at {time_string(job.completed)}"

    if job.state == JobState.CANCELED:
        return f"Canceled at {time_string(job.completed)}"

    return f"Completed at {time_string(job.completed)}"


def job_row(job: JobSummary) -> JobRow:
    return JobRow(
        job_id=job.job_id,
        name=job.name,
        owner=job.owner,
        impressions_completed=job.impressions_completed,
        when=job_when(job),
        show_cancel=job.can_cancel,
    )


def job_rows(jobs: Iterable[JobSummary]) -> Iterator[JobRow]:
    """Lazily map job summaries to rows, preserving queue order."""
    for job in jobs:
        yield job_row(job)
