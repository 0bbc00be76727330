"""
Printer job queue.

Holds the printer's jobs and exposes them to the admin pages as pull-style
sequences of read-only JobSummary objects. The processing pipeline drives
state transitions through start_job/stop_job/finish_job; the admin pages
only read and cancel.

Thread Safety:
    - All job records are guarded by one lock
    - Readers get JobSummary snapshots built under the lock; iterating a
      sequence never holds the lock, so a slow page render cannot block
      the pipeline

Usage:
    queue = JobQueue(max_completed_jobs=100)
    job_id = queue.create_job("report.pdf", "alice")

    for job in queue.jobs():           # newest first
        ...

    queue.cancel_job(job_id)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterator, List, Optional

from core.exceptions import JobNotFoundError
from models.job import JobState, JobSummary
from logging_config import get_logger, get_job_logger


# Module logger
logger = get_logger(__name__)


@dataclass
class _Job:
    """Mutable queue record."""

    job_id: int
    name: str
    owner: str
    state: JobState = JobState.PENDING
    impressions_completed: int = 0
    is_canceled: bool = False
    created: Optional[datetime] = None
    processing: Optional[datetime] = None
    completed: Optional[datetime] = None

    def summary(self) -> JobSummary:
        return JobSummary(
            job_id=self.job_id,
            name=self.name,
            owner=self.owner,
            impressions_completed=self.impressions_completed,
            state=self.state,
            is_canceled=self.is_canceled,
            created=self.created,
            processing=self.processing,
            completed=self.completed,
        )

    @property
    def is_active(self) -> bool:
        return self.state < JobState.CANCELED


class JobQueue:
    """
    Thread-safe job queue for one printer.

    Attributes:
        max_completed_jobs: Finished jobs kept for the history view
    """

    def __init__(self, max_completed_jobs: int = 100, clock=datetime.now):
        self._jobs: Dict[int, _Job] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self._clock = clock
        self.max_completed_jobs = max_completed_jobs

    # =========================================================================
    # READ
    # =========================================================================

    def jobs(self) -> Iterator[JobSummary]:
        """All jobs, newest first."""
        with self._lock:
            snapshot = [job.summary() for job in sorted(
                self._jobs.values(), key=lambda job: job.job_id, reverse=True)]
        yield from snapshot

    def active_jobs(self) -> Iterator[JobSummary]:
        """Jobs that have not reached a terminal state, oldest first."""
        with self._lock:
            snapshot = [job.summary() for job in sorted(
                self._jobs.values(), key=lambda job: job.job_id) if job.is_active]
        yield from snapshot

    def find_job(self, job_id: int) -> Optional[JobSummary]:
        with self._lock:
            job = self._jobs.get(job_id)
            return job.summary() if job else None

    @property
    def number_of_jobs(self) -> int:
        with self._lock:
            return len(self._jobs)

    @property
    def number_of_active_jobs(self) -> int:
        with self._lock:
            return sum(1 for job in self._jobs.values() if job.is_active)

    # =========================================================================
    # PIPELINE TRANSITIONS
    # =========================================================================

    def create_job(self, name: str, owner: str, held: bool = False) -> int:
        """Queue a new job and return its id."""
        with self._lock:
            job_id = self._next_id
            self._next_id += 1
            self._jobs[job_id] = _Job(
                job_id=job_id,
                name=name,
                owner=owner,
                state=JobState.HELD if held else JobState.PENDING,
                created=self._clock(),
            )
        get_job_logger(job_id).info(f"Job '{name}' queued for {owner}")
        return job_id

    def start_job(self, job_id: int) -> None:
        with self._lock:
            job = self._get(job_id)
            job.state = JobState.PROCESSING
            if job.processing is None:
                job.processing = self._clock()
        get_job_logger(job_id).info("Processing started")

    def stop_job(self, job_id: int) -> None:
        with self._lock:
            job = self._get(job_id)
            if job.state == JobState.PROCESSING:
                job.state = JobState.STOPPED

    def update_impressions(self, job_id: int, impressions: int) -> None:
        with self._lock:
            self._get(job_id).impressions_completed = impressions

    def finish_job(self, job_id: int, state: JobState = JobState.COMPLETED) -> None:
        """
        Move a job to a terminal state.

        A job flagged as canceled while processing always finishes as
        CANCELED.
        """
        with self._lock:
            job = self._get(job_id)
            job.state = JobState.CANCELED if job.is_canceled else state
            job.completed = self._clock()
            self._purge_completed()
        get_job_logger(job_id).info(f"Finished as {job.state.name.lower()}")

    # =========================================================================
    # CANCEL
    # =========================================================================

    def cancel_job(self, job_id: int) -> bool:
        """
        Cancel a job.

        Pending and held jobs are canceled immediately. Processing and
        stopped jobs are flagged; the pipeline finishes them. Terminal
        jobs are left alone.

        Returns:
            True if the job was canceled or flagged

        Raises:
            JobNotFoundError: If no job has this id
        """
        with self._lock:
            job = self._get(job_id)
            canceled = self._cancel(job)
            if canceled:
                self._purge_completed()

        if canceled:
            get_job_logger(job_id).info("Job canceled")
        return canceled

    def cancel_all_jobs(self) -> int:
        """Cancel every active job. Returns the number of jobs affected."""
        with self._lock:
            count = sum(1 for job in list(self._jobs.values()) if self._cancel(job))
            self._purge_completed()

        logger.info(f"Canceled {count} active job(s)")
        return count

    def _cancel(self, job: _Job) -> bool:
        if job.state in (JobState.PENDING, JobState.HELD):
            job.state = JobState.CANCELED
            job.completed = self._clock()
            return True
        if job.state in (JobState.PROCESSING, JobState.STOPPED) and not job.is_canceled:
            job.is_canceled = True
            return True
        return False

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _get(self, job_id: int) -> _Job:
        job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    def _purge_completed(self) -> None:
        finished: List[_Job] = sorted(
            (job for job in self._jobs.values() if not job.is_active),
            key=lambda job: job.job_id,
        )
        excess = len(finished) - self.max_completed_jobs
        for job in finished[:max(excess, 0)]:
            del self._jobs[job.job_id]
