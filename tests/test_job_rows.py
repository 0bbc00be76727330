"""
Unit tests for job row rendering.
"""

from datetime import datetime

import pytest

from models.job import JobState, JobSummary
from modules.job_rows import job_row, job_rows, time_string


CREATED = datetime(2024, 5, 1, 9, 0, 0)
STARTED = datetime(2024, 5, 1, 9, 5, 0)
FINISHED = datetime(2024, 5, 1, 9, 10, 0)


def make_job(state, is_canceled=False, job_id=7):
    return JobSummary(
        job_id=job_id,
        name="labels.pdf",
        owner="alice",
        impressions_completed=3,
        state=state,
        is_canceled=is_canceled,
        created=CREATED,
        processing=STARTED,
        completed=FINISHED,
    )


class TestJobRow:
    """Tests for the state -> label/cancel table."""

    @pytest.mark.parametrize("state,is_canceled,prefix,when,show_cancel", [
        (JobState.PENDING, False, "Queued at", CREATED, True),
        (JobState.HELD, False, "Queued at", CREATED, True),
        (JobState.PROCESSING, False, "Started at", STARTED, True),
        (JobState.PROCESSING, True, "Canceling at", STARTED, False),
        (JobState.STOPPED, False, "Started at", STARTED, True),
        (JobState.STOPPED, True, "Canceling at", STARTED, False),
        (JobState.ABORTED, False, "Aborted at", FINISHED, False),
        (JobState.CANCELED, False, "Canceled at", FINISHED, False),
        (JobState.COMPLETED, False, "Completed at", FINISHED, False),
    ])
    def test_state_table(self, state, is_canceled, prefix, when, show_cancel):
        row = job_row(make_job(state, is_canceled))
        assert row.when == f"{prefix} {time_string(when)}"
        assert row.show_cancel is show_cancel

    def test_row_fields(self):
        row = job_row(make_job(JobState.PENDING))
        assert (row.job_id, row.name, row.owner, row.impressions_completed) == (
            7, "labels.pdf", "alice", 3,
        )

    def test_time_string(self):
        assert time_string(None) == ""
        assert time_string(STARTED) == STARTED.strftime("%X")


class TestJobRows:
    """Tests for job_rows()."""

    def test_preserves_order_and_is_lazy(self):
        jobs = [make_job(JobState.COMPLETED, job_id=2), make_job(JobState.PENDING, job_id=1)]
        rows = job_rows(iter(jobs))
        assert next(rows).job_id == 2
        assert next(rows).job_id == 1
