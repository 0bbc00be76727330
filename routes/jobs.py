"""
Job queue pages.

- /jobs: job history with per-job cancel links
- /cancel: confirm and cancel one job
- /cancelall: confirm and cancel every active job

Successful cancels redirect back to /jobs; failures re-render the page
with a banner.
"""

from typing import Optional

from flask import Blueprint, redirect, render_template, request, url_for

from core.exceptions import InvalidJobIdError, PrinterAdminError
from models.options import PrinterState
from modules.job_rows import job_rows
from logging_config import get_logger
from .forms import get_form_data, get_printer, validate_form


# Module logger
logger = get_logger(__name__)

jobs_bp = Blueprint("jobs", __name__)


def parse_job_id(value: Optional[str]) -> int:
    """
    Parse a job-id field.

    Returns:
        Positive job id, or 0 when the value is missing or not a positive
        integer
    """
    if value is None:
        return 0
    try:
        job_id = int(value.strip())
    except ValueError:
        return 0
    return job_id if job_id > 0 else 0


@jobs_bp.route("/jobs", methods=["GET"])
def jobs():
    """Render the job history."""
    printer = get_printer()

    return render_template(
        "jobs.html",
        page="jobs",
        title="Jobs",
        refresh=printer.state == PrinterState.PROCESSING,
        rows=list(job_rows(printer.job_queue.jobs())),
    )


@jobs_bp.route("/cancel", methods=["GET", "POST"])
def cancel():
    """
    Cancel a single job.

    GET: Show the confirmation form for ?job-id=N (no state change)
    POST: Validate, cancel the job, redirect to /jobs
    """
    printer = get_printer()
    message = None

    if request.method == "POST":
        raw_id = request.form.get("job-id")
        job_id = parse_job_id(raw_id)
        try:
            form = get_form_data()
            validate_form(form)

            if not job_id:
                raise InvalidJobIdError(raw_id)

            printer.job_queue.cancel_job(job_id)
            logger.info(f"Job {job_id} cancel requested on '{printer.name}'")
            return redirect(url_for("jobs.jobs"))
        except PrinterAdminError as e:
            message = e.message
    else:
        job_id = parse_job_id(request.args.get("job-id"))

    job = printer.job_queue.find_job(job_id) if job_id else None

    return render_template(
        "cancel.html",
        page="jobs",
        title="Cancel Job",
        message=message,
        is_error=message is not None,
        job_id=job_id,
        job=job,
    )


@jobs_bp.route("/cancelall", methods=["GET", "POST"])
def cancel_all():
    """
    Cancel every active job.

    GET: Show the confirmation form and the active jobs
    POST: Validate, cancel all active jobs, redirect to /jobs
    """
    printer = get_printer()
    message = None

    if request.method == "POST":
        try:
            form = get_form_data()
            validate_form(form)

            count = printer.job_queue.cancel_all_jobs()
            logger.info(f"Cancel all requested on '{printer.name}': {count} job(s)")
            return redirect(url_for("jobs.jobs"))
        except PrinterAdminError as e:
            message = e.message

    return render_template(
        "cancelall.html",
        page="jobs",
        title="Cancel All Jobs",
        message=message,
        is_error=message is not None,
        rows=list(job_rows(printer.job_queue.active_jobs())),
    )
