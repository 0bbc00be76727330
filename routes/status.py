"""
Printer status (home) page.

Shows the status summary, the printer identity and the job history.
"""

from flask import Blueprint, render_template

from models.options import PrinterState
from modules.form_mapper import parse_geo_uri
from modules.job_rows import job_rows
from modules.status_view import status_summary, state_keyword
from .forms import get_printer


status_bp = Blueprint("status", __name__)


@status_bp.route("/", methods=["GET"])
def status():
    """Render the printer home page."""
    printer = get_printer()
    state = printer.state
    identity = printer.get_identity()
    options = printer.get_driver_options()
    latitude, longitude = parse_geo_uri(identity.geo_location)

    return render_template(
        "status.html",
        page="status",
        title=printer.name,
        refresh=state == PrinterState.PROCESSING,
        summary=status_summary(state, printer.reasons, printer.active_job_count),
        state_class=state_keyword(state),
        identity=identity,
        latitude=latitude,
        longitude=longitude,
        has_supplies=options.has_supplies,
        rows=list(job_rows(printer.job_queue.jobs())),
    )
