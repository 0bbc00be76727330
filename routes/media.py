"""
Ready media page.

One editor per media source (the manual feed is never listed). POST
rebuilds the whole ready-media table from the submission.
"""

from flask import Blueprint, render_template, request

from core.exceptions import PrinterAdminError
from modules.form_mapper import apply_media_form
from modules.media_chooser import build_media_choosers
from logging_config import get_logger
from .forms import CHANGES_SAVED, get_form_data, get_printer, validate_form


# Module logger
logger = get_logger(__name__)

media_bp = Blueprint("media", __name__)


@media_bp.route("/media", methods=["GET", "POST"])
def media():
    """
    Handle the ready media configuration.

    GET: Display one chooser per source
    POST: Validate, rebuild ready media, re-render with a banner
    """
    printer = get_printer()
    message = None
    is_error = False

    if request.method == "POST":
        try:
            form = get_form_data()
            validate_form(form)

            with printer.edit_driver_options() as options:
                configured = apply_media_form(options, form)

            logger.info(f"Ready media saved for '{printer.name}': {configured}")
            message = CHANGES_SAVED
        except PrinterAdminError as e:
            message = e.message
            is_error = True

    return render_template(
        "media.html",
        page="media",
        title="Media",
        message=message,
        is_error=is_error,
        choosers=build_media_choosers(printer.get_driver_options()),
    )
