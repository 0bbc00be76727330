"""
Printing defaults page.

GET renders the default job options (media source, orientation, color
mode, sides, quality, darkness, speed, content optimization, scaling and
resolution). POST applies a partial update.
"""

from flask import Blueprint, render_template, request

from core.exceptions import PrinterAdminError
from modules.defaults_view import build_defaults_page
from modules.form_mapper import apply_defaults_form
from logging_config import get_logger
from .forms import CHANGES_SAVED, get_form_data, get_printer, validate_form


# Module logger
logger = get_logger(__name__)

printing_bp = Blueprint("printing", __name__)


@printing_bp.route("/printing", methods=["GET", "POST"])
def printing():
    """
    Handle the printing defaults.

    GET: Display the default options
    POST: Validate, apply present fields, re-render with a banner
    """
    printer = get_printer()
    message = None
    is_error = False

    if request.method == "POST":
        try:
            form = get_form_data()
            validate_form(form)

            with printer.edit_driver_options() as options:
                changed = apply_defaults_form(options, form)

            logger.info(f"Printing defaults saved for '{printer.name}': {changed}")
            message = CHANGES_SAVED
        except PrinterAdminError as e:
            message = e.message
            is_error = True

    return render_template(
        "printing.html",
        page="printing",
        title="Printing Defaults",
        message=message,
        is_error=is_error,
        defaults=build_defaults_page(printer.get_driver_options()),
    )
