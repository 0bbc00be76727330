"""
Printer configuration page.

GET shows the printer identity (DNS-SD name, location, geo-location,
organization and contact). POST applies a partial update.
"""

from flask import Blueprint, render_template, request

from core.exceptions import PrinterAdminError
from modules.form_mapper import parse_geo_uri, apply_config_form
from logging_config import get_logger
from .forms import CHANGES_SAVED, get_form_data, get_printer, validate_form


# Module logger
logger = get_logger(__name__)

config_bp = Blueprint("config", __name__)


@config_bp.route("/config", methods=["GET", "POST"])
def config():
    """
    Handle the identity/contact configuration.

    GET: Display the current identity
    POST: Validate, apply present fields, re-render with a banner
    """
    printer = get_printer()
    message = None
    is_error = False

    if request.method == "POST":
        try:
            form = get_form_data()
            validate_form(form)

            with printer.edit_identity() as identity:
                changed = apply_config_form(identity, form)

            logger.info(f"Configuration saved for '{printer.name}': {changed}")
            message = CHANGES_SAVED
        except PrinterAdminError as e:
            message = e.message
            is_error = True

    identity = printer.get_identity()
    latitude, longitude = parse_geo_uri(identity.geo_location)

    return render_template(
        "config.html",
        page="config",
        title="Configuration",
        message=message,
        is_error=is_error,
        identity=identity,
        latitude=latitude,
        longitude=longitude,
    )
